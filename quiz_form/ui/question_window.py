"""Qt main window hosting the question form."""

from __future__ import annotations

from PySide6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from quiz_form.constants.ui_constants import NO_QUESTIONS_MESSAGE, WINDOW_TITLE
from quiz_form.core.models import QuizQuestion
from quiz_form.core.services.scoring_service import ScoringService
from quiz_form.styling.styles import Styles
from quiz_form.ui.async_bridge import QtAsyncDispatcher
from quiz_form.ui.question_form import QuestionForm


class QuestionWindow(QMainWindow):
    """Main window showing a single question."""

    def __init__(self, scoring_service: ScoringService, question: QuizQuestion | None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumWidth(520)

        self.dispatcher = QtAsyncDispatcher(self)

        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout()
        central_widget.setLayout(layout)

        self.question_form = QuestionForm(scoring_service, self.dispatcher, central_widget)
        layout.addWidget(self.question_form)

        self.empty_label = QLabel(NO_QUESTIONS_MESSAGE, central_widget)
        layout.addWidget(self.empty_label)

        if question is None:
            self.question_form.setVisible(False)
        else:
            self.empty_label.setVisible(False)
            self.question_form.load_question(question)

        self.setStyleSheet(Styles.get_main_window_style())

    def closeEvent(self, event) -> None:
        self.question_form.close()
        self.dispatcher.shutdown()
        super().closeEvent(event)
