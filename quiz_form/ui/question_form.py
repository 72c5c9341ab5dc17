"""Qt widget that renders one question and drives its submission."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_form.constants.ui_constants import (
    RETRY_BUTTON,
    SCORING_FAILED_TEMPLATE,
    SUBMIT_BUTTON,
    SUBMITTING_MESSAGE,
)
from quiz_form.core.dispatch import Dispatcher
from quiz_form.core.events import SubmitEvent
from quiz_form.core.markdown_math_renderer import renderer
from quiz_form.core.models import QuizQuestion, SubmissionState
from quiz_form.core.services.scoring_service import ScoringService
from quiz_form.core.submission_controller import SubmissionController
from quiz_form.styling.styles import Styles
from quiz_form.ui.components.answer_row import AnswerRow, create_answer_rows
from quiz_form.ui.components.feedback_widgets import FeedbackLabel, QuestionExplanationLabel

logger = logging.getLogger(__name__)


class QuestionForm(QWidget):
    """Shows a question, its answer rows, the submit button and feedback.

    Loading a new question tears down the previous controller and rows, so
    any response still in flight for the old question is ignored.
    """

    def __init__(
        self,
        scoring_service: ScoringService,
        dispatcher: Dispatcher,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.scoring_service = scoring_service
        self.dispatcher = dispatcher
        self.controller: SubmissionController | None = None
        self.answer_rows: list[AnswerRow] = []
        self._button_group: QButtonGroup | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.question_label = QLabel(self)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setWordWrap(True)
        self.question_label.setStyleSheet(Styles.get_question_title_style())
        layout.addWidget(self.question_label)

        self.answers_container = QWidget(self)
        self.answers_layout = QVBoxLayout()
        self.answers_layout.setContentsMargins(0, 0, 0, 0)
        self.answers_container.setLayout(self.answers_layout)
        layout.addWidget(self.answers_container)

        button_row = QHBoxLayout()
        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.clicked.connect(lambda: self.handle_submit(SubmitEvent(source="button")))
        button_row.addWidget(self.submit_button)

        self.status_label = QLabel("", self)
        self.status_label.setStyleSheet(Styles.get_secondary_text_style())
        self.status_label.setVisible(False)
        button_row.addWidget(self.status_label)
        button_row.addStretch()
        layout.addLayout(button_row)

        error_row = QHBoxLayout()
        self.error_label = QLabel("", self)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(Styles.get_error_style())
        self.error_label.setVisible(False)
        error_row.addWidget(self.error_label, stretch=1)

        self.retry_button = QPushButton(RETRY_BUTTON, self)
        self.retry_button.clicked.connect(self.handle_retry)
        self.retry_button.setVisible(False)
        error_row.addWidget(self.retry_button)
        layout.addLayout(error_row)

        self.feedback_label = FeedbackLabel(self)
        layout.addWidget(self.feedback_label)

        self.question_explanation_label = QuestionExplanationLabel(self)
        layout.addWidget(self.question_explanation_label)

        layout.addStretch()

    def load_question(self, question: QuizQuestion) -> None:
        """Replace the displayed question and reset all answer state."""
        if self.controller is not None and self.controller.question == question:
            self.refresh()
            return
        self._teardown_question()
        logger.info("Loading question %s (%s)", question.id, question.mode.name.lower())
        self.controller = SubmissionController(
            question,
            self.scoring_service,
            self.dispatcher,
            on_change=self.refresh,
        )
        self.question_label.setText(renderer.render_inline(question.question))
        self.answer_rows, self._button_group = create_answer_rows(self.controller, self.answers_container)
        for row in self.answer_rows:
            self.answers_layout.addWidget(row)
        self.refresh()

    def _teardown_question(self) -> None:
        if self.controller is not None:
            self.controller.dispose()
            self.controller = None
        for row in self.answer_rows:
            self.answers_layout.removeWidget(row)
            row.deleteLater()
        self.answer_rows = []
        if self._button_group is not None:
            self._button_group.deleteLater()
            self._button_group = None

    def handle_submit(self, event: SubmitEvent) -> bool:
        if self.controller is None:
            event.prevent_default()
            return False
        return self.controller.submit(event)

    def handle_retry(self) -> None:
        if self.controller is not None:
            self.controller.retry()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() in (Qt.Key_Return, Qt.Key_Enter):
            event.accept()
            self.handle_submit(SubmitEvent(source="keyboard"))
            return
        super().keyPressEvent(event)

    def refresh(self) -> None:
        """Render the controller's current state."""
        controller = self.controller
        if controller is None:
            return

        for row in self.answer_rows:
            row.refresh()

        state = controller.state
        self.status_label.setText(SUBMITTING_MESSAGE)
        self.status_label.setVisible(state is SubmissionState.SUBMITTING)

        failed = state is SubmissionState.FAILED
        self.error_label.setText(
            SCORING_FAILED_TEMPLATE.format(error=controller.error_message) if failed else ""
        )
        self.error_label.setVisible(failed)
        self.retry_button.setVisible(failed)

        if controller.submitted:
            self.feedback_label.show_feedback(controller.is_answer_correct)
            self.question_explanation_label.show_text(controller.question.question_explanation)
        else:
            self.feedback_label.clear_feedback()
            self.question_explanation_label.clear_text()

    def closeEvent(self, event) -> None:
        self._teardown_question()
        super().closeEvent(event)
