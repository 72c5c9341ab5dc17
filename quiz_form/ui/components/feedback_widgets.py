"""Display-only widgets for correctness feedback and explanations."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QWidget

from quiz_form.constants.ui_constants import (
    EXPLANATION_CORRECT_PREFIX,
    EXPLANATION_INCORRECT_PREFIX,
    FEEDBACK_CORRECT,
    FEEDBACK_INCORRECT,
    QUESTION_EXPLANATION_TITLE,
)
from quiz_form.core.markdown_math_renderer import renderer
from quiz_form.styling.styles import Styles


class ExplanationLabel(QLabel):
    """Explanation shown under one answer."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setTextFormat(Qt.RichText)
        self.setWordWrap(True)
        self.setVisible(False)

    def show_explanation(self, correct: bool, text: str) -> None:
        prefix = EXPLANATION_CORRECT_PREFIX if correct else EXPLANATION_INCORRECT_PREFIX
        self.setText(f"<b>{prefix}</b> {renderer.render_inline(text)}")
        self.setStyleSheet(Styles.get_explanation_style(correct))
        self.setVisible(True)

    def clear_explanation(self) -> None:
        self.clear()
        self.setVisible(False)


class QuestionExplanationLabel(QLabel):
    """Explanation for the question as a whole, shown once after submission."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setTextFormat(Qt.RichText)
        self.setWordWrap(True)
        self.setVisible(False)

    def show_text(self, text: str) -> None:
        self.setText(f"<b>{QUESTION_EXPLANATION_TITLE}</b> {renderer.render_inline(text)}")
        self.setVisible(bool(text))

    def clear_text(self) -> None:
        self.clear()
        self.setVisible(False)


class FeedbackLabel(QLabel):
    """Overall verdict for the submitted answer."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setVisible(False)

    def show_feedback(self, correct: bool) -> None:
        self.setText(FEEDBACK_CORRECT if correct else FEEDBACK_INCORRECT)
        self.setStyleSheet(Styles.get_feedback_style(correct))
        self.setVisible(True)

    def clear_feedback(self) -> None:
        self.clear()
        self.setVisible(False)
