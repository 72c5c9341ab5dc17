"""Answer rows: a radio button or a checkbox plus its explanation."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractButton,
    QButtonGroup,
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from quiz_form.core.markdown_math_renderer import renderer
from quiz_form.core.models import AnswerMode
from quiz_form.core.submission_controller import SubmissionController
from quiz_form.ui.components.feedback_widgets import ExplanationLabel


class AnswerRow(QWidget):
    """Base row for one answer; build rows through ``create_answer_rows``.

    Subclasses override two hooks:

    ``_create_input()``
        Return the input widget (radio button or checkbox) and wire it to
        the controller.
    ``_explanation_correctness()``
        Return the ``correct`` flag passed to the explanation label when the
        row's explanation is shown.
    """

    def __init__(
        self,
        controller: SubmissionController,
        index: int,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.index = index
        self.answer_text = controller.question.answers[index]
        self.explanation_text = controller.question.explanations[index]
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 2, 0, 2)
        self.setLayout(layout)

        input_row = QHBoxLayout()
        self.input = self._create_input()
        self.input.setObjectName(f"answer-{self.index}")
        input_row.addWidget(self.input)

        self.answer_label = QLabel(renderer.render_inline(self.answer_text), self)
        self.answer_label.setTextFormat(Qt.RichText)
        self.answer_label.setWordWrap(True)
        input_row.addWidget(self.answer_label, stretch=1)
        layout.addLayout(input_row)

        self.explanation_label = ExplanationLabel(self)
        layout.addWidget(self.explanation_label)

    def _create_input(self) -> QAbstractButton:
        raise NotImplementedError

    def refresh(self) -> None:
        """Re-derive the explanation visibility from the controller."""
        if self.controller.shows_explanation(self.index):
            self.explanation_label.show_explanation(self._explanation_correctness(), self.explanation_text)
        else:
            self.explanation_label.clear_explanation()

    def _explanation_correctness(self) -> bool:
        raise NotImplementedError


class MultipleAnswerRow(AnswerRow):
    """Checkbox row bound to the selection mapping entry for its index."""

    def _create_input(self) -> QAbstractButton:
        checkbox = QCheckBox(self)
        # clicked fires for user interaction only, not for setChecked().
        checkbox.clicked.connect(self._handle_clicked)
        return checkbox

    def _handle_clicked(self, checked: bool) -> None:
        self.controller.toggle_answer(self.index, checked)

    def refresh(self) -> None:
        self.input.setChecked(self.controller.selection.is_checked(self.index))
        super().refresh()

    def _explanation_correctness(self) -> bool:
        return False


class SingleAnswerRow(AnswerRow):
    """Radio button row that selects its answer on click."""

    def _create_input(self) -> QAbstractButton:
        radio = QRadioButton(self)
        radio.clicked.connect(self._handle_clicked)
        return radio

    def _handle_clicked(self) -> None:
        self.controller.select_answer(self.index)

    def _explanation_correctness(self) -> bool:
        return self.controller.is_answer_correct


def create_answer_rows(
    controller: SubmissionController, parent: QWidget | None = None
) -> tuple[list[AnswerRow], QButtonGroup | None]:
    """Build one row per answer using the row type for the question's mode."""
    if controller.mode is AnswerMode.MULTIPLE:
        return [MultipleAnswerRow(controller, idx, parent) for idx in range(len(controller.question.answers))], None

    group = QButtonGroup(parent)
    group.setExclusive(True)
    rows: list[AnswerRow] = []
    for idx in range(len(controller.question.answers)):
        row = SingleAnswerRow(controller, idx, parent)
        group.addButton(row.input, idx)
        rows.append(row)
    return rows, group
