"""In-progress answer selection for one question."""

from __future__ import annotations

from quiz_form.core.models import AnswerMode, QuizQuestion


class SingleSelection:
    """Holds the one answer index picked with a radio button."""

    mode = AnswerMode.SINGLE

    def __init__(self, answer_count: int) -> None:
        self._answer_count = answer_count
        self._selected_answer: int | None = None

    @property
    def selected_answer(self) -> int | None:
        return self._selected_answer

    def select_answer(self, index: int) -> None:
        """Replace the current selection."""
        if not 0 <= index < self._answer_count:
            raise IndexError(f"Answer index {index} out of range")
        self._selected_answer = index

    def has_selection(self) -> bool:
        return self._selected_answer is not None


class MultipleSelection:
    """Holds checkbox states keyed by answer index.

    Toggling writes only the toggled key. A key that was checked and later
    unchecked stays in the mapping with ``False``, so the mapping counts as
    a selection even when nothing is ticked any more.
    """

    mode = AnswerMode.MULTIPLE

    def __init__(self, answer_count: int) -> None:
        self._answer_count = answer_count
        self._selected_answers: dict[int, bool] = {}

    @property
    def selected_answers(self) -> dict[int, bool]:
        return dict(self._selected_answers)

    def toggle_answer(self, index: int, checked: bool) -> None:
        if not 0 <= index < self._answer_count:
            raise IndexError(f"Answer index {index} out of range")
        self._selected_answers = {**self._selected_answers, index: bool(checked)}

    def is_checked(self, index: int) -> bool:
        return self._selected_answers.get(index, False)

    def has_selection(self) -> bool:
        return bool(self._selected_answers)


SelectionTracker = SingleSelection | MultipleSelection


def create_selection_tracker(question: QuizQuestion) -> SelectionTracker:
    """Build the tracker matching the question's answer mode."""
    if question.mode is AnswerMode.MULTIPLE:
        return MultipleSelection(len(question.answers))
    return SingleSelection(len(question.answers))
