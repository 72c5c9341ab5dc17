"""Per-answer feedback decisions derived from the submission result."""

from __future__ import annotations

from collections.abc import Sequence


def is_feedback_required(answers_requiring_feedback: Sequence[int], index: int) -> bool:
    return index in answers_requiring_feedback


def shows_multiple_explanation(
    submitted: bool, answers_requiring_feedback: Sequence[int], index: int
) -> bool:
    """Whether a checkbox row shows its explanation."""
    return submitted and is_feedback_required(answers_requiring_feedback, index)


def shows_single_explanation(explanation_idx: int | None, index: int) -> bool:
    """Whether a radio row shows its explanation: only the submitted one does."""
    return explanation_idx is not None and explanation_idx == index
