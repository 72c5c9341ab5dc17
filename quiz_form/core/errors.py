"""Exceptions raised by the question form core."""

from __future__ import annotations


class QuizFormError(Exception):
    """Base class for question form errors."""


class SelectionModeError(QuizFormError):
    """Raised when a selection operation does not match the question mode."""


class ScoringError(QuizFormError):
    """Raised when a scoring call cannot be completed."""


class UnknownQuestionError(ScoringError):
    """Raised when a question id is not known to the scoring service."""

    def __init__(self, question_id: str) -> None:
        super().__init__(f"Unknown question id: {question_id!r}")
        self.question_id = question_id
