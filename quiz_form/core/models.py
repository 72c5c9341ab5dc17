"""Domain models for the question form."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class AnswerMode(Enum):
    """How a question collects its answer."""

    SINGLE = auto()
    MULTIPLE = auto()


class SubmissionState(Enum):
    """Lifecycle of one question's answer submission."""

    UNANSWERED = auto()
    SUBMITTING = auto()
    SUBMITTED = auto()
    FAILED = auto()


@dataclass(frozen=True, slots=True)
class QuizQuestion:
    """Question with index-aligned answers and explanations."""

    id: str
    question: str
    answers: tuple[str, ...]
    explanations: tuple[str, ...]
    correct_answers: tuple[int, ...]
    question_explanation: str = ""

    def __post_init__(self) -> None:
        # Accept lists from callers but keep the stored value immutable.
        object.__setattr__(self, "answers", tuple(self.answers))
        object.__setattr__(self, "explanations", tuple(self.explanations))
        object.__setattr__(self, "correct_answers", tuple(self.correct_answers))

        if not self.answers:
            raise ValueError("Question must have at least one answer.")
        if len(self.answers) != len(self.explanations):
            raise ValueError(
                f"Question {self.id!r} has {len(self.answers)} answers "
                f"but {len(self.explanations)} explanations."
            )
        if not self.correct_answers:
            raise ValueError(f"Question {self.id!r} must name at least one correct answer.")
        for index in self.correct_answers:
            if not 0 <= index < len(self.answers):
                raise ValueError(f"Correct answer index {index} out of range")

    @property
    def mode(self) -> AnswerMode:
        return AnswerMode.MULTIPLE if len(self.correct_answers) > 1 else AnswerMode.SINGLE

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self.answers)


@dataclass(frozen=True, slots=True)
class AnswerSelection:
    """One entry of a multiple-answer submission payload."""

    index: int
    checked: bool


@dataclass(frozen=True, slots=True)
class MultipleAnswerResult:
    """Scoring verdict for a multiple-answer submission."""

    question_answered_correctly: bool
    answers_requiring_feedback: list[int] = field(default_factory=list)
