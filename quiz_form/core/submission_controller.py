"""Answer submission state machine for a single quiz question.

One controller owns all mutable state of the question currently on screen:
the selection tracker and the submission result. Replacing the question
resets both. Responses are matched to the question they were sent for
through a generation counter; anything arriving after the question was
replaced, or after ``dispose()``, is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable

from quiz_form.core.dispatch import Dispatcher
from quiz_form.core.errors import SelectionModeError
from quiz_form.core.events import SubmitEvent, prevent_default
from quiz_form.core.feedback import (
    is_feedback_required,
    shows_multiple_explanation,
    shows_single_explanation,
)
from quiz_form.core.models import (
    AnswerMode,
    AnswerSelection,
    MultipleAnswerResult,
    QuizQuestion,
    SubmissionState,
)
from quiz_form.core.payload import transform_selection_to_payload
from quiz_form.core.selection_tracker import (
    MultipleSelection,
    SelectionTracker,
    SingleSelection,
    create_selection_tracker,
)
from quiz_form.core.services.scoring_service import ScoringService

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PendingSubmission:
    """What was sent to the scoring service, captured at call time."""

    question_id: str
    generation: int
    answer_index: int | None = None
    payload: tuple[AnswerSelection, ...] = ()


@dataclass(slots=True)
class SubmissionResult:
    """Result state shown by the form after a response arrives."""

    submitted: bool = False
    is_answer_correct: bool = False
    explanation_idx: int | None = None
    answers_requiring_feedback: list[int] = field(default_factory=list)


class SubmissionController:
    """Tracks the user's selection and drives the scoring round-trip."""

    def __init__(
        self,
        question: QuizQuestion,
        scoring_service: ScoringService,
        dispatcher: Dispatcher,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._scoring_service = scoring_service
        self._dispatcher = dispatcher
        self._on_change = on_change
        self._generation = 0
        self._disposed = False
        self._reset(question)

    def _reset(self, question: QuizQuestion) -> None:
        self._question = question
        self._mode = question.mode
        self._selection: SelectionTracker = create_selection_tracker(question)
        self._result = SubmissionResult()
        self._state = SubmissionState.UNANSWERED
        self._error_message: str | None = None
        self._last_submission: PendingSubmission | None = None

    # --- Read-only view state ---

    @property
    def question(self) -> QuizQuestion:
        return self._question

    @property
    def mode(self) -> AnswerMode:
        return self._mode

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def selection(self) -> SelectionTracker:
        return self._selection

    @property
    def submitted(self) -> bool:
        return self._result.submitted

    @property
    def is_answer_correct(self) -> bool:
        return self._result.is_answer_correct

    @property
    def explanation_idx(self) -> int | None:
        return self._result.explanation_idx

    @property
    def answers_requiring_feedback(self) -> list[int]:
        return list(self._result.answers_requiring_feedback)

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def is_feedback_required(self, index: int) -> bool:
        return is_feedback_required(self._result.answers_requiring_feedback, index)

    def shows_explanation(self, index: int) -> bool:
        """Whether the answer row at ``index`` displays its explanation."""
        if self._mode is AnswerMode.MULTIPLE:
            return shows_multiple_explanation(
                self._result.submitted, self._result.answers_requiring_feedback, index
            )
        return shows_single_explanation(self._result.explanation_idx, index)

    # --- Selection ---

    def select_answer(self, index: int) -> None:
        if not isinstance(self._selection, SingleSelection):
            raise SelectionModeError("select_answer is only available for single-answer questions.")
        self._selection.select_answer(index)
        self._notify()

    def toggle_answer(self, index: int, checked: bool) -> None:
        if not isinstance(self._selection, MultipleSelection):
            raise SelectionModeError("toggle_answer is only available for multiple-answer questions.")
        self._selection.toggle_answer(index, checked)
        self._notify()

    # --- Submission ---

    @prevent_default
    def submit(self, event: SubmitEvent | None = None) -> bool:
        """Send the current selection for scoring.

        Returns False without side effects when nothing has been selected.
        """
        if self._disposed:
            return False
        pending = self._capture_submission()
        if pending is None:
            logger.debug("Ignoring submit for question %s: no selection", self._question.id)
            return False
        self._send(pending)
        return True

    def retry(self) -> bool:
        """Re-send the submission that failed, exactly as it was captured."""
        if self._disposed or self._state is not SubmissionState.FAILED:
            return False
        if self._last_submission is None:
            return False
        self._send(self._last_submission)
        return True

    def replace_question(self, question: QuizQuestion) -> None:
        """Show a different question; pending responses for the old one are dropped."""
        self._generation += 1
        self._reset(question)
        self._notify()

    def dispose(self) -> None:
        self._generation += 1
        self._disposed = True
        self._on_change = None

    def _capture_submission(self) -> PendingSubmission | None:
        selection = self._selection
        if isinstance(selection, SingleSelection):
            if not selection.has_selection():
                return None
            return PendingSubmission(
                question_id=self._question.id,
                generation=self._generation,
                answer_index=selection.selected_answer,
            )
        if not selection.has_selection():
            return None
        payload = transform_selection_to_payload(selection.selected_answers)
        return PendingSubmission(
            question_id=self._question.id,
            generation=self._generation,
            payload=tuple(payload),
        )

    def _send(self, pending: PendingSubmission) -> None:
        self._last_submission = pending
        self._state = SubmissionState.SUBMITTING
        self._error_message = None
        self._notify()

        if self._mode is AnswerMode.SINGLE:
            logger.debug("Submitting answer %s for question %s", pending.answer_index, pending.question_id)
            self._dispatcher.dispatch(
                lambda: self._scoring_service.is_answer_correct(pending.question_id, pending.answer_index),
                lambda is_correct: self._apply_single_result(pending, is_correct),
                lambda error: self._apply_failure(pending, error),
            )
        else:
            logger.debug("Submitting %d selections for question %s", len(pending.payload), pending.question_id)
            self._dispatcher.dispatch(
                lambda: self._scoring_service.is_multiple_answers_correct(
                    pending.question_id, list(pending.payload)
                ),
                lambda result: self._apply_multiple_result(pending, result),
                lambda error: self._apply_failure(pending, error),
            )

    def _is_stale(self, pending: PendingSubmission) -> bool:
        if self._disposed or pending.generation != self._generation:
            logger.debug("Discarding stale scoring response for question %s", pending.question_id)
            return True
        return False

    def _apply_single_result(self, pending: PendingSubmission, is_correct: bool) -> None:
        if self._is_stale(pending):
            return
        logger.info(
            "Question %s answer %s scored %s",
            pending.question_id,
            pending.answer_index,
            "correct" if is_correct else "incorrect",
        )
        self._result.submitted = True
        self._result.is_answer_correct = bool(is_correct)
        self._result.explanation_idx = pending.answer_index
        self._state = SubmissionState.SUBMITTED
        self._notify()

    def _apply_multiple_result(self, pending: PendingSubmission, result: MultipleAnswerResult) -> None:
        if self._is_stale(pending):
            return
        logger.info(
            "Question %s scored %s, feedback required for %s",
            pending.question_id,
            "correct" if result.question_answered_correctly else "incorrect",
            result.answers_requiring_feedback,
        )
        self._result.submitted = True
        self._result.is_answer_correct = bool(result.question_answered_correctly)
        self._result.answers_requiring_feedback = self._valid_feedback_indices(
            pending, result.answers_requiring_feedback
        )
        self._state = SubmissionState.SUBMITTED
        self._notify()

    def _valid_feedback_indices(self, pending: PendingSubmission, indices: list[int]) -> list[int]:
        valid = [index for index in indices if self._question.is_valid_index(index)]
        if len(valid) != len(indices):
            logger.warning(
                "Question %s: ignoring out-of-range feedback indices %s",
                pending.question_id,
                [index for index in indices if not self._question.is_valid_index(index)],
            )
        return valid

    def _apply_failure(self, pending: PendingSubmission, error: BaseException) -> None:
        if self._is_stale(pending):
            return
        logger.warning("Scoring failed for question %s: %s", pending.question_id, error)
        # Retry resends what failed, not whatever was dispatched last.
        self._last_submission = pending
        self._state = SubmissionState.FAILED
        self._error_message = str(error) or error.__class__.__name__
        self._notify()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()
