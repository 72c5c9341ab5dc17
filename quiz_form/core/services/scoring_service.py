"""Scoring collaborator: decides whether submitted answers are correct."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Protocol

from quiz_form.core.errors import ScoringError
from quiz_form.core.models import AnswerSelection, MultipleAnswerResult
from quiz_form.core.services.question_bank import QuestionBank


class ScoringService(Protocol):
    async def is_answer_correct(self, question_id: str, answer_index: int) -> bool: ...

    async def is_multiple_answers_correct(
        self, question_id: str, payload: Sequence[AnswerSelection]
    ) -> MultipleAnswerResult: ...


class LocalScoringService:
    """Scores answers against the correct indices stored in a ``QuestionBank``."""

    def __init__(self, bank: QuestionBank, latency_seconds: float = 0.0) -> None:
        self._bank = bank
        self._latency_seconds = latency_seconds

    async def is_answer_correct(self, question_id: str, answer_index: int) -> bool:
        await self._simulate_latency()
        question = self._bank.get_question(question_id)
        if not question.is_valid_index(answer_index):
            raise ScoringError(f"Answer index {answer_index} out of range for question {question_id!r}")
        return answer_index in question.correct_answers

    async def is_multiple_answers_correct(
        self, question_id: str, payload: Sequence[AnswerSelection]
    ) -> MultipleAnswerResult:
        await self._simulate_latency()
        question = self._bank.get_question(question_id)
        checked: set[int] = set()
        for selection in payload:
            if not question.is_valid_index(selection.index):
                raise ScoringError(
                    f"Answer index {selection.index} out of range for question {question_id!r}"
                )
            # Later entries for the same index win, matching how toggles overwrite.
            if selection.checked:
                checked.add(selection.index)
            else:
                checked.discard(selection.index)

        correct = set(question.correct_answers)
        # Wrongly ticked or missed answers get an explanation.
        requiring_feedback = [
            index for index in range(len(question.answers)) if (index in checked) != (index in correct)
        ]
        return MultipleAnswerResult(
            question_answered_correctly=checked == correct,
            answers_requiring_feedback=requiring_feedback,
        )

    async def _simulate_latency(self) -> None:
        if self._latency_seconds > 0:
            await asyncio.sleep(self._latency_seconds)
