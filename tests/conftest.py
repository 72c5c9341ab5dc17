import asyncio
import os

import pytest

from quiz_form.core.dispatch import deliver_outcome
from quiz_form.core.models import MultipleAnswerResult, QuizQuestion
from quiz_form.core.sample_questions import SAMPLE_QUESTIONS
from quiz_form.core.services.question_bank import QuestionBank
from quiz_form.core.services.scoring_service import LocalScoringService

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class RecordingScoringService:
    """Scoring double that records every call and answers with canned results."""

    def __init__(self, single_result=True, multiple_result=None, error=None):
        self.single_result = single_result
        self.multiple_result = multiple_result or MultipleAnswerResult(
            question_answered_correctly=False, answers_requiring_feedback=[]
        )
        self.error = error
        self.calls = []

    async def is_answer_correct(self, question_id, answer_index):
        self.calls.append(("single", question_id, answer_index))
        if self.error is not None:
            raise self.error
        return self.single_result

    async def is_multiple_answers_correct(self, question_id, payload):
        self.calls.append(("multiple", question_id, list(payload)))
        if self.error is not None:
            raise self.error
        return self.multiple_result


class ManualDispatcher:
    """Holds dispatched calls until the test completes them, in any order."""

    def __init__(self):
        self.pending = []

    def dispatch(self, call, on_result, on_error):
        self.pending.append((call, on_result, on_error))

    def complete(self, position=0):
        call, on_result, on_error = self.pending.pop(position)
        loop = asyncio.new_event_loop()
        try:
            future = asyncio.ensure_future(call(), loop=loop)
            try:
                loop.run_until_complete(future)
            except Exception:
                pass
        finally:
            loop.close()
        deliver_outcome(future, on_result, on_error)

    def complete_all(self):
        while self.pending:
            self.complete(0)


class ImmediateDispatcher(ManualDispatcher):
    """Completes every call as soon as it is dispatched."""

    def dispatch(self, call, on_result, on_error):
        super().dispatch(call, on_result, on_error)
        self.complete_all()


@pytest.fixture
def single_question():
    return QuizQuestion(
        id="q-single",
        question="Pick the even number",
        answers=["1", "3", "4", "7"],
        explanations=["1 is odd", "3 is odd", "4 is even", "7 is odd"],
        correct_answers=[2],
        question_explanation="Even numbers are divisible by two.",
    )


@pytest.fixture
def multiple_question():
    return QuizQuestion(
        id="q-multiple",
        question="Pick the vowels",
        answers=["a", "b", "e", "f"],
        explanations=["a is a vowel", "b is a consonant", "e is a vowel", "f is a consonant"],
        correct_answers=[0, 2],
        question_explanation="The vowels are a, e, i, o and u.",
    )


@pytest.fixture
def bank(single_question, multiple_question):
    return QuestionBank([single_question, multiple_question, *SAMPLE_QUESTIONS])


@pytest.fixture
def local_scoring(bank):
    return LocalScoringService(bank)


@pytest.fixture
def recording_scoring():
    return RecordingScoringService()


@pytest.fixture
def manual_dispatcher():
    return ManualDispatcher()


@pytest.fixture
def immediate_dispatcher():
    return ImmediateDispatcher()
