"""Service holding the questions the scoring service can answer for."""

from __future__ import annotations

from threading import Lock

from quiz_form.core.errors import UnknownQuestionError
from quiz_form.core.models import QuizQuestion


class QuestionBank:
    """Read-only, thread-safe lookup of questions by id."""

    def __init__(self, questions: list[QuizQuestion]) -> None:
        self._lock = Lock()
        self._questions: dict[str, QuizQuestion] = {}
        for question in questions:
            prepared = self._prepare_question(question)
            if prepared.id in self._questions:
                raise ValueError(f"Duplicate question id: {prepared.id!r}")
            self._questions[prepared.id] = prepared

    def get_questions(self) -> list[QuizQuestion]:
        """Return all questions in insertion order."""
        with self._lock:
            return list(self._questions.values())

    def get_question(self, question_id: str) -> QuizQuestion:
        with self._lock:
            question = self._questions.get(question_id)
        if question is None:
            raise UnknownQuestionError(question_id)
        return question

    def has_question(self, question_id: str) -> bool:
        with self._lock:
            return question_id in self._questions

    def get_question_count(self) -> int:
        with self._lock:
            return len(self._questions)

    @staticmethod
    def _prepare_question(question: QuizQuestion) -> QuizQuestion:
        """Validate and normalize a question before storage."""
        cleaned_text = question.question.strip()
        if not cleaned_text:
            raise ValueError("Question text must not be empty.")
        answers = tuple(answer.strip() for answer in question.answers)
        if any(not answer for answer in answers):
            raise ValueError("Answer text cannot be empty.")
        return QuizQuestion(
            id=str(question.id),
            question=cleaned_text,
            answers=answers,
            explanations=tuple(text.strip() for text in question.explanations),
            correct_answers=tuple(sorted(set(question.correct_answers))),
            question_explanation=question.question_explanation.strip(),
        )
