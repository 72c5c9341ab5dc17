"""FastAPI server that exposes the scoring service over HTTP."""

from __future__ import annotations

import logging
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel
import uvicorn

from quiz_form.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from quiz_form.core.errors import ScoringError, UnknownQuestionError
from quiz_form.core.markdown_math_renderer import renderer
from quiz_form.core.models import AnswerSelection, QuizQuestion
from quiz_form.core.services.question_bank import QuestionBank
from quiz_form.core.services.scoring_service import ScoringService

logger = logging.getLogger(__name__)


class SingleAnswerPayload(BaseModel):
    """Payload schema for a single-answer submission."""

    answer_index: int


class AnswerSelectionPayload(BaseModel):
    index: int
    checked: bool


class MultipleAnswersPayload(BaseModel):
    """Payload schema for a multiple-answer submission."""

    answers: list[AnswerSelectionPayload]


class SingleAnswerResponse(BaseModel):
    question_id: str
    is_correct: bool


class MultipleAnswersResponse(BaseModel):
    question_id: str
    question_answered_correctly: bool
    answers_requiring_feedback: list[int]


def _public_question_view(question: QuizQuestion) -> dict[str, object]:
    # Correct answers and explanations stay server-side until scored.
    return {
        "id": question.id,
        "question": question.question,
        "question_html": renderer.render_fragment(question.question),
        "answers": list(question.answers),
        "mode": question.mode.name.lower(),
    }


def _get_dependency(value):
    def dependency():
        return value

    return dependency


def create_api_app(bank: QuestionBank, scoring_service: ScoringService) -> FastAPI:
    """Create a FastAPI application wired to the provided bank and scorer."""
    app = FastAPI(title="QuizForm Scoring API", version="0.1.0")
    bank_dep = _get_dependency(bank)
    scoring_dep = _get_dependency(scoring_service)

    @app.get("/questions")
    def list_questions(questions: QuestionBank = Depends(bank_dep)) -> list[dict[str, object]]:
        return [_public_question_view(question) for question in questions.get_questions()]

    @app.get("/questions/{question_id}")
    def get_question(question_id: str, questions: QuestionBank = Depends(bank_dep)) -> dict[str, object]:
        try:
            question = questions.get_question(question_id)
        except UnknownQuestionError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return _public_question_view(question)

    @app.post("/questions/{question_id}/answer", response_model=SingleAnswerResponse)
    async def check_answer(
        question_id: str,
        payload: SingleAnswerPayload,
        scorer: ScoringService = Depends(scoring_dep),
    ) -> SingleAnswerResponse:
        try:
            is_correct = await scorer.is_answer_correct(question_id, payload.answer_index)
        except UnknownQuestionError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except ScoringError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        logger.info("Scored question %s answer %s: %s", question_id, payload.answer_index, is_correct)
        return SingleAnswerResponse(question_id=question_id, is_correct=is_correct)

    @app.post("/questions/{question_id}/answers", response_model=MultipleAnswersResponse)
    async def check_answers(
        question_id: str,
        payload: MultipleAnswersPayload,
        scorer: ScoringService = Depends(scoring_dep),
    ) -> MultipleAnswersResponse:
        selections = [AnswerSelection(index=item.index, checked=item.checked) for item in payload.answers]
        try:
            result = await scorer.is_multiple_answers_correct(question_id, selections)
        except UnknownQuestionError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except ScoringError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        logger.info(
            "Scored question %s selections: correct=%s feedback=%s",
            question_id,
            result.question_answered_correctly,
            result.answers_requiring_feedback,
        )
        return MultipleAnswersResponse(
            question_id=question_id,
            question_answered_correctly=result.question_answered_correctly,
            answers_requiring_feedback=result.answers_requiring_feedback,
        )

    return app


def start_api_server(
    bank: QuestionBank,
    scoring_service: ScoringService,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(bank, scoring_service)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="ScoringApiServer", daemon=True)
    thread.start()
    return thread
