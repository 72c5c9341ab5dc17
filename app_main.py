"""Application entry point for QuizForm."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from quiz_form.constants.about import APP_NAME, APP_VERSION
from quiz_form.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from quiz_form.constants.scoring_constants import SIMULATED_SCORING_LATENCY_SECONDS
from quiz_form.core.sample_questions import SAMPLE_QUESTIONS
from quiz_form.core.services.question_bank import QuestionBank
from quiz_form.core.services.scoring_service import LocalScoringService
from quiz_form.server.api_server import start_api_server
from quiz_form.ui.question_window import QuestionWindow
from quiz_form.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, start the scoring API, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s…", APP_NAME, APP_VERSION)

    bank = QuestionBank(SAMPLE_QUESTIONS)
    scoring_service = LocalScoringService(bank, latency_seconds=SIMULATED_SCORING_LATENCY_SECONDS)
    start_api_server(bank=bank, scoring_service=scoring_service, host=DEFAULT_HOST, port=DEFAULT_PORT)
    logger.info("Scoring API available at http://%s:%s/questions", DEFAULT_HOST, DEFAULT_PORT)

    questions = bank.get_questions()
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    window = QuestionWindow(scoring_service=scoring_service, question=questions[0] if questions else None)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
