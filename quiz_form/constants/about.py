"""Static metadata describing QuizForm."""

APP_NAME = "QuizForm"
APP_VERSION = "0.1"
