"""Qt UI components for the question form application."""

from .async_bridge import QtAsyncDispatcher
from .question_form import QuestionForm
from .question_window import QuestionWindow

__all__ = [
    "QtAsyncDispatcher",
    "QuestionForm",
    "QuestionWindow",
]
