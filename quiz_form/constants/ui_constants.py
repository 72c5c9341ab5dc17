"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "QuizForm"

SUBMIT_BUTTON: str = "Submit"
RETRY_BUTTON: str = "Retry"

FEEDBACK_CORRECT: str = "Correct!"
FEEDBACK_INCORRECT: str = "Incorrect."
EXPLANATION_CORRECT_PREFIX: str = "Correct:"
EXPLANATION_INCORRECT_PREFIX: str = "Explanation:"
QUESTION_EXPLANATION_TITLE: str = "Why?"
SUBMITTING_MESSAGE: str = "Checking your answer…"
SCORING_FAILED_TEMPLATE: str = "Could not check your answer: {error}"

NO_QUESTIONS_MESSAGE: str = "No questions are available."
