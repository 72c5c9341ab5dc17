"""Built-in questions served by the desktop app and the scoring API."""

from __future__ import annotations

from quiz_form.core.models import QuizQuestion

SAMPLE_QUESTIONS: list[QuizQuestion] = [
    QuizQuestion(
        id="radians-30",
        question="What is $30^\\circ$ in radians?",
        answers=(
            "$\\frac{\\pi}{2}$",
            "$\\frac{\\pi}{6}$",
            "$\\frac{\\pi}{4}$",
            "$\\frac{\\pi}{3}$",
        ),
        explanations=(
            "$\\frac{\\pi}{2}$ is a right angle, $90^\\circ$.",
            "$180^\\circ$ is $\\pi$, so $30^\\circ$ is a sixth of it.",
            "$\\frac{\\pi}{4}$ is $45^\\circ$.",
            "$\\frac{\\pi}{3}$ is $60^\\circ$.",
        ),
        correct_answers=(1,),
        question_explanation="Multiply degrees by $\\frac{\\pi}{180}$.",
    ),
    QuizQuestion(
        id="prime-numbers",
        question="Which of these numbers are **prime**?",
        answers=("2", "9", "11", "15"),
        explanations=(
            "2 is the only even prime.",
            "9 is $3 \\cdot 3$.",
            "11 has no divisors other than 1 and itself.",
            "15 is $3 \\cdot 5$.",
        ),
        correct_answers=(0, 2),
        question_explanation="A prime has exactly two divisors: 1 and itself.",
    ),
    QuizQuestion(
        id="python-falsy",
        question="Which values are falsy in Python?",
        answers=("`0`", "`[]`", "`'False'`", "`None`"),
        explanations=(
            "Numeric zero is falsy.",
            "Empty containers are falsy.",
            "Any non-empty string is truthy, including `'False'`.",
            "`None` is falsy.",
        ),
        correct_answers=(0, 1, 3),
        question_explanation="Falsy values are `None`, `False`, zeros and empty containers.",
    ),
]
