"""
Checkers for authored study-set quizzes.

Correct answers are stored comma-separated; a MULTIPLE_CHOICE quiz with more
than one correct answer is a multi-select question.
"""

from __future__ import annotations

from typing import Any

from ..models import DrillItem
from . import QuizType, register
from .base import AnswerResult, check_answer_set, check_exact, check_free_text


def parse_correct_answers(correct_answer: str) -> list[str]:
    """Split a comma-separated answer string, dropping blanks."""
    return [s.strip() for s in correct_answer.split(",") if s.strip()]


@register(QuizType.MULTIPLE_CHOICE)
class MultipleChoiceQuizHandler:

    def check(self, drill: DrillItem, submitted: Any) -> AnswerResult:
        return check_answer_set(drill, submitted, parse_correct_answers(drill.correct_answer))


@register(QuizType.TRUE_FALSE)
class TrueFalseQuizHandler:

    def check(self, drill: DrillItem, submitted: Any) -> AnswerResult:
        return check_exact(drill, submitted)


@register(QuizType.SHORT_ANSWER)
class ShortAnswerQuizHandler:

    def check(self, drill: DrillItem, submitted: Any) -> AnswerResult:
        return check_free_text(drill, submitted)
