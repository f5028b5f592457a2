"""
Authored study-set quizzes.

Study sets carry hand-written questions instead of generated ones. Each quiz
becomes one DrillItem, in authored order, and runs on the same SessionEngine.
"""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field

from .drills import QuizType
from .drills.base import FALSE_LABEL, TRUE_LABEL
from .drills.quiz import parse_correct_answers
from .exceptions import EmptyInputError
from .models import DrillItem, SourceItem


class StudySetQuiz(BaseModel):
    """One authored quiz question. `correct_answer` is comma-separated."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | None = None
    type: QuizType
    question: str
    options: list[str] = Field(default_factory=list)
    correct_answer: str = Field(alias="correctAnswer")


def quiz_to_drill(quiz: StudySetQuiz, index: int) -> DrillItem:
    """TRUE_FALSE quizzes always offer Đúng/Sai, the labels their answers are authored in."""
    source = SourceItem(
        id=quiz.id if quiz.id is not None else f"quiz-{index}",
        word=quiz.question,
        meaning=quiz.correct_answer,
    )

    if quiz.type is QuizType.TRUE_FALSE:
        options = [TRUE_LABEL, FALSE_LABEL]
    elif quiz.type is QuizType.MULTIPLE_CHOICE:
        options = list(quiz.options)
    else:
        options = []

    return DrillItem(
        drill_type=quiz.type,
        prompt=quiz.question,
        correct_answer=quiz.correct_answer,
        options=options,
        source=source,
    )


def quizzes_to_drills(quizzes: Sequence[StudySetQuiz]) -> list[DrillItem]:
    if not quizzes:
        raise EmptyInputError("Study set has no quizzes")
    return [quiz_to_drill(q, i) for i, q in enumerate(quizzes)]


def is_multi_select(drill: DrillItem) -> bool:
    """True for multiple-choice quizzes with more than one correct answer."""
    return (
        drill.drill_type is QuizType.MULTIPLE_CHOICE
        and len(parse_correct_answers(drill.correct_answer)) > 1
    )
