"""
Base protocol and types for drill handlers.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from ..models import DrillItem, SourceItem

TRUE_LABEL = "Đúng"
FALSE_LABEL = "Sai"


@dataclass
class AnswerResult:
    """Result of checking an answer."""
    correct: bool
    feedback: str
    user_answer: str
    correct_answer: str


@dataclass(frozen=True)
class BuildContext:
    """Randomness and presentation settings shared by all builders in one generation run."""
    rng: random.Random
    max_distractors: int = 3
    true_label: str = TRUE_LABEL
    false_label: str = FALSE_LABEL


class DrillHandler(Protocol):
    """Protocol for drill type handlers."""

    def check(self, drill: DrillItem, submitted: Any) -> AnswerResult:
        """Compare the submitted answer with the drill's correct answer."""
        ...


class DrillBuilder(DrillHandler, Protocol):
    """Handler that can also generate drills from vocabulary words."""

    def build(self, item: SourceItem, pool: Sequence[SourceItem], ctx: BuildContext) -> DrillItem:
        """Create one drill for `item`, drawing distractors from `pool`."""
        ...


def answer_text(submitted: Any) -> str:
    """Flatten a submission (None, a string, or a list of selections) to text."""
    if submitted is None:
        return ""
    if isinstance(submitted, (list, tuple, set, frozenset)):
        return ",".join(str(s) for s in submitted)
    return str(submitted)


def normalize_text(value: str) -> str:
    return value.strip().lower()


def _result(correct: bool, user_answer: str, correct_answer: str) -> AnswerResult:
    return AnswerResult(
        correct=correct,
        feedback="Correct!" if correct else "Incorrect.",
        user_answer=user_answer,
        correct_answer=correct_answer,
    )


def check_exact(drill: DrillItem, submitted: Any) -> AnswerResult:
    """Exact string equality, used for option-based drills."""
    user_answer = answer_text(submitted)
    return _result(user_answer == drill.correct_answer, user_answer, drill.correct_answer)


def check_free_text(drill: DrillItem, submitted: Any) -> AnswerResult:
    """Case-insensitive, whitespace-trimmed equality for typed or spoken answers."""
    user_answer = answer_text(submitted)
    correct = normalize_text(user_answer) == normalize_text(drill.correct_answer)
    return _result(correct, user_answer.strip(), drill.correct_answer)


def check_answer_set(drill: DrillItem, submitted: Any, expected: Sequence[str]) -> AnswerResult:
    """Order-independent comparison of selected answers."""
    if isinstance(submitted, (list, tuple, set, frozenset)):
        selected = [str(s).strip() for s in submitted if str(s).strip()]
    else:
        selected = [s.strip() for s in answer_text(submitted).split(",") if s.strip()]
    correct = sorted(selected) == sorted(expected)
    return _result(correct, ", ".join(selected), ", ".join(expected))
