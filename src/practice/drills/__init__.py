"""
Drill type handlers for practice sessions.

Each drill type has a handler with:
- build(): Turn a source item into a DrillItem (word drills only)
- check(): Compare a submitted answer against the drill's correct answer

Word drills are keyed by DrillType; authored study-set quizzes by QuizType.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterable

from ..exceptions import DrillTypeSelectionError

if TYPE_CHECKING:
    from .base import DrillHandler


class DrillType(str, Enum):
    """Drill variants generated from vocabulary words."""
    CHOOSE_MEANING = "CHOOSE_MEANING"
    CHOOSE_WORD = "CHOOSE_WORD"
    TRUE_FALSE = "TRUE_FALSE"
    LISTEN_CHOOSE = "LISTEN_CHOOSE"
    LISTEN_FILL = "LISTEN_FILL"
    PRONOUNCE = "PRONOUNCE"


class QuizType(str, Enum):
    """Question types of authored study-set quizzes."""
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    TRUE_FALSE = "TRUE_FALSE"
    SHORT_ANSWER = "SHORT_ANSWER"


DRILL_TYPE_LABELS: dict[DrillType, str] = {
    DrillType.CHOOSE_MEANING: "Nhìn từ chọn nghĩa",
    DrillType.CHOOSE_WORD: "Nhìn nghĩa chọn từ",
    DrillType.TRUE_FALSE: "Đúng/Sai",
    DrillType.LISTEN_CHOOSE: "Nghe chọn từ",
    DrillType.LISTEN_FILL: "Nghe điền từ",
    DrillType.PRONOUNCE: "Luyện phát âm",
}

DEFAULT_DRILL_TYPES: tuple[DrillType, ...] = (DrillType.CHOOSE_MEANING, DrillType.CHOOSE_WORD)

# Answered by typing or speaking rather than picking an option
FREE_TEXT_TYPES = frozenset({DrillType.LISTEN_FILL, DrillType.PRONOUNCE, QuizType.SHORT_ANSWER})
AUDIO_TYPES = frozenset({DrillType.LISTEN_CHOOSE, DrillType.LISTEN_FILL})

# Names used by the web client's game selector
_DRILL_TYPE_ALIASES = {
    "SEE_WORD_CHOOSE_MEANING": DrillType.CHOOSE_MEANING,
    "SEE_MEANING_CHOOSE_WORD": DrillType.CHOOSE_WORD,
    "PRONUNCIATION": DrillType.PRONOUNCE,
}


# Handler registries - populated by @register decorator.
# Kept apart because DrillType.TRUE_FALSE and QuizType.TRUE_FALSE compare equal.
HANDLERS: dict[DrillType, "DrillHandler"] = {}
QUIZ_HANDLERS: dict[QuizType, "DrillHandler"] = {}


def register(*drill_types: DrillType | QuizType):
    """Decorator to register a handler for one or more drill types."""
    def decorator(cls):
        handler = cls()
        for drill_type in drill_types:
            if isinstance(drill_type, QuizType):
                QUIZ_HANDLERS[drill_type] = handler
            else:
                HANDLERS[drill_type] = handler
        return cls
    return decorator


def get_handler(drill_type: str | DrillType | QuizType) -> "DrillHandler | None":
    """Get the handler for a drill type. Plain strings resolve to word drills."""
    if isinstance(drill_type, QuizType):
        return QUIZ_HANDLERS.get(drill_type)
    if not isinstance(drill_type, DrillType):
        try:
            drill_type = parse_drill_type(drill_type)
        except DrillTypeSelectionError:
            return None
    return HANDLERS.get(drill_type)


def parse_drill_type(name: str | DrillType) -> DrillType:
    """Resolve a drill type from its name or a web-client alias."""
    if isinstance(name, DrillType):
        return name
    key = str(name).strip().upper()
    if key in _DRILL_TYPE_ALIASES:
        return _DRILL_TYPE_ALIASES[key]
    try:
        return DrillType(key)
    except ValueError:
        raise DrillTypeSelectionError(f"Unknown drill type: {name!r}") from None


def parse_drill_types(names: Iterable[str | DrillType] | str | None) -> list[DrillType]:
    """
    Parse a drill type selection.

    Accepts a comma-separated string or an iterable of names. Duplicates are
    dropped and the result follows DrillType declaration order.
    """
    if names is None:
        return []
    if isinstance(names, str):
        names = [n for n in names.split(",") if n.strip()]
    selected = {parse_drill_type(n) for n in names}
    return [t for t in DrillType if t in selected]


# Import handlers to trigger registration
from . import choice
from . import true_false
from . import free_text
from . import quiz

__all__ = [
    "AUDIO_TYPES",
    "DEFAULT_DRILL_TYPES",
    "DRILL_TYPE_LABELS",
    "DrillType",
    "FREE_TEXT_TYPES",
    "HANDLERS",
    "QUIZ_HANDLERS",
    "QuizType",
    "get_handler",
    "parse_drill_type",
    "parse_drill_types",
    "register",
]
