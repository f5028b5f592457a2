"""
Practice flows.

The same SessionEngine serves three flows; they differ only in configuration:

- TOPIC_LEARNING: new words of a topic, 2 drills per word, at least 2 drill types
- SPACED_REVIEW:  words due for review, 1 drill per word
- STUDY_SET_QUIZ: words or authored quizzes of a study set, 1 drill per item

PRONOUNCE drills are dropped after `drill_pronounce_max_attempts` wrong answers
in every flow; other drill types are retried until answered correctly.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from loguru import logger

from .drills import DEFAULT_DRILL_TYPES, DrillType, parse_drill_types
from .drills.base import FALSE_LABEL, TRUE_LABEL
from .engine import SessionEngine
from .exceptions import DrillTypeSelectionError, EmptyInputError
from .generator import QuestionGenerator
from .models import SourceItem
from .studyset import StudySetQuiz, quizzes_to_drills

if TYPE_CHECKING:
    from config import Settings


class PracticeFlow(str, Enum):
    TOPIC_LEARNING = "topic"
    SPACED_REVIEW = "review"
    STUDY_SET_QUIZ = "study_set"


@dataclass(frozen=True)
class FlowConfig:
    """Per-flow knobs for drill generation and retry."""
    flow: PracticeFlow
    items_per_source: int = 1
    default_types: tuple[DrillType, ...] = DEFAULT_DRILL_TYPES
    attempt_limits: dict[DrillType, int] = field(default_factory=dict)
    min_types: int = 1
    word_limit: Optional[int] = None
    max_distractors: int = 3
    true_label: str = TRUE_LABEL
    false_label: str = FALSE_LABEL
    random_seed: Optional[int] = None


def _load_settings() -> "Settings":
    from config import get_settings
    return get_settings()


def get_flow_config(flow: PracticeFlow | str, settings: Optional["Settings"] = None) -> FlowConfig:
    """Build the configuration for a flow from application settings."""
    flow = PracticeFlow(flow)
    settings = settings or _load_settings()

    shared = dict(
        flow=flow,
        default_types=tuple(parse_drill_types(settings.get_default_drill_types())),
        attempt_limits={
            DrillType(name): limit for name, limit in settings.get_attempt_limits().items()
        },
        max_distractors=settings.drill_max_distractors,
        true_label=settings.true_label,
        false_label=settings.false_label,
        random_seed=settings.drill_random_seed,
    )

    if flow is PracticeFlow.TOPIC_LEARNING:
        return FlowConfig(
            items_per_source=settings.drill_topic_items_per_word,
            min_types=settings.drill_topic_min_types,
            word_limit=settings.drill_topic_word_limit,
            **shared,
        )
    if flow is PracticeFlow.SPACED_REVIEW:
        return FlowConfig(
            items_per_source=settings.drill_review_items_per_word,
            word_limit=settings.drill_review_word_limit,
            **shared,
        )
    return FlowConfig(items_per_source=1, **shared)


def resolve_drill_types(
    enabled_types: Iterable[DrillType | str] | str | None,
    config: FlowConfig,
) -> list[DrillType]:
    """Apply the flow's default pair to an empty selection and enforce its minimum."""
    types = parse_drill_types(enabled_types)
    if not types:
        types = list(config.default_types)
    if not types:
        raise EmptyInputError("No drill types enabled and no defaults configured")
    if len(types) < config.min_types:
        raise DrillTypeSelectionError(
            f"{config.flow.value} needs at least {config.min_types} drill types, got {len(types)}"
        )
    return types


def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)


def start_session(
    flow: PracticeFlow | str,
    source_items: Sequence[SourceItem],
    enabled_types: Iterable[DrillType | str] | str | None = None,
    limit: Optional[int] = None,
    rng: Optional[random.Random] = None,
    settings: Optional["Settings"] = None,
) -> SessionEngine | None:
    """
    Generate drills for a flow and start a session.

    Args:
        flow: Which practice flow this is
        source_items: Words supplied by the source provider
        enabled_types: Selected drill types (empty -> flow defaults)
        limit: Word count; falls back to the flow's word_limit
        rng: Random source (default seeded from settings)
        settings: Settings override (default: get_settings())

    Returns:
        A new SessionEngine, or None when there are no words to practice
    """
    config = get_flow_config(flow, settings)

    items = list(source_items)
    word_limit = limit if limit is not None else config.word_limit
    if word_limit is not None:
        items = items[:word_limit]

    if not items:
        logger.info(f"No drills available for {config.flow.value} session")
        return None

    types = resolve_drill_types(enabled_types, config)

    generator = QuestionGenerator(
        rng=rng or make_rng(config.random_seed),
        max_distractors=config.max_distractors,
        true_label=config.true_label,
        false_label=config.false_label,
    )
    drills = generator.generate(items, types, items_per_source=config.items_per_source)
    return SessionEngine(drills, attempt_limits=config.attempt_limits)


def start_quiz_session(
    quizzes: Sequence[StudySetQuiz],
    settings: Optional["Settings"] = None,
) -> SessionEngine | None:
    """Start a session over authored study-set quizzes, in authored order."""
    if not quizzes:
        logger.info("No drills available for study_set session")
        return None

    config = get_flow_config(PracticeFlow.STUDY_SET_QUIZ, settings)
    drills = quizzes_to_drills(quizzes)
    return SessionEngine(drills, attempt_limits=config.attempt_limits)
