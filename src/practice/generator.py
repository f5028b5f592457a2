"""
Question Generator.

Expands a list of source words into drill items:
1. For each word, draw `items_per_source` drill types uniformly from the enabled set
2. Build each drill with the registered handler (prompt, answer, options)
3. Shuffle the whole list before it is handed to a session

Randomness comes from an explicit `random.Random`, so seeded runs are reproducible.
"""
from __future__ import annotations

import random
from typing import Iterable, Optional, Sequence

from loguru import logger

from .drills import DrillType, HANDLERS, parse_drill_types
from .drills.base import FALSE_LABEL, TRUE_LABEL, BuildContext
from .exceptions import EmptyInputError
from .models import DrillItem, SourceItem


class QuestionGenerator:
    """
    Builds shuffled drill lists from vocabulary words.

    The generator does not apply default drill types; callers resolve an
    empty selection first (see `flows.resolve_drill_types`).
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_distractors: int = 3,
        true_label: str = TRUE_LABEL,
        false_label: str = FALSE_LABEL,
    ):
        self.rng = rng or random.Random()
        self.max_distractors = max_distractors
        self.true_label = true_label
        self.false_label = false_label

    def generate(
        self,
        source_items: Sequence[SourceItem],
        enabled_types: Iterable[DrillType | str],
        items_per_source: int = 1,
    ) -> list[DrillItem]:
        """
        Generate drills for every source item.

        Args:
            source_items: Words to drill (non-empty)
            enabled_types: Drill types to draw from (non-empty)
            items_per_source: Drills per word (2 for topic learning, 1 for review)

        Returns:
            Shuffled list of len(source_items) * items_per_source drills
        """
        items = list(source_items)
        if not items:
            raise EmptyInputError("No source items to generate drills from")

        types = parse_drill_types(enabled_types)
        if not types:
            raise EmptyInputError("No drill types enabled")

        if items_per_source < 1:
            raise ValueError(f"items_per_source must be at least 1, got {items_per_source}")

        ctx = BuildContext(
            rng=self.rng,
            max_distractors=self.max_distractors,
            true_label=self.true_label,
            false_label=self.false_label,
        )

        drills: list[DrillItem] = []
        for item in items:
            for _ in range(items_per_source):
                drill_type = self.rng.choice(types)
                drills.append(HANDLERS[drill_type].build(item, items, ctx))

        self.rng.shuffle(drills)

        logger.debug(
            f"Generated {len(drills)} drills from {len(items)} words "
            f"(types={[t.value for t in types]}, per_word={items_per_source})"
        )
        return drills


def generate_drills(
    source_items: Sequence[SourceItem],
    enabled_types: Iterable[DrillType | str],
    items_per_source: int = 1,
    rng: Optional[random.Random] = None,
    max_distractors: int = 3,
) -> list[DrillItem]:
    """Convenience wrapper around QuestionGenerator.generate()."""
    generator = QuestionGenerator(rng=rng, max_distractors=max_distractors)
    return generator.generate(source_items, enabled_types, items_per_source)
