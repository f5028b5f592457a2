"""
True/False word drill.

Shows "word = meaning". A coin flip decides whether the meaning is the word's
own or one borrowed from another word in the pool.
"""

from __future__ import annotations

from typing import Any, Sequence

from loguru import logger

from ..models import DrillItem, SourceItem
from . import DrillType, register
from .base import AnswerResult, BuildContext, check_exact


@register(DrillType.TRUE_FALSE)
class TrueFalseHandler:
    """Handler for true/false pairing drills."""

    def build(self, item: SourceItem, pool: Sequence[SourceItem], ctx: BuildContext) -> DrillItem:
        meaning = item.display_meaning
        is_true = ctx.rng.random() < 0.5
        shown = meaning

        if not is_true:
            # A false pairing must never show the word's own meaning
            candidates = [
                w for w in pool
                if w.id != item.id and w.display_meaning and w.display_meaning != meaning
            ]
            if candidates:
                shown = ctx.rng.choice(candidates).display_meaning
            else:
                logger.warning(f"No other meaning to pair with word {item.id}; using a true pairing")
                is_true = True

        return DrillItem(
            drill_type=DrillType.TRUE_FALSE,
            prompt=f"{item.word} = {shown}",
            correct_answer=ctx.true_label if is_true else ctx.false_label,
            options=[ctx.true_label, ctx.false_label],
            source=item,
        )

    def check(self, drill: DrillItem, submitted: Any) -> AnswerResult:
        return check_exact(drill, submitted)
