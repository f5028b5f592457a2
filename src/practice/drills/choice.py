"""
Multiple-choice word drills.

- CHOOSE_MEANING: show the word, pick its meaning
- CHOOSE_WORD: show the meaning, pick the word
- LISTEN_CHOOSE: play the word's audio, pick the word

One correct option plus up to `max_distractors` options taken from other
words in the same pool, in random order.
"""

from __future__ import annotations

from typing import Any, Sequence

from loguru import logger

from ..models import DrillItem, SourceItem
from . import DrillType, register
from .base import AnswerResult, BuildContext, check_exact

LISTEN_CHOOSE_PROMPT = "Nghe và chọn từ đúng"


def sample_distractors(
    item: SourceItem,
    pool: Sequence[SourceItem],
    ctx: BuildContext,
) -> list[SourceItem]:
    """Sample distinct other items from the pool, without replacement."""
    others = [w for w in pool if w.id != item.id]
    count = min(ctx.max_distractors, len(others))
    if count < ctx.max_distractors:
        logger.debug(f"Only {count} distractors available for word {item.id}")
    return ctx.rng.sample(others, count)


def build_options(correct: str, distractors: Sequence[str], ctx: BuildContext) -> list[str]:
    options = [correct, *distractors]
    ctx.rng.shuffle(options)
    return options


class _ChoiceHandler:
    """Shared build/check logic; subclasses pick what is shown and what is chosen."""

    drill_type: DrillType

    def prompt_for(self, item: SourceItem) -> str:
        raise NotImplementedError

    def value_of(self, item: SourceItem) -> str:
        raise NotImplementedError

    def build(self, item: SourceItem, pool: Sequence[SourceItem], ctx: BuildContext) -> DrillItem:
        distractors = sample_distractors(item, pool, ctx)
        correct = self.value_of(item)
        return DrillItem(
            drill_type=self.drill_type,
            prompt=self.prompt_for(item),
            correct_answer=correct,
            options=build_options(correct, [self.value_of(d) for d in distractors], ctx),
            source=item,
        )

    def check(self, drill: DrillItem, submitted: Any) -> AnswerResult:
        return check_exact(drill, submitted)


@register(DrillType.CHOOSE_MEANING)
class ChooseMeaningHandler(_ChoiceHandler):
    drill_type = DrillType.CHOOSE_MEANING

    def prompt_for(self, item: SourceItem) -> str:
        return item.word

    def value_of(self, item: SourceItem) -> str:
        return item.display_meaning


@register(DrillType.CHOOSE_WORD)
class ChooseWordHandler(_ChoiceHandler):
    drill_type = DrillType.CHOOSE_WORD

    def prompt_for(self, item: SourceItem) -> str:
        return item.display_meaning

    def value_of(self, item: SourceItem) -> str:
        return item.word


@register(DrillType.LISTEN_CHOOSE)
class ListenChooseHandler(_ChoiceHandler):
    """Same options as CHOOSE_WORD; the prompt never shows the target word."""

    drill_type = DrillType.LISTEN_CHOOSE

    def prompt_for(self, item: SourceItem) -> str:
        return LISTEN_CHOOSE_PROMPT

    def value_of(self, item: SourceItem) -> str:
        return item.word
