"""
Free-response word drills: LISTEN_FILL (type what you hear) and PRONOUNCE
(say the word; speech is transcribed elsewhere). No options.
"""

from __future__ import annotations

from typing import Any, Sequence

from ..models import DrillItem, SourceItem
from . import DrillType, register
from .base import AnswerResult, BuildContext, check_free_text

LISTEN_FILL_PROMPT = "Nghe và điền từ"
PRONOUNCE_PROMPT = "Phát âm từ: {word}"


@register(DrillType.LISTEN_FILL)
class ListenFillHandler:

    def build(self, item: SourceItem, pool: Sequence[SourceItem], ctx: BuildContext) -> DrillItem:
        return DrillItem(
            drill_type=DrillType.LISTEN_FILL,
            prompt=LISTEN_FILL_PROMPT,
            correct_answer=item.word.lower(),
            source=item,
        )

    def check(self, drill: DrillItem, submitted: Any) -> AnswerResult:
        return check_free_text(drill, submitted)


@register(DrillType.PRONOUNCE)
class PronounceHandler:

    def build(self, item: SourceItem, pool: Sequence[SourceItem], ctx: BuildContext) -> DrillItem:
        return DrillItem(
            drill_type=DrillType.PRONOUNCE,
            prompt=PRONOUNCE_PROMPT.format(word=item.word),
            correct_answer=item.word,
            source=item,
        )

    def check(self, drill: DrillItem, submitted: Any) -> AnswerResult:
        return check_free_text(drill, submitted)
