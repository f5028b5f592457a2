"""
Data model for practice sessions.

- SourceItem: a vocabulary word or authored test item, as supplied by the caller
- DrillItem: one generated question instance, owned by a single session
- ItemOutcome: per-source-item result used to build progress payloads
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .drills import DrillType, QuizType


class SourceItem(BaseModel):
    """A word (or test item) a drill is generated from. Immutable."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: int | str
    word: str
    meaning: str | None = None
    vn_meaning: str | None = Field(default=None, alias="vnMeaning")
    phonetic: str | None = None
    audio_url: str | None = Field(default=None, alias="audioUrl")
    image_url: str | None = Field(default=None, alias="imageUrl")
    example: str | None = None
    example_translation: str | None = Field(default=None, alias="exampleTranslation")
    topic_id: int | None = Field(default=None, alias="topicId")
    cefr_level: str | None = Field(default=None, alias="cefrLevel")

    @property
    def display_meaning(self) -> str:
        """Vietnamese meaning, falling back to the English meaning."""
        return self.vn_meaning or self.meaning or ""


@dataclass(eq=False)
class DrillItem:
    """
    One question shown to the learner.

    Identity-compared: two drills for the same word are distinct queue entries.
    """

    drill_type: DrillType | QuizType
    prompt: str
    correct_answer: str
    source: SourceItem
    options: list[str] = field(default_factory=list)
    attempt_count: int = 0

    @property
    def source_id(self) -> int | str:
        return self.source.id

    @property
    def audio_url(self) -> str | None:
        return self.source.audio_url

    @property
    def has_options(self) -> bool:
        return bool(self.options)


@dataclass
class ItemOutcome:
    """Aggregated result for one source item across all of its drills."""

    source_id: int | str
    drills_total: int = 0
    drills_correct: int = 0
    wrong_count: int = 0
    skipped: bool = False

    @property
    def mastered(self) -> bool:
        """True when every drill for this item was answered correctly."""
        return self.drills_total > 0 and self.drills_correct == self.drills_total
