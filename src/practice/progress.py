"""
Progress sink payloads.

The engine never calls a sink itself. After a session completes, the caller
turns it into a payload and hands that to a sink:

- review flow: per-word wrong counts and a reviewed timestamp
- topic flow:  ids of the words that were studied
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Protocol

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from .engine import SessionEngine
from .exceptions import InvalidOperationError


class WordProgressEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    word_id: int | str = Field(alias="wordId")
    wrong_count: int = Field(alias="wrongCount")
    reviewed_date: datetime = Field(alias="reviewedDate")


class UpdateWordProgressRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    word_progress: list[WordProgressEntry] = Field(alias="wordProgress")


class LearnedWordsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    word_ids: list[int | str] = Field(alias="wordIds")


def _require_complete(engine: SessionEngine) -> None:
    if not engine.is_complete:
        raise InvalidOperationError("Session is not complete; progress is not final")


def build_review_progress(
    engine: SessionEngine,
    reviewed_at: Optional[datetime] = None,
) -> UpdateWordProgressRequest:
    """Per-word wrong counts for a finished review session."""
    _require_complete(engine)
    reviewed_at = reviewed_at or datetime.now(timezone.utc)
    return UpdateWordProgressRequest(
        word_progress=[
            WordProgressEntry(
                word_id=o.source_id,
                wrong_count=o.wrong_count,
                reviewed_date=reviewed_at,
            )
            for o in engine.outcomes()
        ]
    )


def build_learned_words(engine: SessionEngine) -> LearnedWordsRequest:
    """Ids of every word in a finished topic-learning session."""
    _require_complete(engine)
    return LearnedWordsRequest(word_ids=[o.source_id for o in engine.outcomes()])


class ProgressSink(Protocol):
    """Receives a progress payload when a session ends."""

    def submit(self, payload: BaseModel) -> None:
        ...


class JsonFileProgressSink:
    """Writes progress payloads as camelCase JSON, the shape the REST API accepts."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def submit(self, payload: BaseModel) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(payload.model_dump_json(by_alias=True, indent=2))
        logger.info(f"Progress written to {self.path}")
