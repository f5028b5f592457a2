"""
Source data providers.

Providers hand the practice core its input. Only local JSON files are read
here; fetching from the REST API belongs to the caller.

Accepted file shapes:
    [ {...}, {...} ]                       - bare list
    { "words": [ ... ] }                   - keyed list
    { "metaData": { "words": [ ... ] } }   - API response envelope
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Protocol

from pydantic import TypeAdapter, ValidationError

from .exceptions import SourceDataError
from .models import SourceItem
from .studyset import StudySetQuiz

_SOURCE_ITEMS = TypeAdapter(list[SourceItem])
_QUIZZES = TypeAdapter(list[StudySetQuiz])


class SourceProvider(Protocol):
    """Supplies source items for a topic, review or study-set request."""

    def fetch(self, limit: Optional[int] = None) -> list[SourceItem]:
        ...


def _load_records(path: Path, key: str) -> list[Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SourceDataError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SourceDataError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("metaData", data)
        if isinstance(data, dict):
            data = data.get(key, [])

    if not isinstance(data, list):
        raise SourceDataError(f"Expected a list of {key} in {path}")
    return data


class JsonFileSource:
    """Reads vocabulary words from a JSON file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def fetch(self, limit: Optional[int] = None) -> list[SourceItem]:
        records = _load_records(self.path, "words")
        try:
            items = _SOURCE_ITEMS.validate_python(records)
        except ValidationError as e:
            raise SourceDataError(f"Invalid word data in {self.path}: {e}") from e
        return items[:limit] if limit is not None else items


class JsonFileStudySetSource:
    """Reads authored study-set quizzes from a JSON file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def fetch_quizzes(self) -> list[StudySetQuiz]:
        records = _load_records(self.path, "quizzes")
        try:
            return _QUIZZES.validate_python(records)
        except ValidationError as e:
            raise SourceDataError(f"Invalid quiz data in {self.path}: {e}") from e
