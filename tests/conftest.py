"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import json
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import Settings  # noqa: E402
from src.practice.models import SourceItem  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


class FixedCoin(random.Random):
    """Random source whose random() always returns the same value (coin flips are fixed)."""

    def __init__(self, value: float, seed: int = 0):
        super().__init__(seed)
        self.value = value

    def random(self) -> float:
        return self.value


WORDS = [
    {"id": 1, "word": "cat", "meaning": "a small domesticated feline", "vnMeaning": "con mèo",
     "audioUrl": "https://cdn.example.com/audio/cat.mp3"},
    {"id": 2, "word": "dog", "meaning": "a domesticated canine", "vnMeaning": "con chó"},
    {"id": 3, "word": "bird", "meaning": "a feathered animal", "vnMeaning": "con chim"},
    {"id": 4, "word": "fish", "meaning": "an aquatic animal", "vnMeaning": "con cá"},
    {"id": 5, "word": "horse", "meaning": "a large riding animal", "vnMeaning": "con ngựa"},
]


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def words():
    """Five vocabulary words with distinct Vietnamese meanings."""
    return [SourceItem.model_validate(w) for w in WORDS]


@pytest.fixture
def three_words(words):
    return words[:3]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def settings():
    """Settings with defaults only (no .env)."""
    return Settings(_env_file=None)


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(WORDS, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def fixed_coin():
    """Factory for a random source with a fixed coin flip: fixed_coin(0.9)."""
    return FixedCoin
