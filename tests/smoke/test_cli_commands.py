"""
Smoke Tests for CLI Commands.

These tests verify that CLI commands run without errors and produce output.
They don't validate correctness deeply - just that commands work.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import json

import pytest
from typer.testing import CliRunner

from src.cli.drill import app

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

runner = CliRunner()


@pytest.fixture
def single_word_file(tmp_path):
    path = tmp_path / "one.json"
    path.write_text(json.dumps([{"id": 42, "word": "cat", "vnMeaning": "con mèo"}]), encoding="utf-8")
    return path


class TestCLIHelp:

    def test_main_help(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "run" in result.output
        assert "preview" in result.output


class TestTypesCommand:

    def test_lists_drill_types(self):
        result = runner.invoke(app, ["types"])

        assert result.exit_code == 0
        assert "CHOOSE_MEANING" in result.output
        assert "PRONOUNCE" in result.output


class TestPreviewCommand:

    def test_preview(self, words_file):
        result = runner.invoke(app, ["preview", str(words_file), "--types", "CHOOSE_MEANING", "--seed", "1"])

        assert result.exit_code == 0, result.output
        assert "5 drills" in result.output

    def test_preview_topic_two_per_word(self, words_file):
        result = runner.invoke(app, ["preview", str(words_file), "--flow", "topic", "--count", "3", "--seed", "1"])

        assert result.exit_code == 0, result.output
        assert "6 drills" in result.output

    def test_unknown_type_fails(self, words_file):
        result = runner.invoke(app, ["preview", str(words_file), "--types", "BOGUS"])

        assert result.exit_code == 1
        assert "Unknown drill type" in result.output


class TestRunCommand:

    def test_run_single_word(self, single_word_file, tmp_path):
        out = tmp_path / "progress.json"
        result = runner.invoke(
            app,
            ["run", str(single_word_file), "--types", "LISTEN_FILL", "--progress-out", str(out)],
            input="cat\n",
        )

        assert result.exit_code == 0, result.output
        assert "Correct!" in result.output
        assert "Session Complete" in result.output

        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["wordProgress"][0]["wordId"] == 42
        assert data["wordProgress"][0]["wrongCount"] == 0

    def test_run_retries_wrong_answer(self, single_word_file):
        result = runner.invoke(
            app,
            ["run", str(single_word_file), "--types", "LISTEN_FILL"],
            input="dog\ncat\n",
        )

        assert result.exit_code == 0, result.output
        assert "Incorrect." in result.output
        assert "Session Complete" in result.output

    def test_run_empty_word_list(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("[]", encoding="utf-8")
        result = runner.invoke(app, ["run", str(path)])

        assert result.exit_code == 0
        assert "No words to practice" in result.output

    def test_run_bad_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{oops", encoding="utf-8")
        result = runner.invoke(app, ["run", str(path)])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestQuizCommand:

    def test_quiz(self, tmp_path):
        path = tmp_path / "quiz.json"
        path.write_text(json.dumps({"quizzes": [
            {"id": 1, "type": "SHORT_ANSWER", "question": "Capital of France?", "correctAnswer": "Paris"},
            {"id": 2, "type": "TRUE_FALSE", "question": "Fire is cold", "correctAnswer": "Sai"},
        ]}), encoding="utf-8")
        # Second quiz: option 2 is "Sai"
        result = runner.invoke(app, ["quiz", str(path)], input="paris\n2\n")

        assert result.exit_code == 0, result.output
        assert "2/2" in result.output
