"""
Unit tests for practice flow configuration and session start.
"""

import random
from collections import Counter

import pytest

from config import Settings
from src.practice.drills import DrillType, QuizType
from src.practice.exceptions import DrillTypeSelectionError
from src.practice.flows import (
    PracticeFlow,
    get_flow_config,
    resolve_drill_types,
    start_quiz_session,
    start_session,
)
from src.practice.studyset import StudySetQuiz


class TestFlowConfig:

    def test_topic_learning(self, settings):
        config = get_flow_config(PracticeFlow.TOPIC_LEARNING, settings)

        assert config.items_per_source == 2
        assert config.min_types == 2
        assert config.word_limit == 10
        assert config.attempt_limits == {DrillType.PRONOUNCE: 2}
        assert config.default_types == (DrillType.CHOOSE_MEANING, DrillType.CHOOSE_WORD)

    def test_spaced_review(self, settings):
        config = get_flow_config("review", settings)

        assert config.flow is PracticeFlow.SPACED_REVIEW
        assert config.items_per_source == 1
        assert config.min_types == 1

    def test_study_set(self, settings):
        config = get_flow_config(PracticeFlow.STUDY_SET_QUIZ, settings)

        assert config.items_per_source == 1
        assert config.word_limit is None
        assert config.attempt_limits == {DrillType.PRONOUNCE: 2}

    def test_settings_override(self):
        settings = Settings(_env_file=None, drill_pronounce_max_attempts=3, drill_default_types="TRUE_FALSE")
        config = get_flow_config(PracticeFlow.SPACED_REVIEW, settings)

        assert config.attempt_limits == {DrillType.PRONOUNCE: 3}
        assert config.default_types == (DrillType.TRUE_FALSE,)


class TestResolveDrillTypes:

    def test_empty_uses_default_pair(self, settings):
        config = get_flow_config(PracticeFlow.SPACED_REVIEW, settings)
        assert resolve_drill_types(None, config) == [DrillType.CHOOSE_MEANING, DrillType.CHOOSE_WORD]
        assert resolve_drill_types([], config) == [DrillType.CHOOSE_MEANING, DrillType.CHOOSE_WORD]

    def test_topic_requires_two_types(self, settings):
        config = get_flow_config(PracticeFlow.TOPIC_LEARNING, settings)
        with pytest.raises(DrillTypeSelectionError):
            resolve_drill_types("LISTEN_FILL", config)

    def test_review_accepts_single_type(self, settings):
        config = get_flow_config(PracticeFlow.SPACED_REVIEW, settings)
        assert resolve_drill_types("LISTEN_FILL", config) == [DrillType.LISTEN_FILL]


class TestStartSession:

    def test_topic_two_drills_per_word(self, three_words, settings, rng):
        engine = start_session(PracticeFlow.TOPIC_LEARNING, three_words, rng=rng, settings=settings)

        assert engine.total == 6
        assert Counter(d.source_id for d in engine.queue) == {1: 2, 2: 2, 3: 2}
        assert {d.drill_type for d in engine.queue} <= {DrillType.CHOOSE_MEANING, DrillType.CHOOSE_WORD}

    def test_review_one_drill_per_word(self, words, settings, rng):
        engine = start_session(
            PracticeFlow.SPACED_REVIEW, words, enabled_types=["TRUE_FALSE"], rng=rng, settings=settings,
        )

        assert engine.total == 5
        assert all(d.drill_type is DrillType.TRUE_FALSE for d in engine.queue)

    def test_limit_truncates_words(self, words, settings, rng):
        engine = start_session(PracticeFlow.SPACED_REVIEW, words, limit=2, rng=rng, settings=settings)

        assert {d.source_id for d in engine.queue} == {1, 2}

    def test_no_words_means_no_session(self, settings):
        assert start_session(PracticeFlow.SPACED_REVIEW, [], settings=settings) is None

    def test_engine_carries_attempt_limits(self, words, settings, rng):
        engine = start_session(
            PracticeFlow.SPACED_REVIEW, words, enabled_types="PRONOUNCE", rng=rng, settings=settings,
        )
        assert engine.attempt_limits == {DrillType.PRONOUNCE: 2}

    def test_seeded_sessions_match(self, words, settings):
        a = start_session(PracticeFlow.TOPIC_LEARNING, words, rng=random.Random(3), settings=settings)
        b = start_session(PracticeFlow.TOPIC_LEARNING, words, rng=random.Random(3), settings=settings)

        assert [(d.drill_type, d.prompt, d.options) for d in a.queue] == \
               [(d.drill_type, d.prompt, d.options) for d in b.queue]

    def test_seed_from_settings(self, words):
        settings = Settings(_env_file=None, drill_random_seed=11)
        a = start_session(PracticeFlow.SPACED_REVIEW, words, settings=settings)
        b = start_session(PracticeFlow.SPACED_REVIEW, words, settings=settings)

        assert [d.prompt for d in a.queue] == [d.prompt for d in b.queue]


class TestStartQuizSession:

    def test_authored_order_kept(self, settings):
        quizzes = [
            StudySetQuiz(id=10, type=QuizType.SHORT_ANSWER, question="Capital of France?", correct_answer="Paris"),
            StudySetQuiz(id=11, type=QuizType.TRUE_FALSE, question="2 + 2 = 4", correct_answer="Đúng"),
        ]
        engine = start_quiz_session(quizzes, settings=settings)

        assert [d.source_id for d in engine.queue] == [10, 11]
        assert engine.queue[1].options == ["Đúng", "Sai"]

    def test_empty_study_set(self, settings):
        assert start_quiz_session([], settings=settings) is None

    def test_quiz_true_false_ignores_custom_labels(self):
        settings = Settings(_env_file=None, true_label="True", false_label="False")
        quiz = StudySetQuiz(type=QuizType.TRUE_FALSE, question="2 + 2 = 4", correct_answer="Đúng")
        engine = start_quiz_session([quiz], settings=settings)

        drill = engine.current
        assert drill.options == ["Đúng", "Sai"]
        assert engine.check_answer("Đúng").correct is True
        engine.advance()
        assert engine.is_complete

    def test_each_quiz_type_finishes_with_own_options(self, settings):
        quizzes = [
            StudySetQuiz(id=1, type=QuizType.MULTIPLE_CHOICE, question="Which is a fruit?",
                         options=["car", "apple", "desk"], correct_answer="apple"),
            StudySetQuiz(id=2, type=QuizType.MULTIPLE_CHOICE, question="Which are animals?",
                         options=["cat", "desk", "dog"], correct_answer="cat, dog"),
            StudySetQuiz(id=3, type=QuizType.TRUE_FALSE, question="Fire is cold", correct_answer="Sai"),
            StudySetQuiz(id=4, type=QuizType.SHORT_ANSWER, question="Capital of France?", correct_answer="Paris"),
        ]
        engine = start_quiz_session(quizzes, settings=settings)

        answers = {1: "apple", 2: ["dog", "cat"], 3: "Sai", 4: "paris"}
        for _ in range(len(quizzes)):
            drill = engine.current
            answer = answers[drill.source_id]
            picked = answer if isinstance(answer, list) else [answer]
            if drill.options:
                assert all(a in drill.options for a in picked)
            assert engine.check_answer(answer).correct is True
            engine.advance()

        assert engine.is_complete
        assert engine.correct_count == 4
