"""
Practice sessions for vocabulary learning.

Turns a set of words (or authored study-set quizzes) into an adaptively
reordered sequence of drills, tracks attempts, and decides completion.

Components:
- drills: Drill type handlers (build + check), registered by type
- generator: Question Generator (words -> shuffled drills)
- engine: Session Engine (queue, retry, eviction, completion)
- flows: Topic learning / spaced review / study-set quiz configuration
- progress: Payloads for persisting results after a session
- sources: Local source-data providers
"""

from .drills import DRILL_TYPE_LABELS, DrillType, QuizType, get_handler, parse_drill_types
from .drills.base import AnswerResult
from .engine import (
    ScoreBand,
    SessionEngine,
    SessionPhase,
    SessionProgress,
    SessionSummary,
)
from .exceptions import (
    DrillTypeSelectionError,
    EmptyInputError,
    InvalidOperationError,
    PracticeError,
    SourceDataError,
)
from .flows import FlowConfig, PracticeFlow, get_flow_config, start_quiz_session, start_session
from .generator import QuestionGenerator, generate_drills
from .models import DrillItem, ItemOutcome, SourceItem
from .studyset import StudySetQuiz

__all__ = [
    "AnswerResult",
    "DRILL_TYPE_LABELS",
    "DrillItem",
    "DrillType",
    "DrillTypeSelectionError",
    "EmptyInputError",
    "FlowConfig",
    "InvalidOperationError",
    "ItemOutcome",
    "PracticeError",
    "PracticeFlow",
    "QuestionGenerator",
    "QuizType",
    "ScoreBand",
    "SessionEngine",
    "SessionPhase",
    "SessionProgress",
    "SessionSummary",
    "SourceDataError",
    "SourceItem",
    "StudySetQuiz",
    "generate_drills",
    "get_flow_config",
    "get_handler",
    "parse_drill_types",
    "start_quiz_session",
    "start_session",
]
