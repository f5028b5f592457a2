"""
Session Engine: drives one practice pass over a queue of drills.

State machine:
    AWAITING_ANSWER --check_answer()--> ANSWER_CHECKED --advance()--> AWAITING_ANSWER
                                                                  +--> COMPLETE (queue empty)

On advance():
- correct   -> the head drill leaves the queue for good
- incorrect -> attempt_count += 1; the drill moves to the back of the queue,
               unless its type has an attempt limit that is now reached, in
               which case it is dropped (skipped, never counted correct)
"""
from __future__ import annotations

import uuid
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from loguru import logger

from .drills import DrillType, QuizType, get_handler
from .drills.base import AnswerResult
from .exceptions import EmptyInputError, InvalidOperationError
from .models import DrillItem, ItemOutcome


class SessionPhase(str, Enum):
    AWAITING_ANSWER = "awaiting_answer"
    ANSWER_CHECKED = "answer_checked"
    COMPLETE = "complete"


class ScoreBand(str, Enum):
    """Result band shown on the completion screen."""
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_WORK = "needs_work"
    REVIEW = "review"


SCORE_BAND_LABELS: dict[ScoreBand, str] = {
    ScoreBand.EXCELLENT: "Xuất sắc!",
    ScoreBand.GOOD: "Tốt lắm!",
    ScoreBand.NEEDS_WORK: "Cần cố gắng thêm",
    ScoreBand.REVIEW: "Hãy ôn lại nhé",
}


def score_band(percentage: float) -> ScoreBand:
    if percentage >= 80:
        return ScoreBand.EXCELLENT
    if percentage >= 60:
        return ScoreBand.GOOD
    if percentage >= 40:
        return ScoreBand.NEEDS_WORK
    return ScoreBand.REVIEW


@dataclass(frozen=True)
class SessionProgress:
    """Position within a session."""
    answered: int  # advance() calls so far, retries included
    total: int  # drills originally queued
    remaining: int  # drills still in the queue

    @property
    def percentage(self) -> float:
        """Share of work done; never moves backwards, 100 only at completion."""
        done_or_pending = self.answered + self.remaining
        if done_or_pending == 0:
            return 100.0
        return self.answered / done_or_pending * 100


@dataclass(frozen=True)
class SessionSummary:
    """Final (or running) statistics of a session."""
    session_id: str
    correct_count: int
    total: int
    answered: int
    skipped_count: int
    complete: bool
    outcomes: tuple[ItemOutcome, ...]

    @property
    def percentage(self) -> int:
        if self.total == 0:
            return 0
        return round(self.correct_count / self.total * 100)

    @property
    def band(self) -> ScoreBand:
        return score_band(self.percentage)


class SessionEngine:
    """
    Owns the drill queue, the correctness ledger and per-drill attempt counters.

    The presentation layer reads `current`, calls `check_answer()` with the
    learner's submission, shows feedback, then calls `advance()`.
    """

    def __init__(
        self,
        drills: Iterable[DrillItem],
        attempt_limits: Optional[Mapping[DrillType | QuizType, int]] = None,
        session_id: Optional[str] = None,
    ):
        self._queue: deque[DrillItem] = deque(drills)
        if not self._queue:
            raise EmptyInputError("No drills available for this session")

        self.session_id = session_id or uuid.uuid4().hex[:12]
        self.attempt_limits: dict[DrillType | QuizType, int] = dict(attempt_limits or {})

        self._total = len(self._queue)
        self._phase = SessionPhase.AWAITING_ANSWER
        self._last_result: AnswerResult | None = None
        self._correct_count = 0
        self._step = 0
        self._skipped: list[DrillItem] = []

        self._outcomes: dict[Any, ItemOutcome] = {}
        for drill in self._queue:
            outcome = self._outcomes.setdefault(drill.source_id, ItemOutcome(source_id=drill.source_id))
            outcome.drills_total += 1

        logger.info(
            f"Session {self.session_id} started: {self._total} drills, "
            f"{len(self._outcomes)} items"
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def is_complete(self) -> bool:
        return self._phase is SessionPhase.COMPLETE

    @property
    def is_answer_checked(self) -> bool:
        return self._phase is SessionPhase.ANSWER_CHECKED

    @property
    def current(self) -> DrillItem | None:
        """Drill at the head of the queue, or None once complete."""
        return self._queue[0] if self._queue else None

    @property
    def last_result(self) -> AnswerResult | None:
        """Result of the pending check, cleared on advance()."""
        return self._last_result

    @property
    def queue(self) -> tuple[DrillItem, ...]:
        return tuple(self._queue)

    @property
    def queue_length(self) -> int:
        return len(self._queue)

    @property
    def correct_count(self) -> int:
        return self._correct_count

    @property
    def total(self) -> int:
        return self._total

    @property
    def skipped(self) -> tuple[DrillItem, ...]:
        return tuple(self._skipped)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def check_answer(self, submitted: Any) -> AnswerResult:
        """
        Check the learner's answer against the head drill.

        Does not touch the queue. Valid only while awaiting an answer.
        """
        if self._phase is SessionPhase.COMPLETE:
            raise InvalidOperationError("Session is complete; no drill to answer")
        if self._phase is SessionPhase.ANSWER_CHECKED:
            raise InvalidOperationError("Answer already checked; call advance() first")

        drill = self._queue[0]
        handler = get_handler(drill.drill_type)
        if handler is None:
            raise InvalidOperationError(f"No handler registered for {drill.drill_type!r}")

        result = handler.check(drill, submitted)
        self._last_result = result
        self._phase = SessionPhase.ANSWER_CHECKED

        logger.debug(
            f"[{self.session_id}] {drill.drill_type.value} item={drill.source_id} "
            f"answer={result.user_answer!r} correct={result.correct}"
        )
        return result

    def advance(self) -> DrillItem | None:
        """
        Apply the checked result to the queue and move to the next drill.

        Returns:
            The new head drill, or None when the session just completed
        """
        if self._phase is SessionPhase.COMPLETE:
            raise InvalidOperationError("Session is already complete")
        if self._phase is not SessionPhase.ANSWER_CHECKED or self._last_result is None:
            raise InvalidOperationError("advance() called before check_answer()")

        drill = self._queue.popleft()
        outcome = self._outcomes[drill.source_id]
        self._step += 1

        if self._last_result.correct:
            self._correct_count += 1
            outcome.drills_correct += 1
        else:
            drill.attempt_count += 1
            outcome.wrong_count += 1
            limit = self.attempt_limits.get(drill.drill_type)
            if limit is not None and drill.attempt_count >= limit:
                self._skipped.append(drill)
                outcome.skipped = True
                logger.debug(
                    f"[{self.session_id}] item={drill.source_id} dropped after "
                    f"{drill.attempt_count} attempts"
                )
            else:
                self._queue.append(drill)

        self._last_result = None

        if not self._queue:
            self._complete()
            return None

        self._phase = SessionPhase.AWAITING_ANSWER
        return self._queue[0]

    def submit(self, submitted: Any) -> AnswerResult:
        """check_answer() followed by advance(), for callers with no feedback step."""
        result = self.check_answer(submitted)
        self.advance()
        return result

    def _complete(self) -> None:
        if self._phase is SessionPhase.COMPLETE:
            return
        self._phase = SessionPhase.COMPLETE
        logger.info(
            f"Session {self.session_id} complete: {self._correct_count}/{self._total} correct "
            f"in {self._step} answers, {len(self._skipped)} skipped"
        )

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def progress(self) -> SessionProgress:
        return SessionProgress(answered=self._step, total=self._total, remaining=len(self._queue))

    def outcomes(self) -> list[ItemOutcome]:
        """Per-item outcomes in first-seen order (copies)."""
        return [
            ItemOutcome(
                source_id=o.source_id,
                drills_total=o.drills_total,
                drills_correct=o.drills_correct,
                wrong_count=o.wrong_count,
                skipped=o.skipped,
            )
            for o in self._outcomes.values()
        ]

    def summary(self) -> SessionSummary:
        return SessionSummary(
            session_id=self.session_id,
            correct_count=self._correct_count,
            total=self._total,
            answered=self._step,
            skipped_count=len(self._skipped),
            complete=self.is_complete,
            outcomes=tuple(self.outcomes()),
        )
