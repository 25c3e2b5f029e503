"""Round, countdown and scoring state machine shared with the Qt view."""

from __future__ import annotations

import logging
import random
from typing import Callable

from prime_quiz.core.game_settings import GameSettings
from prime_quiz.core.models import AnswerState, RoundSnapshot, RoundState
from prime_quiz.core.prime_check import is_prime
from prime_quiz.core.services.scheduler import ScheduledTask, Scheduler
from prime_quiz.core.services.scoreboard import ScoreTally

logger = logging.getLogger(__name__)

StateListener = Callable[[RoundSnapshot], None]


class RoundEngine:
    """Owns the current round, its countdown and the running score.

    All intents and timer callbacks must arrive on the same scheduling
    context; the engine does no locking of its own.
    """

    is_prime = staticmethod(is_prime)

    def __init__(
        self,
        scheduler: Scheduler,
        settings: GameSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings or GameSettings()
        self._settings.validate()
        self._scheduler = scheduler
        self._rng = rng or random.Random()

        self._round = RoundState(
            number=self._settings.number_min,
            time_remaining=self._settings.countdown_seconds,
        )
        self._started: bool = False
        self._tally = ScoreTally()
        self._dialog_visible: bool = False

        self._countdown: ScheduledTask | None = None
        self._pending_advance: ScheduledTask | None = None
        # Stamped on every scheduled callback; a mismatch means the callback is stale.
        self._generation: int = 0

        self._listeners: list[StateListener] = []

    # --- State queries ---

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def number(self) -> int:
        return self._round.number

    @property
    def time_remaining(self) -> int:
        return self._round.time_remaining

    @property
    def answer_state(self) -> AnswerState:
        return self._round.answer_state

    @property
    def correct_count(self) -> int:
        return self._tally.correct_count

    @property
    def wrong_count(self) -> int:
        return self._tally.wrong_count

    @property
    def total_attempts(self) -> int:
        return self._tally.total_attempts

    @property
    def dialog_visible(self) -> bool:
        return self._dialog_visible

    def has_started(self) -> bool:
        return self._started

    def is_countdown_active(self) -> bool:
        return self._countdown is not None and self._countdown.is_active()

    def is_advance_pending(self) -> bool:
        return self._pending_advance is not None and self._pending_advance.is_active()

    def snapshot(self) -> RoundSnapshot:
        return RoundSnapshot(
            number=self._round.number,
            time_remaining=self._round.time_remaining,
            answer_state=self._round.answer_state,
            correct_count=self._tally.correct_count,
            wrong_count=self._tally.wrong_count,
            total_attempts=self._tally.total_attempts,
            dialog_visible=self._dialog_visible,
        )

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` for snapshots; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_number_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    # --- Intents ---

    def start_round(self) -> None:
        """Show a fresh number and restart the countdown."""
        if self._dialog_visible:
            logger.debug("Summary is open; not starting a new round")
            return

        self._cancel_countdown()
        self._cancel_pending_advance()
        self._generation += 1
        self._started = True
        self._round = RoundState(
            number=self._rng.randint(self._settings.number_min, self._settings.number_max),
            time_remaining=self._settings.countdown_seconds,
        )
        generation = self._generation
        self._countdown = self._scheduler.schedule_repeating(
            self._settings.tick_interval_ms,
            lambda: self._on_countdown_tick(generation),
        )
        logger.debug("Round started with number %d", self._round.number)
        self._notify()

    def tick(self) -> None:
        """Advance the countdown by one unit, resolving the round as wrong at zero."""
        if not self._started or self._round.is_resolved():
            return

        if self._round.time_remaining > 1:
            self._round.time_remaining -= 1
            self._notify()
            return

        self._cancel_countdown()
        self._round.time_remaining = 0
        logger.debug("Time ran out on %d", self._round.number)
        self._resolve(is_correct=False, advance_delay_ms=self._settings.timeout_advance_delay_ms)

    def select(self, is_prime_guess: bool) -> None:
        """Grade the player's answer for the current number."""
        if not self._started or self._round.is_resolved():
            logger.debug("Ignoring answer for a round that is not open")
            return

        self._cancel_countdown()
        is_correct = is_prime_guess == is_prime(self._round.number)
        self._resolve(is_correct=is_correct, advance_delay_ms=self._settings.answer_advance_delay_ms)

    def dismiss_summary(self) -> None:
        """Close the summary, zero the score and start the next round."""
        if not self._dialog_visible:
            logger.debug("dismiss_summary called with no summary open")
            return

        self._dialog_visible = False
        self._tally.reset()
        logger.info("Score reset after summary")
        self.start_round()

    def stop(self) -> None:
        """Cancel every outstanding timer; late callbacks become no-ops."""
        self._cancel_countdown()
        self._cancel_pending_advance()
        self._generation += 1
        logger.info("Round engine stopped")

    # --- Internals ---

    def _resolve(self, is_correct: bool, advance_delay_ms: int) -> None:
        self._round.answer_state = AnswerState.CORRECT if is_correct else AnswerState.INCORRECT
        self._tally.record(is_correct)

        if self._tally.is_summary_due(self._settings.summary_interval):
            self._open_summary()
        else:
            self._schedule_advance(advance_delay_ms)
        self._notify()

    def _open_summary(self) -> None:
        self._cancel_countdown()
        self._cancel_pending_advance()
        self._generation += 1
        self._dialog_visible = True
        logger.info(
            "Summary after %d attempts: %d correct, %d wrong",
            self._tally.total_attempts,
            self._tally.correct_count,
            self._tally.wrong_count,
        )

    def _schedule_advance(self, delay_ms: int) -> None:
        self._cancel_pending_advance()
        generation = self._generation
        self._pending_advance = self._scheduler.schedule_once(
            delay_ms,
            lambda: self._on_advance_due(generation),
        )

    def _on_countdown_tick(self, generation: int) -> None:
        if generation != self._generation:
            return
        self.tick()

    def _on_advance_due(self, generation: int) -> None:
        if generation != self._generation or self._dialog_visible:
            return
        self._pending_advance = None
        self.start_round()

    def _cancel_countdown(self) -> None:
        if self._countdown is not None:
            self._countdown.cancel()
            self._countdown = None

    def _cancel_pending_advance(self) -> None:
        if self._pending_advance is not None:
            self._pending_advance.cancel()
            self._pending_advance = None

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
