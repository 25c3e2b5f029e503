"""Tunable game rules for the round engine."""

from __future__ import annotations

from dataclasses import dataclass

from prime_quiz.constants.quiz_constants import (
    ANSWER_ADVANCE_DELAY_MS,
    COUNTDOWN_SECONDS,
    NUMBER_MAX,
    NUMBER_MIN,
    SUMMARY_INTERVAL,
    TICK_INTERVAL_MS,
    TIMEOUT_ADVANCE_DELAY_MS,
)


class GameSettingsError(ValueError):
    """Raised when game settings describe an unplayable configuration."""


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Timings, number range and summary cadence for a game."""

    number_min: int = NUMBER_MIN
    number_max: int = NUMBER_MAX
    countdown_seconds: int = COUNTDOWN_SECONDS
    tick_interval_ms: int = TICK_INTERVAL_MS
    answer_advance_delay_ms: int = ANSWER_ADVANCE_DELAY_MS
    timeout_advance_delay_ms: int = TIMEOUT_ADVANCE_DELAY_MS
    summary_interval: int = SUMMARY_INTERVAL

    def validate(self) -> None:
        """Raise GameSettingsError if any value is out of range."""
        if self.number_min < 2:
            raise GameSettingsError(f"number_min must be at least 2, got {self.number_min}.")
        if self.number_max < self.number_min:
            raise GameSettingsError(
                f"number_max ({self.number_max}) must not be below number_min ({self.number_min})."
            )
        if self.countdown_seconds < 1:
            raise GameSettingsError(
                f"countdown_seconds must be at least 1, got {self.countdown_seconds}."
            )
        for name in ("tick_interval_ms", "answer_advance_delay_ms", "timeout_advance_delay_ms"):
            value = getattr(self, name)
            if value <= 0:
                raise GameSettingsError(f"{name} must be positive, got {value}.")
        if self.summary_interval < 1:
            raise GameSettingsError(
                f"summary_interval must be at least 1, got {self.summary_interval}."
            )
