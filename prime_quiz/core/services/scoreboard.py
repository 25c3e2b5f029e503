"""Service for tallying answers between summaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ScoreRow:
    """Snapshot of the tally returned to consumers."""

    correct_count: int
    wrong_count: int
    total_attempts: int


class ScoreTally:
    """Tracks correct and wrong answers since the last reset."""

    def __init__(self) -> None:
        self._correct_count: int = 0
        self._wrong_count: int = 0

    @property
    def correct_count(self) -> int:
        return self._correct_count

    @property
    def wrong_count(self) -> int:
        return self._wrong_count

    @property
    def total_attempts(self) -> int:
        # Always correct + wrong.
        return self._correct_count + self._wrong_count

    def record(self, is_correct: bool) -> None:
        """Count one resolved round."""
        if is_correct:
            self._correct_count += 1
        else:
            self._wrong_count += 1

    def reset(self) -> None:
        """Zero all counters."""
        self._correct_count = 0
        self._wrong_count = 0

    def is_summary_due(self, interval: int) -> bool:
        """True when the attempt count just reached a positive multiple of ``interval``."""
        total = self.total_attempts
        return total > 0 and total % interval == 0

    def get_row(self) -> ScoreRow:
        return ScoreRow(
            correct_count=self._correct_count,
            wrong_count=self._wrong_count,
            total_attempts=self.total_attempts,
        )
