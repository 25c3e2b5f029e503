"""Domain models for the prime quiz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class AnswerState(Enum):
    """Outcome of the current round."""

    UNANSWERED = auto()
    CORRECT = auto()
    INCORRECT = auto()


@dataclass(slots=True)
class RoundState:
    """Mutable state of the number currently on screen."""

    number: int
    time_remaining: int
    answer_state: AnswerState = AnswerState.UNANSWERED

    def is_resolved(self) -> bool:
        return self.answer_state is not AnswerState.UNANSWERED


@dataclass(frozen=True, slots=True)
class RoundSnapshot:
    """Immutable snapshot handed to the view layer after every change."""

    number: int
    time_remaining: int
    answer_state: AnswerState
    correct_count: int
    wrong_count: int
    total_attempts: int
    dialog_visible: bool
