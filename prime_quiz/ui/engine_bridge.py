"""Qt signal adapter around the round engine."""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from prime_quiz.core.models import RoundSnapshot
from prime_quiz.core.round_engine import RoundEngine


class EngineBridge(QObject):
    """Re-emits engine snapshots as a Qt signal and forwards user intents."""

    state_changed = Signal(object)

    def __init__(self, engine: RoundEngine, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._unsubscribe = engine.subscribe(self._on_snapshot)

    @property
    def engine(self) -> RoundEngine:
        return self._engine

    def request_snapshot(self) -> None:
        self.state_changed.emit(self._engine.snapshot())

    def select(self, is_prime_guess: bool) -> None:
        self._engine.select(is_prime_guess)

    def dismiss_summary(self) -> None:
        self._engine.dismiss_summary()

    def detach(self) -> None:
        """Stop the engine and stop listening to it."""
        self._engine.stop()
        self._unsubscribe()

    def _on_snapshot(self, snapshot: RoundSnapshot) -> None:
        self.state_changed.emit(snapshot)
