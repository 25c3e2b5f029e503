"""Timer abstraction used by the round engine.

The engine never talks to a concrete event loop. It asks a ``Scheduler`` for
one-shot or repeating callbacks and keeps the returned ``ScheduledTask`` so it
can cancel it later. The application plugs in a QTimer-backed scheduler; the
tests plug in a manual clock.
"""

from __future__ import annotations

from typing import Callable

TaskCallback = Callable[[], None]


class ScheduledTask:
    """Handle for a pending callback."""

    def cancel(self) -> None:
        """Stop the callback from firing again. Safe to call more than once."""
        raise NotImplementedError

    def is_active(self) -> bool:
        """Return True while the callback may still fire."""
        raise NotImplementedError


class Scheduler:
    """Creates scheduled callbacks on a single scheduling context."""

    def schedule_once(self, delay_ms: int, callback: TaskCallback) -> ScheduledTask:
        """Run ``callback`` once after ``delay_ms`` milliseconds."""
        raise NotImplementedError

    def schedule_repeating(self, interval_ms: int, callback: TaskCallback) -> ScheduledTask:
        """Run ``callback`` every ``interval_ms`` milliseconds until cancelled."""
        raise NotImplementedError
