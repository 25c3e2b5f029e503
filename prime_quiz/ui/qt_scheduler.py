"""QTimer-backed scheduler used by the running application."""

from __future__ import annotations

from PySide6.QtCore import QObject, QTimer

from prime_quiz.core.services.scheduler import ScheduledTask, Scheduler, TaskCallback


class QtScheduledTask(ScheduledTask):
    """Wraps a QTimer so the engine can cancel it without knowing about Qt."""

    def __init__(self, timer: QTimer, callback: TaskCallback) -> None:
        self._timer: QTimer | None = timer
        self._callback = callback
        timer.timeout.connect(self._fire)

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None

    def is_active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def _fire(self) -> None:
        if self._timer is None:
            return
        if self._timer.isSingleShot():
            self.cancel()
        self._callback()


class QtScheduler(Scheduler):
    """Creates QTimers parented to ``parent`` on the GUI thread."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule_once(self, delay_ms: int, callback: TaskCallback) -> ScheduledTask:
        return self._start_timer(delay_ms, callback, single_shot=True)

    def schedule_repeating(self, interval_ms: int, callback: TaskCallback) -> ScheduledTask:
        return self._start_timer(interval_ms, callback, single_shot=False)

    def _start_timer(self, interval_ms: int, callback: TaskCallback, single_shot: bool) -> ScheduledTask:
        timer = QTimer(self._parent)
        timer.setSingleShot(single_shot)
        timer.setInterval(interval_ms)
        task = QtScheduledTask(timer, callback)
        timer.start()
        return task
