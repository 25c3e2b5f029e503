"""Deterministic stand-ins for the Qt timer and the random number source."""

from __future__ import annotations

import itertools
import random

from prime_quiz.core.services.scheduler import ScheduledTask, Scheduler


class ManualTask(ScheduledTask):
    def __init__(self, seq, due_ms, interval_ms, callback):
        self.seq = seq
        self.due_ms = due_ms
        self.interval_ms = interval_ms
        self.callback = callback
        self.cancelled = False
        self.finished = False

    def cancel(self):
        self.cancelled = True

    def is_active(self):
        return not self.cancelled and not self.finished


class ManualScheduler(Scheduler):
    """Scheduler driven by ``advance(ms)`` instead of wall-clock time."""

    def __init__(self):
        self.now_ms = 0
        self._tasks = []
        self._seq = itertools.count()

    def schedule_once(self, delay_ms, callback):
        return self._add(delay_ms, None, callback)

    def schedule_repeating(self, interval_ms, callback):
        return self._add(interval_ms, interval_ms, callback)

    def _add(self, delay_ms, interval_ms, callback):
        task = ManualTask(next(self._seq), self.now_ms + delay_ms, interval_ms, callback)
        self._tasks.append(task)
        return task

    def active_tasks(self):
        return [t for t in self._tasks if t.is_active()]

    def advance(self, ms):
        target = self.now_ms + ms
        while True:
            due = [t for t in self._tasks if t.is_active() and t.due_ms <= target]
            if not due:
                break
            task = min(due, key=lambda t: (t.due_ms, t.seq))
            self.now_ms = task.due_ms
            if task.interval_ms is None:
                task.finished = True
            else:
                task.due_ms += task.interval_ms
            task.callback()
        self.now_ms = target
        self._tasks = [t for t in self._tasks if t.is_active()]


class ScriptedNumbers(random.Random):
    """Random source whose ``randint`` replays a fixed list, then repeats its last value."""

    def __init__(self, numbers):
        super().__init__(0)
        self._numbers = list(numbers)
        self.requests = []

    def randint(self, a, b):
        self.requests.append((a, b))
        if len(self._numbers) > 1:
            return self._numbers.pop(0)
        return self._numbers[0]
