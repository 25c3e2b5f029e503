import pytest

pytest.importorskip("PySide6.QtWidgets")
QtCore = pytest.importorskip("PySide6.QtCore")

from prime_quiz.ui.qt_scheduler import QtScheduler  # noqa: E402


@pytest.fixture(scope="module")
def qt_app():
    app = QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])
    yield app


def _run_event_loop(ms):
    loop = QtCore.QEventLoop()
    QtCore.QTimer.singleShot(ms, loop.quit)
    loop.exec()


def test_once_fires_and_becomes_inactive(qt_app):
    calls = []
    task = QtScheduler().schedule_once(10, lambda: calls.append("fired"))
    assert task.is_active()

    _run_event_loop(200)

    assert calls == ["fired"]
    assert not task.is_active()


def test_cancelled_task_never_fires(qt_app):
    calls = []
    task = QtScheduler().schedule_once(20, lambda: calls.append("fired"))
    task.cancel()
    task.cancel()

    _run_event_loop(100)

    assert calls == []
    assert not task.is_active()


def test_repeating_fires_until_cancelled(qt_app):
    calls = []
    holder = {}

    def on_tick():
        calls.append(len(calls))
        if len(calls) == 3:
            holder["task"].cancel()

    holder["task"] = QtScheduler().schedule_repeating(10, on_tick)
    _run_event_loop(300)

    assert len(calls) == 3
    assert not holder["task"].is_active()


def test_engine_times_out_on_qt_timers(qt_app):
    from prime_quiz.core.game_settings import GameSettings
    from prime_quiz.core.models import AnswerState
    from prime_quiz.core.round_engine import RoundEngine

    settings = GameSettings(
        countdown_seconds=2,
        tick_interval_ms=10,
        answer_advance_delay_ms=10,
        timeout_advance_delay_ms=1000,
    )
    engine = RoundEngine(scheduler=QtScheduler(), settings=settings)
    engine.start_round()

    _run_event_loop(200)
    engine.stop()

    assert engine.answer_state is AnswerState.INCORRECT
    assert (engine.correct_count, engine.wrong_count, engine.total_attempts) == (0, 1, 1)
