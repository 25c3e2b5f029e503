import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from prime_quiz.core.game_settings import GameSettings  # noqa: E402
from prime_quiz.core.round_engine import RoundEngine  # noqa: E402
from tests.helpers import ManualScheduler, ScriptedNumbers  # noqa: E402


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def make_engine(scheduler):
    """Build an engine on the manual clock, optionally with a fixed number sequence."""

    def _make(numbers=None, settings=None):
        rng = ScriptedNumbers(numbers) if numbers is not None else None
        return RoundEngine(scheduler=scheduler, settings=settings or GameSettings(), rng=rng)

    return _make
