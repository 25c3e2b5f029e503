import pytest

from prime_quiz.core.game_settings import GameSettings, GameSettingsError
from prime_quiz.core.round_engine import RoundEngine
from tests.helpers import ManualScheduler


def test_defaults_match_game_rules():
    settings = GameSettings()
    settings.validate()

    assert (settings.number_min, settings.number_max) == (2, 100)
    assert settings.countdown_seconds == 5
    assert settings.tick_interval_ms == 1000
    assert settings.answer_advance_delay_ms == 1000
    assert settings.timeout_advance_delay_ms == 800
    assert settings.summary_interval == 10


@pytest.mark.parametrize(
    "overrides",
    [
        {"number_min": 1},
        {"number_min": 50, "number_max": 10},
        {"countdown_seconds": 0},
        {"tick_interval_ms": 0},
        {"answer_advance_delay_ms": -5},
        {"timeout_advance_delay_ms": 0},
        {"summary_interval": 0},
    ],
)
def test_invalid_settings_rejected(overrides):
    with pytest.raises(GameSettingsError):
        GameSettings(**overrides).validate()


def test_error_is_a_value_error():
    assert issubclass(GameSettingsError, ValueError)


def test_engine_validates_settings_on_construction():
    with pytest.raises(GameSettingsError, match="countdown_seconds"):
        RoundEngine(scheduler=ManualScheduler(), settings=GameSettings(countdown_seconds=0))
