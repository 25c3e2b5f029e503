"""Game-rule constants shared across UI and core layers."""

NUMBER_MIN: int = 2
NUMBER_MAX: int = 100
COUNTDOWN_SECONDS: int = 5
TICK_INTERVAL_MS: int = 1000
ANSWER_ADVANCE_DELAY_MS: int = 1000
TIMEOUT_ADVANCE_DELAY_MS: int = 800
SUMMARY_INTERVAL: int = 10
COUNTDOWN_WARNING_SECONDS: int = 2
