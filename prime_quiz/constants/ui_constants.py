"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "PrimeQuizQt"
WINDOW_MIN_WIDTH: int = 360
WINDOW_MIN_HEIGHT: int = 560

PRIME_BUTTON_TEXT: str = "Prime"
NOT_PRIME_BUTTON_TEXT: str = "non Prime"
CORRECT_MARK: str = "✓"
INCORRECT_MARK: str = "✗"

SETTINGS_BUTTON_TEXT: str = "Settings"
ABOUT_BUTTON_TEXT: str = "About"
HELP_BUTTON_TEXT: str = "Help"

SUMMARY_TITLE_TEMPLATE: str = "Results after {count} attempts"
SUMMARY_MESSAGE_TEMPLATE: str = "Correct: {correct}\nWrong: {wrong}"
SUMMARY_CONTINUE_TEXT: str = "Continue"

DEFAULT_UI_FONT_SIZE: int = 11
DEFAULT_NUMBER_FONT_SIZE: int = 64
NUMBER_FONT_SIZE_RANGE: tuple[int, int] = (32, 120)
