"""Static metadata describing PrimeQuizQt."""

APP_NAME = "PrimeQuizQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "PrimeQuizQt is a small desktop drill built with Qt. "
    "A number between 2 and 100 appears and you decide, before the countdown runs out, "
    "whether it is prime."
)

HELP_TEXT = (
    "Press 'Prime' if the number shown is a prime number, otherwise press 'non Prime'.\n\n"
    "Each number stays on screen for 5 seconds. If the countdown runs out before you answer, "
    "the round counts as wrong.\n\n"
    "After every 10 attempts a summary shows how many you got right and wrong. "
    "Press 'Continue' to reset the score and keep playing."
)
