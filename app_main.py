"""Application entry point for PrimeQuizQt."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from prime_quiz.constants.about import APP_NAME, APP_VERSION
from prime_quiz.core.round_engine import RoundEngine
from prime_quiz.ui.engine_bridge import EngineBridge
from prime_quiz.ui.main_window import PrimeQuizWindow
from prime_quiz.ui.qt_scheduler import QtScheduler
from prime_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, build the engine and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    engine = RoundEngine(scheduler=QtScheduler(app))
    bridge = EngineBridge(engine, app)
    window = PrimeQuizWindow(bridge)
    window.show()
    engine.start_round()

    exit_code = app.exec()
    logger.info("%s closed", APP_NAME)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
