"""Qt UI components for the prime quiz."""

from .dialog_helpers import build_summary_dialog, show_info
from .engine_bridge import EngineBridge
from .main_window import PrimeQuizWindow
from .qt_scheduler import QtScheduler

__all__ = [
    "EngineBridge",
    "PrimeQuizWindow",
    "QtScheduler",
    "build_summary_dialog",
    "show_info",
]
