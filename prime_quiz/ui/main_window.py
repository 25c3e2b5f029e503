"""Qt main window for the prime quiz."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from prime_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from prime_quiz.constants.ui_constants import (
    ABOUT_BUTTON_TEXT,
    DEFAULT_NUMBER_FONT_SIZE,
    DEFAULT_UI_FONT_SIZE,
    HELP_BUTTON_TEXT,
    SETTINGS_BUTTON_TEXT,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from prime_quiz.core.models import AnswerState, RoundSnapshot
from prime_quiz.styling.color_palette import Theme
from prime_quiz.styling.styles import Styles
from prime_quiz.ui.components.answer_panel import AnswerPanel
from prime_quiz.ui.components.countdown_indicator import CountdownIndicator
from prime_quiz.ui.components.score_panel import FeedbackMark, ScorePanel
from prime_quiz.ui.dialog_helpers import build_summary_dialog, show_info
from prime_quiz.ui.engine_bridge import EngineBridge
from prime_quiz.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class PrimeQuizWindow(QMainWindow):
    """Single game screen rendering engine snapshots."""

    def __init__(self, bridge: EngineBridge) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.bridge = bridge

        self._ui_font_size: int = DEFAULT_UI_FONT_SIZE
        self._number_font_size: int = DEFAULT_NUMBER_FONT_SIZE
        self._theme: Theme = Theme.LIGHT
        self._summary_dialog: QMessageBox | None = None
        self._closing: bool = False

        self._build_ui()
        self._apply_styles()
        self.bridge.state_changed.connect(self._render)
        self.bridge.request_snapshot()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        top_row = QHBoxLayout()
        self.settings_button = QPushButton(SETTINGS_BUTTON_TEXT, self)
        self.settings_button.clicked.connect(self._handle_settings)
        top_row.addWidget(self.settings_button)

        self.help_button = QPushButton(HELP_BUTTON_TEXT, self)
        self.help_button.clicked.connect(self._handle_help)
        top_row.addWidget(self.help_button)

        self.about_button = QPushButton(ABOUT_BUTTON_TEXT, self)
        self.about_button.clicked.connect(self._handle_about)
        top_row.addWidget(self.about_button)

        top_row.addStretch()

        self.countdown = CountdownIndicator(self.bridge.engine.settings.countdown_seconds, self)
        self.countdown.setFixedWidth(140)
        top_row.addWidget(self.countdown)
        root_layout.addLayout(top_row)

        root_layout.addStretch()

        self.number_label = QLabel("", self)
        self.number_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.number_label)

        root_layout.addStretch()

        self.answer_panel = AnswerPanel(on_select=self.bridge.select, parent=self)
        root_layout.addWidget(self.answer_panel)

        root_layout.addStretch()

        self.feedback_mark = FeedbackMark(self)
        root_layout.addWidget(self.feedback_mark)

        root_layout.addStretch()

        self.score_panel = ScorePanel(self)
        root_layout.addWidget(self.score_panel)

    def _render(self, snapshot: RoundSnapshot) -> None:
        self.number_label.setText(str(snapshot.number) if self.bridge.engine.has_started() else "")
        self.countdown.set_time_remaining(snapshot.time_remaining)
        self.answer_panel.set_answerable(
            snapshot.answer_state is AnswerState.UNANSWERED and self.bridge.engine.has_started()
        )
        self.feedback_mark.set_answer_state(snapshot.answer_state)
        self.score_panel.set_scores(snapshot.correct_count, snapshot.wrong_count)

        if snapshot.dialog_visible and self._summary_dialog is None:
            self._open_summary(snapshot)

    def _open_summary(self, snapshot: RoundSnapshot) -> None:
        dialog = build_summary_dialog(
            self,
            snapshot.total_attempts,
            snapshot.correct_count,
            snapshot.wrong_count,
            font_point_size=self._ui_font_size,
        )
        dialog.setWindowModality(Qt.WindowModal)
        dialog.finished.connect(self._handle_summary_closed)
        self._summary_dialog = dialog
        dialog.open()

    def _handle_summary_closed(self, _result: int) -> None:
        if self._summary_dialog is not None:
            self._summary_dialog.deleteLater()
            self._summary_dialog = None
        if self._closing:
            return
        self.bridge.dismiss_summary()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details, font_point_size=self._ui_font_size)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT, font_point_size=self._ui_font_size)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._number_font_size,
            self._theme,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._number_font_size = dialog.get_number_font_size()
            self._theme = dialog.get_theme()
            logger.info(
                "Display settings changed: ui=%dpt number=%dpt theme=%s",
                self._ui_font_size,
                self._number_font_size,
                self._theme.name.lower(),
            )
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme, self._ui_font_size))
        self.number_label.setStyleSheet(Styles.get_number_style(self._theme, self._number_font_size))
        self.answer_panel.apply_style(self._theme, max(self._ui_font_size * 2, 18))
        self.countdown.set_theme(self._theme)
        self.feedback_mark.set_theme(self._theme)
        self.score_panel.apply_style(self._theme, self._ui_font_size + 6)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        self._closing = True
        self.bridge.detach()
        super().closeEvent(event)
