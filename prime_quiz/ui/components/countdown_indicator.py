"""Component showing the seconds left in the current round."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QProgressBar, QWidget

from prime_quiz.constants.quiz_constants import COUNTDOWN_WARNING_SECONDS
from prime_quiz.styling.color_palette import Theme
from prime_quiz.styling.styles import Styles


class CountdownIndicator(QWidget):
    """Progress bar plus seconds label, turning red in the last seconds."""

    def __init__(self, total_seconds: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._total_seconds = total_seconds
        self._theme = Theme.LIGHT
        self._warning: bool | None = None

        layout = QHBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        self.setLayout(layout)

        self.progress = QProgressBar(self)
        self.progress.setRange(0, total_seconds)
        self.progress.setValue(total_seconds)
        self.progress.setTextVisible(False)
        layout.addWidget(self.progress, stretch=1)

        self.seconds_label = QLabel(str(total_seconds), self)
        self.seconds_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.seconds_label.setMinimumWidth(24)
        layout.addWidget(self.seconds_label)

        self._apply_emphasis(warning=False)

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self._apply_emphasis(warning=bool(self._warning), force=True)

    def set_time_remaining(self, seconds: int) -> None:
        seconds = max(0, min(seconds, self._total_seconds))
        self.progress.setValue(seconds)
        self.seconds_label.setText(str(seconds))
        self._apply_emphasis(warning=seconds <= COUNTDOWN_WARNING_SECONDS)

    def _apply_emphasis(self, warning: bool, force: bool = False) -> None:
        if warning == self._warning and not force:
            return
        self._warning = warning
        self.progress.setStyleSheet(Styles.get_countdown_style(self._theme, warning))
        self.seconds_label.setStyleSheet(Styles.get_countdown_label_style(self._theme, warning))
