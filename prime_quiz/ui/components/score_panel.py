"""Components for answer feedback and the running score."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QWidget

from prime_quiz.constants.ui_constants import CORRECT_MARK, INCORRECT_MARK
from prime_quiz.core.models import AnswerState
from prime_quiz.styling.color_palette import ColorPalette, Theme
from prime_quiz.styling.styles import Styles


class FeedbackMark(QLabel):
    """Check mark or cross for the resolved round, blank while unanswered."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("", parent)
        self.setAlignment(Qt.AlignCenter)
        self.setMinimumHeight(80)
        self._theme = Theme.LIGHT
        self._font_size = 48
        self._state = AnswerState.UNANSWERED

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.set_answer_state(self._state)

    def set_answer_state(self, state: AnswerState) -> None:
        self._state = state
        if state is AnswerState.CORRECT:
            self.setText(CORRECT_MARK)
            self.setStyleSheet(Styles.get_mark_style(ColorPalette.SUCCESS.get(self._theme), self._font_size))
        elif state is AnswerState.INCORRECT:
            self.setText(INCORRECT_MARK)
            self.setStyleSheet(Styles.get_mark_style(ColorPalette.ERROR.get(self._theme), self._font_size))
        else:
            self.setText("")


class ScorePanel(QWidget):
    """Correct count on the left, wrong count on the right."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = Theme.LIGHT
        self._font_size = 18

        layout = QHBoxLayout()
        layout.setContentsMargins(30, 0, 30, 25)
        self.setLayout(layout)

        self.correct_label = QLabel("0", self)
        layout.addWidget(self.correct_label)
        layout.addStretch()
        self.wrong_label = QLabel("0", self)
        layout.addWidget(self.wrong_label)

        self._apply_style()

    def set_scores(self, correct: int, wrong: int) -> None:
        self.correct_label.setText(str(correct))
        self.wrong_label.setText(str(wrong))

    def apply_style(self, theme: Theme, font_size: int) -> None:
        self._theme = theme
        self._font_size = font_size
        self._apply_style()

    def _apply_style(self) -> None:
        self.correct_label.setStyleSheet(
            Styles.get_mark_style(ColorPalette.SUCCESS.get(self._theme), self._font_size)
        )
        self.wrong_label.setStyleSheet(
            Styles.get_mark_style(ColorPalette.ERROR.get(self._theme), self._font_size)
        )
