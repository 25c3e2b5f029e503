"""Component with the two answer buttons."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QPushButton, QVBoxLayout, QWidget

from prime_quiz.constants.ui_constants import NOT_PRIME_BUTTON_TEXT, PRIME_BUTTON_TEXT
from prime_quiz.styling.color_palette import Theme
from prime_quiz.styling.styles import Styles


class AnswerPanel(QWidget):
    """'Prime' and 'non Prime' buttons forwarding the choice to ``on_select``."""

    def __init__(self, on_select: Callable[[bool], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_select = on_select

        layout = QVBoxLayout()
        layout.setSpacing(16)
        self.setLayout(layout)

        self.prime_button = QPushButton(PRIME_BUTTON_TEXT, self)
        self.prime_button.setCursor(Qt.PointingHandCursor)
        self.prime_button.clicked.connect(lambda: self.on_select(True))
        layout.addWidget(self.prime_button, alignment=Qt.AlignHCenter)

        self.not_prime_button = QPushButton(NOT_PRIME_BUTTON_TEXT, self)
        self.not_prime_button.setCursor(Qt.PointingHandCursor)
        self.not_prime_button.clicked.connect(lambda: self.on_select(False))
        layout.addWidget(self.not_prime_button, alignment=Qt.AlignHCenter)

    def set_answerable(self, enabled: bool) -> None:
        self.prime_button.setEnabled(enabled)
        self.not_prime_button.setEnabled(enabled)

    def apply_style(self, theme: Theme, font_size: int) -> None:
        style = Styles.get_answer_button_style(theme, font_size)
        self.prime_button.setStyleSheet(style)
        self.not_prime_button.setStyleSheet(style)
