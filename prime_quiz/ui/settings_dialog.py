"""Settings dialog for configuring PrimeQuizQt display preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from prime_quiz.constants.ui_constants import NUMBER_FONT_SIZE_RANGE
from prime_quiz.styling.color_palette import Theme


class SettingsDialog(QDialog):
    """Dialog for configuring display settings."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 11,
        number_font_size: int = 64,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(360)

        self._ui_font_size = ui_font_size
        self._number_font_size = number_font_size
        self._theme = theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        ui_font_row = QHBoxLayout()
        ui_font_label = QLabel("UI Font Size (buttons, score):")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        ui_font_row.addWidget(ui_font_label)
        ui_font_row.addStretch()
        ui_font_row.addWidget(self.ui_font_spinbox)
        font_layout.addLayout(ui_font_row)

        number_font_row = QHBoxLayout()
        number_font_label = QLabel("Number Font Size:")
        number_font_label.setToolTip("Font size of the number you are asked to classify")
        self.number_font_spinbox = QSpinBox()
        self.number_font_spinbox.setRange(*NUMBER_FONT_SIZE_RANGE)
        self.number_font_spinbox.setValue(self._number_font_size)
        self.number_font_spinbox.setSuffix(" pt")
        number_font_row.addWidget(number_font_label)
        number_font_row.addStretch()
        number_font_row.addWidget(self.number_font_spinbox)
        font_layout.addLayout(number_font_row)

        layout.addWidget(font_group)

        display_group = QGroupBox("Display Settings")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        self.dark_theme_checkbox = QCheckBox("Use dark theme")
        self.dark_theme_checkbox.setChecked(self._theme == Theme.DARK)
        display_layout.addWidget(self.dark_theme_checkbox)

        layout.addWidget(display_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_ui_font_size(self) -> int:
        """Get the selected UI font size."""
        return self.ui_font_spinbox.value()

    def get_number_font_size(self) -> int:
        """Get the selected number font size."""
        return self.number_font_spinbox.value()

    def get_theme(self) -> Theme:
        return Theme.DARK if self.dark_theme_checkbox.isChecked() else Theme.LIGHT
