"""Helper functions for common dialog patterns in the game window."""

from __future__ import annotations

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QMessageBox, QWidget

from prime_quiz.constants.ui_constants import (
    SUMMARY_CONTINUE_TEXT,
    SUMMARY_MESSAGE_TEMPLATE,
    SUMMARY_TITLE_TEMPLATE,
)


def _apply_optional_font(widget: QWidget, font_point_size: int | None) -> None:
    """Apply font size to a widget when requested."""
    if font_point_size is None or font_point_size <= 0:
        return

    font: QFont = widget.font()
    font.setPointSize(font_point_size)
    widget.setFont(font)


def show_info(
    parent: QWidget,
    title: str,
    message: str,
    *,
    font_point_size: int | None = None,
) -> None:
    """Show information dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Information message
    """
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    _apply_optional_font(msg_box, font_point_size)
    msg_box.exec()


def build_summary_dialog(
    parent: QWidget,
    attempts: int,
    correct: int,
    wrong: int,
    *,
    font_point_size: int | None = None,
) -> QMessageBox:
    """Create the window-modal results dialog shown every few attempts.

    The dialog is returned unopened so the caller can connect ``finished``
    before calling ``open()``. Blocking with ``exec()`` is avoided because the
    dialog is raised from inside an engine notification.
    """
    msg_box = QMessageBox(parent)
    msg_box.setWindowTitle(SUMMARY_TITLE_TEMPLATE.format(count=attempts))
    msg_box.setText(SUMMARY_TITLE_TEMPLATE.format(count=attempts))
    msg_box.setInformativeText(SUMMARY_MESSAGE_TEMPLATE.format(correct=correct, wrong=wrong))
    continue_button = msg_box.addButton(SUMMARY_CONTINUE_TEXT, QMessageBox.AcceptRole)
    msg_box.setDefaultButton(continue_button)
    msg_box.setEscapeButton(continue_button)
    _apply_optional_font(msg_box, font_point_size)
    return msg_box
