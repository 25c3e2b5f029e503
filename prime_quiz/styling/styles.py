"""Centralized stylesheets for the game screen."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT, font_size: int = 11) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: {font_size}pt;
            }}
            QPushButton {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px 10px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
        """

    @staticmethod
    def get_number_style(theme: Theme, font_size: int) -> str:
        return (
            f"color: {ColorPalette.ACCENT.get(theme)}; font-size: {font_size}pt; "
            "font-family: serif; font-style: italic; font-weight: 300;"
        )

    @staticmethod
    def get_answer_button_style(theme: Theme, font_size: int) -> str:
        return f"""
            QPushButton {{
                border: none;
                background: transparent;
                color: {ColorPalette.ACCENT.get(theme)};
                font-size: {font_size}pt;
                font-family: serif;
                font-style: italic;
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_MUTED.get(theme)};
            }}
        """

    @staticmethod
    def get_countdown_style(theme: Theme, warning: bool) -> str:
        chunk = ColorPalette.ERROR.get(theme) if warning else ColorPalette.SUCCESS.get(theme)
        return f"""
            QProgressBar {{
                border: none;
                border-radius: 3px;
                background-color: {ColorPalette.COUNTDOWN_TRACK.get(theme)};
                max-height: 6px;
            }}
            QProgressBar::chunk {{
                border-radius: 3px;
                background-color: {chunk};
            }}
        """

    @staticmethod
    def get_countdown_label_style(theme: Theme, warning: bool) -> str:
        color = ColorPalette.ERROR.get(theme) if warning else ColorPalette.TEXT_MUTED.get(theme)
        return f"color: {color}; font-weight: 600;"

    @staticmethod
    def get_mark_style(color: str, font_size: int) -> str:
        return f"color: {color}; font-size: {font_size}pt; font-weight: bold;"
