"""Color palette for PrimeQuizQt supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the game screen."""

    TEXT_PRIMARY = ThemeColors(
        light="#000000",      # Black
        dark="#F5F5F5"        # WhiteSmoke
    )

    TEXT_MUTED = ThemeColors(
        light="#8A8A8A",      # Gray
        dark="#777777"        # Dim Gray
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",      # White
        dark="#1E1E1E"        # Dark Gray
    )

    # Number and answer buttons
    ACCENT = ThemeColors(
        light="#008080",      # Teal
        dark="#30C5C5"        # Lighter Teal
    )

    # Feedback and score
    SUCCESS = ThemeColors(
        light="#1E9E3A",      # Green
        dark="#6FCF6F"        # Light Green
    )

    ERROR = ThemeColors(
        light="#D13438",      # Red
        dark="#FF6B6B"        # Light Red
    )

    # Countdown
    COUNTDOWN_TRACK = ThemeColors(
        light="#E5E5E5",      # Light Gray
        dark="#3A3A3A"        # Medium Dark Gray
    )

    BORDER_PRIMARY = ThemeColors(
        light="#D1D1D1",      # Gray
        dark="#555555"        # Dark Gray
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#E8E8E8",      # Light Gray
        dark="#505050"        # Medium Gray
    )
