"""Styling module for PrimeQuizQt."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
