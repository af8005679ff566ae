"""
Background color scheme for focus flash theming.

Reads the window background out of a QPalette and classifies it as dark or
light using the WCAG relative luminance formula.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from PyQt6.QtGui import QPalette

logger = logging.getLogger(__name__)

# Relative luminance below this reads as a dark theme
DARK_LUMINANCE_THRESHOLD = 0.5


def relative_luminance(color: Tuple[int, int, int]) -> float:
    """Calculate WCAG relative luminance of an 8-bit RGB color."""
    r, g, b = [c / 255.0 for c in color]

    # Apply gamma correction
    def gamma_correct(c):
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = map(gamma_correct, [r, g, b])
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


@dataclass
class ColorScheme:
    """
    Window background of the active theme.

    Defaults describe a dark theme; use from_palette() to read the colors an
    application is using.
    """

    window_bg: Tuple[int, int, int] = (43, 43, 43)      # #2b2b2b - Main window/dialog backgrounds

    def is_dark(self) -> bool:
        """True when the window background reads as dark."""
        return relative_luminance(self.window_bg) < DARK_LUMINANCE_THRESHOLD

    @classmethod
    def from_palette(cls, palette: QPalette) -> 'ColorScheme':
        """
        Read a scheme back out of a QPalette.

        Args:
            palette: Palette to inspect (usually QApplication.palette())

        Returns:
            ColorScheme: Scheme with the palette's Window color
        """
        color = palette.color(QPalette.ColorRole.Window)
        scheme = cls(window_bg=(color.red(), color.green(), color.blue()))
        logger.debug(f"[THEME] Palette window background {scheme.window_bg}, dark={scheme.is_dark()}")
        return scheme
