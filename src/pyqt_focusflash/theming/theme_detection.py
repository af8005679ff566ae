"""Theme direction detection from the application palette."""

import logging
from typing import Optional

from PyQt6.QtGui import QGuiApplication

from pyqt_focusflash.animation.flash_math import theme_direction
from .color_scheme import ColorScheme

logger = logging.getLogger(__name__)


def is_dark_theme(app: Optional[QGuiApplication] = None) -> bool:
    """True if the application currently paints with a dark window background."""
    if app is None:
        app = QGuiApplication.instance()
    if app is None:
        logger.warning("[THEME] No QApplication instance, assuming light theme")
        return False
    return ColorScheme.from_palette(app.palette()).is_dark()


def detect_theme_direction(app: Optional[QGuiApplication] = None) -> int:
    """+1 (lighten) on dark themes, -1 (darken) on light themes."""
    return theme_direction(is_dark_theme(app))
