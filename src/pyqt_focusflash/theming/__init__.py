"""
Theming system.

Color scheme helpers used to decide whether a focus flash lightens or
darkens the window background.
"""

from .color_scheme import ColorScheme, relative_luminance
from .theme_detection import is_dark_theme, detect_theme_direction

__all__ = [
    "ColorScheme",
    "relative_luminance",
    "is_dark_theme",
    "detect_theme_direction",
]
