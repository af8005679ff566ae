"""
Service layer.

Qt window host implementation and the focus-change service that turns
focus notifications into flashes.
"""

from .qt_window_host import QtWindowHost, QtColorOverride, is_widget_alive
from .focus_flash_service import FocusFlashService

__all__ = [
    "QtWindowHost",
    "QtColorOverride",
    "is_widget_alive",
    "FocusFlashService",
]
