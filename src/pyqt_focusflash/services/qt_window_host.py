"""Qt implementation of the focus flash window host.

Windows are registered QWidget panes (editor views, tab pages, docks). A
focused child widget is mapped to the registered pane that contains it, so
focus moving between widgets of the same pane is not a window change.

Example Usage:

    host = QtWindowHost()
    for editor in (left_editor, right_editor):
        host.register_window(editor)

    service = FocusFlashService(host)
    service.enable()
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication, QDialog, QWidget

from pyqt_focusflash.exceptions import FocusFlashError
from pyqt_focusflash.protocols.window_host import RGB16, WindowHostABC

logger = logging.getLogger(__name__)

# 8-bit -> 16-bit channel widening (0xff -> 0xffff)
CHANNEL_WIDEN = 257

SECONDARY_WINDOW_TYPES = (
    Qt.WindowType.Popup,
    Qt.WindowType.Tool,
    Qt.WindowType.ToolTip,
)

CONTENT_IDENTITY_PROPERTY = "contentIdentity"
SECONDARY_WINDOW_PROPERTY = "secondaryWindow"


@dataclass
class QtColorOverride:
    """Palette snapshot needed to undo one flash color override."""
    widget: QWidget
    color: str
    previous_palette: QPalette
    had_own_palette: bool
    previous_auto_fill: bool


def is_widget_alive(widget: Optional[QWidget]) -> bool:
    """Probe the wrapped C++ object; deleted widgets raise RuntimeError."""
    if widget is None:
        return False
    try:
        widget.objectName()
        return True
    except RuntimeError:
        return False


class QtWindowHost(WindowHostABC):
    """Window host over registered QWidget panes."""

    def __init__(self, app: Optional[QApplication] = None):
        self._app = app
        self._windows: List[QWidget] = []
        self._focus_callback: Optional[Callable[[Any], None]] = None
        self._listening_app: Optional[QApplication] = None

    # ==================== REGISTRATION ====================

    def register_window(self, widget: QWidget) -> None:
        """Take part in focus tracking. Registering twice is a no-op."""
        if not isinstance(widget, QWidget):
            raise FocusFlashError(f"Only QWidget panes can be registered, got {type(widget).__name__}")
        if widget not in self._windows:
            self._windows.append(widget)
            logger.debug(f"[FLASH_HOST] Registered window {widget!r}, total: {len(self._windows)}")

    def unregister_window(self, widget: QWidget) -> None:
        if widget in self._windows:
            self._windows.remove(widget)
            logger.debug(f"[FLASH_HOST] Unregistered window {widget!r}, total: {len(self._windows)}")

    def windows(self) -> List[QWidget]:
        """Live registered windows; stale entries are pruned."""
        live = [w for w in self._windows if is_widget_alive(w)]
        if len(live) != len(self._windows):
            logger.debug(f"[FLASH_HOST] Pruned {len(self._windows) - len(live)} deleted windows")
            self._windows = live
        return list(live)

    def window_for_widget(self, widget: Optional[QWidget]) -> Optional[QWidget]:
        """Registered pane containing ``widget`` (or the widget itself)."""
        current = widget
        while is_widget_alive(current):
            if current in self._windows:
                return current
            current = current.parentWidget()
        return None

    # ==================== CONTENT SIDE ====================

    def get_background_color(self, window: QWidget) -> RGB16:
        color = window.palette().color(window.backgroundRole())
        return (color.red() * CHANNEL_WIDEN, color.green() * CHANNEL_WIDEN, color.blue() * CHANNEL_WIDEN)

    def apply_color_override(self, window: QWidget, color: str) -> QtColorOverride:
        override = QtColorOverride(
            widget=window,
            color=color,
            previous_palette=QPalette(window.palette()),
            had_own_palette=window.testAttribute(Qt.WidgetAttribute.WA_SetPalette),
            previous_auto_fill=window.autoFillBackground(),
        )

        qcolor = QColor(color)
        palette = QPalette(window.palette())
        for role in (window.backgroundRole(), QPalette.ColorRole.Window, QPalette.ColorRole.Base):
            palette.setColor(role, qcolor)
        window.setPalette(palette)
        window.setAutoFillBackground(True)
        return override

    def remove_color_override(self, handle: QtColorOverride) -> None:
        widget = handle.widget
        if not is_widget_alive(widget):
            logger.debug("[FLASH_HOST] Override target already deleted, nothing to restore")
            return

        if handle.had_own_palette:
            widget.setPalette(handle.previous_palette)
        else:
            # Empty palette drops the explicit palette and resumes inheritance
            widget.setPalette(QPalette())
        widget.setAutoFillBackground(handle.previous_auto_fill)

    def is_window_live(self, window: Any) -> bool:
        return is_widget_alive(window)

    def get_content_identity(self, window: QWidget) -> str:
        identity = window.property(CONTENT_IDENTITY_PROPERTY)
        if identity:
            return str(identity)
        return window.objectName() or window.windowTitle()

    def window_count(self) -> int:
        return len(self.windows())

    def is_secondary_window(self, window: QWidget) -> bool:
        if window.property(SECONDARY_WINDOW_PROPERTY):
            return True
        if isinstance(window.window(), QDialog):
            return True
        return window.windowType() in SECONDARY_WINDOW_TYPES

    def focused_window(self) -> Optional[QWidget]:
        app = self._application()
        if app is None:
            return None
        return self.window_for_widget(app.focusWidget())

    # ==================== FOCUS NOTIFICATIONS ====================

    def _application(self) -> Optional[QApplication]:
        return self._app if self._app is not None else QApplication.instance()

    def install_focus_listener(self, callback: Callable[[Any], None]) -> None:
        self.remove_focus_listener()
        app = self._application()
        if app is None:
            logger.warning("[FLASH_HOST] No QApplication instance, focus changes will not be reported")
            return

        self._focus_callback = callback
        app.focusChanged.connect(self._on_focus_changed)
        self._listening_app = app
        logger.debug("[FLASH_HOST] Listening for application focus changes")

    def remove_focus_listener(self) -> None:
        if self._listening_app is not None:
            self._listening_app.focusChanged.disconnect(self._on_focus_changed)
            self._listening_app = None
            logger.debug("[FLASH_HOST] Stopped listening for application focus changes")
        self._focus_callback = None

    def _on_focus_changed(self, old: Optional[QWidget], new: Optional[QWidget]) -> None:
        """QApplication.focusChanged slot: report the pane that now has focus."""
        if self._focus_callback is None:
            return
        window = self.window_for_widget(new)
        if window is None:
            return
        self._focus_callback(window)
