"""Focus-change glue between a window host and the FlashController.

The host reports "this window is focused" (including spurious repeats for
the same window). The service decides whether that is a real change worth a
flash and, if so, starts one:

    on_window_focus_changed(window)
      -> same as last focused?          skip (no real change)
      -> only one window?               skip
      -> secondary window + ignoring?   skip
      -> window dead?                   skip
      -> content identity excluded?     skip
      -> start_flash(window, background)

Last-focused tracking is instance state: initialized by enable(), cleared by
disable().
"""

import logging
from typing import Any, Optional

from pyqt_focusflash.animation.flash_config import FocusFlashConfig, get_flash_config
from pyqt_focusflash.animation.focus_flash import FlashController, should_skip
from pyqt_focusflash.exceptions import FocusFlashError
from pyqt_focusflash.protocols.window_host import WindowHostABC, get_window_host

logger = logging.getLogger(__name__)


class FocusFlashService:
    """Flashes windows as they gain focus while enabled."""

    def __init__(
        self,
        host: Optional[WindowHostABC] = None,
        controller: Optional[FlashController] = None,
        config: Optional[FocusFlashConfig] = None,
    ):
        if host is None:
            host = get_window_host()
        if host is None:
            raise FocusFlashError("No window host given and none registered with register_window_host()")
        self._host = host
        self._controller = controller or FlashController(host)
        self._config = config
        self._enabled = False
        self._last_focused: Optional[Any] = None

    @property
    def config(self) -> FocusFlashConfig:
        return self._config or get_flash_config()

    @property
    def controller(self) -> FlashController:
        return self._controller

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    @property
    def last_focused(self) -> Optional[Any]:
        return self._last_focused

    def enable(self) -> None:
        """Start reacting to focus changes. Idempotent."""
        if self._enabled:
            return
        self._enabled = True
        self._last_focused = self._host.focused_window()
        self._host.install_focus_listener(self.on_window_focus_changed)
        logger.debug(f"[FOCUS_FLASH] Enabled, last focused: {self._last_focused!r}")

    def disable(self) -> None:
        """Stop reacting, end running flashes and reset focus tracking. Idempotent."""
        if not self._enabled:
            return
        self._enabled = False
        self._host.remove_focus_listener()
        self._controller.cleanup_all()
        self._last_focused = None
        logger.debug("[FOCUS_FLASH] Disabled")

    def on_window_focus_changed(self, window: Any) -> None:
        if not self._enabled or window is None:
            return
        if window is self._last_focused:
            return
        self._last_focused = window

        if not self._host.is_window_live(window):
            logger.debug(f"[FOCUS_FLASH] Skipping dead window {window!r}")
            return

        if self._host.window_count() <= 1:
            return

        cfg = self.config
        if cfg.ignore_secondary_focus and self._host.is_secondary_window(window):
            logger.debug(f"[FOCUS_FLASH] Skipping secondary window {window!r}")
            return

        identity = self._host.get_content_identity(window)
        if should_skip(identity, cfg.compiled_patterns):
            logger.debug(f"[FOCUS_FLASH] Skipping excluded content {identity!r}")
            return

        self._start(window, cfg)

    def flash_window(self, window: Any) -> bool:
        """Flash ``window`` now, regardless of focus history or exclusions.

        Returns:
            False if the window is not live, True otherwise
        """
        if not self._host.is_window_live(window):
            logger.debug(f"[FOCUS_FLASH] Cannot flash dead window {window!r}")
            return False
        self._start(window, self.config)
        return True

    def _start(self, window: Any, cfg: FocusFlashConfig) -> None:
        # Background must be read with no override applied
        self._controller.cleanup(window)
        self._controller.start_flash(window, self._host.get_background_color(window), cfg)
