"""Repeating frame timer and the Qt frame scheduler built on it."""

import logging
from typing import Callable, Optional

from PyQt6.QtCore import QTimer

from pyqt_focusflash.protocols.window_host import FrameSchedulerABC

logger = logging.getLogger(__name__)


class FrameTimer:
    """
    Repeating timer that fires a handler every interval until stopped.

    stop() disconnects the handler as well as stopping the QTimer, so a
    timeout already queued in the event loop cannot reach the handler.

    Usage:
        self._frames = FrameTimer(interval_ms=50, handler=self._advance)
        self._frames.start()
        ...
        self._frames.stop()
    """

    def __init__(self, interval_ms: int, handler: Callable[[], None]):
        self._interval_ms = interval_ms
        self._handler = handler
        self._timer: Optional[QTimer] = None

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def start(self):
        """Start (or restart) the repeating timer."""
        self.stop()

        self._timer = QTimer()
        self._timer.setSingleShot(False)
        self._timer.timeout.connect(self._handler)
        self._timer.start(self._interval_ms)

    def stop(self):
        """Stop the timer and drop the handler connection."""
        if self._timer is not None:
            self._timer.stop()
            self._timer.timeout.disconnect()
            self._timer.deleteLater()
            self._timer = None

    def is_active(self) -> bool:
        return self._timer is not None and self._timer.isActive()


class QtFrameScheduler(FrameSchedulerABC):
    """Frame scheduler backed by one FrameTimer per animation."""

    def schedule_repeating(self, interval_s: float, callback: Callable[[], None]) -> FrameTimer:
        timer = FrameTimer(interval_ms=max(1, round(interval_s * 1000)), handler=callback)
        timer.start()
        logger.debug(f"[FRAME_TIMER] Started {timer.interval_ms}ms frame timer")
        return timer

    def cancel(self, handle: FrameTimer) -> None:
        handle.stop()
