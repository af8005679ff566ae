"""Host collaborator protocols and ABCs for focus flashes.

The flash engine never touches a toolkit directly. It reads background
colors, applies and removes color overrides and checks liveness through a
window host, and it drives frames through a frame scheduler. Applications
subclass the ABCs (or use the Qt implementations in ``services`` and
``core``) and may register a process-wide host with register_window_host().

Example:
    class MyEditorHost(WindowHostABC):
        def get_background_color(self, window):
            return window.theme_background_rgb16()
        ...

    register_window_host(MyEditorHost())
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Tuple

RGB16 = Tuple[int, int, int]


class WindowHostABC(ABC):
    """Abstract base class for window hosts.

    Window handles are opaque to the engine. They must be hashable and may
    become invalid at any time; every method except is_window_live() may
    assume the caller checked liveness first.
    """

    @abstractmethod
    def get_background_color(self, window: Any) -> RGB16:
        """Resting background color of the window's content, 16-bit channels."""
        ...

    @abstractmethod
    def apply_color_override(self, window: Any, color: str) -> Any:
        """Paint the window's content background with ``color`` (``#rrggbb``).

        Returns:
            Opaque handle accepted by remove_color_override()
        """
        ...

    @abstractmethod
    def remove_color_override(self, handle: Any) -> None:
        """Undo an override. Must tolerate handles whose window has died."""
        ...

    @abstractmethod
    def is_window_live(self, window: Any) -> bool:
        ...

    @abstractmethod
    def get_content_identity(self, window: Any) -> str:
        """Name of what the window currently shows (document, buffer, tab)."""
        ...

    @abstractmethod
    def window_count(self) -> int:
        """Number of live windows taking part in focus tracking."""
        ...

    @abstractmethod
    def is_secondary_window(self, window: Any) -> bool:
        """True for prompt/dialog style windows."""
        ...

    @abstractmethod
    def focused_window(self) -> Optional[Any]:
        ...

    def install_focus_listener(self, callback: Callable[[Any], None]) -> None:
        """Start calling ``callback(window)`` on focus changes.

        Hosts that deliver notifications some other way can leave this as is.
        """

    def remove_focus_listener(self) -> None:
        """Stop delivering focus notifications."""


class FrameSchedulerABC(ABC):
    """Repeating timer source that drives animation frames."""

    @abstractmethod
    def schedule_repeating(self, interval_s: float, callback: Callable[[], None]) -> Any:
        """Call ``callback`` every ``interval_s`` seconds until cancelled.

        Returns:
            Opaque handle accepted by cancel()
        """
        ...

    @abstractmethod
    def cancel(self, handle: Any) -> None:
        """Stop the timer. No callback may run for ``handle`` afterwards."""
        ...


_window_host: Optional[WindowHostABC] = None


def register_window_host(host: Optional[WindowHostABC]) -> None:
    """Register the global window host.

    Args:
        host: Host instance implementing WindowHostABC (None unregisters)
    """
    global _window_host
    _window_host = host


def get_window_host() -> Optional[WindowHostABC]:
    """Get the registered window host."""
    return _window_host
