"""
Host collaborator protocols.

ABC-based contracts for the window system and the frame timer, so the
flash engine can run against Qt or against test doubles.
"""

from .window_host import (
    RGB16,
    WindowHostABC,
    FrameSchedulerABC,
    register_window_host,
    get_window_host,
)

__all__ = [
    "RGB16",
    "WindowHostABC",
    "FrameSchedulerABC",
    "register_window_host",
    "get_window_host",
]
