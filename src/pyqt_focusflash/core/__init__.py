"""
Core PyQt6 utilities.

Timer primitives that drive animation frames on the Qt event loop.
"""

from .frame_timer import FrameTimer, QtFrameScheduler

__all__ = [
    "FrameTimer",
    "QtFrameScheduler",
]
