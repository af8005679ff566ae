"""
Animation system.

Per-window focus flash: pure color/easing math, declarative config and the
controller that schedules frames and owns animation state.
"""

from .flash_math import (
    LIGHTEN,
    DARKEN,
    theme_direction,
    shift_color,
    to_display_color,
    frame_count,
    easing_frames,
    frame_color,
)
from .flash_config import FocusFlashConfig, get_flash_config, set_flash_config
from .focus_flash import AnimationState, FlashController, should_skip

__all__ = [
    "LIGHTEN",
    "DARKEN",
    "theme_direction",
    "shift_color",
    "to_display_color",
    "frame_count",
    "easing_frames",
    "frame_color",
    "FocusFlashConfig",
    "get_flash_config",
    "set_flash_config",
    "AnimationState",
    "FlashController",
    "should_skip",
]
