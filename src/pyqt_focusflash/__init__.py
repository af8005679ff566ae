"""
pyqt-focusflash: focus pulse animations for multi-window PyQt6 editors.

When a pane becomes the focused window its background is shifted away from
its resting color and eased back over a short duration, giving the user a
transient cue of where focus just landed.

Architecture:
- Tier 1 (Math): Pure color and easing functions, no Qt dependency
- Tier 2 (Protocols): Host and scheduler ABCs (no duck typing)
- Tier 3 (Animation): FlashController, one animation state per window
- Tier 4 (Services): Qt host implementation and focus-change glue

Key Features:
- Quadratic ease-out "pop then fade" pulse
- Theme-aware direction (lighten on dark themes, darken on light)
- At most one animation and one color override per window
- Synchronous cancellation on re-trigger or window destruction
"""

__version__ = "0.1.0"

from .animation import (
    FlashController,
    FocusFlashConfig,
    get_flash_config,
    set_flash_config,
)
from .exceptions import FocusFlashError
from .services import FocusFlashService, QtWindowHost

__all__ = [
    "__version__",
    "FlashController",
    "FocusFlashConfig",
    "get_flash_config",
    "set_flash_config",
    "FocusFlashError",
    "FocusFlashService",
    "QtWindowHost",
]
