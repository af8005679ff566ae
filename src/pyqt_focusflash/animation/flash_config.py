"""Declarative configuration for focus flash animations."""

from dataclasses import dataclass
from typing import Optional, Pattern, Tuple
import logging
import re

from pyqt_focusflash.animation import flash_math

logger = logging.getLogger(__name__)

MAX_BRIGHTNESS = 255


@dataclass
class FocusFlashConfig:
    """Focus flash tuning knobs."""

    brightness: int = 20  # Peak channel shift at frame 0, 8-bit units
    duration_s: float = 0.6
    step_interval_s: float = 0.05

    # Don't flash dialogs, popups and other prompt-style windows
    ignore_secondary_focus: bool = True

    # Regular expressions searched against a window's content identity
    excluded_content_patterns: Tuple[str, ...] = ()

    def __post_init__(self):
        """Validate timing, clamp brightness and compile exclusion patterns."""
        if self.duration_s <= 0:
            raise ValueError(f"duration_s must be positive, got {self.duration_s}")
        if self.step_interval_s <= 0:
            raise ValueError(f"step_interval_s must be positive, got {self.step_interval_s}")

        if not 0 <= self.brightness <= MAX_BRIGHTNESS:
            clamped = max(0, min(MAX_BRIGHTNESS, round(self.brightness)))
            logger.warning(f"[FocusFlashConfig] brightness {self.brightness} out of range, using {clamped}")
            self.brightness = clamped
        else:
            self.brightness = round(self.brightness)

        self.excluded_content_patterns = tuple(self.excluded_content_patterns)
        self._compiled_patterns: Tuple[Pattern[str], ...] = tuple(
            re.compile(pattern) for pattern in self.excluded_content_patterns
        )

    @property
    def compiled_patterns(self) -> Tuple[Pattern[str], ...]:
        return self._compiled_patterns

    @property
    def frame_count(self) -> int:
        return flash_math.frame_count(self.duration_s, self.step_interval_s)

    @property
    def step_interval_ms(self) -> int:
        """Frame period in whole milliseconds (QTimer resolution)."""
        return max(1, round(self.step_interval_s * 1000))


_config: Optional[FocusFlashConfig] = None


def get_flash_config() -> FocusFlashConfig:
    """Return singleton focus flash config."""
    global _config
    if _config is None:
        _config = FocusFlashConfig()
    return _config


def set_flash_config(config: Optional[FocusFlashConfig]) -> None:
    """Replace the singleton config (None restores defaults on next get)."""
    global _config
    _config = config
