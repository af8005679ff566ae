"""Per-window focus flash controller.

ONE ANIMATION PER WINDOW:
- FlashController owns a mapping window -> AnimationState
- Starting a flash on an animating window fully cleans up the old state first,
  so a window never carries two timers or two color overrides
- Each timer tick advances frame_index on the state object (no captured
  counters) and swaps the single color override slot

LIFECYCLE:
    Idle -> Animating(frame 0..n-1) -> Idle
    Animating -> Animating on re-trigger (cleanup, then a fresh start)

Stale windows are expected, not exceptional: a tick that finds its window
dead cancels itself and forgets the override without touching the window.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Pattern, Union

from pyqt_focusflash.animation.flash_config import FocusFlashConfig, get_flash_config
from pyqt_focusflash.animation.flash_math import RGB16, easing_frames, frame_color
from pyqt_focusflash.protocols.window_host import FrameSchedulerABC, WindowHostABC

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class AnimationState:
    """Live animation bookkeeping for one window.

    override_handle and timer_handle are both set while frames remain and
    both cleared by FlashController.cleanup().
    """
    window: Any
    baseline_color: RGB16
    frames: List[float]
    brightness: int
    direction: int
    frame_index: int = 0
    override_handle: Any = None
    timer_handle: Any = None

    @property
    def is_exhausted(self) -> bool:
        return self.frame_index >= len(self.frames)

    def current_color(self) -> str:
        return frame_color(self.baseline_color, self.frames[self.frame_index], self.brightness, self.direction)


def should_skip(content_identity: str, exclude_patterns: Iterable[Union[str, Pattern[str]]]) -> bool:
    """True if any exclusion pattern is found in the content identity.

    Takes the identity rather than the window; callers read it with
    WindowHostABC.get_content_identity().
    """
    return any(re.search(pattern, content_identity) for pattern in exclude_patterns)


class FlashController:
    """Starts, steps and cancels focus flashes, one per window."""

    def __init__(
        self,
        host: WindowHostABC,
        scheduler: Optional[FrameSchedulerABC] = None,
        theme_direction: Optional[Callable[[], int]] = None,
    ):
        if scheduler is None:
            from pyqt_focusflash.core.frame_timer import QtFrameScheduler
            scheduler = QtFrameScheduler()
        if theme_direction is None:
            from pyqt_focusflash.theming.theme_detection import detect_theme_direction
            theme_direction = detect_theme_direction

        self._host = host
        self._scheduler = scheduler
        self._theme_direction = theme_direction
        self._states: Dict[Any, AnimationState] = {}

    def start_flash(self, window: Any, base_color: RGB16, config: Optional[FocusFlashConfig] = None) -> None:
        """Flash ``window`` starting from its resting ``base_color``.

        Frame 0 is applied synchronously; later frames follow on the
        scheduler every ``config.step_interval_s``.
        """
        cfg = config or get_flash_config()
        self.cleanup(window)

        if cfg.brightness <= 0:
            logger.debug(f"[FOCUS_FLASH] brightness is 0, nothing to animate for {window!r}")
            return

        state = AnimationState(
            window=window,
            baseline_color=tuple(base_color),
            frames=easing_frames(cfg.frame_count),
            brightness=cfg.brightness,
            direction=self._theme_direction(),
        )
        self._states[window] = state
        state.override_handle = self._host.apply_color_override(window, state.current_color())
        state.timer_handle = self._scheduler.schedule_repeating(
            cfg.step_interval_s, lambda: self._on_tick(state)
        )
        logger.debug(f"[FOCUS_FLASH] start: window={window!r} frames={len(state.frames)} "
                     f"direction={state.direction:+d}")

    def _on_tick(self, state: AnimationState) -> None:
        """Advance one frame, or finish the flash."""
        window = state.window
        if self._states.get(window) is not state:
            # Superseded state; its timer was cancelled already
            return

        if not self._host.is_window_live(window):
            logger.debug(f"[FOCUS_FLASH] window died mid-flash at frame {state.frame_index}: {window!r}")
            self.cleanup(window)
            return

        state.frame_index += 1
        if state.is_exhausted:
            logger.debug(f"[FOCUS_FLASH] finished: {window!r}")
            self.cleanup(window)
            return

        if state.override_handle is not None:
            self._host.remove_color_override(state.override_handle)
        state.override_handle = self._host.apply_color_override(window, state.current_color())

    def cleanup(self, window: Any) -> None:
        """Cancel the timer, drop the override and forget the state. Idempotent."""
        state = self._states.pop(window, None)
        if state is None:
            return

        if state.timer_handle is not None:
            self._scheduler.cancel(state.timer_handle)
            state.timer_handle = None

        if state.override_handle is not None:
            if self._host.is_window_live(window):
                self._host.remove_color_override(state.override_handle)
            else:
                logger.debug(f"[FOCUS_FLASH] forgetting override of dead window {window!r}")
            state.override_handle = None

    def cleanup_all(self) -> None:
        """Clean up every active flash."""
        for window in list(self._states):
            self.cleanup(window)

    def is_animating(self, window: Any) -> bool:
        return window in self._states

    def get_state(self, window: Any) -> Optional[AnimationState]:
        return self._states.get(window)

    @property
    def active_count(self) -> int:
        return len(self._states)
