"""Pure color and easing math for focus flashes.

Colors are RGB triples on a 16-bit channel scale (0-65535), the scale Qt uses
for QRgba64 and the scale the host reports background colors in. Brightness
shifts are expressed in 8-bit units and widened by 256 before being applied.

No Qt imports here: everything is plain arithmetic and safe to call from any
context.
"""

from typing import List, Tuple

RGB16 = Tuple[int, int, int]

LIGHTEN = 1
DARKEN = -1

CHANNEL_MAX = 65535
MIN_FRAMES = 2


def theme_direction(is_dark: bool) -> int:
    """Return LIGHTEN for dark themes, DARKEN for light ones."""
    return LIGHTEN if is_dark else DARKEN


def _clamp_channel(value: int) -> int:
    return max(0, min(CHANNEL_MAX, value))


def shift_color(rgb: RGB16, shift_units: int, direction: int) -> RGB16:
    """Shift every channel by ``direction * shift_units * 256``.

    Args:
        rgb: 16-bit RGB triple
        shift_units: Brightness shift on the 0-255 scale
        direction: LIGHTEN (+1) or DARKEN (-1)

    Returns:
        Shifted triple, saturated to [0, 65535] per channel
    """
    delta = direction * shift_units * 256
    r, g, b = rgb
    return (_clamp_channel(r + delta), _clamp_channel(g + delta), _clamp_channel(b + delta))


def to_display_color(rgb: RGB16) -> str:
    """Format a 16-bit triple as ``#rrggbb`` (channels truncated to 8 bits)."""
    r, g, b = (channel // 256 for channel in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def frame_count(duration_s: float, step_interval_s: float) -> int:
    """Number of frames for a flash, never fewer than two."""
    return max(MIN_FRAMES, round(duration_s / step_interval_s))


def easing_frames(n: int) -> List[float]:
    """Quadratic ease-out intensity fractions.

    Frame 0 is full intensity (1.0) and the last frame is baseline (0.0).
    Drops are large early and small late, so the flash reads as a pop
    followed by a slow fade.

    Raises:
        ValueError: if ``n < 2``; callers clamp with frame_count() first.
    """
    if n < MIN_FRAMES:
        raise ValueError(f"easing_frames needs at least {MIN_FRAMES} frames, got {n}")
    last = n - 1
    return [((last - i) / last) ** 2 for i in range(n)]


def shift_units_for(fraction: float, brightness: int) -> int:
    """Scale peak brightness by a frame's intensity fraction."""
    return round(brightness * fraction)


def frame_color(baseline: RGB16, fraction: float, brightness: int, direction: int) -> str:
    """Display color for one frame of a flash."""
    shifted = shift_color(baseline, shift_units_for(fraction, brightness), direction)
    return to_display_color(shifted)
