"""Pixel value conversion for TrueColor visuals.

A visual describes where the red, green and blue channels sit in a pixel
through three bit masks. :func:`rgb_shifts` turns those masks into the
position and width of each channel. :func:`good_color` uses them to turn
a 0xRRGGBB colour into the pixel value such a visual expects.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

__all__ = ["RgbShifts", "rgb_shifts", "good_color"]

_CHANNEL_BITS = 16


class RgbShifts(NamedTuple):
    """Position and width, in bits, of each colour channel in a pixel."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int


def _mask_layout(mask: int, name: str) -> tuple[int, int]:
    if isinstance(mask, bool) or not isinstance(mask, int):
        raise TypeError(f"{name} mask must be an integer, not {type(mask).__name__}")
    if mask <= 0:
        raise ValueError(f"{name} mask must have at least one bit set, got {mask}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    bits = (mask ^ (mask + 1)).bit_length() - 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> RgbShifts:
    """Return where each channel starts and how many bits it has.

    For every mask the shift is the number of zero bits below it and the
    width is the length of the run of one bits that follows.
    """
    red = _mask_layout(red_mask, "red")
    green = _mask_layout(green_mask, "green")
    blue = _mask_layout(blue_mask, "blue")
    return RgbShifts(*red, *green, *blue)


def good_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual.

    Visuals of depth 24 or more take the colour as it is. Shallower ones
    get each channel cut down to its width and moved to its place.
    """
    if isinstance(color, bool) or not isinstance(color, int):
        raise TypeError(f"colour must be an integer, not {type(color).__name__}")
    if depth >= 24:
        return color
    layout = tuple(shifts)
    if len(layout) != 6:
        raise ValueError(f"expected 6 shift values, got {len(layout)}")
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = layout
    for bits in (red_bits, green_bits, blue_bits):
        if not 0 <= bits <= _CHANNEL_BITS:
            raise ValueError(f"channel width must be between 0 and 16 bits, got {bits}")
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (_CHANNEL_BITS - red_bits)) << red_shift)
        + ((green >> (_CHANNEL_BITS - green_bits)) << green_shift)
        + ((blue >> (_CHANNEL_BITS - blue_bits)) << blue_shift)
    )