"""Conversions between #RRGGBB strings, RGB triples and WCAG luminance."""

from __future__ import annotations

import re
from typing import Sequence, Tuple, Union

import numpy as np

from .exceptions import InvalidFormatException

RGB = Tuple[int, int, int]

# Relative luminance below this counts as a dark colour, for both roles.
DARK_LUMINANCE_THRESHOLD = 0.5

_HEX_PATTERN = re.compile(r"#[0-9a-fA-F]{6}")
_LUMINANCE_COEFFS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def hex_to_rgb(hex_color: str) -> RGB:
    """Parse a ``#RRGGBB`` string (either case) into an RGB triple."""

    if not isinstance(hex_color, str) or not _HEX_PATTERN.fullmatch(hex_color):
        raise InvalidFormatException(f"Invalid hex colour: {hex_color!r}", value=hex_color)
    return tuple(int(hex_color[i : i + 2], 16) for i in (1, 3, 5))


def _clamp_channel(value: float) -> int:
    return min(255, max(0, int(value)))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    r, g, b = (_clamp_channel(c) for c in (r, g, b))
    return f"#{r:02X}{g:02X}{b:02X}"


def format_rgb(r: int, g: int, b: int) -> str:
    """Display form used next to the hex value, e.g. ``"255, 0, 128"``."""

    return f"{r}, {g}, {b}"


def _srgb_to_linear(channels: np.ndarray) -> np.ndarray:
    c = channels / 255.0
    return np.where(c <= 0.03928, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def relative_luminance(
    r: Union[int, Sequence[int], np.ndarray], g: int = None, b: int = None
) -> Union[float, np.ndarray]:
    """Compute the WCAG relative luminance.

    Accepts three channels, a single ``(r, g, b)`` sequence, or an array of
    shape ``(..., 3)``.  Scalars in give a float out; arrays give an array of
    luminances with the trailing axis removed.
    """

    if g is None and b is None:
        arr = np.asarray(r, dtype=np.float64)
    else:
        arr = np.asarray((r, g, b), dtype=np.float64)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError("RGB colour must have exactly three channels")

    lum = np.dot(_srgb_to_linear(np.clip(arr, 0.0, 255.0)), _LUMINANCE_COEFFS)
    if np.ndim(lum) == 0:
        return float(lum)
    return lum


def is_dark_color(r: int, g: int, b: int) -> bool:
    return relative_luminance(r, g, b) < DARK_LUMINANCE_THRESHOLD


__all__ = [
    "DARK_LUMINANCE_THRESHOLD",
    "RGB",
    "format_rgb",
    "hex_to_rgb",
    "is_dark_color",
    "relative_luminance",
    "rgb_to_hex",
]
