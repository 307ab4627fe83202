"""Utilities for WCAG contrast ratios and conformance levels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

from .colors import relative_luminance

ColorLike = Sequence[int]

# Contrast ratio is displayed as e.g. "4.5:1"
RATIO_DISPLAY_DECIMALS = 1

MIN_RATIO = 1.0
MAX_RATIO = 21.0

# Minimum ratios per success criterion
AAA_REGULAR_THRESHOLD = 7.0
AA_REGULAR_THRESHOLD = 4.5
AA_LARGE_THRESHOLD = 3.0


@dataclass(frozen=True)
class WcagLevels:
    """Pass/fail flags keyed by WCAG success criterion."""

    level_143_regular: bool = True
    level_143_large: bool = True
    level_146_regular: bool = True
    level_146_large: bool = True
    level_1411: bool = True

    def to_dict(self) -> Dict[str, bool]:
        return {
            "1.4.3-regular": self.level_143_regular,
            "1.4.3-large": self.level_143_large,
            "1.4.6-regular": self.level_146_regular,
            "1.4.6-large": self.level_146_large,
            "1.4.11": self.level_1411,
        }


@dataclass(frozen=True)
class ContrastResult:
    """Contrast between two colours.

    ``ratio`` is the display value; ``levels`` is always derived from the
    unrounded ``ratio_raw`` so that e.g. 4.496 (shown as 4.5) still fails AA.
    """

    ratio_raw: float
    ratio: float
    levels: WcagLevels

    def passes(self, criterion: str) -> bool:
        return self.levels.to_dict()[criterion]


def contrast_ratio(lum_a: float, lum_b: float) -> float:
    """Return the WCAG contrast ratio between two relative luminances."""

    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def color_contrast(color_a: ColorLike, color_b: ColorLike) -> float:
    """Return the WCAG contrast ratio between two RGB colours."""

    return contrast_ratio(relative_luminance(color_a), relative_luminance(color_b))


def round_ratio(ratio: float, decimals: int = RATIO_DISPLAY_DECIMALS) -> float:
    return round(ratio, decimals)


def wcag_flags(ratio: float) -> WcagLevels:
    """Derive the conformance flags from an unrounded contrast ratio.

    Every flag starts as passing; each threshold below is checked on its own
    and can only turn flags off.
    """

    level_143_regular = level_143_large = True
    level_146_regular = level_146_large = True
    level_1411 = True

    if ratio < AAA_REGULAR_THRESHOLD:
        level_146_regular = False
    if ratio < AA_REGULAR_THRESHOLD:
        level_143_regular = False
        level_146_large = False
    if ratio < AA_LARGE_THRESHOLD:
        level_143_large = False
        level_1411 = False

    return WcagLevels(
        level_143_regular=level_143_regular,
        level_143_large=level_143_large,
        level_146_regular=level_146_regular,
        level_146_large=level_146_large,
        level_1411=level_1411,
    )


def evaluate_ratio(ratio: float) -> ContrastResult:
    return ContrastResult(ratio_raw=ratio, ratio=round_ratio(ratio), levels=wcag_flags(ratio))


def evaluate_contrast(foreground: ColorLike, background: ColorLike) -> ContrastResult:
    """Compute ratio, display ratio and WCAG flags for a colour pair."""

    return evaluate_ratio(color_contrast(foreground, background))


__all__ = [
    "ContrastResult",
    "WcagLevels",
    "color_contrast",
    "contrast_ratio",
    "evaluate_contrast",
    "evaluate_ratio",
    "round_ratio",
    "wcag_flags",
]
