"""Data structures for sampled colours and the state mirrored by the UI."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping, Optional

from modules.utils.colors import RGB, format_rgb, hex_to_rgb, is_dark_color, rgb_to_hex
from modules.utils.exceptions import InvalidFormatException
from modules.utils.wcag import ContrastResult, evaluate_contrast


class ColorRole(str, Enum):
    FOREGROUND = "foreground"
    BACKGROUND = "background"

    @property
    def is_foreground(self) -> bool:
        return self is ColorRole.FOREGROUND

    @classmethod
    def from_fg(cls, fg: bool) -> "ColorRole":
        return cls.FOREGROUND if fg else cls.BACKGROUND


@dataclass(frozen=True)
class Color:
    """An opaque 8-bit sRGB colour.

    Only the channel triple is stored; the hex string, display string and
    dark flag are all derived from it.
    """

    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise InvalidFormatException(
                    f"RGB channels must be integers in [0, 255], got {(self.r, self.g, self.b)!r}",
                    value=(self.r, self.g, self.b),
                )

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        return cls(*hex_to_rgb(hex_color))

    @classmethod
    def from_rgb(cls, rgb) -> "Color":
        try:
            r, g, b = rgb
        except (TypeError, ValueError):
            raise InvalidFormatException(f"RGB colour must have three channels, got {rgb!r}", value=rgb)
        return cls(r, g, b)

    @classmethod
    def parse(cls, value: Any) -> "Color":
        """Normalise either wire encoding (``"#RRGGBB"`` or ``[r, g, b]``)."""

        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        return cls.from_rgb(value)

    @property
    def rgb(self) -> RGB:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return rgb_to_hex(self.r, self.g, self.b)

    @property
    def rgb_display(self) -> str:
        return format_rgb(self.r, self.g, self.b)

    @property
    def is_dark(self) -> bool:
        return is_dark_color(self.r, self.g, self.b)


def _parse_optional(payload: Mapping[str, Any], role: ColorRole) -> Optional[Color]:
    # Hex payloads use the bare role name; RGB-tuple payloads may use "<role>_rgb".
    for key in (role.value, f"{role.value}_rgb"):
        value = payload.get(key)
        if value is not None:
            return Color.parse(value)
    return None


@dataclass(frozen=True)
class ColorState:
    """Authoritative sampling state held by the backend store."""

    foreground: Optional[Color] = None
    background: Optional[Color] = None
    continue_mode: bool = False

    def get(self, role: ColorRole) -> Optional[Color]:
        return self.foreground if role.is_foreground else self.background

    def with_color(self, role: ColorRole, color: Optional[Color]) -> "ColorState":
        return replace(self, **{role.value: color})

    def to_dict(self) -> dict:
        """Serialise using the hex wire encoding."""

        return {
            "foreground": None if self.foreground is None else self.foreground.hex,
            "background": None if self.background is None else self.background.hex,
            "continue_mode": self.continue_mode,
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ColorState":
        """Recreate a :class:`ColorState` from either wire encoding.

        Raises :class:`InvalidFormatException` if any present colour is
        malformed; nothing is partially parsed.
        """

        if not data:
            return cls()
        return cls(
            foreground=_parse_optional(data, ColorRole.FOREGROUND),
            background=_parse_optional(data, ColorRole.BACKGROUND),
            continue_mode=bool(data.get("continue_mode", False)),
        )


@dataclass(frozen=True)
class UIState:
    """Immutable snapshot published to the rendering layer."""

    foreground: str = ""
    background: str = ""
    foreground_rgb: str = ""
    background_rgb: str = ""
    foreground_is_dark: bool = False
    background_is_dark: bool = False
    contrast: Optional[ContrastResult] = None
    continue_mode: bool = False
    foreground_picking: bool = False
    background_picking: bool = False
    result_visible: bool = False
    copied_visible: bool = False
    current_icc_profile: str = ""

    @property
    def is_picking(self) -> bool:
        return self.foreground_picking or self.background_picking

    def hex_for(self, role: ColorRole) -> str:
        return self.foreground if role.is_foreground else self.background

    def picking(self, role: ColorRole) -> bool:
        return self.foreground_picking if role.is_foreground else self.background_picking

    def with_picking(self, role: ColorRole, picking: bool) -> "UIState":
        return replace(self, **{f"{role.value}_picking": picking})

    def with_color(self, role: ColorRole, color: Color) -> "UIState":
        """Replace one side wholesale; hex, RGB text and dark flag move together."""

        return replace(
            self,
            **{
                role.value: color.hex,
                f"{role.value}_rgb": color.rgb_display,
                f"{role.value}_is_dark": color.is_dark,
            },
        )

    def with_contrast(self) -> "UIState":
        """Recompute the contrast result from the displayed colours."""

        if not self.foreground or not self.background:
            return replace(self, contrast=None)
        fg = hex_to_rgb(self.foreground)
        bg = hex_to_rgb(self.background)
        return replace(self, contrast=evaluate_contrast(fg, bg))


__all__ = ["Color", "ColorRole", "ColorState", "UIState"]
