from __future__ import annotations

"""Color string formatting for export layers and UIs.

This module exposes the supported output formats as an enum with
label/enum pairs for UI choices, and converts colors and scales into
CSS-style strings.
"""

from enum import Enum
from typing import Dict, List, Tuple

from .color_types import ColorLike, as_color, to_hsl, to_rgb
from .scale import ColorScale


class ColorFormat(Enum):
    """Supported output formats for color strings."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"

    @classmethod
    def from_value(cls, value: "ColorFormat | str") -> "ColorFormat":
        if isinstance(value, ColorFormat):
            return value
        for fmt in cls:
            if fmt.value == str(value).lower():
                return fmt
        raise ValueError(f"Unknown color format: {value!r}")


# Label/Enum pairs for UI choices
COLOR_FORMAT_OPTIONS: List[Tuple[str, ColorFormat]] = [
    ("HEX", ColorFormat.HEX),
    ("RGB", ColorFormat.RGB),
    ("HSL", ColorFormat.HSL),
    ("OKLCH", ColorFormat.OKLCH),
]


def _trim(value: float, digits: int) -> str:
    text = f"{value:.{digits}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def oklch_string(color: ColorLike) -> str:
    """``oklch(62.31% 0.1880 259.81)``."""
    L, C, h = as_color(color).oklch
    return f"oklch({L * 100:.2f}% {C:.4f} {h:.2f})"


def format_color_as(color: ColorLike, fmt: ColorFormat | str) -> str:
    """Convert a color to the requested string format."""
    out_fmt = ColorFormat.from_value(fmt)
    if out_fmt == ColorFormat.HEX:
        return as_color(color).hex
    if out_fmt == ColorFormat.RGB:
        r, g, b = to_rgb(color)
        return f"rgb({r}, {g}, {b})"
    if out_fmt == ColorFormat.HSL:
        h, s, light = to_hsl(color)
        return f"hsl({_trim(h, 1)}, {_trim(s, 1)}%, {_trim(light, 1)}%)"
    return oklch_string(color)


def export_scale(scale: ColorScale, fmt: ColorFormat | str) -> Dict[int, str]:
    """Format every shade of a scale, keyed by shade."""
    out_fmt = ColorFormat.from_value(fmt)
    return {key: format_color_as(color, out_fmt) for key, color in scale.items()}


__all__ = [
    "ColorFormat",
    "COLOR_FORMAT_OPTIONS",
    "oklch_string",
    "format_color_as",
    "export_scale",
]
