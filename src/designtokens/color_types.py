from __future__ import annotations

"""Core color types used by the designtokens library.

This module defines the immutable :class:`Color` value, the
:class:`ColorInput` wrapper for user-supplied colors in various formats,
and the module-level converters (``to_perceptual``, ``to_hex``,
``to_rgb``, ``to_hsl``) every other component builds on.
"""

import colorsys
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from util.color import normalize_rgb, parse_color_str, rgb_to_hex, to_u8_rgb

from .engine import DEFAULT_ENGINE, OKLCH, SRGB, ColorEngine
from .errors import InvalidColorError
from .gamut import to_srgb_gamut_safe


@dataclass(frozen=True)
class Color:
    """Concrete color representation in OKLCH and sRGB.

    Attributes
    ----------
    oklch:
        Tuple of (L, C, h). L is in [0, 1], C is non-negative,
        and h is in [0, 360).
    srgb:
        Tuple of (r, g, b) in [0, 1] sRGB space.
    hex:
        Hex representation "#rrggbb".
    """

    oklch: OKLCH
    srgb: SRGB
    hex: str

    def __str__(self) -> str:
        return self.hex

    @property
    def lightness(self) -> float:
        return self.oklch[0]

    @property
    def chroma(self) -> float:
        return self.oklch[1]

    @property
    def hue(self) -> float:
        return self.oklch[2]

    def to_hex(self) -> str:
        """Return hex representation of the color."""
        return self.hex

    def to_srgb(self) -> SRGB:
        """Return sRGB representation as (r, g, b) in [0, 1]."""
        return self.srgb

    def to_oklch(self) -> OKLCH:
        """Return OKLCH representation as (L, C, h)."""
        return self.oklch

    @classmethod
    def from_srgb(
        cls,
        r: float,
        g: float,
        b: float,
        engine: ColorEngine | None = None,
    ) -> "Color":
        """Create a Color from sRGB in [0, 1]; the hex is rounded from it."""
        engine = engine or DEFAULT_ENGINE
        srgb = (float(r), float(g), float(b))
        return cls(oklch=engine.srgb_to_oklch(*srgb), srgb=srgb, hex=rgb_to_hex(srgb))

    @classmethod
    def from_oklch(
        cls,
        L: float,
        C: float,
        h: float,
        engine: ColorEngine | None = None,
    ) -> "Color":
        """Create a gamut-mapped Color from OKLCH.

        Parameters
        ----------
        L, C, h:
            OKLCH coordinates. L is expected in [0, 1], h in degrees.
            Out-of-range values are clamped; out-of-gamut chroma is reduced.
        engine:
            ColorEngine used for conversion. If None, DefaultColorEngine is used.
        """
        engine = engine or DEFAULT_ENGINE
        r, g, b, (L_adj, C_adj, h_adj) = to_srgb_gamut_safe(engine, L, C, h)
        return cls(oklch=(L_adj, C_adj, h_adj), srgb=(r, g, b), hex=rgb_to_hex((r, g, b)))


class ColorInput:
    """User-facing color input wrapper supporting multiple formats.

    Use one of the constructor-like class methods to create instances.
    :meth:`to_color` resolves the input into a :class:`Color`.
    """

    def __init__(self, *, _mode: str, _value) -> None:
        self._mode = _mode
        self._value = _value

    def __repr__(self) -> str:
        return f"ColorInput({self._mode}={self._value!r})"

    @classmethod
    def from_oklch(cls, L: float, C: float, h: float) -> "ColorInput":
        """Create ColorInput from OKLCH values (L in [0, 1], C >= 0)."""
        if not (0.0 <= L <= 1.0):
            raise InvalidColorError((L, C, h), "L must be in [0, 1]")
        if C < 0.0:
            raise InvalidColorError((L, C, h), "C must be non-negative")
        return cls(_mode="oklch", _value=(float(L), float(C), float(h)))

    @classmethod
    def from_srgb(cls, r: float, g: float, b: float) -> "ColorInput":
        """Create ColorInput from sRGB values in [0, 1]."""
        for name, v in (("r", r), ("g", g), ("b", b)):
            if not (0.0 <= v <= 1.0):
                raise InvalidColorError((r, g, b), f"{name} must be in [0, 1]")
        return cls(_mode="srgb", _value=(float(r), float(g), float(b)))

    @classmethod
    def from_hex(cls, hex_str: str) -> "ColorInput":
        """Create ColorInput from a hex string (#rgb, #rrggbb or rrggbb)."""
        if not isinstance(hex_str, str) or "(" in hex_str:
            raise InvalidColorError(hex_str, "expected a hex string")
        return cls.parse(hex_str)

    @classmethod
    def parse(cls, value: str) -> "ColorInput":
        """Create ColorInput from any supported color string."""
        try:
            space, coords = parse_color_str(value)
        except ValueError as exc:
            raise InvalidColorError(value, str(exc)) from exc
        return cls(_mode=space, _value=coords)

    def to_oklch(self, engine: ColorEngine | None = None) -> OKLCH:
        """Convert the input into OKLCH using the given ColorEngine."""
        return self.to_color(engine).oklch

    def to_color(self, engine: ColorEngine | None = None) -> Color:
        """Resolve the input into a concrete :class:`Color`."""
        engine = engine or DEFAULT_ENGINE
        if self._mode == "oklch":
            L, C, h = self._value
            return Color.from_oklch(L, C, h, engine)
        if self._mode == "srgb":
            return Color.from_srgb(*self._value, engine=engine)
        raise RuntimeError(f"Unknown ColorInput mode: {self._mode}")


ColorLike = Union[Color, ColorInput, str, Sequence[float]]


def as_color(value: ColorLike, engine: ColorEngine | None = None) -> Color:
    """Coerce any supported color value into a :class:`Color`.

    Raises
    ------
    InvalidColorError
        If ``value`` cannot be interpreted as a color.
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, ColorInput):
        return value.to_color(engine)
    if isinstance(value, str):
        return ColorInput.parse(value).to_color(engine)
    if isinstance(value, (tuple, list)):
        try:
            rgb = normalize_rgb(value)
        except ValueError as exc:
            raise InvalidColorError(value, str(exc)) from exc
        return Color.from_srgb(*rgb, engine=engine)
    raise InvalidColorError(value, f"unsupported color type {type(value).__name__}")


def to_perceptual(color: ColorLike) -> OKLCH:
    """Return the (L, C, h) OKLCH coordinates of ``color``."""
    return as_color(color).oklch


def to_hex(oklch: OKLCH | Color) -> str:
    """Return "#rrggbb" for an OKLCH triple (or an existing color value).

    Out-of-gamut or out-of-range OKLCH values are mapped into sRGB, so this
    never fails for numeric input.
    """
    if isinstance(oklch, (Color, ColorInput, str)):
        return as_color(oklch).hex
    L, C, h = oklch
    return Color.from_oklch(float(L), float(C), float(h)).hex


def to_rgb(color: ColorLike) -> Tuple[int, int, int]:
    """Return (r, g, b) as 0–255 integers."""
    return to_u8_rgb(as_color(color).srgb)


def to_hsl(color: ColorLike) -> Tuple[float, float, float]:
    """Return (h, s, l) with hue in degrees and s/l in percent."""
    r, g, b = as_color(color).srgb
    h, light, sat = colorsys.rgb_to_hls(r, g, b)
    return (h * 360.0, sat * 100.0, light * 100.0)


def adjust_lightness(color: ColorLike, lightness: float) -> Color:
    """Return ``color`` with its OKLCH lightness replaced (clamped to [0, 1])."""
    _, C, h = as_color(color).oklch
    return Color.from_oklch(max(0.0, min(1.0, lightness)), C, h)


def adjust_chroma(color: ColorLike, chroma: float) -> Color:
    """Return ``color`` with its OKLCH chroma replaced (gamut mapped)."""
    L, _, h = as_color(color).oklch
    return Color.from_oklch(L, max(0.0, chroma), h)


__all__ = [
    "Color",
    "ColorInput",
    "ColorLike",
    "as_color",
    "to_perceptual",
    "to_hex",
    "to_rgb",
    "to_hsl",
    "adjust_lightness",
    "adjust_chroma",
]
