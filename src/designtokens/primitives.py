from __future__ import annotations

"""Primitive color palette generation.

A :class:`PrimitivePalette` maps role names to :class:`ColorScale`. It is
rebuilt from scratch for every brand-color input.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union

from .color_types import Color, ColorLike, as_color
from .errors import MissingPaletteRoleError
from .harmony import (
    derive_destructive,
    derive_neutral,
    derive_secondary,
    derive_success,
    derive_warning,
)
from .scale import ColorScale, generate_color_scale
from .tuning import DEFAULT_TUNING, Tuning

REQUIRED_ROLES: Tuple[str, ...] = (
    "primary",
    "secondary",
    "neutral",
    "success",
    "warning",
    "destructive",
)


@dataclass(frozen=True)
class BrandColors:
    """Brand input: a primary color and an optional secondary color."""

    primary: ColorLike
    secondary: Optional[ColorLike] = None

    @classmethod
    def coerce(cls, value: "BrandColors | Mapping[str, ColorLike]") -> "BrandColors":
        if isinstance(value, BrandColors):
            return value
        if isinstance(value, Mapping):
            if "primary" not in value:
                raise ValueError("brand colors require a 'primary' color")
            return cls(primary=value["primary"], secondary=value.get("secondary"))
        raise TypeError(f"expected BrandColors or mapping, got {type(value).__name__}")


class PrimitivePalette(Mapping[str, ColorScale]):
    """Read-only mapping from role name to :class:`ColorScale`."""

    __slots__ = ("_scales",)

    def __init__(self, scales: Mapping[str, ColorScale]) -> None:
        self._scales = MappingProxyType(dict(scales))

    def __getitem__(self, role: str) -> ColorScale:
        try:
            return self._scales[role]
        except KeyError:
            raise MissingPaletteRoleError(role, tuple(self._scales)) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._scales)

    def __len__(self) -> int:
        return len(self._scales)

    def __repr__(self) -> str:
        return f"PrimitivePalette({', '.join(self._scales)})"

    def require(self, *roles: str) -> None:
        """Raise :class:`MissingPaletteRoleError` for the first absent role."""
        for role in roles:
            if role not in self._scales:
                raise MissingPaletteRoleError(role, tuple(self._scales))

    def hex(self) -> Dict[str, Dict[int, str]]:
        return {role: scale.hex() for role, scale in self._scales.items()}


def derive_base_colors(
    brand_colors: BrandColors | Mapping[str, ColorLike],
    tuning: Optional[Tuning] = None,
) -> Dict[str, Color]:
    """Resolve the reference color of every required role."""
    tuning = tuning or DEFAULT_TUNING
    brand = BrandColors.coerce(brand_colors)
    primary = as_color(brand.primary)
    if brand.secondary is None:
        secondary = derive_secondary(primary, tuning=tuning)
    else:
        secondary = as_color(brand.secondary)
    return {
        "primary": primary,
        "secondary": secondary,
        "neutral": derive_neutral(primary, tuning),
        "success": derive_success(primary, tuning),
        "warning": derive_warning(primary, tuning),
        "destructive": derive_destructive(primary, tuning),
    }


def generate_primitive_palette(
    brand_colors: BrandColors | Mapping[str, ColorLike],
    additional_colors: Sequence[ColorLike] = (),
    tuning: Optional[Tuning] = None,
) -> PrimitivePalette:
    """Generate a complete primitive palette from brand colors.

    Roles: primary, secondary (derived when not given), neutral, success,
    warning, destructive, plus ``custom1`` … ``customN`` for
    ``additional_colors``. Each scale's shade 50 is its role color.
    """
    tuning = tuning or DEFAULT_TUNING
    scales: Dict[str, ColorScale] = {
        role: generate_color_scale(color, tuning)
        for role, color in derive_base_colors(brand_colors, tuning).items()
    }
    for index, color in enumerate(additional_colors, start=1):
        scales[f"custom{index}"] = generate_color_scale(color, tuning)
    return PrimitivePalette(scales)


def get_shade(palette: Mapping[str, ColorScale], role: str, shade: Union[int, str]) -> Color:
    """Get a specific shade from a palette role."""
    if role not in palette:
        raise MissingPaletteRoleError(role, tuple(palette))
    scale = palette[role]
    key = int(shade)
    if key not in scale:
        raise KeyError(f"shade {shade!r} not in scale (expected one of {tuple(scale)})")
    return scale[key]


__all__ = [
    "REQUIRED_ROLES",
    "BrandColors",
    "PrimitivePalette",
    "derive_base_colors",
    "generate_primitive_palette",
    "get_shade",
]
