from __future__ import annotations

"""Token system assembly.

Combines primitive scales, semantic/surface/utility tokens for the
requested modes, and the non-color scales (spacing, radii, typography,
shadows, border colors, layout) into a :class:`TokenSystem`.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Mapping, Optional, Sequence, Tuple

from .color_types import Color, ColorLike
from .primitives import BrandColors, PrimitivePalette, generate_primitive_palette
from .semantic import (
    MODES,
    Mode,
    SemanticTokens,
    SurfaceTokens,
    UtilityTokens,
    check_semantic_contrast,
    generate_semantic_tokens,
    generate_surface_tokens,
    generate_utility_tokens,
)
from .tuning import Tuning

ModeSelection = Literal["light", "dark", "both"]

SPACING_MULTIPLIERS: Tuple[float, ...] = (
    0, 0.5, 1, 1.5, 2, 2.5, 3, 3.5, 4, 5, 6, 7, 8, 9, 10, 11, 12, 14, 16, 20,
    24, 28, 32, 36, 40, 44, 48, 52, 56, 60, 64, 72, 80, 96,
)

DEFAULT_TYPOGRAPHY: Dict[str, Any] = {
    "fontFamily": {
        "sans": ["Inter", "system-ui", "sans-serif"],
        "mono": ["JetBrains Mono", "monospace"],
    },
    "fontSize": {
        "xs": ["0.75rem", {"lineHeight": "1rem"}],
        "sm": ["0.875rem", {"lineHeight": "1.25rem"}],
        "base": ["1rem", {"lineHeight": "1.5rem"}],
        "lg": ["1.125rem", {"lineHeight": "1.75rem"}],
        "xl": ["1.25rem", {"lineHeight": "1.75rem"}],
        "2xl": ["1.5rem", {"lineHeight": "2rem"}],
        "3xl": ["1.875rem", {"lineHeight": "2.25rem"}],
        "4xl": ["2.25rem", {"lineHeight": "2.5rem"}],
        "5xl": ["3rem", {"lineHeight": "1"}],
        "6xl": ["3.75rem", {"lineHeight": "1"}],
    },
    "fontWeight": {
        "thin": 100,
        "extralight": 200,
        "light": 300,
        "normal": 400,
        "medium": 500,
        "semibold": 600,
        "bold": 700,
        "extrabold": 800,
        "black": 900,
    },
}

DEFAULT_RADII: Dict[str, str] = {
    "xs": "0.125rem",
    "sm": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "4xl": "2rem",
}

_DEFAULT_SHADOWS: Dict[str, str] = {
    "2xs": "0 1px rgb(0 0 0 / 0.05)",
    "xs": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "sm": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    "2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
}

_BREAKPOINTS: Dict[str, str] = {
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}


def _num(value: float) -> str:
    """Render a number without a trailing ``.0``."""
    value = round(float(value), 4)
    if value == int(value):
        return str(int(value))
    return repr(value)


def _modes(mode: str) -> Tuple[Mode, ...]:
    if mode == "both":
        return MODES
    if mode in MODES:
        return (mode,)  # type: ignore[return-value]
    raise ValueError(f"mode must be 'light', 'dark' or 'both', got {mode!r}")


def generate_spacing_scale(base_unit: float = 4) -> Dict[str, str]:
    """Spacing scale in rem from a pixel base unit (16px = 1rem)."""
    if base_unit <= 0:
        raise ValueError("base_unit must be positive")
    spacing: Dict[str, str] = {}
    for mult in SPACING_MULTIPLIERS:
        px = mult * base_unit
        spacing[_num(mult)] = "0" if px == 0 else f"{_num(px / 16)}rem"
    return spacing


def generate_radii_scale(base_radius: float = 0.25) -> Dict[str, str]:
    """Border radius scale in rem from the ``sm`` radius."""
    if base_radius < 0:
        raise ValueError("base_radius must be non-negative")
    factors = {"xs": 0.5, "sm": 1, "md": 1.5, "lg": 2, "xl": 3, "2xl": 4, "3xl": 6, "4xl": 8}
    return {name: f"{_num(round(base_radius * f, 3))}rem" for name, f in factors.items()}


def generate_shadows() -> Dict[str, Dict[str, str]]:
    return {"light": dict(_DEFAULT_SHADOWS), "dark": dict(_DEFAULT_SHADOWS)}


def generate_shadows_with_intensity(intensity: float = 1.0) -> Dict[str, Dict[str, str]]:
    """Shadows whose opacities scale with ``intensity`` (dark mode is heavier)."""
    if intensity < 0:
        raise ValueError("intensity must be non-negative")

    def rgba(alpha: float) -> str:
        return f"rgba(0, 0, 0, {alpha * intensity:.2f})"

    def build(sm: float, base: float, xl2: float, inner: float) -> Dict[str, str]:
        return {
            "sm": f"0 1px 2px 0 {rgba(sm)}",
            "md": f"0 4px 6px -1px {rgba(base)}, 0 2px 4px -2px {rgba(base)}",
            "lg": f"0 10px 15px -3px {rgba(base)}, 0 4px 6px -4px {rgba(base)}",
            "xl": f"0 20px 25px -5px {rgba(base)}, 0 8px 10px -6px {rgba(base)}",
            "2xl": f"0 25px 50px -12px {rgba(xl2)}",
            "inner": f"inset 0 2px 4px 0 {rgba(inner)}",
        }

    return {"light": build(0.05, 0.1, 0.25, 0.05), "dark": build(0.3, 0.4, 0.5, 0.3)}


@dataclass(frozen=True)
class ShadowSettings:
    offset_x: float = 0.0
    offset_y: float = 4.0
    blur: float = 6.0
    spread: float = 0.0
    opacity: float = 0.1


_SHADOW_STEPS: Dict[str, Tuple[float, float, float]] = {
    # name: (offset factor, blur factor, spread factor)
    "sm": (0.25, 0.5, 0.0),
    "md": (1.0, 1.5, -0.25),
    "lg": (2.5, 3.75, -0.75),
    "xl": (5.0, 6.25, -1.25),
    "2xl": (6.25, 12.5, -3.0),
}


def generate_shadows_with_settings(settings: ShadowSettings) -> Dict[str, Dict[str, str]]:
    """Shadows derived from one set of offset/blur/spread/opacity settings."""
    out: Dict[str, Dict[str, str]] = {}
    for mode, opacity_factor, inner_factor in (("light", 1.0, 0.5), ("dark", 1.5, 0.75)):
        alpha = settings.opacity * opacity_factor
        shadows: Dict[str, str] = {}
        for name, (k_off, k_blur, k_spread) in _SHADOW_STEPS.items():
            shadows[name] = (
                f"{_num(settings.offset_x * k_off)}px {_num(settings.offset_y * k_off)}px "
                f"{_num(settings.blur * k_blur)}px {_num(settings.spread * k_spread)}px "
                f"rgba(0, 0, 0, {alpha:.2f})"
            )
        shadows["inner"] = (
            f"inset 0 {_num(settings.offset_y * 0.5)}px {_num(settings.blur)}px 0 "
            f"rgba(0, 0, 0, {settings.opacity * inner_factor:.2f})"
        )
        out[mode] = shadows
    return out


def generate_border_colors(primitives: Mapping[str, Any]) -> Dict[str, Dict[str, Color]]:
    """Default/input/ring border colors from the neutral scale."""
    neutral = primitives["neutral"]
    return {
        "light": {"default": neutral[30], "input": neutral[40], "ring": neutral[60]},
        "dark": {"default": neutral[80], "input": neutral[70], "ring": neutral[60]},
    }


def generate_layout_tokens() -> Dict[str, Dict[str, str]]:
    return {"breakpoints": dict(_BREAKPOINTS), "containers": dict(_BREAKPOINTS)}


@dataclass(frozen=True)
class TokenSystem:
    """Complete generated token set. Color values are :class:`Color`."""

    primitives: PrimitivePalette
    semantic: Dict[str, SemanticTokens]
    surface: Dict[str, SurfaceTokens]
    utility: Dict[str, UtilityTokens]
    spacing: Dict[str, str] = field(default_factory=generate_spacing_scale)
    typography: Dict[str, Any] = field(default_factory=lambda: copy.deepcopy(DEFAULT_TYPOGRAPHY))
    radii: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_RADII))
    shadows: Dict[str, Dict[str, str]] = field(default_factory=generate_shadows)
    border_colors: Dict[str, Dict[str, Color]] = field(default_factory=dict)
    layout: Dict[str, Dict[str, str]] = field(default_factory=generate_layout_tokens)

    @property
    def modes(self) -> Tuple[str, ...]:
        return tuple(self.semantic)

    def to_dict(self) -> Dict[str, Any]:
        """Plain JSON-compatible data; colors become hex strings."""
        return {
            "primitives": {
                role: {str(k): v for k, v in scale.hex().items()}
                for role, scale in self.primitives.items()
            },
            "semantic": {mode: tokens.to_dict() for mode, tokens in self.semantic.items()},
            "surface": {mode: tokens.to_dict() for mode, tokens in self.surface.items()},
            "utility": {mode: tokens.to_dict() for mode, tokens in self.utility.items()},
            "spacing": dict(self.spacing),
            "typography": self.typography,
            "radii": dict(self.radii),
            "shadows": {mode: dict(values) for mode, values in self.shadows.items()},
            "borderColors": {
                mode: {name: color.hex for name, color in values.items()}
                for mode, values in self.border_colors.items()
            },
            "layout": self.layout,
        }

    def contrast_report(self) -> Dict[str, Dict[str, Any]]:
        """Per-mode contrast checks for every semantic pair."""
        return {
            mode: {key: check.to_dict() for key, check in check_semantic_contrast(tokens).items()}
            for mode, tokens in self.semantic.items()
        }


def generate_tokens(
    brand_colors: BrandColors | Mapping[str, ColorLike],
    mode: ModeSelection = "both",
    additional_colors: Sequence[ColorLike] = (),
    tuning: Optional[Tuning] = None,
) -> TokenSystem:
    """Generate a complete token system from brand colors.

    Parameters
    ----------
    brand_colors:
        :class:`BrandColors` or a mapping with ``primary`` and optional
        ``secondary``.
    mode:
        ``"light"``, ``"dark"`` or ``"both"``; limits which modes get
        semantic, surface and utility tokens.
    additional_colors:
        Extra colors added to the primitives as ``custom1`` … ``customN``.
    tuning:
        Coefficients for scale generation and derivation.
    """
    modes = _modes(mode)
    primitives = generate_primitive_palette(brand_colors, additional_colors, tuning)
    return TokenSystem(
        primitives=primitives,
        semantic={m: generate_semantic_tokens(primitives, m, tuning) for m in modes},
        surface={m: generate_surface_tokens(primitives, m) for m in modes},
        utility={m: generate_utility_tokens(primitives, m) for m in modes},
        border_colors=generate_border_colors(primitives),
    )


def get_semantic_for_mode(token_system: TokenSystem, mode: Mode) -> SemanticTokens:
    try:
        return token_system.semantic[mode]
    except KeyError:
        raise ValueError(f"token system has no {mode!r} mode (has {token_system.modes})") from None


__all__ = [
    "ModeSelection",
    "DEFAULT_TYPOGRAPHY",
    "DEFAULT_RADII",
    "ShadowSettings",
    "TokenSystem",
    "generate_spacing_scale",
    "generate_radii_scale",
    "generate_shadows",
    "generate_shadows_with_intensity",
    "generate_shadows_with_settings",
    "generate_border_colors",
    "generate_layout_tokens",
    "generate_tokens",
    "get_semantic_for_mode",
]
