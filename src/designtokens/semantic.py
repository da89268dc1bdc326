from __future__ import annotations

"""Semantic token generation.

Maps primitive scales to meaningful roles per color mode. Foregrounds are
chosen with :func:`designtokens.contrast.pick_foreground` between the
neutral scale's lightest and darkest shades; shortfalls against WCAG AA
are reported by :func:`check_semantic_contrast`, never raised.
"""

from dataclasses import dataclass
from typing import Dict, Literal, Mapping, Optional, Tuple

from .color_types import Color
from .contrast import contrast_ratio, meets_aa, meets_aaa, pick_foreground
from .errors import MissingPaletteRoleError
from .scale import ColorScale
from .tuning import DEFAULT_TUNING, ShadePicks, Tuning

Mode = Literal["light", "dark"]
MODES: Tuple[Mode, ...] = ("light", "dark")
SEMANTIC_ROLES: Tuple[str, ...] = ("primary", "secondary", "success", "warning", "destructive")


def _check_mode(mode: str) -> Mode:
    if mode not in MODES:
        raise ValueError(f"mode must be 'light' or 'dark', got {mode!r}")
    return mode  # type: ignore[return-value]


def _require(palette: Mapping[str, ColorScale], *roles: str) -> None:
    for role in roles:
        if role not in palette:
            raise MissingPaletteRoleError(role, tuple(palette))


@dataclass(frozen=True)
class SemanticColor:
    """Background slots and their foregrounds for one role in one mode."""

    base: Color
    muted: Color
    accent: Color
    on_base: Color
    on_muted: Color
    on_accent: Color

    def pairs(self) -> Dict[str, Tuple[Color, Color]]:
        """``{slot: (background, foreground)}``."""
        return {
            "base": (self.base, self.on_base),
            "muted": (self.muted, self.on_muted),
            "accent": (self.accent, self.on_accent),
        }

    def to_dict(self) -> Dict[str, str]:
        return {
            "base": self.base.hex,
            "muted": self.muted.hex,
            "accent": self.accent.hex,
            "onBase": self.on_base.hex,
            "onMuted": self.on_muted.hex,
            "onAccent": self.on_accent.hex,
        }


@dataclass(frozen=True)
class SemanticTokens:
    mode: Mode
    primary: SemanticColor
    secondary: SemanticColor
    success: SemanticColor
    warning: SemanticColor
    destructive: SemanticColor

    def roles(self) -> Dict[str, SemanticColor]:
        return {role: getattr(self, role) for role in SEMANTIC_ROLES}

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {role: color.to_dict() for role, color in self.roles().items()}


@dataclass(frozen=True)
class SurfaceTokens:
    background: Color
    foreground: Color
    card: Color
    card_foreground: Color
    popover: Color
    popover_foreground: Color

    def to_dict(self) -> Dict[str, str]:
        return {
            "background": self.background.hex,
            "foreground": self.foreground.hex,
            "card": self.card.hex,
            "card-foreground": self.card_foreground.hex,
            "popover": self.popover.hex,
            "popover-foreground": self.popover_foreground.hex,
        }


@dataclass(frozen=True)
class UtilityTokens:
    border: Color
    input: Color
    ring: Color

    def to_dict(self) -> Dict[str, str]:
        return {"border": self.border.hex, "input": self.input.hex, "ring": self.ring.hex}


@dataclass(frozen=True)
class ContrastCheck:
    ratio: float
    passes_aa: bool
    passes_aaa: bool

    def to_dict(self) -> Dict[str, object]:
        return {"ratio": self.ratio, "passesAA": self.passes_aa, "passesAAA": self.passes_aaa}


def assign_semantic_color(
    scale: ColorScale,
    neutral: ColorScale,
    picks: ShadePicks,
) -> SemanticColor:
    """Build one role's SemanticColor from its scale and the neutral scale."""
    light_fg, dark_fg = neutral.lightest, neutral.darkest
    base, muted, accent = scale[picks.base], scale[picks.muted], scale[picks.accent]
    return SemanticColor(
        base=base,
        muted=muted,
        accent=accent,
        on_base=pick_foreground(base, light_fg, dark_fg),
        on_muted=pick_foreground(muted, light_fg, dark_fg),
        on_accent=pick_foreground(accent, light_fg, dark_fg),
    )


def generate_semantic_tokens(
    palette: Mapping[str, ColorScale],
    mode: Mode,
    tuning: Optional[Tuning] = None,
) -> SemanticTokens:
    """Generate semantic tokens for one mode.

    Raises
    ------
    MissingPaletteRoleError
        If ``palette`` lacks ``neutral`` or any semantic role.
    ValueError
        If ``mode`` is not ``"light"`` or ``"dark"``.
    """
    mode = _check_mode(mode)
    tuning = tuning or DEFAULT_TUNING
    _require(palette, "neutral", *SEMANTIC_ROLES)
    picks = tuning.semantic.light if mode == "light" else tuning.semantic.dark
    neutral = palette["neutral"]
    colors = {role: assign_semantic_color(palette[role], neutral, picks) for role in SEMANTIC_ROLES}
    return SemanticTokens(mode=mode, **colors)


def generate_surface_tokens(palette: Mapping[str, ColorScale], mode: Mode) -> SurfaceTokens:
    """Page/card/popover surfaces from the neutral scale."""
    mode = _check_mode(mode)
    _require(palette, "neutral")
    neutral = palette["neutral"]
    if mode == "light":
        return SurfaceTokens(
            background=neutral[10],
            foreground=neutral[100],
            card=neutral[10],
            card_foreground=neutral[100],
            popover=neutral[10],
            popover_foreground=neutral[100],
        )
    return SurfaceTokens(
        background=neutral[100],
        foreground=neutral[10],
        card=neutral[90],
        card_foreground=neutral[10],
        popover=neutral[90],
        popover_foreground=neutral[10],
    )


def generate_utility_tokens(palette: Mapping[str, ColorScale], mode: Mode) -> UtilityTokens:
    """Border, input and focus-ring colors."""
    mode = _check_mode(mode)
    _require(palette, "neutral", "primary")
    neutral, primary = palette["neutral"], palette["primary"]
    if mode == "light":
        return UtilityTokens(border=neutral[30], input=neutral[30], ring=primary[40])
    return UtilityTokens(border=neutral[80], input=neutral[80], ring=primary[50])


def check_semantic_contrast(tokens: SemanticTokens) -> Dict[str, ContrastCheck]:
    """Contrast of every background/foreground pair, keyed ``"role/slot"``."""
    results: Dict[str, ContrastCheck] = {}
    for role, color in tokens.roles().items():
        for slot, (background, foreground) in color.pairs().items():
            ratio = contrast_ratio(background, foreground)
            results[f"{role}/{slot}"] = ContrastCheck(
                ratio=round(ratio, 2),
                passes_aa=meets_aa(ratio),
                passes_aaa=meets_aaa(ratio),
            )
    return results


__all__ = [
    "Mode",
    "MODES",
    "SEMANTIC_ROLES",
    "SemanticColor",
    "SemanticTokens",
    "SurfaceTokens",
    "UtilityTokens",
    "ContrastCheck",
    "assign_semantic_color",
    "generate_semantic_tokens",
    "generate_surface_tokens",
    "generate_utility_tokens",
    "check_semantic_contrast",
]
