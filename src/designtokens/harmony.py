from __future__ import annotations

"""Derive secondary and semantic role colors from a primary color.

Each semantic role (success, warning, destructive) has a fixed hue band
center. The derived hue is nudged toward the primary's hue by at most
``max_hue_nudge`` degrees so the role colors feel related to the brand,
and lightness/chroma are role constants blended lightly toward the
primary. All derivers are total over valid colors.
"""

import math
from enum import Enum
from typing import Optional

from .color_types import Color, ColorLike, as_color
from .engine import DEFAULT_ENGINE
from .tuning import DEFAULT_TUNING, HARMONY_OFFSETS, RoleTarget, Tuning


class HarmonyType(Enum):
    """Geometric hue relationships used to derive a secondary color."""

    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split_complementary"
    COMPLEMENTARY = "complementary"

    @property
    def hue_offset(self) -> float:
        return HARMONY_OFFSETS[self.value]


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def hue_nudge(primary_hue: float, target_hue: float, max_nudge: float) -> float:
    """Signed offset (degrees) that pulls ``target_hue`` toward ``primary_hue``.

    Proportional to the sine of the angular difference, so the nudge is
    zero for identical or opposite hues and never exceeds ``max_nudge``.
    """
    return max_nudge * math.sin(math.radians(primary_hue - target_hue))


def _derive_role(primary: Color, role: RoleTarget, tuning: Tuning) -> Color:
    L0, C0, h0 = primary.oklch
    cfg = tuning.derive
    w = cfg.harmony_weight

    if C0 < tuning.scale.achromatic_threshold:
        nudge = 0.0
    else:
        nudge = hue_nudge(h0, role.hue, cfg.max_hue_nudge)
    hue = DEFAULT_ENGINE.normalize_hue(role.hue + nudge)
    lightness = _clamp((1.0 - w) * role.lightness + w * L0, 0.2, 0.9)
    chroma = _clamp((1.0 - w) * role.chroma + w * C0, role.chroma_floor, role.chroma_max)
    return Color.from_oklch(lightness, chroma, hue)


def derive_success(primary: ColorLike, tuning: Optional[Tuning] = None) -> Color:
    """Green success color harmonized with ``primary``."""
    tuning = tuning or DEFAULT_TUNING
    return _derive_role(as_color(primary), tuning.derive.success, tuning)


def derive_warning(primary: ColorLike, tuning: Optional[Tuning] = None) -> Color:
    """Amber warning color harmonized with ``primary``."""
    tuning = tuning or DEFAULT_TUNING
    return _derive_role(as_color(primary), tuning.derive.warning, tuning)


def derive_destructive(primary: ColorLike, tuning: Optional[Tuning] = None) -> Color:
    """Red destructive color harmonized with ``primary``."""
    tuning = tuning or DEFAULT_TUNING
    return _derive_role(as_color(primary), tuning.derive.destructive, tuning)


def derive_secondary(
    primary: ColorLike,
    harmony: HarmonyType | str | None = None,
    tuning: Optional[Tuning] = None,
) -> Color:
    """Secondary brand color by hue rotation from ``primary``.

    Lightness is kept; chroma is scaled by ``secondary_chroma_factor`` with
    a floor so gray primaries still get a visible secondary.
    """
    tuning = tuning or DEFAULT_TUNING
    cfg = tuning.derive
    if harmony is None:
        harmony = cfg.secondary_harmony
    harmony_type = harmony if isinstance(harmony, HarmonyType) else HarmonyType(harmony)

    L0, C0, h0 = as_color(primary).oklch
    chroma = max(cfg.secondary_chroma_floor, C0 * cfg.secondary_chroma_factor)
    return Color.from_oklch(L0, chroma, h0 + harmony_type.hue_offset)


def derive_neutral(primary: ColorLike, tuning: Optional[Tuning] = None) -> Color:
    """Near-gray neutral tinted with the primary's hue.

    The chroma stays below the achromatic threshold so the neutral scale
    uses the neutral profile.
    """
    tuning = tuning or DEFAULT_TUNING
    cfg = tuning.derive
    _, C0, h0 = as_color(primary).oklch
    chroma = min(cfg.neutral_chroma, C0, tuning.scale.achromatic_threshold * 0.9)
    return Color.from_oklch(cfg.neutral_lightness, chroma, h0)


__all__ = [
    "HarmonyType",
    "hue_nudge",
    "derive_secondary",
    "derive_success",
    "derive_warning",
    "derive_destructive",
    "derive_neutral",
]
