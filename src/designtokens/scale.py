from __future__ import annotations

"""Ten-step perceptual shade scales.

:func:`generate_color_scale` expands one base color into shades keyed
10 … 100 (lightest to darkest). Shade 50 is the base color itself.
Colors whose OKLCH chroma is below the achromatic threshold use the
neutral profile; all others use the chromatic profile. Both profiles are
data (:class:`designtokens.tuning.ScaleProfile`), the algorithm is shared.
"""

from typing import Dict, Iterator, List, Literal, Mapping, Tuple

import numpy as np

from .color_types import Color, ColorLike, as_color
from .tuning import (
    DARK_KEYS,
    DEFAULT_TUNING,
    LIGHT_KEYS,
    REFERENCE_SHADE,
    SHADE_KEYS,
    ScaleProfile,
    Tuning,
)

ProfileName = Literal["chromatic", "neutral"]

# Position of the reference key on the 0 (lightest) .. 1 (darkest) axis.
_T_REF = SHADE_KEYS.index(REFERENCE_SHADE) / (len(SHADE_KEYS) - 1)


class ColorScale(Mapping[int, Color]):
    """Immutable mapping from the ten shade keys to :class:`Color`."""

    __slots__ = ("_shades", "_profile")

    def __init__(self, shades: Mapping[int, Color], profile: ProfileName = "chromatic") -> None:
        keys = tuple(sorted(shades))
        if keys != SHADE_KEYS:
            raise ValueError(f"ColorScale requires exactly the keys {SHADE_KEYS}, got {keys}")
        self._shades: Dict[int, Color] = {k: shades[k] for k in SHADE_KEYS}
        self._profile: ProfileName = profile

    def __getitem__(self, key: int) -> Color:
        return self._shades[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._shades)

    def __len__(self) -> int:
        return len(self._shades)

    def __repr__(self) -> str:
        body = ", ".join(f"{k}: {c.hex}" for k, c in self._shades.items())
        return f"ColorScale({self._profile}; {body})"

    @property
    def profile(self) -> ProfileName:
        """Which lightness/chroma profile produced this scale."""
        return self._profile

    @property
    def reference(self) -> Color:
        return self._shades[REFERENCE_SHADE]

    @property
    def lightest(self) -> Color:
        return self._shades[SHADE_KEYS[0]]

    @property
    def darkest(self) -> Color:
        return self._shades[SHADE_KEYS[-1]]

    def hex(self) -> Dict[int, str]:
        """Return ``{shade: "#rrggbb"}`` in key order."""
        return {k: c.hex for k, c in self._shades.items()}


def select_profile(chroma: float, tuning: Tuning = DEFAULT_TUNING) -> Tuple[ProfileName, ScaleProfile]:
    """Pick the neutral profile below the achromatic threshold, else chromatic."""
    if chroma < tuning.scale.achromatic_threshold:
        return "neutral", tuning.scale.neutral
    return "chromatic", tuning.scale.chromatic


def lightness_targets(base_lightness: float, profile: ScaleProfile) -> Dict[int, float]:
    """Target OKLCH lightness per shade key for a base lightness.

    Light keys move from the base toward ``profile.light_anchor`` and dark
    keys toward ``profile.dark_anchor`` by the profile's fractions. If the
    base lies outside the anchors, that side collapses onto the base.
    """
    top = max(profile.light_anchor, base_lightness)
    bottom = min(profile.dark_anchor, base_lightness)
    light = base_lightness + (top - base_lightness) * np.asarray(profile.light_fractions)
    dark = base_lightness - (base_lightness - bottom) * np.asarray(profile.dark_fractions)

    targets: Dict[int, float] = dict(zip(LIGHT_KEYS, (float(v) for v in light)))
    targets[REFERENCE_SHADE] = float(base_lightness)
    targets.update(zip(DARK_KEYS, (float(v) for v in dark)))
    return targets


def chroma_multiplier(t: float, profile: ScaleProfile) -> float:
    """Chroma multiplier at scale position ``t`` (0 lightest, 1 darkest).

    Each side is a parabola that peaks at the reference position and
    falls to the side's floor at the extreme.
    """
    if t <= _T_REF:
        u = t / _T_REF
        floor = profile.chroma_light_floor
    else:
        u = (1.0 - t) / (1.0 - _T_REF)
        floor = profile.chroma_dark_floor
    return floor + (profile.chroma_peak - floor) * (1.0 - (1.0 - u) ** 2)


def generate_color_scale(base_color: ColorLike, tuning: Tuning | None = None) -> ColorScale:
    """Generate a ten-step scale from ``base_color``.

    Parameters
    ----------
    base_color:
        Any color accepted by :func:`designtokens.color_types.as_color`.
    tuning:
        Coefficients to use; defaults to :data:`DEFAULT_TUNING`.

    Returns
    -------
    ColorScale
        Shades keyed 10 … 100. Shade 50 is the parsed input color.

    Raises
    ------
    InvalidColorError
        If ``base_color`` cannot be parsed.
    """
    tuning = tuning or DEFAULT_TUNING
    base = as_color(base_color)
    L0, C0, h0 = base.oklch
    name, profile = select_profile(C0, tuning)
    targets = lightness_targets(L0, profile)

    hue_shift = tuning.scale.hue_shift if tuning.scale.hue_shift_enabled and name == "chromatic" else 0.0
    light_span = max(profile.light_anchor - L0, 1e-9)

    shades: Dict[int, Color] = {}
    last = len(SHADE_KEYS) - 1
    for i, key in enumerate(SHADE_KEYS):
        if key == REFERENCE_SHADE:
            shades[key] = base
            continue
        L = targets[key]
        if profile.keep_base_chroma:
            C = C0
        else:
            C = C0 * chroma_multiplier(i / last, profile)
        # Bezold–Brücke: lighter tints get a small warm hue rotation.
        h = h0 + hue_shift * max(0.0, min(1.0, (L - L0) / light_span))
        shades[key] = Color.from_oklch(L, max(0.0, C), h)
    return ColorScale(shades, profile=name)


def scale_lightness(scale: ColorScale) -> List[float]:
    """OKLCH lightness of each shade, in key order (lightest first)."""
    return [scale[k].lightness for k in SHADE_KEYS]


__all__ = [
    "ColorScale",
    "SHADE_KEYS",
    "REFERENCE_SHADE",
    "select_profile",
    "lightness_targets",
    "chroma_multiplier",
    "generate_color_scale",
    "scale_lightness",
]
