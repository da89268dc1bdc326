from __future__ import annotations

"""sRGB gamut handling utilities for OKLCH colors.

This module converts OKLCH colors into the sRGB gamut by shrinking chroma
at constant lightness and hue until the color falls inside [0, 1]^3.
"""

from typing import Tuple

from .engine import OKLCH, ColorEngine

# Tolerance for float noise at the cube faces (well below one 8-bit step).
_GAMUT_EPS = 1e-6


def to_srgb_gamut_safe(
    engine: ColorEngine,
    L: float,
    C: float,
    h: float,
    max_iter: int = 24,
) -> Tuple[float, float, float, OKLCH]:
    """Convert OKLCH to in-gamut sRGB, reducing C until within gamut.

    Chroma is found by bisection between 0 (always in gamut for
    L in [0, 1]) and the requested value, so hue and lightness are kept.

    Returns (r, g, b, (L_adj, C_adj, h_adj)).
    """
    L = max(0.0, min(1.0, L))
    C = max(0.0, C)
    h_norm = engine.normalize_hue(h)

    r, g, b = engine.oklch_to_srgb(L, C, h_norm)
    if _in_gamut(r, g, b):
        return _clip01(r), _clip01(g), _clip01(b), (L, C, h_norm)

    lo, hi = 0.0, C
    for _ in range(max_iter):
        mid = (lo + hi) / 2.0
        if _in_gamut(*engine.oklch_to_srgb(L, mid, h_norm)):
            lo = mid
        else:
            hi = mid

    r, g, b = engine.oklch_to_srgb(L, lo, h_norm)
    return _clip01(r), _clip01(g), _clip01(b), (L, lo, h_norm)


def in_srgb_gamut(engine: ColorEngine, L: float, C: float, h: float) -> bool:
    """Return True when the OKLCH color is representable in sRGB."""
    return _in_gamut(*engine.oklch_to_srgb(L, C, h))


def _in_gamut(r: float, g: float, b: float) -> bool:
    lo, hi = -_GAMUT_EPS, 1.0 + _GAMUT_EPS
    return lo <= r <= hi and lo <= g <= hi and lo <= b <= hi


def _clip01(x: float) -> float:
    return max(0.0, min(1.0, x))
