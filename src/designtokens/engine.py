from __future__ import annotations

"""Color conversion engine for OKLCH and sRGB.

This module defines the :class:`ColorEngine` protocol and a default
implementation that converts between sRGB (D65) and OKLCH via OKLab.
Lightness is expressed in [0, 1] throughout the package.
"""

import math
from typing import Protocol, Tuple

import numpy as np


OKLCH = Tuple[float, float, float]
SRGB = Tuple[float, float, float]

# Linear sRGB -> LMS
_M_RGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
# LMS' (cube root) -> OKLab
_M_LMS_TO_LAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
# OKLab -> LMS'
_M_LAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)
# LMS -> linear sRGB
_M_LMS_TO_RGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)

# Below this chroma the hue angle is numerically meaningless.
_HUE_EPSILON = 1e-7


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def srgb_to_oklch(self, r: float, g: float, b: float) -> OKLCH: ...

    def oklch_to_srgb(self, L: float, C: float, h: float) -> SRGB: ...

    def normalize_hue(self, h: float) -> float: ...


class DefaultColorEngine:
    """Default implementation based on OKLab/OKLCH and sRGB (D65).

    ``oklch_to_srgb`` does not clip: callers decide how to bring
    out-of-gamut results back into [0, 1] (see :mod:`designtokens.gamut`).
    """

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        return float(h) % 360.0

    def srgb_to_oklch(self, r: float, g: float, b: float) -> OKLCH:
        """Convert sRGB in [0, 1] to OKLCH with L in [0, 1]."""
        rgb_lin = np.array([_srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b)])
        lms = _M_RGB_TO_LMS @ rgb_lin
        L_ok, a_ok, b_ok = _M_LMS_TO_LAB @ np.cbrt(lms)

        C = math.hypot(a_ok, b_ok)
        if C < _HUE_EPSILON:
            C = 0.0
            h_deg = 0.0
        else:
            h_deg = self.normalize_hue(math.degrees(math.atan2(b_ok, a_ok)))
        return (max(0.0, min(1.0, float(L_ok))), float(C), h_deg)

    def oklch_to_srgb(self, L: float, C: float, h: float) -> SRGB:
        """Convert OKLCH (L in [0, 1]) to gamma-encoded sRGB (unclipped)."""
        L_ok = max(0.0, min(1.0, L))
        C = max(0.0, C)
        h_rad = math.radians(self.normalize_hue(h))
        lab = np.array([L_ok, C * math.cos(h_rad), C * math.sin(h_rad)])

        lms = (_M_LAB_TO_LMS @ lab) ** 3
        rl, gl, bl = _M_LMS_TO_RGB @ lms
        return (_linear_to_srgb(rl), _linear_to_srgb(gl), _linear_to_srgb(bl))


def _srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(c: float) -> float:
    c = float(c)
    if c < 0.0:
        return -_linear_to_srgb(-c)
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055


DEFAULT_ENGINE = DefaultColorEngine()


__all__ = ["OKLCH", "SRGB", "ColorEngine", "DefaultColorEngine", "DEFAULT_ENGINE"]
