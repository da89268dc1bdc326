from __future__ import annotations

"""WCAG relative luminance and contrast ratio helpers.

All functions are pure; malformed colors raise
:class:`designtokens.errors.InvalidColorError` via :func:`as_color`.
"""

from util.color import to_u8_rgb

from .color_types import Color, ColorLike, as_color

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5


def _linearize(v: float) -> float:
    # WCAG 2.x uses 0.03928 (not the sRGB standard's 0.04045).
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    """Return the WCAG relative luminance of ``color`` in [0, 1].

    Measured on the 8-bit value behind ``Color.hex``, so generated shades
    are judged exactly as they are exported.
    """
    r, g, b = (v / 255.0 for v in to_u8_rgb(as_color(color).srgb))
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(a: ColorLike, b: ColorLike) -> float:
    """Return the WCAG contrast ratio between two colors (1.0 to 21.0)."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    lighter, darker = max(la, lb), min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


def meets_aa(ratio: float, is_large_text: bool = False) -> bool:
    """True if ``ratio`` satisfies WCAG AA."""
    return ratio >= (AA_LARGE if is_large_text else AA_NORMAL)


def meets_aaa(ratio: float, is_large_text: bool = False) -> bool:
    """True if ``ratio`` satisfies WCAG AAA."""
    return ratio >= (AAA_LARGE if is_large_text else AAA_NORMAL)


def pick_foreground(background: ColorLike, candidate_a: ColorLike, candidate_b: ColorLike) -> Color:
    """Return whichever candidate contrasts more with ``background``.

    Ties go to ``candidate_a``. A result that fails AA is still returned:
    contrast is reported (see :func:`designtokens.semantic.check_semantic_contrast`),
    not enforced.
    """
    bg = as_color(background)
    a = as_color(candidate_a)
    b = as_color(candidate_b)
    if contrast_ratio(bg, b) > contrast_ratio(bg, a):
        return b
    return a


# Names used by the token generator's public surface.
get_contrast_ratio = contrast_ratio
meets_wcag_aa = meets_aa
meets_wcag_aaa = meets_aaa


__all__ = [
    "relative_luminance",
    "contrast_ratio",
    "meets_aa",
    "meets_aaa",
    "pick_foreground",
    "get_contrast_ratio",
    "meets_wcag_aa",
    "meets_wcag_aaa",
]
