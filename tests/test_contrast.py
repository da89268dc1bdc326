from __future__ import annotations

"""WCAG コントラスト計算のテスト。"""

import pytest

from designtokens import (
    Color,
    as_color,
    contrast_ratio,
    get_contrast_ratio,
    meets_aa,
    meets_aaa,
    meets_wcag_aa,
    pick_foreground,
    relative_luminance,
)


def test_black_white_is_21():
    assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)


def test_same_color_is_1():
    assert contrast_ratio("#3b82f6", "#3b82f6") == pytest.approx(1.0)


def test_ratio_is_symmetric_and_bounded():
    pairs = [("#3b82f6", "#ffffff"), ("#ef4444", "#111111"), ("#808080", "#f5f5f5")]
    for a, b in pairs:
        r = contrast_ratio(a, b)
        assert r == pytest.approx(contrast_ratio(b, a))
        assert 1.0 <= r <= 21.0


def test_relative_luminance_extremes():
    assert relative_luminance("#000000") == pytest.approx(0.0)
    assert relative_luminance("#ffffff") == pytest.approx(1.0)


def test_known_ratio():
    """#767676 on white is the classic AA boundary (≈4.54)."""
    ratio = contrast_ratio("#767676", "#ffffff")
    assert ratio == pytest.approx(4.54, abs=0.01)
    assert meets_aa(ratio)
    assert not meets_aaa(ratio)


def test_thresholds():
    assert meets_aa(4.5) and not meets_aa(4.49)
    assert meets_aa(3.0, is_large_text=True) and not meets_aa(2.99, is_large_text=True)
    assert meets_aaa(7.0) and not meets_aaa(6.99)
    assert meets_aaa(4.5, is_large_text=True)


def test_pick_foreground_prefers_higher_ratio():
    white, black = as_color("#ffffff"), as_color("#000000")
    assert pick_foreground("#1e3a8a", white, black) == white
    assert pick_foreground("#fef3c7", white, black) == black


def test_pick_foreground_tie_goes_to_first():
    a, b = as_color("#111111"), as_color("#111111")
    assert pick_foreground("#ffffff", a, b) is a


def test_aliases():
    assert get_contrast_ratio is contrast_ratio
    assert meets_wcag_aa is meets_aa


def test_pick_foreground_on_black_and_white():
    white, black = as_color("#ffffff"), as_color("#000000")
    assert pick_foreground("#000000", white, black) == white
    assert pick_foreground("#ffffff", white, black) == black


def test_luminance_is_measured_on_exported_hex():
    """float の sRGB を持つ色も、出力される hex と同じ値で判定する。"""
    c = Color.from_oklch(0.6, 0.2, 25.0)
    assert relative_luminance(c) == relative_luminance(c.hex)
    assert contrast_ratio(c, "#faf9fe") == contrast_ratio(c.hex, "#faf9fe")
