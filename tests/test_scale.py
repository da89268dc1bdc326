from __future__ import annotations

"""10 段階スケール生成のテスト。"""

import pytest

from designtokens import REFERENCE_SHADE, SHADE_KEYS, Color, ColorScale, as_color, generate_color_scale
from designtokens.scale import chroma_multiplier, lightness_targets, scale_lightness, select_profile
from designtokens.tuning import CHROMATIC_PROFILE, DEFAULT_TUNING, NEUTRAL_PROFILE


def _hue_diff(a: float, b: float) -> float:
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


def test_scale_has_exactly_ten_keys(blue: Color):
    scale = generate_color_scale(blue)
    assert tuple(scale) == SHADE_KEYS
    assert len(scale) == 10


def test_reference_shade_is_input(blue: Color):
    """スケールの 50 は入力色そのもの。"""
    scale = generate_color_scale("#3b82f6")
    assert scale[REFERENCE_SHADE].hex == "#3b82f6"
    assert scale.reference == blue


@pytest.mark.parametrize("value", ["#3b82f6", "#ef4444", "#22c55e", "#808080", "#6d28d9"])
def test_lightness_monotonic(value):
    """10 → 100 で明度が単調減少する。"""
    values = scale_lightness(generate_color_scale(value))
    assert all(a > b for a, b in zip(values, values[1:])), values


@pytest.mark.parametrize("value", ["#3b82f6", "#ef4444", "#22c55e", "#6d28d9"])
def test_hue_stability_chromatic(value):
    scale = generate_color_scale(value)
    h0 = scale.reference.hue
    for key in SHADE_KEYS:
        assert _hue_diff(scale[key].hue, h0) <= 10.0, key


@pytest.mark.parametrize("value", ["#3b82f6", "#ef4444", "#22c55e", "#808080", "#6d28d9"])
def test_exported_hex_is_distinct_and_monotonic(value):
    """出力される hex 同士でも明度は単調減少し、段が潰れない。"""
    scale = generate_color_scale(value)
    hexes = list(scale.hex().values())
    assert len(set(hexes)) == len(SHADE_KEYS), hexes
    values = [as_color(h).lightness for h in hexes]
    assert all(a > b for a, b in zip(values, values[1:])), values


@pytest.mark.parametrize("value", ["#3b82f6", "#ef4444", "#22c55e", "#6d28d9"])
def test_exported_hex_keeps_hue(value):
    scale = generate_color_scale(value)
    h0 = scale.reference.hue
    for key, hex_str in scale.hex().items():
        assert _hue_diff(as_color(hex_str).hue, h0) <= 10.0, (key, hex_str)


def test_achromatic_uses_neutral_profile(gray: Color):
    scale = generate_color_scale(gray)
    assert scale.profile == "neutral"
    assert generate_color_scale("#3b82f6").profile == "chromatic"
    for key in SHADE_KEYS:
        assert scale[key].chroma < DEFAULT_TUNING.scale.achromatic_threshold

    # 明側は白付近に留まり、暗側で大きく下がる
    lightness = dict(zip(SHADE_KEYS, scale_lightness(scale)))
    assert lightness[10] >= 0.98
    light_steps = [lightness[a] - lightness[b] for a, b in ((10, 20), (20, 30))]
    dark_steps = [lightness[a] - lightness[b] for a, b in ((60, 70), (70, 80), (80, 90), (90, 100))]
    assert max(light_steps) < min(dark_steps)
    mean_light = (lightness[10] - lightness[40]) / 3
    mean_dark = (lightness[60] - lightness[100]) / 4
    assert mean_light < mean_dark

    chromatic = lightness_targets(gray.lightness, CHROMATIC_PROFILE)
    assert lightness[10] - lightness[20] < chromatic[10] - chromatic[20]
    assert any(lightness[k] != pytest.approx(chromatic[k], abs=1e-3) for k in SHADE_KEYS)


def test_select_profile_threshold():
    assert select_profile(0.0099)[1] is NEUTRAL_PROFILE
    assert select_profile(0.01)[1] is CHROMATIC_PROFILE


def test_extremes_reach_anchors():
    targets = lightness_targets(0.6, CHROMATIC_PROFILE)
    assert targets[10] == pytest.approx(CHROMATIC_PROFILE.light_anchor)
    assert targets[100] == pytest.approx(CHROMATIC_PROFILE.dark_anchor)
    assert targets[50] == pytest.approx(0.6)


def test_base_outside_anchor_collapses_onto_base():
    targets = lightness_targets(0.99, CHROMATIC_PROFILE)
    assert all(targets[k] == pytest.approx(0.99) for k in (10, 20, 30, 40))
    assert targets[100] == pytest.approx(CHROMATIC_PROFILE.dark_anchor)


def test_chroma_multiplier_shape():
    t_ref = SHADE_KEYS.index(REFERENCE_SHADE) / (len(SHADE_KEYS) - 1)
    assert chroma_multiplier(t_ref, CHROMATIC_PROFILE) == pytest.approx(CHROMATIC_PROFILE.chroma_peak)
    assert chroma_multiplier(0.0, CHROMATIC_PROFILE) == pytest.approx(CHROMATIC_PROFILE.chroma_light_floor)
    assert chroma_multiplier(1.0, CHROMATIC_PROFILE) == pytest.approx(CHROMATIC_PROFILE.chroma_dark_floor)


def test_hue_shift_can_be_disabled():
    tuning = DEFAULT_TUNING.with_hue_shift(False)
    scale = generate_color_scale("#3b82f6", tuning)
    h0 = scale.reference.hue
    for key in (10, 20, 30, 40):
        assert scale[key].hue == pytest.approx(h0, abs=1e-9)


def test_hue_shift_applies_on_light_side():
    scale = generate_color_scale("#3b82f6")
    h0 = scale.reference.hue
    assert _hue_diff(scale[10].hue, h0) == pytest.approx(DEFAULT_TUNING.scale.hue_shift, abs=1e-6)
    assert scale[100].hue == pytest.approx(h0, abs=1e-9)


def test_color_scale_rejects_wrong_keys(blue: Color):
    with pytest.raises(ValueError):
        ColorScale({10: blue, 20: blue})


def test_scale_hex_and_extremes():
    scale = generate_color_scale("#3b82f6")
    hexes = scale.hex()
    assert list(hexes) == list(SHADE_KEYS)
    assert scale.lightest == scale[10]
    assert scale.darkest == scale[100]
