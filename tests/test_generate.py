from __future__ import annotations

"""トークンシステム組み立てと非カラースケールのテスト。"""

import json

import pytest

from designtokens import TokenSystem, generate_tokens, get_semantic_for_mode
from designtokens.generate import (
    DEFAULT_RADII,
    ShadowSettings,
    generate_border_colors,
    generate_radii_scale,
    generate_shadows,
    generate_shadows_with_intensity,
    generate_shadows_with_settings,
    generate_spacing_scale,
)


def test_end_to_end_blue():
    """単一の primary から全ロール・両モードが揃い、primary[50] は入力色。"""
    system = generate_tokens({"primary": "#3b82f6"})
    assert isinstance(system, TokenSystem)
    assert system.modes == ("light", "dark")
    assert system.primitives["primary"][50].hex == "#3b82f6"
    for role in ("primary", "secondary", "neutral", "success", "warning", "destructive"):
        assert len(system.primitives[role]) == 10
    assert set(system.surface) == {"light", "dark"}
    assert set(system.utility) == {"light", "dark"}


@pytest.mark.parametrize("mode", ["light", "dark"])
def test_single_mode(mode):
    system = generate_tokens({"primary": "#3b82f6"}, mode=mode)
    assert system.modes == (mode,)
    assert get_semantic_for_mode(system, mode).mode == mode
    other = "dark" if mode == "light" else "light"
    with pytest.raises(ValueError):
        get_semantic_for_mode(system, other)  # type: ignore[arg-type]


def test_invalid_mode_raises():
    with pytest.raises(ValueError):
        generate_tokens({"primary": "#3b82f6"}, mode="auto")  # type: ignore[arg-type]


def test_to_dict_is_json_serializable():
    data = generate_tokens({"primary": "#3b82f6", "secondary": "#f97316"}).to_dict()
    text = json.dumps(data)
    assert "#3b82f6" in text
    assert data["primitives"]["primary"]["50"] == "#3b82f6"
    assert data["primitives"]["secondary"]["50"] == "#f97316"
    assert set(data) == {
        "primitives",
        "semantic",
        "surface",
        "utility",
        "spacing",
        "typography",
        "radii",
        "shadows",
        "borderColors",
        "layout",
    }


def test_to_dict_does_not_share_defaults():
    a = generate_tokens({"primary": "#3b82f6"})
    a.typography["fontFamily"]["sans"].append("Comic Sans")
    b = generate_tokens({"primary": "#3b82f6"})
    assert "Comic Sans" not in b.typography["fontFamily"]["sans"]


def test_contrast_report_per_mode():
    report = generate_tokens({"primary": "#3b82f6"}).contrast_report()
    assert set(report) == {"light", "dark"}
    entry = report["light"]["primary/base"]
    assert set(entry) == {"ratio", "passesAA", "passesAAA"}
    assert entry["ratio"] >= 1.0


def test_spacing_scale():
    spacing = generate_spacing_scale(4)
    assert spacing["0"] == "0"
    assert spacing["0.5"] == "0.125rem"
    assert spacing["4"] == "1rem"
    assert spacing["96"] == "24rem"
    with pytest.raises(ValueError):
        generate_spacing_scale(0)


def test_radii_scale_matches_defaults():
    assert generate_radii_scale(0.25) == DEFAULT_RADII
    assert generate_radii_scale(0.5)["sm"] == "0.5rem"
    with pytest.raises(ValueError):
        generate_radii_scale(-1)


def test_shadows():
    shadows = generate_shadows()
    assert set(shadows) == {"light", "dark"}
    scaled = generate_shadows_with_intensity(2.0)
    assert scaled["light"]["sm"] == "0 1px 2px 0 rgba(0, 0, 0, 0.10)"
    assert "rgba(0, 0, 0, 0.60)" in scaled["dark"]["sm"]
    with pytest.raises(ValueError):
        generate_shadows_with_intensity(-0.1)


def test_shadows_with_settings():
    out = generate_shadows_with_settings(ShadowSettings())
    assert out["light"]["md"] == "0px 4px 9px 0px rgba(0, 0, 0, 0.10)"
    assert out["dark"]["md"].endswith("rgba(0, 0, 0, 0.15)")
    assert out["light"]["inner"].startswith("inset 0 2px 6px 0")


def test_border_colors(palette):
    borders = generate_border_colors(palette)
    assert borders["light"]["default"] == palette["neutral"][30]
    assert borders["dark"]["input"] == palette["neutral"][70]


def test_deterministic():
    a = generate_tokens({"primary": "#ef4444"}).to_dict()
    b = generate_tokens({"primary": "#ef4444"}).to_dict()
    assert a == b


def test_layout_tokens():
    from designtokens.generate import generate_layout_tokens

    layout = generate_layout_tokens()
    assert layout["breakpoints"]["md"] == "768px"
    assert set(layout["containers"]) == set(layout["breakpoints"])
