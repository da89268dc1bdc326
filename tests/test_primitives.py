from __future__ import annotations

"""プリミティブパレット生成のテスト。"""

import pytest

from designtokens import (
    BrandColors,
    MissingPaletteRoleError,
    PrimitivePalette,
    as_color,
    generate_primitive_palette,
    get_shade,
)
from designtokens.primitives import REQUIRED_ROLES


def test_palette_has_required_roles(palette: PrimitivePalette):
    assert set(REQUIRED_ROLES) <= set(palette)
    for role in REQUIRED_ROLES:
        assert len(palette[role]) == 10


def test_primary_reference_is_input(palette: PrimitivePalette):
    assert palette["primary"][50].hex == "#3b82f6"


def test_explicit_secondary_is_kept():
    pal = generate_primitive_palette(BrandColors(primary="#3b82f6", secondary="#f97316"))
    assert pal["secondary"][50].hex == "#f97316"


def test_neutral_uses_neutral_profile(palette: PrimitivePalette):
    assert palette["neutral"].profile == "neutral"
    assert palette["primary"].profile == "chromatic"


def test_additional_colors_become_custom_roles():
    pal = generate_primitive_palette({"primary": "#3b82f6"}, additional_colors=["#ec4899", "#14b8a6"])
    assert pal["custom1"][50].hex == "#ec4899"
    assert pal["custom2"][50].hex == "#14b8a6"
    assert "custom3" not in pal


def test_missing_role_raises(palette: PrimitivePalette):
    with pytest.raises(MissingPaletteRoleError) as exc:
        palette["accent"]
    assert "accent" in str(exc.value)
    # KeyError としても捕捉できる
    with pytest.raises(KeyError):
        palette["accent"]
    with pytest.raises(MissingPaletteRoleError):
        palette.require("primary", "accent")


def test_get_shade(palette: PrimitivePalette):
    assert get_shade(palette, "primary", 50) == as_color("#3b82f6")
    assert get_shade(palette, "primary", "50") == as_color("#3b82f6")
    with pytest.raises(KeyError):
        get_shade(palette, "primary", 55)
    with pytest.raises(MissingPaletteRoleError):
        get_shade(palette, "brand", 50)


def test_brand_colors_coerce():
    assert BrandColors.coerce({"primary": "#000"}).secondary is None
    with pytest.raises(ValueError):
        BrandColors.coerce({"secondary": "#000"})
    with pytest.raises(TypeError):
        BrandColors.coerce("#000")  # type: ignore[arg-type]


def test_palette_is_read_only(palette: PrimitivePalette):
    with pytest.raises(TypeError):
        palette["primary"] = palette["secondary"]  # type: ignore[index]


def test_hex_export_shape(palette: PrimitivePalette):
    data = palette.hex()
    assert set(data) == set(palette)
    assert all(len(shades) == 10 for shades in data.values())


def test_end_to_end_brand_pair():
    """primary/secondary の参照色は入力、導出ロールの参照色は導出関数の出力。"""
    from designtokens import derive_destructive, derive_neutral, derive_success, derive_warning

    pal = generate_primitive_palette({"primary": "#3b82f6", "secondary": "#8b5cf6"})
    assert pal["primary"][50].hex == "#3b82f6"
    assert pal["secondary"][50].hex == "#8b5cf6"
    assert pal["success"][50] == derive_success("#3b82f6")
    assert pal["warning"][50] == derive_warning("#3b82f6")
    assert pal["destructive"][50] == derive_destructive("#3b82f6")
    assert pal["neutral"][50] == derive_neutral("#3b82f6")
