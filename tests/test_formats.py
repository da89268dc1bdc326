from __future__ import annotations

"""色の文字列フォーマットのテスト。"""

import pytest

from designtokens import ColorFormat, export_scale, format_color_as, generate_color_scale
from designtokens.formats import COLOR_FORMAT_OPTIONS


def test_hex_and_rgb():
    assert format_color_as("#3b82f6", "hex") == "#3b82f6"
    assert format_color_as("#3b82f6", ColorFormat.RGB) == "rgb(59, 130, 246)"


def test_hsl():
    assert format_color_as("#ff0000", "hsl") == "hsl(0, 100%, 50%)"
    assert format_color_as("#3b82f6", "HSL") == "hsl(217.2, 91.2%, 59.8%)"


def test_oklch():
    text = format_color_as("#ff0000", "oklch")
    assert text.startswith("oklch(62.")
    assert text.endswith(")")
    assert len(text.split()) == 3


def test_unknown_format_raises():
    with pytest.raises(ValueError):
        format_color_as("#ff0000", "cmyk")


def test_export_scale():
    scale = generate_color_scale("#3b82f6")
    out = export_scale(scale, "rgb")
    assert list(out) == list(scale)
    assert out[50] == "rgb(59, 130, 246)"


def test_options_cover_enum():
    assert [fmt for _, fmt in COLOR_FORMAT_OPTIONS] == list(ColorFormat)
