from __future__ import annotations

import pytest

from util.color import (
    normalize_rgb,
    parse_color_str,
    parse_functional_color_str,
    parse_hex_color_str,
    rgb_to_hex,
    to_u8_rgb,
)


def _approx_tuple(t):
    return tuple(round(v, 6) for v in t)


def test_parse_hex_color_valid_variants() -> None:
    expected = (round(0x11 / 255.0, 6), round(0x22 / 255.0, 6), round(0x33 / 255.0, 6))
    assert _approx_tuple(parse_hex_color_str("#112233")) == expected
    assert _approx_tuple(parse_hex_color_str("0x112233")) == expected
    assert _approx_tuple(parse_hex_color_str("112233")) == expected
    assert _approx_tuple(parse_hex_color_str("#123")) == expected


def test_parse_hex_color_invalid() -> None:
    with pytest.raises(ValueError):
        parse_hex_color_str("#1234")
    with pytest.raises(ValueError):
        parse_hex_color_str("not-a-color")
    with pytest.raises(ValueError):
        parse_hex_color_str("#12345g")


def test_parse_functional_rgb_and_hsl() -> None:
    space, rgb = parse_functional_color_str("rgb(255, 0, 127.5)")
    assert space == "srgb"
    assert _approx_tuple(rgb) == (1.0, 0.0, 0.5)
    space, rgb = parse_functional_color_str("rgba(100%, 0%, 0% / 0.5)")
    assert _approx_tuple(rgb) == (1.0, 0.0, 0.0)
    space, rgb = parse_functional_color_str("hsl(120deg 100% 25%)")
    assert _approx_tuple(rgb) == (0.0, 0.5, 0.0)


def test_parse_functional_oklch() -> None:
    assert parse_functional_color_str("oklch(50% 0.1 400)") == ("oklch", (0.5, 0.1, 40.0))
    space, (L, C, h) = parse_functional_color_str("oklch(0.7 25% none)")
    assert (L, round(C, 6), h) == (0.7, 0.1, 0.0)
    with pytest.raises(ValueError):
        parse_functional_color_str("oklch(150% 0.1 20)")


@pytest.mark.parametrize("bad", ["rgb(1, 2)", "lab(50 20 30)", "rgb(a, b, c)", "hsl(0, 150%, 50%)"])
def test_parse_functional_invalid(bad) -> None:
    with pytest.raises(ValueError):
        parse_functional_color_str(bad)


def test_parse_color_str_dispatch() -> None:
    assert parse_color_str("  #fff ")[0] == "srgb"
    assert parse_color_str("oklch(0.5 0 0)")[0] == "oklch"
    with pytest.raises(ValueError):
        parse_color_str("   ")


def test_normalize_rgb() -> None:
    assert _approx_tuple(normalize_rgb((0.1, 0.2, 0.3))) == (0.1, 0.2, 0.3)
    assert _approx_tuple(normalize_rgb((255, 128, 0))) == (1.0, round(128 / 255.0, 6), 0.0)
    with pytest.raises(ValueError):
        normalize_rgb((1, 2))
    with pytest.raises(ValueError):
        normalize_rgb((256, 0, 0))


def test_to_u8_and_hex() -> None:
    assert to_u8_rgb((0.0, 1.0, 0.5)) == (0, 255, 128)
    assert to_u8_rgb((-0.1, 1.2, 0.0)) == (0, 255, 0)
    assert rgb_to_hex((1.0, 0.0, 1.0)) == "#ff00ff"
