"""
どこで: `util.color`。
何を: 色指定文字列/タプルの字句解析（Hex, rgb(), hsl(), oklch(), RGB 0–1 / 0–255）を一元化。
なぜ: ライブラリ本体・CLI・ツール境界で同一の受理仕様とエラーメッセージを提供するため。

本モジュールは designtokens に依存しない。失敗時は ValueError を送出し、
`designtokens.color_types` が InvalidColorError に包み直す。
"""

from __future__ import annotations

import colorsys
import re
from typing import Literal, Sequence

RawSpace = Literal["srgb", "oklch"]
RawColor = tuple[RawSpace, tuple[float, float, float]]

_FUNC_RE = re.compile(r"^(rgba?|hsla?|oklch)\(\s*(.*?)\s*\)$", re.IGNORECASE)
_NUM_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_HEX_RE = re.compile(r"^[0-9a-fA-F]{6}$")
# CSS Color 4: 100% chroma in oklch() corresponds to 0.4.
_OKLCH_CHROMA_PERCENT_REF = 0.4


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color_str(s: str) -> tuple[float, float, float]:
    """Hex 文字列から RGB(0–1) を返す。

    受理形式: "#RGB", "#RRGGBB", "0xRRGGBB", "RRGGBB"（大文字/小文字は不問）。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) == 3:
        t = "".join(ch * 2 for ch in t)
    if len(t) != 6:
        raise ValueError(f"invalid hex color length: '{s}' (expected RGB or RRGGBB)")
    if _HEX_RE.match(t) is None:
        raise ValueError(f"invalid hex color: '{s}'")
    r = int(t[0:2], 16)
    g = int(t[2:4], 16)
    b = int(t[4:6], 16)
    return (r / 255.0, g / 255.0, b / 255.0)


def _split_args(body: str) -> list[str]:
    # "/ alpha" は無視する（不透明色のみ扱う）
    main = body.split("/", 1)[0]
    parts = [p for p in re.split(r"[\s,]+", main.strip()) if p]
    if len(parts) != 3:
        raise ValueError(f"expected 3 components, got {len(parts)}")
    return parts


def _number(token: str) -> float:
    if not _NUM_RE.match(token):
        raise ValueError(f"not a number: '{token}'")
    return float(token)


def _percent_or_number(token: str, *, percent_scale: float) -> float:
    if token.endswith("%"):
        return _number(token[:-1]) / 100.0 * percent_scale
    return _number(token)


def _hue(token: str) -> float:
    t = token.lower()
    if t == "none":
        return 0.0
    if t.endswith("deg"):
        t = t[:-3]
    return _number(t) % 360.0


def parse_functional_color_str(s: str) -> RawColor:
    """`rgb()` / `hsl()` / `oklch()` 記法を解析して (空間, 値) を返す。

    - rgb: 0–255 もしくは百分率 → ("srgb", 0–1)
    - hsl: 色相（度）, 彩度%, 明度% → ("srgb", 0–1)
    - oklch: L（0–1 もしくは %）, C, h（度） → ("oklch", (L, C, h))
    """
    m = _FUNC_RE.match(s.strip())
    if m is None:
        raise ValueError(f"unsupported color notation: '{s}'")
    name = m.group(1).lower()
    if name in ("rgba", "hsla"):
        name = name[:-1]
    a, b, c = _split_args(m.group(2))

    if name == "rgb":
        vals = [_percent_or_number(t, percent_scale=255.0) for t in (a, b, c)]
        if any(v < 0.0 or v > 255.0 for v in vals):
            raise ValueError(f"rgb components out of range: '{s}'")
        return ("srgb", (vals[0] / 255.0, vals[1] / 255.0, vals[2] / 255.0))

    if name == "hsl":
        h = _hue(a)
        sat = _number(b.rstrip("%")) / 100.0
        light = _number(c.rstrip("%")) / 100.0
        if not (0.0 <= sat <= 1.0 and 0.0 <= light <= 1.0):
            raise ValueError(f"hsl components out of range: '{s}'")
        r, g, bb = colorsys.hls_to_rgb(h / 360.0, light, sat)
        return ("srgb", (_clamp01(r), _clamp01(g), _clamp01(bb)))

    L = _percent_or_number(a, percent_scale=1.0)
    C = _percent_or_number(b, percent_scale=_OKLCH_CHROMA_PERCENT_REF)
    h = _hue(c)
    if not (0.0 <= L <= 1.0):
        raise ValueError(f"oklch lightness out of range: '{s}'")
    if C < 0.0:
        raise ValueError(f"oklch chroma must be non-negative: '{s}'")
    return ("oklch", (L, C, h))


def normalize_rgb(value: Sequence[float | int]) -> tuple[float, float, float]:
    """(r, g, b) を RGB(0–1) へ正規化する。

    - 全要素が 0..1 の float ならそのまま
    - それ以外は 0–255 とみなし、範囲外は ValueError
    """
    if len(value) != 3:
        raise ValueError("color tuple/list must be length 3")
    try:
        fseq = [float(v) for v in value]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if all(isinstance(v, float) for v in value) and all(0.0 <= x <= 1.0 for x in fseq):
        return (fseq[0], fseq[1], fseq[2])
    if any(x < 0.0 or x > 255.0 for x in fseq):
        raise ValueError(f"color components out of range: {value!r}")
    r, g, b = (int(round(x)) for x in fseq)
    return (r / 255.0, g / 255.0, b / 255.0)


def parse_color_str(s: str) -> RawColor:
    """任意の受理文字列を (空間, 値) に解析する。"""
    t = s.strip()
    if not t:
        raise ValueError("empty color string")
    if "(" in t:
        return parse_functional_color_str(t)
    return ("srgb", parse_hex_color_str(t))


def to_u8_rgb(rgb: Sequence[float]) -> tuple[int, int, int]:
    """RGB(0–1) を RGB(0–255) へ変換する。"""
    r, g, b = (_clamp01(float(v)) for v in rgb)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


def rgb_to_hex(rgb: Sequence[float]) -> str:
    """RGB(0–1) を "#rrggbb" へ変換する。"""
    r, g, b = to_u8_rgb(rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


__all__ = [
    "RawColor",
    "parse_hex_color_str",
    "parse_functional_color_str",
    "parse_color_str",
    "normalize_rgb",
    "to_u8_rgb",
    "rgb_to_hex",
]
