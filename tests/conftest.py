"""共通フィクスチャ。

- 代表的なブランド色
- 設定/メモ化キャッシュの隔離
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings as settings_mod
from designtokens import Color, PrimitivePalette, as_color, generate_primitive_palette

BLUE = "#3b82f6"
RED = "#ef4444"
GRAY = "#808080"


@pytest.fixture()
def blue() -> Color:
    return as_color(BLUE)


@pytest.fixture()
def gray() -> Color:
    return as_color(GRAY)


@pytest.fixture()
def palette() -> PrimitivePalette:
    return generate_primitive_palette({"primary": BLUE})


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """TOK_* 環境変数を外し、設定とツール側キャッシュを毎テスト初期化する。"""
    for name in ("TOK_LOG_LEVEL", "TOK_CONFIG", "TOK_HUE_SHIFT_ENABLED", "TOK_MEMO_MAXSIZE"):
        monkeypatch.delenv(name, raising=False)
    settings_mod.reload_from_env()
    from api.tools import clear_caches

    clear_caches()
    yield
    settings_mod.reload_from_env()
    clear_caches()
