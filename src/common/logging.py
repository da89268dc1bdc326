"""
どこで: `common.logging`
何を: CLI/ツール境界向けの最小ロギング初期化。
なぜ: 各モジュールは `logging.getLogger(__name__)` を使うだけにし、
      ハンドラ構成はアプリ側（未設定時のみ本ヘルパ）に任せるため。
"""

from __future__ import annotations

import logging

from .settings import get as _get_settings

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str | None) -> int:
    """ログレベル名/数値を数値へ正規化（不明な名前は WARNING）。"""
    if level is None:
        level = _get_settings().LOG_LEVEL
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        return value if isinstance(value, int) else logging.WARNING
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - level 省略時は `TOK_LOG_LEVEL`（settings.LOG_LEVEL）を使う
    """
    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(level=resolve_level(level), format=_FORMAT)


__all__ = ["resolve_level", "setup_default_logging"]
