"""
どこで: `common` パッケージ。
何を: 環境変数・設定スナップショット・ロギング初期化の軽量ユーティリティ。
なぜ: designtokens 本体を純関数のまま保ち、環境依存の処理を境界層（api）へ寄せるため。
"""

from .logging import setup_default_logging
from .settings import get as get_settings

__all__ = [
    "get_settings",
    "setup_default_logging",
]
