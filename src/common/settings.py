"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "WARNING"

    # 設定ファイル（YAML）の明示パス。None なら configs/default.yaml + config.yaml
    CONFIG_PATH: str | None = None

    # Scale generation
    HUE_SHIFT_ENABLED: bool = True

    # api.tools のメモ化キャッシュ（0 で無効）
    MEMO_MAXSIZE: int = 64


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int` を使用。
    - MEMO_MAXSIZE は 0 を下限に丸める。
    """
    _settings.LOG_LEVEL = (env_str("TOK_LOG_LEVEL", "WARNING") or "WARNING").upper()
    _settings.CONFIG_PATH = env_str("TOK_CONFIG")
    _settings.HUE_SHIFT_ENABLED = env_bool("TOK_HUE_SHIFT_ENABLED", True)
    _settings.MEMO_MAXSIZE = env_int("TOK_MEMO_MAXSIZE", 64, min_value=0) or 0


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
