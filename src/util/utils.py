"""
どこで: `util.utils`
何を: YAML 設定の読み込み（configs/default.yaml → config.yaml / TOK_CONFIG の順に上書き）。
なぜ: Tuning 係数などを設定ファイルで差し替え可能にしつつ、読込失敗で生成を止めないため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from common.settings import get as get_settings

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.debug("config load failed: %s (%s)", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.debug("config ignored (top level is not a mapping): %s", path)
        return {}
    return data


def _find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - `src/` 配下から呼ばれることを想定し、上位に `.git` や `pyproject.toml`、`configs/` がある
      もっとも近いディレクトリを返す。
    - 見つからない場合は `start.parent.parent` をフォールバックとして返す。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    # 典型: <repo>/src/util/utils.py -> <repo>
    return cur.parent.parent


def load_config(path: Optional[str | Path] = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) `path` 引数 → `TOK_CONFIG` → ルート `config.yaml` のうち最初に指定/存在したもの（上書き）

    - いずれも存在しない/不正な場合は空辞書を返す。
    - ネストした辞書のディープマージは行わず、トップレベルのみ上書き。
    """
    project_root = _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = project_root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    override = path if path is not None else get_settings().CONFIG_PATH
    if override is not None:
        override_path = Path(override).expanduser()
        if override_path.exists():
            base.update(_safe_load_yaml(override_path))
        else:
            logger.debug("config not found: %s", override_path)
        return base

    root_config_path = project_root / "config.yaml"
    if root_config_path.exists():
        base.update(_safe_load_yaml(root_config_path))

    return base


def tuning_section(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """設定辞書から `tuning:` セクションを取り出す（無い/不正なら空辞書）。"""
    cfg = load_config() if config is None else config
    section = cfg.get("tuning")
    return section if isinstance(section, dict) else {}
