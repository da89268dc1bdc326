"""
どこで: `api.tools`（ツール境界）。
何を: JSON 風ペイロードを型付きリクエストへ検証し、トークン生成/コントラスト判定を実行して
      JSON 互換の辞書を返す。ツール定義（JSON Schema）も提供する。
なぜ: 不正な入力を境界で確定的に弾き、コアには検証済みの値だけを渡すため。
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from common.settings import get as get_settings
from designtokens import (
    Color,
    InvalidColorError,
    TokenSystem,
    TokensError,
    Tuning,
    as_color,
    contrast_ratio,
    generate_tokens,
    meets_aa,
    meets_aaa,
)
from designtokens.generate import ModeSelection
from util.utils import tuning_section

logger = logging.getLogger(__name__)

MODE_CHOICES: Tuple[str, ...] = ("light", "dark", "both")


class RequestValidationError(TokensError, ValueError):
    """ツール入力が不正（構造/型/色の解釈）。`errors` に全ての問題を保持する。"""

    def __init__(self, errors: List[str]) -> None:
        self.errors: Tuple[str, ...] = tuple(errors)
        super().__init__("invalid request: " + "; ".join(self.errors))


def _parse_color_field(value: Any, path: str, errors: List[str]) -> Optional[Color]:
    if not isinstance(value, str):
        errors.append(f"{path}: expected a color string, got {type(value).__name__}")
        return None
    try:
        return as_color(value)
    except InvalidColorError as exc:
        errors.append(f"{path}: {exc}")
        return None


def _require_mapping(payload: Any, errors: List[str]) -> Mapping[str, Any]:
    if isinstance(payload, Mapping):
        return payload
    errors.append(f"payload: expected an object, got {type(payload).__name__}")
    return {}


@dataclass(frozen=True)
class GenerateTokensRequest:
    """検証済みの `generate_tokens` リクエスト。"""

    primary: Color
    secondary: Optional[Color] = None
    mode: ModeSelection = "both"

    @classmethod
    def from_payload(cls, payload: Any) -> "GenerateTokensRequest":
        """`{"brandColors": {"primary", "secondary"?}, "mode"?}` を検証して生成する。

        Raises
        ------
        RequestValidationError
            構造/型/色のいずれかが不正な場合（全ての問題を列挙）。
        """
        errors: List[str] = []
        data = _require_mapping(payload, errors)

        primary: Optional[Color] = None
        secondary: Optional[Color] = None
        brand = data.get("brandColors")
        if brand is None:
            if not errors:
                errors.append("brandColors: required")
        elif not isinstance(brand, Mapping):
            errors.append(f"brandColors: expected an object, got {type(brand).__name__}")
        else:
            if "primary" not in brand:
                errors.append("brandColors.primary: required")
            else:
                primary = _parse_color_field(brand["primary"], "brandColors.primary", errors)
            if brand.get("secondary") is not None:
                secondary = _parse_color_field(brand["secondary"], "brandColors.secondary", errors)

        mode = data.get("mode", "both")
        if mode not in MODE_CHOICES:
            errors.append(f"mode: expected one of {list(MODE_CHOICES)}, got {mode!r}")

        if errors or primary is None:
            raise RequestValidationError(errors or ["brandColors.primary: required"])
        return cls(primary=primary, secondary=secondary, mode=mode)

    def cache_key(self) -> Tuple[str, Optional[str], str]:
        return (self.primary.hex, self.secondary.hex if self.secondary else None, self.mode)


@dataclass(frozen=True)
class CheckContrastRequest:
    foreground: Color
    background: Color

    @classmethod
    def from_payload(cls, payload: Any) -> "CheckContrastRequest":
        errors: List[str] = []
        data = _require_mapping(payload, errors)
        colors: Dict[str, Optional[Color]] = {}
        for name in ("foreground", "background"):
            if name not in data:
                if data or not errors:
                    errors.append(f"{name}: required")
                colors[name] = None
                continue
            colors[name] = _parse_color_field(data[name], name, errors)
        fg, bg = colors["foreground"], colors["background"]
        if errors or fg is None or bg is None:
            raise RequestValidationError(errors)
        return cls(foreground=fg, background=bg)


# --- tuning / memo ---------------------------------------------------------


@lru_cache(maxsize=1)
def active_tuning() -> Tuning:
    """設定ファイルの `tuning:` と `TOK_HUE_SHIFT_ENABLED` を反映した Tuning。"""
    tuning = Tuning.from_mapping(tuning_section())
    if not get_settings().HUE_SHIFT_ENABLED:
        tuning = tuning.with_hue_shift(False)
    return tuning


def _generate_system(primary: str, secondary: Optional[str], mode: str) -> TokenSystem:
    brand = {"primary": primary, "secondary": secondary}
    return generate_tokens(brand, mode, tuning=active_tuning())  # type: ignore[arg-type]


_generate_cached: Callable[[str, Optional[str], str], TokenSystem] = lru_cache(
    maxsize=get_settings().MEMO_MAXSIZE
)(_generate_system)


def clear_caches() -> None:
    """メモ化キャッシュと Tuning を破棄（設定変更後やテストで使用）。"""
    _generate_cached.cache_clear()  # type: ignore[attr-defined]
    active_tuning.cache_clear()


def _contrast_summary(system: TokenSystem) -> Dict[str, Any]:
    summary: Dict[str, Any] = {}
    for mode, checks in system.contrast_report().items():
        failing = sorted(key for key, check in checks.items() if not check["passesAA"])
        for key in failing:
            logger.warning(
                "contrast below AA: mode=%s pair=%s ratio=%.2f",
                mode,
                key,
                checks[key]["ratio"],
            )
        summary[mode] = {"checked": len(checks), "failingAA": failing, "checks": checks}
    return summary


# --- tools -----------------------------------------------------------------


def generate_tokens_tool(payload: Any) -> Dict[str, Any]:
    """`generate_tokens` ツール本体。

    Returns
    -------
    dict
        `TokenSystem.to_dict()` に `contrast`（モード別の AA 未達一覧と全チェック）を加えたもの。
        呼び出し側が自由に変更できるよう毎回新しいオブジェクトを返す。
    """
    request = GenerateTokensRequest.from_payload(payload)
    logger.debug("generate_tokens: %s", request.cache_key())
    system = _generate_cached(*request.cache_key())
    result = copy.deepcopy(system.to_dict())
    result["contrast"] = _contrast_summary(system)
    return result


def check_contrast_tool(payload: Any) -> Dict[str, Any]:
    """`check_contrast` ツール本体（比率と WCAG 判定）。"""
    request = CheckContrastRequest.from_payload(payload)
    ratio = contrast_ratio(request.foreground, request.background)
    return {
        "ratio": round(ratio, 2),
        "aa": meets_aa(ratio),
        "aaa": meets_aaa(ratio),
        "aa_large": meets_aa(ratio, is_large_text=True),
        "aaa_large": meets_aaa(ratio, is_large_text=True),
    }


TOOL_DEFINITIONS: Dict[str, Dict[str, Any]] = {
    "generate_tokens": {
        "name": "generate_tokens",
        "description": (
            "Generate design tokens deterministically using OKLCH color generation from brand "
            "colors. Only the primary color is required; secondary, neutral, success, warning "
            "and destructive colors are derived when omitted."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "brandColors": {
                    "type": "object",
                    "properties": {
                        "primary": {"type": "string", "description": "Primary brand color (hex)"},
                        "secondary": {"type": "string", "description": "Secondary brand color (hex)"},
                    },
                    "required": ["primary"],
                },
                "mode": {
                    "type": "string",
                    "enum": list(MODE_CHOICES),
                    "default": "both",
                    "description": "Color mode to generate",
                },
            },
            "required": ["brandColors"],
        },
    },
    "check_contrast": {
        "name": "check_contrast",
        "description": "WCAG 2.x contrast ratio between two colors with AA/AAA pass flags",
        "inputSchema": {
            "type": "object",
            "properties": {
                "foreground": {"type": "string", "description": "Text color"},
                "background": {"type": "string", "description": "Background color"},
            },
            "required": ["foreground", "background"],
        },
    },
}

_TOOLS: Dict[str, Callable[[Any], Dict[str, Any]]] = {
    "generate_tokens": generate_tokens_tool,
    "check_contrast": check_contrast_tool,
}


def call_tool(name: str, payload: Any) -> Dict[str, Any]:
    """名前でツールを呼び出す（未知の名前は RequestValidationError）。"""
    try:
        tool = _TOOLS[name]
    except KeyError:
        raise RequestValidationError([f"unknown tool {name!r} (available: {sorted(_TOOLS)})"]) from None
    return tool(payload)


__all__ = [
    "MODE_CHOICES",
    "RequestValidationError",
    "GenerateTokensRequest",
    "CheckContrastRequest",
    "active_tuning",
    "clear_caches",
    "generate_tokens_tool",
    "check_contrast_tool",
    "call_tool",
    "TOOL_DEFINITIONS",
]
