"""
どこで: `api.cli`（`designtokens` コンソールスクリプト / `python -m api.cli`）。
何を: トークン生成・単色スケール・コントラスト判定を標準出力へ JSON/テキストで出す。
なぜ: ツール境界と同じ検証経路をシェルから手早く試せるようにするため。

Usage:
    designtokens generate --primary "#3b82f6" --mode light
    designtokens scale "#3b82f6" --format oklch
    designtokens contrast "#ffffff" "#3b82f6"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence

from common.logging import setup_default_logging
from designtokens import TokensError, export_scale, generate_color_scale
from designtokens.formats import COLOR_FORMAT_OPTIONS

from .tools import MODE_CHOICES, active_tuning, check_contrast_tool, generate_tokens_tool

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 2


def _emit(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _cmd_generate(args: argparse.Namespace) -> int:
    brand = {"primary": args.primary}
    if args.secondary:
        brand["secondary"] = args.secondary
    result = generate_tokens_tool({"brandColors": brand, "mode": args.mode})
    if not args.with_contrast:
        result.pop("contrast", None)
    _emit(result)
    return EXIT_OK


def _cmd_scale(args: argparse.Namespace) -> int:
    scale = generate_color_scale(args.color, active_tuning())
    shades = export_scale(scale, args.format)
    if args.json:
        _emit({"profile": scale.profile, "shades": {str(k): v for k, v in shades.items()}})
        return EXIT_OK
    for key, value in shades.items():
        print(f"{key:>3}  {value}")
    return EXIT_OK


def _cmd_contrast(args: argparse.Namespace) -> int:
    _emit(check_contrast_tool({"foreground": args.foreground, "background": args.background}))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="designtokens",
        description="Generate OKLCH-based design tokens from brand colors.",
    )
    parser.add_argument("--log-level", default=None, help="logging level (default: TOK_LOG_LEVEL)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_gen = sub.add_parser("generate", help="generate a full token system as JSON")
    p_gen.add_argument("--primary", required=True, help="primary brand color")
    p_gen.add_argument("--secondary", default=None, help="secondary brand color (derived if omitted)")
    p_gen.add_argument("--mode", choices=MODE_CHOICES, default="both")
    p_gen.add_argument(
        "--with-contrast", action="store_true", help="include the contrast report in the output"
    )
    p_gen.set_defaults(func=_cmd_generate)

    p_scale = sub.add_parser("scale", help="print the 10-100 scale of one color")
    p_scale.add_argument("color", help="base color (hex, rgb(), hsl() or oklch())")
    p_scale.add_argument(
        "--format",
        choices=[fmt.value for _, fmt in COLOR_FORMAT_OPTIONS],
        default="hex",
    )
    p_scale.add_argument("--json", action="store_true", help="emit JSON instead of text")
    p_scale.set_defaults(func=_cmd_scale)

    p_con = sub.add_parser("contrast", help="WCAG contrast ratio between two colors")
    p_con.add_argument("foreground")
    p_con.add_argument("background")
    p_con.set_defaults(func=_cmd_contrast)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level)
    try:
        return int(args.func(args))
    except TokensError as exc:
        # InvalidColorError / RequestValidationError / MissingPaletteRoleError
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID
    except ValueError as exc:
        logger.debug("invalid configuration or input", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
