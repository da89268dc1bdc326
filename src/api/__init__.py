"""
どこで: `api` 入口（ツール境界と CLI）。
何を: ペイロード検証付きのツール関数とツール定義を再輸出。
なぜ: 外部（MCP 風ツール呼び出し/CLI）からは検証済みの経路だけを使わせるため。
"""

from .tools import (
    TOOL_DEFINITIONS,
    CheckContrastRequest,
    GenerateTokensRequest,
    RequestValidationError,
    call_tool,
    check_contrast_tool,
    generate_tokens_tool,
)

__all__ = [
    "TOOL_DEFINITIONS",
    "GenerateTokensRequest",
    "CheckContrastRequest",
    "RequestValidationError",
    "generate_tokens_tool",
    "check_contrast_tool",
    "call_tool",
]
