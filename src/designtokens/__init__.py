"""Public entrypoint for the designtokens library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``designtokens`` instead of individual
submodules.
"""

from .color_types import (
    Color,
    ColorInput,
    adjust_chroma,
    adjust_lightness,
    as_color,
    to_hex,
    to_hsl,
    to_perceptual,
    to_rgb,
)
from .contrast import (
    contrast_ratio,
    get_contrast_ratio,
    meets_aa,
    meets_aaa,
    meets_wcag_aa,
    meets_wcag_aaa,
    pick_foreground,
    relative_luminance,
)
from .errors import InvalidColorError, MissingPaletteRoleError, TokensError
from .formats import ColorFormat, export_scale, format_color_as
from .generate import TokenSystem, generate_tokens, get_semantic_for_mode
from .harmony import (
    HarmonyType,
    derive_destructive,
    derive_neutral,
    derive_secondary,
    derive_success,
    derive_warning,
)
from .primitives import BrandColors, PrimitivePalette, generate_primitive_palette, get_shade
from .scale import REFERENCE_SHADE, SHADE_KEYS, ColorScale, generate_color_scale
from .semantic import (
    SemanticColor,
    SemanticTokens,
    check_semantic_contrast,
    generate_semantic_tokens,
)
from .tuning import DEFAULT_TUNING, Tuning

__all__ = [
    "Color",
    "ColorInput",
    "as_color",
    "to_perceptual",
    "to_hex",
    "to_rgb",
    "to_hsl",
    "adjust_lightness",
    "adjust_chroma",
    "relative_luminance",
    "contrast_ratio",
    "get_contrast_ratio",
    "meets_aa",
    "meets_aaa",
    "meets_wcag_aa",
    "meets_wcag_aaa",
    "pick_foreground",
    "TokensError",
    "InvalidColorError",
    "MissingPaletteRoleError",
    "ColorFormat",
    "format_color_as",
    "export_scale",
    "HarmonyType",
    "derive_secondary",
    "derive_success",
    "derive_warning",
    "derive_destructive",
    "derive_neutral",
    "ColorScale",
    "SHADE_KEYS",
    "REFERENCE_SHADE",
    "generate_color_scale",
    "BrandColors",
    "PrimitivePalette",
    "generate_primitive_palette",
    "get_shade",
    "SemanticColor",
    "SemanticTokens",
    "generate_semantic_tokens",
    "check_semantic_contrast",
    "TokenSystem",
    "generate_tokens",
    "get_semantic_for_mode",
    "Tuning",
    "DEFAULT_TUNING",
]
