from __future__ import annotations

"""Tunable coefficients for scale generation, derivation and semantic picks.

The empirical constants (lightness fractions, chroma taper, hue shift,
role targets) live here as frozen dataclasses instead of inside the
algorithms. :meth:`Tuning.from_mapping` builds an instance from the
``tuning:`` section of the YAML config; the built-in defaults match
``configs/default.yaml``.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping, Tuple, get_origin, get_type_hints

SHADE_KEYS: Tuple[int, ...] = (10, 20, 30, 40, 50, 60, 70, 80, 90, 100)
REFERENCE_SHADE = 50
LIGHT_KEYS: Tuple[int, ...] = tuple(k for k in SHADE_KEYS if k < REFERENCE_SHADE)
DARK_KEYS: Tuple[int, ...] = tuple(k for k in SHADE_KEYS if k > REFERENCE_SHADE)

HARMONY_OFFSETS = {
    "analogous": 30.0,
    "triadic": 120.0,
    "split_complementary": 150.0,
    "complementary": 180.0,
}


@dataclass(frozen=True)
class ScaleProfile:
    """Lightness/chroma profile for one branch of the scale generator.

    Attributes
    ----------
    light_anchor, dark_anchor:
        OKLCH lightness reached by the lightest (10) and darkest (100) keys.
    light_fractions:
        For keys 10, 20, 30, 40: fraction of the distance from the base
        lightness to ``light_anchor``. Must be strictly decreasing.
    dark_fractions:
        For keys 60 … 100: fraction of the distance from the base lightness
        to ``dark_anchor``. Must be strictly increasing.
    chroma_peak, chroma_light_floor, chroma_dark_floor:
        Chroma multipliers at the reference shade and at both extremes.
    keep_base_chroma:
        Use the base chroma for every shade (neutral profile).
    """

    light_anchor: float
    dark_anchor: float
    light_fractions: Tuple[float, ...]
    dark_fractions: Tuple[float, ...]
    chroma_peak: float = 1.1
    chroma_light_floor: float = 0.3
    chroma_dark_floor: float = 0.5
    keep_base_chroma: bool = False

    def __post_init__(self) -> None:
        if not (0.0 <= self.dark_anchor < self.light_anchor <= 1.0):
            raise ValueError("anchors must satisfy 0 <= dark_anchor < light_anchor <= 1")
        if len(self.light_fractions) != len(LIGHT_KEYS):
            raise ValueError(f"light_fractions needs {len(LIGHT_KEYS)} values")
        if len(self.dark_fractions) != len(DARK_KEYS):
            raise ValueError(f"dark_fractions needs {len(DARK_KEYS)} values")
        _check_fractions("light_fractions", tuple(reversed(self.light_fractions)))
        _check_fractions("dark_fractions", self.dark_fractions)
        for name in ("chroma_peak", "chroma_light_floor", "chroma_dark_floor"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"{name} must be non-negative")


def _check_fractions(name: str, values: Tuple[float, ...]) -> None:
    prev = 0.0
    for v in values:
        if not (prev < v <= 1.0):
            raise ValueError(f"{name} must be strictly monotonic within (0, 1]")
        prev = v


CHROMATIC_PROFILE = ScaleProfile(
    light_anchor=0.97,
    dark_anchor=0.15,
    light_fractions=(1.0, 0.8, 0.55, 0.28),
    dark_fractions=(0.22, 0.45, 0.66, 0.84, 1.0),
)

# Neutrals stay near white on the light side and drop hard on the dark side.
NEUTRAL_PROFILE = ScaleProfile(
    light_anchor=0.985,
    dark_anchor=0.15,
    light_fractions=(1.0, 0.96, 0.86, 0.62),
    dark_fractions=(0.3, 0.5, 0.7, 0.86, 1.0),
    keep_base_chroma=True,
)


@dataclass(frozen=True)
class ScaleTuning:
    achromatic_threshold: float = 0.01
    hue_shift: float = 3.0
    hue_shift_enabled: bool = True
    chromatic: ScaleProfile = CHROMATIC_PROFILE
    neutral: ScaleProfile = NEUTRAL_PROFILE


@dataclass(frozen=True)
class RoleTarget:
    """Fixed hue band center and lightness/chroma for a derived role."""

    hue: float
    lightness: float
    chroma: float
    chroma_floor: float
    chroma_max: float

    def __post_init__(self) -> None:
        if not (0.0 <= self.lightness <= 1.0):
            raise ValueError("lightness must be in [0, 1]")
        if not (0.0 <= self.chroma_floor <= self.chroma_max):
            raise ValueError("chroma_floor must be within [0, chroma_max]")


@dataclass(frozen=True)
class DeriverTuning:
    max_hue_nudge: float = 12.0
    harmony_weight: float = 0.15
    success: RoleTarget = RoleTarget(hue=145.0, lightness=0.68, chroma=0.15, chroma_floor=0.11, chroma_max=0.18)
    warning: RoleTarget = RoleTarget(hue=60.0, lightness=0.76, chroma=0.15, chroma_floor=0.11, chroma_max=0.18)
    destructive: RoleTarget = RoleTarget(hue=25.0, lightness=0.6, chroma=0.2, chroma_floor=0.15, chroma_max=0.24)
    secondary_harmony: str = "split_complementary"
    secondary_chroma_factor: float = 0.9
    secondary_chroma_floor: float = 0.04
    neutral_lightness: float = 0.556
    neutral_chroma: float = 0.006

    def __post_init__(self) -> None:
        if self.secondary_harmony not in HARMONY_OFFSETS:
            raise ValueError(
                f"secondary_harmony must be one of {sorted(HARMONY_OFFSETS)}, got {self.secondary_harmony!r}"
            )
        if not (0.0 <= self.harmony_weight <= 1.0):
            raise ValueError("harmony_weight must be in [0, 1]")
        if self.max_hue_nudge < 0.0:
            raise ValueError("max_hue_nudge must be non-negative")


@dataclass(frozen=True)
class ShadePicks:
    base: int
    muted: int
    accent: int

    def __post_init__(self) -> None:
        for name in ("base", "muted", "accent"):
            if getattr(self, name) not in SHADE_KEYS:
                raise ValueError(f"{name} shade must be one of {SHADE_KEYS}")


@dataclass(frozen=True)
class SemanticPicks:
    light: ShadePicks = ShadePicks(base=50, muted=10, accent=70)
    dark: ShadePicks = ShadePicks(base=60, muted=90, accent=80)


@dataclass(frozen=True)
class Tuning:
    scale: ScaleTuning = field(default_factory=ScaleTuning)
    derive: DeriverTuning = field(default_factory=DeriverTuning)
    semantic: SemanticPicks = field(default_factory=SemanticPicks)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "Tuning":
        """Build a Tuning from a (possibly partial) nested mapping.

        Unknown keys are ignored; invalid values raise ``ValueError``.
        """
        base = cls()
        if not data:
            return base
        if not isinstance(data, Mapping):
            raise ValueError("tuning config must be a mapping")

        scale_cfg = _section(data, "scale")
        scale = _merge(base.scale, scale_cfg, nested=("chromatic", "neutral"))
        derive_cfg = _section(data, "derive")
        derive = _merge(base.derive, derive_cfg, nested=("success", "warning", "destructive"))
        semantic_cfg = _section(data, "semantic")
        semantic = _merge(base.semantic, semantic_cfg, nested=("light", "dark"))
        return cls(scale=scale, derive=derive, semantic=semantic)

    def with_hue_shift(self, enabled: bool) -> "Tuning":
        return replace(self, scale=replace(self.scale, hue_shift_enabled=enabled))


DEFAULT_TUNING = Tuning()


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, Mapping):
        raise ValueError(f"tuning.{name} must be a mapping")
    return value


def _coerce(key: str, hint: Any, value: Any) -> Any:
    """Check a scalar override against the field's declared type."""
    if hint is bool:
        if isinstance(value, bool):
            return value
    elif hint is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
    elif hint is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif hint is str:
        if isinstance(value, str):
            return value
    elif get_origin(hint) is tuple:
        if isinstance(value, (list, tuple)):
            return tuple(_coerce(key, float, v) for v in value)
    else:
        return value
    raise ValueError(f"tuning key {key!r} expects {getattr(hint, '__name__', hint)}, got {value!r}")


def _merge(obj: Any, overrides: Mapping[str, Any], nested: Tuple[str, ...] = ()) -> Any:
    hints = get_type_hints(type(obj))
    known = {f.name for f in fields(obj)}
    changes: dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in known:
            continue
        if key in nested:
            if not isinstance(value, Mapping):
                raise ValueError(f"tuning key {key!r} must be a mapping")
            changes[key] = _merge(getattr(obj, key), value)
        else:
            changes[key] = _coerce(key, hints[key], value)
    try:
        return replace(obj, **changes)
    except TypeError as exc:
        raise ValueError(f"invalid tuning values: {exc}") from exc


__all__ = [
    "SHADE_KEYS",
    "REFERENCE_SHADE",
    "LIGHT_KEYS",
    "DARK_KEYS",
    "HARMONY_OFFSETS",
    "ScaleProfile",
    "ScaleTuning",
    "RoleTarget",
    "DeriverTuning",
    "ShadePicks",
    "SemanticPicks",
    "Tuning",
    "CHROMATIC_PROFILE",
    "NEUTRAL_PROFILE",
    "DEFAULT_TUNING",
]
