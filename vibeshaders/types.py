"""Configuration types consumed by the shader factory."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union

RGB = Tuple[float, float, float]
EffectParamValue = Union[float, int, bool, str]


class NoiseType(str, Enum):
    """Noise algorithms the composer can inject."""

    SIMPLEX = "simplex"
    HASH = "hash"
    BOTH = "both"


class EffectType(str, Enum):
    """Closed set of effect tags understood by the effect catalog."""

    DOMAIN_WARP = "domain_warp"
    DOMAIN_WARP_TIEDYE = "domain_warp_tiedye"
    MULTI_SWIRL = "multi_swirl"
    AURORA_SPIRALS = "aurora_spirals"
    CELLULAR = "cellular"
    LIQUID_MARBLE = "liquid_marble"
    KALEIDOSCOPE = "kaleidoscope"
    FLOWING_STREAMS = "flowing_streams"
    RADIAL_FLOW = "radial_flow"
    METABALLS = "metaballs"
    CHROMATIC_BLOOM = "chromatic_bloom"
    LAYERED_ORBS = "layered_orbs"
    STIPPLED = "stippled"
    BREATHING_NEBULA = "breathing_nebula"
    MAGNETIC_FIELD = "magnetic_field"
    CRYSTALLINE = "crystalline"
    INK_BLOOM = "ink_bloom"
    CELLULAR_MEMBRANE = "cellular_membrane"
    AURORA_CURTAINS = "aurora_curtains"


def _as_rgb(value: Sequence[float]) -> RGB:
    r, g, b = value
    return (float(r), float(g), float(b))


@dataclass(frozen=True)
class ColorPalette:
    """Named colors baked into a shader as constants.

    Entries keep their insertion order so generated source is reproducible.
    """

    colors: Mapping[str, RGB] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {str(name): _as_rgb(rgb) for name, rgb in dict(self.colors).items()}
        object.__setattr__(self, "colors", MappingProxyType(frozen))

    def items(self) -> Iterator[Tuple[str, RGB]]:
        return iter(self.colors.items())

    def __contains__(self, name: object) -> bool:
        return name in self.colors

    def __len__(self) -> int:
        return len(self.colors)


@dataclass(frozen=True)
class TimeConfig:
    """Converts the raw ``u_time`` clock into the effect's time domain."""

    scale: float = 0.00025
    offset: float = 0.0


@dataclass(frozen=True)
class VignetteConfig:
    """Parameters of the radial darkening applied before the final return."""

    strength: float = 1.3
    smoothness: float = 0.6
    base_brightness: float = 0.8
    brightness_boost: float = 0.2

    @classmethod
    def from_partial(cls, overrides: Optional[Mapping[str, float]] = None) -> "VignetteConfig":
        """Merge *overrides* (snake_case or camelCase keys) over the defaults."""

        values: Dict[str, float] = {}
        known = {f.name for f in fields(cls)}
        for key, value in (overrides or {}).items():
            name = _snake_case(key)
            if name in known:
                values[name] = float(value)
        return cls(**values)


DEFAULT_VIGNETTE = VignetteConfig()
DEFAULT_TIME = TimeConfig()


@dataclass(frozen=True)
class ShaderConfig:
    """Root configuration for one generated shader. Never mutated once built."""

    id: int
    name: str
    description: str
    fallback_color: str
    noise: NoiseType
    time: TimeConfig
    palette: ColorPalette
    effect: EffectType
    effect_params: Mapping[str, EffectParamValue] = field(default_factory=dict)
    vignette: Optional[VignetteConfig] = None
    use_uniform_colors: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "effect_params", MappingProxyType(dict(self.effect_params)))

    @property
    def resolved_vignette(self) -> VignetteConfig:
        return self.vignette or DEFAULT_VIGNETTE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ShaderConfig":
        """Build a config from JSON-like *data* after schema validation.

        Keys may be camelCase (``fallbackColor``) or snake_case
        (``fallback_color``). Raises :class:`ShaderConfigError` when the
        payload does not satisfy the config schema.
        """

        from vibeshaders.exceptions import ShaderConfigError
        from vibeshaders.schema import validate_config

        normalized = {_snake_case(key): value for key, value in data.items()}
        result = validate_config(normalized)
        if not result["ok"]:
            raise ShaderConfigError(
                f"invalid shader config {normalized.get('name')!r}: {result['reason']}",
                result["errors"],
            )

        palette = normalized.get("palette") or {}
        colors = palette.get("colors") or {}
        time_block = {_snake_case(k): v for k, v in (normalized.get("time") or {}).items()}
        vignette_block = normalized.get("vignette")

        return cls(
            id=int(normalized["id"]),
            name=str(normalized["name"]),
            description=str(normalized.get("description", "")),
            fallback_color=str(normalized.get("fallback_color", "#000000")),
            noise=NoiseType(normalized["noise"]),
            time=replace(DEFAULT_TIME, **{k: float(v) for k, v in time_block.items()}),
            palette=ColorPalette(colors),
            effect=EffectType(normalized["effect"]),
            effect_params=dict(normalized.get("effect_params") or {}),
            vignette=VignetteConfig.from_partial(vignette_block) if vignette_block is not None else None,
            use_uniform_colors=bool(normalized.get("use_uniform_colors", False)),
        )

    def to_mapping(self) -> Dict[str, Any]:
        """Return a JSON-serialisable snapshot of the config."""

        payload: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "fallback_color": self.fallback_color,
            "noise": getattr(self.noise, "value", str(self.noise)),
            "time": {"scale": self.time.scale, "offset": self.time.offset},
            "palette": {"colors": {name: list(rgb) for name, rgb in self.palette.items()}},
            "effect": getattr(self.effect, "value", str(self.effect)),
            "effect_params": dict(self.effect_params),
            "use_uniform_colors": self.use_uniform_colors,
        }
        if self.vignette is not None:
            payload["vignette"] = {
                "strength": self.vignette.strength,
                "smoothness": self.vignette.smoothness,
                "base_brightness": self.vignette.base_brightness,
                "brightness_boost": self.vignette.brightness_boost,
            }
        return payload


@dataclass(frozen=True)
class GeneratedShader:
    source: str
    config: ShaderConfig


@dataclass(frozen=True)
class ShaderEntry:
    """Registry record pairing generated source with its metadata."""

    id: int
    name: str
    description: str
    source: str
    fallback_color: str
    config: ShaderConfig

    @classmethod
    def from_config(cls, config: ShaderConfig, source: str) -> "ShaderEntry":
        return cls(
            id=config.id,
            name=config.name,
            description=config.description,
            source=source,
            fallback_color=config.fallback_color,
            config=config,
        )


def _snake_case(key: str) -> str:
    chars = []
    for char in str(key):
        if char.isupper():
            chars.append("_")
            chars.append(char.lower())
        else:
            chars.append(char)
    return "".join(chars).lstrip("_")


__all__ = [
    "RGB",
    "NoiseType",
    "EffectType",
    "ColorPalette",
    "TimeConfig",
    "VignetteConfig",
    "DEFAULT_VIGNETTE",
    "DEFAULT_TIME",
    "ShaderConfig",
    "GeneratedShader",
    "ShaderEntry",
]
