"""Preset shader configurations, ids 0 through 18."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from vibeshaders.types import (
    ColorPalette,
    EffectType,
    NoiseType,
    ShaderConfig,
    TimeConfig,
    VignetteConfig,
)

_NO_PALETTE = ColorPalette({})

DOMAIN_WARP = ShaderConfig(
    id=0,
    name="DOMAIN_WARP",
    description="Base domain warping with fBM - organic flowing patterns",
    fallback_color="#0a0a1a",
    noise=NoiseType.SIMPLEX,
    time=TimeConfig(scale=0.001),
    palette=_NO_PALETTE,
    effect=EffectType.DOMAIN_WARP,
    use_uniform_colors=True,
)

DOMAIN_WARP_ENHANCED = ShaderConfig(
    id=1,
    name="DOMAIN_WARP_ENHANCED",
    description="Enhanced domain warping with tie-dye flow",
    fallback_color="#0a0a1a",
    noise=NoiseType.SIMPLEX,
    time=TimeConfig(scale=0.001),
    palette=_NO_PALETTE,
    effect=EffectType.DOMAIN_WARP_TIEDYE,
    use_uniform_colors=True,
)

WARM_FIRE_SWIRLS = ShaderConfig(
    id=2,
    name="WARM_FIRE_SWIRLS",
    description="Multiple drifting swirl centers with warm colors",
    fallback_color="#1a0a0a",
    noise=NoiseType.SIMPLEX,
    time=TimeConfig(scale=0.00025),
    palette=ColorPalette(
        {
            "COLOR_RED": (0.9, 0.15, 0.1),
            "COLOR_ORANGE": (1.0, 0.5, 0.1),
            "COLOR_YELLOW": (1.0, 0.85, 0.2),
            "COLOR_MAGENTA": (0.85, 0.1, 0.5),
        }
    ),
    effect=EffectType.MULTI_SWIRL,
    vignette=VignetteConfig(strength=1.3, smoothness=0.6, base_brightness=0.8, brightness_boost=0.2),
)

NEON_AURORA_SPIRALS = ShaderConfig(
    id=3,
    name="NEON_AURORA_SPIRALS",
    description="Vibrant aurora-like spirals with neon colors",
    fallback_color="#0a1a0a",
    noise=NoiseType.SIMPLEX,
    time=TimeConfig(scale=0.0002),
    palette=ColorPalette(
        {
            "COLOR_PINK": (1.0, 0.2, 0.6),
            "COLOR_BLUE": (0.1, 0.4, 1.0),
            "COLOR_CYAN": (0.0, 0.9, 0.9),
            "COLOR_PURPLE": (0.6, 0.1, 0.9),
        }
    ),
    effect=EffectType.AURORA_SPIRALS,
    vignette=VignetteConfig(strength=1.4, smoothness=0.5, base_brightness=0.75, brightness_boost=0.25),
)

CELLULAR_DREAMS = ShaderConfig(
    id=4,
    name="CELLULAR_DREAMS",
    description="Organic cellular patterns resembling aerial reef views",
    fallback_color="#0a0a1a",
    noise=NoiseType.HASH,
    time=TimeConfig(scale=0.001),
    palette=ColorPalette(
        {
            "TURQUOISE": (0.25, 0.88, 0.82),
            "CYAN": (0.18, 0.75, 0.78),
            "TEAL_DEEP": (0.08, 0.55, 0.58),
            "REEF_DARK": (0.04, 0.25, 0.28),
        }
    ),
    effect=EffectType.CELLULAR,
)

LIQUID_MARBLE = ShaderConfig(
    id=5,
    name="LIQUID_MARBLE",
    description="Flowing marble texture with organic veins",
    fallback_color="#0a0a1a",
    noise=NoiseType.SIMPLEX,
    time=TimeConfig(scale=0.00025),
    palette=ColorPalette(
        {
            "COLOR_NAVY": (0.08, 0.1, 0.2),
            "COLOR_GOLD": (0.85, 0.7, 0.3),
            "COLOR_CREAM": (0.95, 0.9, 0.85),
            "COLOR_ROSE": (0.8, 0.4, 0.5),
        }
    ),
    effect=EffectType.LIQUID_MARBLE,
    vignette=VignetteConfig(strength=1.4, smoothness=0.5, base_brightness=0.7, brightness_boost=0.3),
)

KALEIDOSCOPE_BLOOM = ShaderConfig(
    id=6,
    name="KALEIDOSCOPE_BLOOM",
    description="Kaleidoscopic blooming patterns with radial symmetry",
    fallback_color="#1a0a1a",
    noise=NoiseType.SIMPLEX,
    time=TimeConfig(scale=0.0002),
    palette=ColorPalette(
        {
            "COLOR_FUCHSIA": (1.0, 0.2, 0.6),
            "COLOR_VIOLET": (0.6, 0.2, 0.9),
            "COLOR_CORAL": (1.0, 0.5, 0.4),
            "COLOR_PEACH": (1.0, 0.8, 0.6),
        }
    ),
    effect=EffectType.KALEIDOSCOPE,
    vignette=VignetteConfig(strength=1.3, smoothness=0.5, base_brightness=0.75, brightness_boost=0.25),
)

FLOWING_STREAMS = ShaderConfig(
    id=7,
    name="FLOWING_STREAMS",
    description="Ocean shore-inspired flowing stream patterns",
    fallback_color="#0a1a1a",
    noise=NoiseType.HASH,
    time=TimeConfig(scale=0.001),
    palette=ColorPalette(
        {
            "DEEP_BLUE": (0.15, 0.35, 0.55),
            "TURQUOISE": (0.25, 0.75, 0.72),
            "LAVENDER": (0.65, 0.58, 0.75),
            "SAND": (0.82, 0.72, 0.62),
            "FOAM": (0.95, 0.97, 0.98),
        }
    ),
    effect=EffectType.FLOWING_STREAMS,
)

RADIAL_FLOW_FIELD = ShaderConfig(
    id=8,
    name="RADIAL_FLOW_FIELD",
    description="Deep ocean radial flow field patterns",
    fallback_color="#050510",
    noise=NoiseType.SIMPLEX,
    time=TimeConfig(scale=0.001),
    palette=_NO_PALETTE,
    effect=EffectType.RADIAL_FLOW,
)

BLOB_METABALLS = ShaderConfig(
    id=9,
    name="BLOB_METABALLS",
    description="Organic blob metaballs with smooth blending",
    fallback_color="#0a0a1a",
    noise=NoiseType.SIMPLEX,
    time=TimeConfig(scale=0.001),
    palette=_NO_PALETTE,
    effect=EffectType.METABALLS,
)

CHROMATIC_BLOOM = ShaderConfig(
    id=10,
    name="CHROMATIC_BLOOM",
    description="Chromatic aberration bloom effects",
    fallback_color="#0a0a1a",
    noise=NoiseType.SIMPLEX,
    time=TimeConfig(scale=0.0003),
    palette=_NO_PALETTE,
    effect=EffectType.CHROMATIC_BLOOM,
)

LAYERED_ORBS = ShaderConfig(
    id=11,
    name="LAYERED_ORBS",
    description="Coral reef-inspired layered orb patterns",
    fallback_color="#0a0a1a",
    noise=NoiseType.SIMPLEX,
    time=TimeConfig(scale=0.001),
    palette=_NO_PALETTE,
    effect=EffectType.LAYERED_ORBS,
)

STIPPLED_GRADIENT = ShaderConfig(
    id=12,
    name="STIPPLED_GRADIENT",
    description="Stippled gradient textures with pointillist effect",
    fallback_color="#0a0a1a",
    noise=NoiseType.HASH,
    time=TimeConfig(scale=0.001),
    palette=_NO_PALETTE,
    effect=EffectType.STIPPLED,
)

BREATHING_NEBULA = ShaderConfig(
    id=13,
    name="BREATHING_NEBULA",
    description="Fluid shoreline-inspired breathing nebula",
    fallback_color="#0a0a1a",
    noise=NoiseType.BOTH,
    time=TimeConfig(scale=0.001),
    palette=_NO_PALETTE,
    effect=EffectType.BREATHING_NEBULA,
)

MAGNETIC_FIELD_LINES = ShaderConfig(
    id=14,
    name="MAGNETIC_FIELD_LINES",
    description="Tidal pool-inspired magnetic field line patterns",
    fallback_color="#0a0a1a",
    noise=NoiseType.SIMPLEX,
    time=TimeConfig(scale=0.001),
    palette=_NO_PALETTE,
    effect=EffectType.MAGNETIC_FIELD,
)

CRYSTALLINE_FACETS = ShaderConfig(
    id=15,
    name="CRYSTALLINE_FACETS",
    description="Seafoam crystalline facet patterns",
    fallback_color="#0a0a1a",
    noise=NoiseType.HASH,
    time=TimeConfig(scale=0.001),
    palette=_NO_PALETTE,
    effect=EffectType.CRYSTALLINE,
)

INK_BLOOM = ShaderConfig(
    id=16,
    name="INK_BLOOM",
    description="Ink bloom spreading effect in water",
    fallback_color="#0a0a1a",
    noise=NoiseType.BOTH,
    time=TimeConfig(scale=0.001),
    palette=_NO_PALETTE,
    effect=EffectType.INK_BLOOM,
)

CELLULAR_MEMBRANE = ShaderConfig(
    id=17,
    name="CELLULAR_MEMBRANE",
    description="Lagoon-inspired cellular membrane patterns",
    fallback_color="#0a1a1a",
    noise=NoiseType.HASH,
    time=TimeConfig(scale=0.001),
    palette=_NO_PALETTE,
    effect=EffectType.CELLULAR_MEMBRANE,
)

AURORA_CURTAINS = ShaderConfig(
    id=18,
    name="AURORA_CURTAINS",
    description="Ocean currents aurora curtain effect",
    fallback_color="#0a0a1a",
    noise=NoiseType.BOTH,
    time=TimeConfig(scale=0.001),
    palette=_NO_PALETTE,
    effect=EffectType.AURORA_CURTAINS,
)

SHADER_PRESETS: Mapping[int, ShaderConfig] = MappingProxyType(
    {
        preset.id: preset
        for preset in (
            DOMAIN_WARP,
            DOMAIN_WARP_ENHANCED,
            WARM_FIRE_SWIRLS,
            NEON_AURORA_SPIRALS,
            CELLULAR_DREAMS,
            LIQUID_MARBLE,
            KALEIDOSCOPE_BLOOM,
            FLOWING_STREAMS,
            RADIAL_FLOW_FIELD,
            BLOB_METABALLS,
            CHROMATIC_BLOOM,
            LAYERED_ORBS,
            STIPPLED_GRADIENT,
            BREATHING_NEBULA,
            MAGNETIC_FIELD_LINES,
            CRYSTALLINE_FACETS,
            INK_BLOOM,
            CELLULAR_MEMBRANE,
            AURORA_CURTAINS,
        )
    }
)

PRESETS: Mapping[str, ShaderConfig] = MappingProxyType(
    {preset.name: preset for preset in SHADER_PRESETS.values()}
)

__all__ = [
    "SHADER_PRESETS",
    "PRESETS",
    "DOMAIN_WARP",
    "DOMAIN_WARP_ENHANCED",
    "WARM_FIRE_SWIRLS",
    "NEON_AURORA_SPIRALS",
    "CELLULAR_DREAMS",
    "LIQUID_MARBLE",
    "KALEIDOSCOPE_BLOOM",
    "FLOWING_STREAMS",
    "RADIAL_FLOW_FIELD",
    "BLOB_METABALLS",
    "CHROMATIC_BLOOM",
    "LAYERED_ORBS",
    "STIPPLED_GRADIENT",
    "BREATHING_NEBULA",
    "MAGNETIC_FIELD_LINES",
    "CRYSTALLINE_FACETS",
    "INK_BLOOM",
    "CELLULAR_MEMBRANE",
    "AURORA_CURTAINS",
]
