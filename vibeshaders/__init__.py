"""vibeshaders package exposing the shader factory surface."""

from .exceptions import ShaderConfigError, UnknownEffectError, VibeShadersError
from .generator import ShaderComposer, create_shader
from .morph import MORPH_DEFAULTS, wrap_with_morph
from .presets import PRESETS, SHADER_PRESETS
from .registry import (
    ShaderRegistry,
    create_custom_shader,
    default_registry,
    get_all_shaders,
    get_shader_by_id,
    get_shader_by_name,
    get_shader_config,
)
from .schema import validate_config
from .types import (
    ColorPalette,
    EffectType,
    GeneratedShader,
    NoiseType,
    ShaderConfig,
    ShaderEntry,
    TimeConfig,
    VignetteConfig,
)

__all__ = [
    "ColorPalette",
    "EffectType",
    "GeneratedShader",
    "MORPH_DEFAULTS",
    "NoiseType",
    "PRESETS",
    "SHADER_PRESETS",
    "ShaderComposer",
    "ShaderConfig",
    "ShaderConfigError",
    "ShaderEntry",
    "ShaderRegistry",
    "TimeConfig",
    "UnknownEffectError",
    "VibeShadersError",
    "VignetteConfig",
    "create_custom_shader",
    "create_shader",
    "default_registry",
    "get_all_shaders",
    "get_shader_by_id",
    "get_shader_by_name",
    "get_shader_config",
    "validate_config",
    "wrap_with_morph",
]
