"""Compose complete shader programs from a :class:`ShaderConfig`."""

from __future__ import annotations

import logging
from numbers import Real
from typing import List, Optional

from vibeshaders.effects import EffectDefinition, get_effect
from vibeshaders.types import GeneratedShader, ShaderConfig, TimeConfig, VignetteConfig

from .noise import TURBULENCE, get_noise_code
from .palette import format_float, generate_color_constants, generate_uniforms


class ShaderComposer:
    """Stitch uniforms, palette, noise and an effect into one source string.

    The part order is fixed because later parts reference names declared by
    earlier ones: uniforms, palette constants, noise, turbulence, effect
    helpers, then the ``main`` entry point.
    """

    HEADER = "// Generated by vibeshaders"

    def __init__(self) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)

    def compose(self, config: ShaderConfig) -> str:
        """Return the full shader source for *config*."""

        effect = get_effect(config.effect)

        parts: List[str] = [self._build_header(config)]
        parts.append("// Uniforms\n" + generate_uniforms(config))
        if not config.use_uniform_colors and len(config.palette):
            parts.append("// Color Palette\n" + generate_color_constants(config.palette))
        parts.append(get_noise_code(config.noise).strip("\n"))
        if effect.requires_turbulence:
            parts.append(TURBULENCE.strip("\n"))
        parts.append("// Effect Helpers\n" + effect.helpers.strip("\n"))
        parts.append("// Main\n" + self._build_main(config, effect))

        source = "\n\n".join(parts) + "\n"
        self._logger.debug(
            "Composed shader %s (effect=%s, noise=%s, %d chars)",
            config.name,
            effect_name(config),
            config.noise,
            len(source),
        )
        return source

    def generate(self, config: ShaderConfig) -> GeneratedShader:
        return GeneratedShader(source=self.compose(config), config=config)

    @staticmethod
    def _build_header(config: ShaderConfig) -> str:
        return f"{ShaderComposer.HEADER}\n// Effect: {effect_name(config)} ({config.name})"

    @staticmethod
    def _build_time(time: TimeConfig) -> str:
        expression = f"u_time * {format_float(time.scale)}"
        if time.offset:
            expression += f" + {format_float(time.offset)}"
        return f"  float time = {expression};"

    @staticmethod
    def _build_pattern_scale(config: ShaderConfig) -> Optional[str]:
        scale = config.effect_params.get("patternScale")
        if isinstance(scale, bool) or not isinstance(scale, Real):
            return None
        return f"  uv *= {format_float(scale)};"

    @staticmethod
    def _build_vignette(vignette: VignetteConfig) -> str:
        return (
            "  // Vignette\n"
            "  float2 vignetteUV = xy / u_resolution;\n"
            f"  float vignette = 1.0 - length((vignetteUV - 0.5) * {format_float(vignette.strength, 1)});\n"
            f"  vignette = smoothstep(0.0, {format_float(vignette.smoothness, 1)}, vignette);\n"
            f"  color *= half({format_float(vignette.base_brightness, 2)} + "
            f"{format_float(vignette.brightness_boost, 2)} * vignette);"
        )

    @staticmethod
    def _build_main(config: ShaderConfig, effect: EffectDefinition) -> str:
        lines = [
            "half4 main(float2 xy) {",
            "  float2 uv = xy / u_resolution;",
            "  float aspect = u_resolution.x / u_resolution.y;",
            "  uv.x *= aspect;",
            "",
            ShaderComposer._build_time(config.time),
        ]
        pattern_scale = ShaderComposer._build_pattern_scale(config)
        if pattern_scale is not None:
            lines.append(pattern_scale)
        lines.extend(
            [
                "",
                effect.main.strip("\n"),
                "",
                ShaderComposer._build_vignette(config.resolved_vignette),
                "",
                "  return half4(color, 1.0);",
                "}",
            ]
        )
        return "\n".join(lines)


def effect_name(config: ShaderConfig) -> str:
    effect = config.effect
    return getattr(effect, "value", str(effect))


_DEFAULT_COMPOSER = ShaderComposer()


def create_shader(config: ShaderConfig) -> str:
    """Return the shader source for *config*; same config, same bytes."""

    return _DEFAULT_COMPOSER.compose(config)


__all__ = ["ShaderComposer", "create_shader"]
