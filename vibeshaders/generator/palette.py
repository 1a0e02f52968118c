"""Uniform declarations and palette constants for generated shaders."""

from __future__ import annotations

from typing import List, Sequence

from vibeshaders.types import ColorPalette, ShaderConfig

BASE_UNIFORMS = (
    "uniform float u_time;",
    "uniform float2 u_resolution;",
    "uniform float u_complexity;",
)

COLOR_UNIFORMS = (
    "uniform float3 u_colorA;",
    "uniform float3 u_colorB;",
    "uniform float3 u_colorC;",
)


def format_float(value: float, digits: int | None = None) -> str:
    """Render *value* as a shading-language float literal.

    With *digits* the value is fixed to that many decimals; otherwise the
    shortest round-tripping form is used. The literal always carries a
    decimal point and never uses exponent notation.
    """

    number = float(value)
    if digits is not None:
        return f"{number:.{digits}f}" if digits > 0 else f"{number:.0f}.0"

    text = repr(number)
    if "e" in text or "E" in text:
        text = f"{number:.17f}".rstrip("0")
    if "." not in text:
        text += ".0"
    if text.endswith("."):
        text += "0"
    return text


def rgb_literal(rgb: Sequence[float]) -> str:
    r, g, b = rgb
    return f"float3({format_float(r, 2)}, {format_float(g, 2)}, {format_float(b, 2)})"


def generate_uniforms(config: ShaderConfig) -> str:
    """Return the uniform block; color uniforms only for uniform-driven configs."""

    lines: List[str] = list(BASE_UNIFORMS)
    if config.use_uniform_colors:
        lines.extend(COLOR_UNIFORMS)
    return "\n".join(lines)


def generate_color_constants(palette: ColorPalette) -> str:
    """Return one ``const float3`` declaration per palette entry, in order."""

    return "\n".join(f"const float3 {name} = {rgb_literal(rgb)};" for name, rgb in palette.items())


__all__ = [
    "BASE_UNIFORMS",
    "COLOR_UNIFORMS",
    "format_float",
    "rgb_literal",
    "generate_uniforms",
    "generate_color_constants",
]
