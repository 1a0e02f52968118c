"""Shader source generators."""

from __future__ import annotations

from .composer import ShaderComposer, create_shader
from .noise import get_noise_code
from .palette import format_float, generate_color_constants, generate_uniforms

__all__ = [
    "ShaderComposer",
    "create_shader",
    "get_noise_code",
    "format_float",
    "generate_color_constants",
    "generate_uniforms",
]
