"""Uniform and palette builder tests."""

from __future__ import annotations

from dataclasses import replace

import pytest

from vibeshaders.generator.palette import (
    format_float,
    generate_color_constants,
    generate_uniforms,
)
from vibeshaders.presets import DOMAIN_WARP, LIQUID_MARBLE
from vibeshaders.types import ColorPalette


def test_base_uniforms_always_present() -> None:
    block = generate_uniforms(LIQUID_MARBLE)

    assert block.splitlines() == [
        "uniform float u_time;",
        "uniform float2 u_resolution;",
        "uniform float u_complexity;",
    ]


def test_color_uniforms_only_for_uniform_driven_configs() -> None:
    block = generate_uniforms(DOMAIN_WARP)

    assert "uniform float3 u_colorA;" in block
    assert "uniform float3 u_colorB;" in block
    assert "uniform float3 u_colorC;" in block
    assert "u_colorA" not in generate_uniforms(replace(DOMAIN_WARP, use_uniform_colors=False))


def test_color_constants_use_two_decimals_in_order() -> None:
    palette = ColorPalette({"COLOR_NAVY": (0.08, 0.1, 0.2), "COLOR_GOLD": (0.85, 0.7, 0.3)})

    assert generate_color_constants(palette) == (
        "const float3 COLOR_NAVY = float3(0.08, 0.10, 0.20);\n"
        "const float3 COLOR_GOLD = float3(0.85, 0.70, 0.30);"
    )


def test_empty_palette_emits_nothing() -> None:
    assert generate_color_constants(ColorPalette({})) == ""


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, "1.0"),
        (0.00025, "0.00025"),
        (0.001, "0.001"),
        (1e-05, "0.00001"),
        (-2.5, "-2.5"),
    ],
)
def test_format_float_literals(value: float, expected: str) -> None:
    assert format_float(value) == expected


def test_format_float_fixed_digits() -> None:
    assert format_float(1.3, 1) == "1.3"
    assert format_float(0.8, 2) == "0.80"
