"""Transition wrapper tests."""

from __future__ import annotations

import re

import pytest

from vibeshaders.generator import create_shader
from vibeshaders.morph import MORPH_DEFAULTS, MORPH_FUNCTIONS, tokenize, wrap_with_morph
from vibeshaders.presets import LIQUID_MARBLE, SHADER_PRESETS


def _uniform_lines(source: str):
    return [line for line in source.splitlines() if line.lstrip().startswith("uniform ")]


def test_malformed_input_is_returned_unchanged() -> None:
    malformed = "this is not a valid shader"

    assert wrap_with_morph(malformed) == malformed


@pytest.mark.parametrize(
    "source",
    [
        "",
        "half4 main(float2 xy) { return half4(1.0, 0.0, 0.0, 1.0);",
        "uniform float u_time;\nfloat f(float x) { return x; }\n",
        "half4 main(float2 xy) {\n  return color;\n}\n",
    ],
)
def test_unrecognised_shapes_are_identity(source: str) -> None:
    assert wrap_with_morph(source) == source


def test_valid_shader_gains_morph_declarations(valid_shader: str) -> None:
    wrapped = wrap_with_morph(valid_shader)

    assert "uniform float u_morphProgress;" in wrapped
    assert "uniform float u_morphDirection;" in wrapped
    assert "float morphFbm(float2 p)" in wrapped
    assert "float getMorphAlpha(" in wrapped
    for line in _uniform_lines(valid_shader):
        assert line in wrapped.splitlines()


def test_return_alpha_uses_entry_parameter(valid_shader: str) -> None:
    wrapped = wrap_with_morph(valid_shader)

    assert (
        "return half4(color, half(getMorphAlpha(fragCoord, u_resolution, "
        "u_morphProgress, u_morphDirection)));"
    ) in wrapped
    assert "return half4(color, 1.0);" not in wrapped


def test_surrounding_text_is_preserved(valid_shader: str) -> None:
    wrapped = wrap_with_morph(valid_shader)

    assert "float wave(float2 p) {\n  return sin(p.x * 4.0) * 0.5 + 0.5;\n}\n" in wrapped
    assert "  half3 color = half3(wave(uv), uv.y, 0.5);\n" in wrapped
    assert wrapped.index("uniform float u_morphDirection;") < wrapped.index("float wave(")
    assert wrapped.index("float getMorphAlpha(") < wrapped.index("half4 main(")


def test_morph_uniforms_follow_last_uniform(valid_shader: str) -> None:
    wrapped = wrap_with_morph(valid_shader)

    assert (
        "uniform float u_complexity;\n"
        "uniform float u_morphProgress;\n"
        "uniform float u_morphDirection;\n"
    ) in wrapped


def test_non_unit_alpha_is_multiplied() -> None:
    source = (
        "uniform float2 u_resolution;\n"
        "half4 main(float2 xy) {\n"
        "  half3 color = half3(0.2);\n"
        "  return half4(color, 0.5 * u_fade);\n"
        "}\n"
    )

    wrapped = wrap_with_morph(source)

    assert "return half4(color, half((0.5 * u_fade) * getMorphAlpha(xy," in wrapped


def test_missing_resolution_uniform_is_declared() -> None:
    source = (
        "float3 tint() { return float3(1.0); }\n"
        "float4 main(float2 coord) {\n"
        "  return float4(tint(), 1.0);\n"
        "}\n"
    )

    wrapped = wrap_with_morph(source)

    assert wrapped.startswith("float3 tint() { return float3(1.0); }\n")
    assert "uniform float2 u_resolution;" in wrapped
    assert "return float4(tint(), float(getMorphAlpha(coord," in wrapped


def test_helper_returns_are_left_alone() -> None:
    source = (
        "uniform float2 u_resolution;\n"
        "half4 shade(float2 p) {\n"
        "  return half4(1.0, 1.0, 1.0, 1.0);\n"
        "}\n"
        "half4 main(float2 xy) {\n"
        "  return shade(xy) * half4(1.0, 1.0, 1.0, 1.0);\n"
        "}\n"
    )

    assert wrap_with_morph(source) == source


def test_wrap_is_idempotent() -> None:
    once = wrap_with_morph(create_shader(LIQUID_MARBLE))

    assert wrap_with_morph(once) == once


@pytest.mark.parametrize("shader_id", sorted(SHADER_PRESETS))
def test_every_preset_can_be_wrapped(shader_id: int) -> None:
    source = create_shader(SHADER_PRESETS[shader_id])
    wrapped = wrap_with_morph(source)

    assert wrapped != source
    assert wrapped.count("uniform float u_morphProgress;") == 1
    assert "return half4(color, half(getMorphAlpha(xy, u_resolution" in wrapped
    assert wrapped.count("{") == wrapped.count("}")
    for line in _uniform_lines(source):
        assert line in wrapped.splitlines()


def test_morph_functions_unroll_octaves() -> None:
    assert "for" not in re.findall(r"\w+", MORPH_FUNCTIONS)
    assert MORPH_FUNCTIONS.count("morphNoise(p * frequency)") == 4


def test_defaults() -> None:
    assert MORPH_DEFAULTS == {"u_morphProgress": 0.0, "u_morphDirection": 1.0}


def test_tokenizer_keeps_every_character() -> None:
    source = "uniform float u_t; /* block */ half4 main(float2 xy) { return half4(1.0e-3); }"

    tokens = tokenize(source)

    assert "".join(token.text for token in tokens) == source
    assert [token.kind for token in tokens[:3]] == ["ident", "space", "ident"]
    assert any(token.kind == "comment" and token.text == "/* block */" for token in tokens)


def test_glsl_entry_point_gets_glsl_helpers() -> None:
    source = (
        "uniform vec2 u_resolution;\n"
        "vec4 main(vec2 fragCoord) {\n"
        "  return vec4(1.0, 0.0, 0.0, 1.0);\n"
        "}\n"
    )

    wrapped = wrap_with_morph(source)

    assert "float morphHash(vec2 p) {" in wrapped
    assert "float getMorphAlpha(vec2 xy, vec2 resolution, float progress, float direction) {" in wrapped
    assert not re.search(r"\b(?:float[234]|half[234]?)\b", wrapped)
    assert "return vec4(1.0, 0.0, 0.0, float(getMorphAlpha(fragCoord, u_resolution," in wrapped


def test_glsl_source_without_resolution_declares_vec2() -> None:
    source = "vec4 main(vec2 p) {\n  return vec4(vec3(0.5), 1.0);\n}\n"

    wrapped = wrap_with_morph(source)

    assert wrapped.startswith("uniform vec2 u_resolution;\nuniform float u_morphProgress;\n")
    assert "float2" not in wrapped
