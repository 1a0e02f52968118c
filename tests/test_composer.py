"""Shader composer tests."""

from __future__ import annotations

from dataclasses import replace

import pytest

from vibeshaders.exceptions import UnknownEffectError
from vibeshaders.generator import ShaderComposer, create_shader
from vibeshaders.generator.noise import TURBULENCE, get_noise_code
from vibeshaders.generator.palette import BASE_UNIFORMS, COLOR_UNIFORMS
from vibeshaders.presets import (
    BREATHING_NEBULA,
    CELLULAR_DREAMS,
    DOMAIN_WARP,
    LIQUID_MARBLE,
    SHADER_PRESETS,
    WARM_FIRE_SWIRLS,
)
from vibeshaders.types import GeneratedShader, NoiseType, TimeConfig, VignetteConfig


@pytest.fixture()
def composer() -> ShaderComposer:
    return ShaderComposer()


def test_uniform_driven_config_declares_color_uniforms() -> None:
    source = create_shader(DOMAIN_WARP)

    assert "uniform float3 u_colorA;" in source
    assert "const float3 COLOR_" not in source
    assert "// Color Palette" not in source


def test_constant_driven_config_declares_palette() -> None:
    source = create_shader(LIQUID_MARBLE)

    for name in ("COLOR_NAVY", "COLOR_GOLD", "COLOR_CREAM", "COLOR_ROSE"):
        assert f"const float3 {name} = float3(" in source
    assert "uniform float3 u_colorA;" not in source


def test_parts_follow_fixed_order() -> None:
    source = create_shader(LIQUID_MARBLE)

    markers = [
        "uniform float u_time;",
        "const float3 COLOR_NAVY",
        "float snoise(float2 v)",
        "float fbm(float2 p, float octaves)",
        "float turbulence(float2 p, float octaves)",
        "float marbleVein(",
        "half4 main(float2 xy) {",
        "float2 vignetteUV = xy / u_resolution;",
        "return half4(color, 1.0);",
    ]
    positions = [source.index(marker) for marker in markers]
    assert positions == sorted(positions)


def test_turbulence_only_when_required() -> None:
    assert TURBULENCE.strip() in create_shader(LIQUID_MARBLE)
    assert "float turbulence(" not in create_shader(WARM_FIRE_SWIRLS)


def test_entry_point_scales_time() -> None:
    source = create_shader(WARM_FIRE_SWIRLS)

    assert "float time = u_time * 0.00025;" in source
    assert "uv.x *= aspect;" in source


def test_time_offset_is_added_when_set() -> None:
    config = replace(WARM_FIRE_SWIRLS, time=TimeConfig(scale=0.001, offset=12.5))

    assert "float time = u_time * 0.001 + 12.5;" in create_shader(config)


def test_pattern_scale_param_rescales_uv() -> None:
    config = replace(CELLULAR_DREAMS, effect_params={"patternScale": 2})

    assert "  uv *= 2.0;" in create_shader(config)
    assert "uv *= 2.0;" not in create_shader(CELLULAR_DREAMS)


def test_vignette_defaults_and_overrides() -> None:
    default_source = create_shader(CELLULAR_DREAMS)
    assert "length((vignetteUV - 0.5) * 1.3)" in default_source
    assert "smoothstep(0.0, 0.6, vignette)" in default_source
    assert "color *= half(0.80 + 0.20 * vignette);" in default_source

    marble = create_shader(LIQUID_MARBLE)
    assert "length((vignetteUV - 0.5) * 1.4)" in marble
    assert "color *= half(0.70 + 0.30 * vignette);" in marble


def test_partial_vignette_merges_over_defaults() -> None:
    config = replace(CELLULAR_DREAMS, vignette=VignetteConfig.from_partial({"baseBrightness": 0.5}))
    source = create_shader(config)

    assert "color *= half(0.50 + 0.20 * vignette);" in source
    assert "length((vignetteUV - 0.5) * 1.3)" in source


def test_header_names_effect() -> None:
    source = create_shader(BREATHING_NEBULA)

    assert source.startswith("// Generated by vibeshaders\n// Effect: breathing_nebula (BREATHING_NEBULA)")


def test_unknown_effect_raises() -> None:
    config = replace(DOMAIN_WARP, effect="plasma_storm")

    with pytest.raises(UnknownEffectError):
        create_shader(config)


def test_generate_wraps_source(composer: ShaderComposer) -> None:
    result = composer.generate(LIQUID_MARBLE)

    assert isinstance(result, GeneratedShader)
    assert result.config is LIQUID_MARBLE
    assert result.source == create_shader(LIQUID_MARBLE)


@pytest.mark.parametrize("shader_id", sorted(SHADER_PRESETS))
def test_every_preset_composes(shader_id: int) -> None:
    source = create_shader(SHADER_PRESETS[shader_id])

    assert source.count("half4 main(float2 xy)") == 1
    assert source.count("{") == source.count("}")
    assert "atan2" not in source


@pytest.mark.parametrize("shader_id", sorted(SHADER_PRESETS))
def test_every_preset_declares_uniform_contract(shader_id: int) -> None:
    config = SHADER_PRESETS[shader_id]
    source = create_shader(config)

    for declaration in BASE_UNIFORMS:
        assert declaration in source
    for declaration in COLOR_UNIFORMS:
        assert (declaration in source) == config.use_uniform_colors


@pytest.mark.parametrize("noise", list(NoiseType))
def test_presets_sharing_noise_inject_identical_fragment(noise: NoiseType) -> None:
    fragment = get_noise_code(noise).strip("\n")
    group = [config for config in SHADER_PRESETS.values() if config.noise is noise]
    assert group

    for config in group:
        assert fragment in create_shader(config)
