"""Determinism checks for shader composition."""

from __future__ import annotations

from vibeshaders.generator import ShaderComposer, create_shader
from vibeshaders.morph import wrap_with_morph
from vibeshaders.presets import SHADER_PRESETS
from vibeshaders.registry import ShaderRegistry


def test_composition_is_byte_identical() -> None:
    for config in SHADER_PRESETS.values():
        assert create_shader(config) == ShaderComposer().compose(config)


def test_independent_registries_agree() -> None:
    first = ShaderRegistry()
    second = ShaderRegistry()

    for shader_id in SHADER_PRESETS:
        assert first.get_shader_by_id(shader_id).source == second.get_shader_by_id(shader_id).source


def test_morph_wrap_is_deterministic() -> None:
    source = create_shader(SHADER_PRESETS[9])

    assert wrap_with_morph(source) == wrap_with_morph(source)
