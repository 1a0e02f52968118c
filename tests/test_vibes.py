"""Vibe theme mapping tests."""

from __future__ import annotations

import random

import pytest

from vibeshaders.morph import MORPH_DEFAULTS
from vibeshaders.presets import SHADER_PRESETS
from vibeshaders.vibes import (
    ACCENT_COLOR,
    DEFAULT_VIBE_SHADERS,
    VIBE_SHADER_GROUPS,
    VibeComplexity,
    VibeTheme,
    build_uniform_values,
    get_next_shader_in_vibe_group,
    get_shader_for_vibe,
    hex_to_rgb,
)


def test_groups_reference_known_shaders() -> None:
    for theme in VibeTheme:
        group = VIBE_SHADER_GROUPS[theme]
        assert group
        assert set(group) <= set(SHADER_PRESETS)
        assert DEFAULT_VIBE_SHADERS[theme] in group


@pytest.mark.parametrize(("index", "expected"), [(0, 4), (1, 13), (3, 4), (-2, 17), (7, 13)])
def test_index_cycles_through_group(index: int, expected: int) -> None:
    assert get_shader_for_vibe(VibeTheme.DEEP, index) == expected


def test_random_pick_stays_in_group() -> None:
    rng = random.Random(7)
    picks = {get_shader_for_vibe("PASSION", rng=rng) for _ in range(50)}

    assert picks <= set(VIBE_SHADER_GROUPS[VibeTheme.PASSION])


def test_random_pick_is_reproducible_with_seed() -> None:
    first = [get_shader_for_vibe(VibeTheme.TRUST, rng=random.Random(3)) for _ in range(5)]
    second = [get_shader_for_vibe(VibeTheme.TRUST, rng=random.Random(3)) for _ in range(5)]

    assert first == second


def test_unknown_theme_raises() -> None:
    with pytest.raises(ValueError):
        get_shader_for_vibe("SERENE", 0)


def test_next_shader_wraps_around() -> None:
    assert get_next_shader_in_vibe_group(VibeTheme.CAUTION, 8) == 14
    assert get_next_shader_in_vibe_group(VibeTheme.CAUTION, 14) == 15
    assert get_next_shader_in_vibe_group(VibeTheme.CAUTION, 15) == 8


def test_next_shader_for_foreign_id_restarts_group() -> None:
    assert get_next_shader_in_vibe_group(VibeTheme.ALERT, 0) == 9


def test_hex_to_rgb() -> None:
    assert hex_to_rgb("#FF0000") == (1.0, 0.0, 0.0)
    assert hex_to_rgb("336699") == pytest.approx((0.2, 0.4, 0.6))
    with pytest.raises(ValueError):
        hex_to_rgb("#FFF")


def test_uniform_values_for_theme() -> None:
    values = build_uniform_values(VibeTheme.GROWTH, VibeComplexity.STORM, time=1500, resolution=(800, 600))

    assert values["u_time"] == 1500.0
    assert values["u_resolution"] == [800.0, 600.0]
    assert values["u_complexity"] == 0.7
    assert values["u_colorA"] == list(hex_to_rgb("#059669"))
    assert values["u_colorB"] == list(hex_to_rgb("#0D9488"))
    assert values["u_colorC"] == list(ACCENT_COLOR)
    for key, default in MORPH_DEFAULTS.items():
        assert values[key] == default


def test_uniform_values_accept_morph_overrides() -> None:
    values = build_uniform_values(
        "ALERT",
        "SMOOTHIE",
        time=0.0,
        resolution=(1, 1),
        morph={"u_morphProgress": 0.25, "u_morphDirection": -1},
    )

    assert values["u_complexity"] == 0.1
    assert values["u_morphProgress"] == 0.25
    assert values["u_morphDirection"] == -1.0
