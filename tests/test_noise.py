"""Noise library tests."""

from __future__ import annotations

import re

import pytest

from vibeshaders.generator.noise import (
    FBM_HASH,
    FBM_SIMPLEX,
    HASH_NOISE,
    SIMPLEX_NOISE,
    TURBULENCE,
    get_noise_code,
)
from vibeshaders.types import NoiseType


def _definitions(source: str, name: str) -> int:
    return len(re.findall(rf"^\w+\s+{name}\s*\(", source, flags=re.MULTILINE))


def test_simplex_contains_gradient_noise_and_fbm() -> None:
    code = get_noise_code(NoiseType.SIMPLEX)

    assert code == SIMPLEX_NOISE + FBM_SIMPLEX
    assert "float snoise(float2 v)" in code
    assert "float hash(" not in code


def test_hash_contains_value_noise_and_fbm() -> None:
    code = get_noise_code(NoiseType.HASH)

    assert code == HASH_NOISE + FBM_HASH
    assert "float noise(float2 p)" in code
    assert "snoise" not in code


def test_both_defines_every_function_once() -> None:
    code = get_noise_code(NoiseType.BOTH)

    assert _definitions(code, "snoise") == 1
    assert _definitions(code, "hash") == 1
    assert _definitions(code, "noise") == 1
    assert _definitions(code, "fbm") == 1
    assert FBM_HASH not in code


def test_accepts_string_values() -> None:
    assert get_noise_code("simplex") == get_noise_code(NoiseType.SIMPLEX)


def test_unknown_noise_type_raises() -> None:
    with pytest.raises(ValueError):
        get_noise_code("perlin")


@pytest.mark.parametrize("fragment", [FBM_SIMPLEX, FBM_HASH, TURBULENCE])
def test_loops_use_literal_bounds(fragment: str) -> None:
    loops = re.findall(r"for\s*\(([^;]*);([^;]*);", fragment)
    assert loops
    for _, condition in loops:
        assert re.search(r"[<>]=?\s*-?\d+(\.\d+)?\s*$", condition.strip())
    assert "break;" in fragment
