"""Global pytest configuration for the vibeshaders suite."""

from __future__ import annotations

import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from vibeshaders.config import FAIL_FAST_ENV, GENERATION_LOG_ENV, LOG_LEVEL_ENV
from vibeshaders.registry import ShaderRegistry


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient settings from leaking into individual tests."""

    for name in (FAIL_FAST_ENV, GENERATION_LOG_ENV, LOG_LEVEL_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def registry() -> ShaderRegistry:
    return ShaderRegistry()


@pytest.fixture()
def valid_shader() -> str:
    return (
        "uniform float u_time;\n"
        "uniform float2 u_resolution; // viewport size\n"
        "uniform float u_complexity;\n"
        "\n"
        "float wave(float2 p) {\n"
        "  return sin(p.x * 4.0) * 0.5 + 0.5;\n"
        "}\n"
        "\n"
        "half4 main(float2 fragCoord) {\n"
        "  float2 uv = fragCoord / u_resolution;\n"
        "  half3 color = half3(wave(uv), uv.y, 0.5);\n"
        "  return half4(color, 1.0);\n"
        "}\n"
    )
