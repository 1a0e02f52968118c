"""Config schema validation tests."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict

import pytest

from vibeshaders.exceptions import ShaderConfigError
from vibeshaders.presets import LIQUID_MARBLE
from vibeshaders.schema import validate_config
from vibeshaders.types import DEFAULT_TIME, EffectType, NoiseType, ShaderConfig


@pytest.fixture()
def payload() -> Dict[str, Any]:
    return {
        "id": 40,
        "name": "SUNSET_MARBLE",
        "description": "Marble veins in sunset tones",
        "fallbackColor": "#201008",
        "noise": "simplex",
        "time": {"scale": 0.0005},
        "palette": {
            "colors": {
                "COLOR_NAVY": [0.2, 0.1, 0.1],
                "COLOR_GOLD": [1.0, 0.6, 0.2],
                "COLOR_CREAM": [1.0, 0.9, 0.8],
                "COLOR_ROSE": [0.9, 0.3, 0.4],
            }
        },
        "effect": "liquid_marble",
        "effectParams": {"patternScale": 1.5},
        "vignette": {"strength": 1.1},
    }


def test_preset_is_valid() -> None:
    result = validate_config(LIQUID_MARBLE)

    assert result == {"ok": True, "reason": "validation_passed", "errors": []}


def test_from_mapping_builds_config(payload: Dict[str, Any]) -> None:
    config = ShaderConfig.from_mapping(payload)

    assert config.id == 40
    assert config.fallback_color == "#201008"
    assert config.noise is NoiseType.SIMPLEX
    assert config.effect is EffectType.LIQUID_MARBLE
    assert config.time.scale == 0.0005
    assert list(config.palette.colors) == ["COLOR_NAVY", "COLOR_GOLD", "COLOR_CREAM", "COLOR_ROSE"]
    assert config.effect_params["patternScale"] == 1.5
    assert config.resolved_vignette.strength == 1.1
    assert config.resolved_vignette.smoothness == 0.6


def test_to_mapping_round_trips_through_schema(payload: Dict[str, Any]) -> None:
    config = ShaderConfig.from_mapping(payload)

    assert ShaderConfig.from_mapping(config.to_mapping()) == config


@pytest.mark.parametrize(
    ("field", "value", "path"),
    [
        ("effect", "plasma_storm", ["effect"]),
        ("noise", "perlin", ["noise"]),
        ("fallbackColor", "orange", ["fallback_color"]),
        ("time", {"scale": 0}, ["time", "scale"]),
        ("palette", {"colors": {"COLOR_GOLD": [1.2, 0.5, 0.5]}}, ["palette", "colors", "COLOR_GOLD", 0]),
    ],
)
def test_invalid_fields_are_reported(payload: Dict[str, Any], field: str, value: Any, path: list) -> None:
    payload[field] = value

    with pytest.raises(ShaderConfigError) as excinfo:
        ShaderConfig.from_mapping(payload)

    assert [error["path"] for error in excinfo.value.errors] == [path]


def test_missing_required_field(payload: Dict[str, Any]) -> None:
    del payload["effect"]

    result = validate_config(payload)

    assert result["ok"] is False
    assert result["reason"] == "validation_failed"
    assert "'effect' is a required property" in result["errors"][0]["message"]


def test_non_mapping_is_rejected() -> None:
    result = validate_config(["not", "a", "config"])

    assert result["ok"] is False
    assert result["reason"] == "not_a_mapping"


def test_time_offset_defaults_when_omitted(payload: Dict[str, Any]) -> None:
    config = ShaderConfig.from_mapping(payload)

    assert config.time == replace(DEFAULT_TIME, scale=0.0005)
    assert config.time.offset == DEFAULT_TIME.offset


def test_unknown_noise_on_config_object_is_reported() -> None:
    result = validate_config(replace(LIQUID_MARBLE, noise="perlin"))

    assert result["ok"] is False
    assert [error["path"] for error in result["errors"]] == [["noise"]]
