"""JSON Schema validation for shader configuration payloads."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from jsonschema import Draft202012Validator, ValidationError
from referencing import Registry, Resource

from vibeshaders.types import EffectType, NoiseType

_BASE_URI = "https://schemas.vibeshaders.dev/0.1.0"
RGB_SCHEMA_ID = f"{_BASE_URI}/rgb.schema.json"
PALETTE_SCHEMA_ID = f"{_BASE_URI}/palette.schema.json"
CONFIG_SCHEMA_ID = f"{_BASE_URI}/shader-config.schema.json"

RGB_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": RGB_SCHEMA_ID,
    "type": "array",
    "items": {"type": "number", "minimum": 0.0, "maximum": 1.0},
    "minItems": 3,
    "maxItems": 3,
}

PALETTE_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": PALETTE_SCHEMA_ID,
    "type": "object",
    "properties": {
        "colors": {
            "type": "object",
            "propertyNames": {"pattern": "^[A-Za-z_][A-Za-z0-9_]*$"},
            "additionalProperties": {"$ref": RGB_SCHEMA_ID},
        }
    },
    "additionalProperties": False,
}

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": CONFIG_SCHEMA_ID,
    "type": "object",
    "required": ["id", "name", "noise", "time", "palette", "effect"],
    "properties": {
        "id": {"type": "integer", "minimum": 0},
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "fallback_color": {"type": "string", "pattern": "^#[0-9A-Fa-f]{6}$"},
        "noise": {"enum": [member.value for member in NoiseType]},
        "time": {
            "type": "object",
            "required": ["scale"],
            "properties": {
                "scale": {"type": "number", "exclusiveMinimum": 0},
                "offset": {"type": "number"},
            },
            "additionalProperties": False,
        },
        "palette": {"$ref": PALETTE_SCHEMA_ID},
        "effect": {"enum": [member.value for member in EffectType]},
        "effect_params": {
            "type": "object",
            "additionalProperties": {"type": ["number", "boolean", "string"]},
        },
        "vignette": {
            "type": ["object", "null"],
            "additionalProperties": {"type": "number"},
        },
        "use_uniform_colors": {"type": "boolean"},
    },
    "additionalProperties": False,
}


def validate_config(candidate: Any) -> Dict[str, Any]:
    """Validate a shader config mapping (or :class:`ShaderConfig`) against the schema."""

    if hasattr(candidate, "to_mapping"):
        candidate = candidate.to_mapping()

    if not isinstance(candidate, Mapping):
        return {
            "ok": False,
            "reason": "not_a_mapping",
            "errors": [{"message": "shader config must be a mapping", "path": []}],
        }

    validator = Draft202012Validator(CONFIG_SCHEMA, registry=_build_registry())
    errors = list(_collect_errors(validator.iter_errors(dict(candidate))))
    if errors:
        return {"ok": False, "reason": "validation_failed", "errors": errors}
    return {"ok": True, "reason": "validation_passed", "errors": []}


def _collect_errors(raw_errors: Iterable[ValidationError]):
    for error in sorted(raw_errors, key=lambda item: [str(part) for part in item.absolute_path]):
        yield {
            "message": error.message,
            "path": list(error.absolute_path),
        }


def _build_registry() -> Registry:
    """Create a referencing registry holding the shared sub-schemas."""

    resources = {
        RGB_SCHEMA_ID: Resource.from_contents(RGB_SCHEMA),
        PALETTE_SCHEMA_ID: Resource.from_contents(PALETTE_SCHEMA),
    }
    return Registry().with_resources(resources.items())


__all__ = ["CONFIG_SCHEMA", "PALETTE_SCHEMA", "RGB_SCHEMA", "validate_config"]
