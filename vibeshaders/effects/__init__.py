"""Effect catalog keyed by :class:`EffectType`."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Union

from vibeshaders.exceptions import UnknownEffectError
from vibeshaders.types import EffectType

from .base import EffectDefinition
from .cellular import CELLULAR, CELLULAR_MEMBRANE, CRYSTALLINE
from .glow import AURORA_CURTAINS, BREATHING_NEBULA, CHROMATIC_BLOOM, METABALLS
from .ocean import FLOWING_STREAMS, LAYERED_ORBS, MAGNETIC_FIELD
from .swirl import AURORA_SPIRALS, KALEIDOSCOPE, MULTI_SWIRL, RADIAL_FLOW
from .texture import INK_BLOOM, LIQUID_MARBLE, STIPPLED
from .warp import DOMAIN_WARP, DOMAIN_WARP_TIEDYE

EFFECTS: Mapping[EffectType, EffectDefinition] = MappingProxyType(
    {
        EffectType.DOMAIN_WARP: DOMAIN_WARP,
        EffectType.DOMAIN_WARP_TIEDYE: DOMAIN_WARP_TIEDYE,
        EffectType.MULTI_SWIRL: MULTI_SWIRL,
        EffectType.AURORA_SPIRALS: AURORA_SPIRALS,
        EffectType.CELLULAR: CELLULAR,
        EffectType.LIQUID_MARBLE: LIQUID_MARBLE,
        EffectType.KALEIDOSCOPE: KALEIDOSCOPE,
        EffectType.FLOWING_STREAMS: FLOWING_STREAMS,
        EffectType.RADIAL_FLOW: RADIAL_FLOW,
        EffectType.METABALLS: METABALLS,
        EffectType.CHROMATIC_BLOOM: CHROMATIC_BLOOM,
        EffectType.LAYERED_ORBS: LAYERED_ORBS,
        EffectType.STIPPLED: STIPPLED,
        EffectType.BREATHING_NEBULA: BREATHING_NEBULA,
        EffectType.MAGNETIC_FIELD: MAGNETIC_FIELD,
        EffectType.CRYSTALLINE: CRYSTALLINE,
        EffectType.INK_BLOOM: INK_BLOOM,
        EffectType.CELLULAR_MEMBRANE: CELLULAR_MEMBRANE,
        EffectType.AURORA_CURTAINS: AURORA_CURTAINS,
    }
)

_missing = set(EffectType) - set(EFFECTS)
if _missing:
    raise RuntimeError(f"effect catalog is missing: {sorted(m.value for m in _missing)}")


def get_effect(effect_type: Union[EffectType, str]) -> EffectDefinition:
    """Return the definition for *effect_type* or raise :class:`UnknownEffectError`."""

    try:
        key = EffectType(effect_type)
    except ValueError:
        raise UnknownEffectError(effect_type) from None
    try:
        return EFFECTS[key]
    except KeyError:
        raise UnknownEffectError(effect_type) from None


__all__ = ["EFFECTS", "EffectDefinition", "get_effect"]
