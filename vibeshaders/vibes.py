"""Emotional vibe themes mapped to shader groups and runtime uniform values."""

from __future__ import annotations

import random
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from vibeshaders.morph import MORPH_DEFAULTS
from vibeshaders.types import RGB


class VibeTheme(str, Enum):
    TRUST = "TRUST"
    DEEP = "DEEP"
    PASSION = "PASSION"
    GROWTH = "GROWTH"
    CAUTION = "CAUTION"
    ALERT = "ALERT"


class VibeComplexity(str, Enum):
    SMOOTHIE = "SMOOTHIE"
    FLOW = "FLOW"
    OCEAN = "OCEAN"
    STORM = "STORM"
    PAISLEY = "PAISLEY"


COMPLEXITY_VALUES: Mapping[VibeComplexity, float] = MappingProxyType(
    {
        VibeComplexity.SMOOTHIE: 0.1,
        VibeComplexity.FLOW: 0.3,
        VibeComplexity.OCEAN: 0.5,
        VibeComplexity.STORM: 0.7,
        VibeComplexity.PAISLEY: 1.0,
    }
)

# Each theme draws from three shaders whose texture suits its mood.
VIBE_SHADER_GROUPS: Mapping[VibeTheme, Tuple[int, ...]] = MappingProxyType(
    {
        VibeTheme.TRUST: (0, 5, 7),
        VibeTheme.DEEP: (4, 13, 17),
        VibeTheme.PASSION: (2, 10, 16),
        VibeTheme.GROWTH: (7, 11, 18),
        VibeTheme.CAUTION: (8, 14, 15),
        VibeTheme.ALERT: (9, 12, 3),
    }
)

DEFAULT_VIBE_SHADERS: Mapping[VibeTheme, int] = MappingProxyType(
    {
        VibeTheme.TRUST: 0,
        VibeTheme.DEEP: 13,
        VibeTheme.PASSION: 2,
        VibeTheme.GROWTH: 18,
        VibeTheme.CAUTION: 14,
        VibeTheme.ALERT: 9,
    }
)

FALLBACK_SHADER_ID = 0
ACCENT_COLOR: RGB = (0.88, 0.11, 0.28)


def hex_to_rgb(value: str) -> RGB:
    """Convert ``#RRGGBB`` into normalized channels."""

    text = value.lstrip("#")
    if len(text) != 6:
        raise ValueError(f"expected #RRGGBB colour, got {value!r}")
    return (
        int(text[0:2], 16) / 255,
        int(text[2:4], 16) / 255,
        int(text[4:6], 16) / 255,
    )


VIBE_COLORS: Mapping[VibeTheme, Mapping[str, RGB]] = MappingProxyType(
    {
        VibeTheme.TRUST: {"primary": hex_to_rgb("#2563EB"), "secondary": hex_to_rgb("#0891B2")},
        VibeTheme.PASSION: {"primary": hex_to_rgb("#E11D48"), "secondary": hex_to_rgb("#F472B6")},
        VibeTheme.CAUTION: {"primary": hex_to_rgb("#D97706"), "secondary": hex_to_rgb("#92400E")},
        VibeTheme.GROWTH: {"primary": hex_to_rgb("#059669"), "secondary": hex_to_rgb("#0D9488")},
        VibeTheme.DEEP: {"primary": hex_to_rgb("#4C1D95"), "secondary": hex_to_rgb("#8B5CF6")},
        VibeTheme.ALERT: {"primary": hex_to_rgb("#64748B"), "secondary": hex_to_rgb("#334155")},
    }
)


def get_shader_for_vibe(
    theme: Union[VibeTheme, str],
    index: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> int:
    """Pick a shader id for *theme*.

    With *index* the group is cycled (``abs(index) % len(group)``); without
    it a member is chosen at random using *rng* when given.
    """

    group = _group(theme)
    if not group:
        return FALLBACK_SHADER_ID
    if index is not None:
        return group[abs(index) % len(group)]
    chooser = rng or random
    return chooser.choice(group)


def get_next_shader_in_vibe_group(theme: Union[VibeTheme, str], current_shader_id: int) -> int:
    group = _group(theme)
    if not group:
        return FALLBACK_SHADER_ID
    if current_shader_id not in group:
        return group[0]
    return group[(group.index(current_shader_id) + 1) % len(group)]


def build_uniform_values(
    theme: Union[VibeTheme, str],
    complexity: Union[VibeComplexity, str],
    *,
    time: float,
    resolution: Sequence[float],
    morph: Optional[Mapping[str, float]] = None,
) -> Dict[str, Any]:
    """Return the per-frame uniform map a uniform-driven shader expects."""

    palette = VIBE_COLORS[VibeTheme(theme)]
    width, height = resolution
    values: Dict[str, Any] = {
        "u_time": float(time),
        "u_resolution": [float(width), float(height)],
        "u_complexity": COMPLEXITY_VALUES[VibeComplexity(complexity)],
        "u_colorA": list(palette["primary"]),
        "u_colorB": list(palette["secondary"]),
        "u_colorC": list(ACCENT_COLOR),
    }
    values.update(MORPH_DEFAULTS)
    if morph:
        values.update({key: float(value) for key, value in morph.items()})
    return values


def _group(theme: Union[VibeTheme, str]) -> Tuple[int, ...]:
    return VIBE_SHADER_GROUPS.get(VibeTheme(theme), ())


__all__ = [
    "VibeTheme",
    "VibeComplexity",
    "COMPLEXITY_VALUES",
    "VIBE_SHADER_GROUPS",
    "DEFAULT_VIBE_SHADERS",
    "VIBE_COLORS",
    "ACCENT_COLOR",
    "hex_to_rgb",
    "get_shader_for_vibe",
    "get_next_shader_in_vibe_group",
    "build_uniform_values",
]
