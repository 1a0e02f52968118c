"""Effect definition record shared by the effect modules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EffectDefinition:
    """Shader text contributed by one effect.

    ``helpers`` is spliced at file scope before the entry point; ``main`` is
    spliced inside it, after ``uv``, ``aspect`` and ``time`` are set up, and
    must leave a 3-component ``color`` behind.
    """

    helpers: str
    main: str
    requires_turbulence: bool = False


__all__ = ["EffectDefinition"]
