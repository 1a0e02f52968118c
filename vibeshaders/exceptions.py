"""Shared exceptions raised by the shader factory."""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class VibeShadersError(Exception):
    """Base class for errors raised by :mod:`vibeshaders`."""


class UnknownEffectError(VibeShadersError, ValueError):
    """Raised when an effect tag has no entry in the effect catalog."""

    def __init__(self, effect: Any) -> None:
        self.effect = effect
        super().__init__(f"Unknown effect type: {effect!r}")


class ShaderConfigError(VibeShadersError, ValueError):
    """Raised when a shader configuration or preset catalog is invalid."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        self.errors = list(errors or [])
        super().__init__(message)


__all__ = ["VibeShadersError", "UnknownEffectError", "ShaderConfigError"]
