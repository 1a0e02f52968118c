"""Shader registry resolving preset ids and names to cached entries."""

from __future__ import annotations

import hashlib
import logging
import threading
from typing import Dict, List, Mapping, Optional

from vibeshaders.config import generation_log_path, load_env_file, strict_mode_enabled
from vibeshaders.exceptions import ShaderConfigError
from vibeshaders.generator.composer import ShaderComposer, effect_name
from vibeshaders.logging import log_generation
from vibeshaders.presets import SHADER_PRESETS
from vibeshaders.schema import validate_config
from vibeshaders.types import ShaderConfig, ShaderEntry

DEFAULT_SHADER_ID = 0


class ShaderRegistry:
    """Map preset ids and names to generated :class:`ShaderEntry` records.

    Parameters
    ----------
    presets:
        Catalog keyed by shader id. Must contain :data:`DEFAULT_SHADER_ID`,
        which is what unknown ids and names resolve to.
    composer:
        Composer used to render sources; a fresh one is built when omitted.
    log_path:
        Optional JSONL sink receiving one record per generated shader.
    strict:
        When ``True`` an invalid custom config raises
        :class:`ShaderConfigError`; otherwise the failure is logged and
        generation proceeds.
    """

    def __init__(
        self,
        presets: Mapping[int, ShaderConfig] = SHADER_PRESETS,
        *,
        composer: Optional[ShaderComposer] = None,
        log_path: Optional[str] = None,
        strict: bool = True,
    ) -> None:
        self._validate_catalog(presets)
        self._presets = dict(sorted(presets.items()))
        self._composer = composer or ShaderComposer()
        self.log_path = log_path
        self.strict = strict
        self._logger = logging.getLogger(self.__class__.__name__)
        self._cache: Dict[int, ShaderEntry] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _validate_catalog(presets: Mapping[int, ShaderConfig]) -> None:
        if DEFAULT_SHADER_ID not in presets:
            raise ShaderConfigError(f"preset catalog must define shader id {DEFAULT_SHADER_ID}")

        names = set()
        for key, config in presets.items():
            if key != config.id:
                raise ShaderConfigError(f"preset key {key} does not match config id {config.id}")
            if config.name in names:
                raise ShaderConfigError(f"duplicate preset name {config.name!r}")
            names.add(config.name)

    def get_shader_by_id(self, shader_id: int) -> ShaderEntry:
        """Return the entry for *shader_id*, falling back to the default shader."""

        if shader_id not in self._presets:
            self._logger.debug("Unknown shader id %s; using %s", shader_id, DEFAULT_SHADER_ID)
            shader_id = DEFAULT_SHADER_ID

        with self._lock:
            entry = self._cache.get(shader_id)
            if entry is None:
                entry = self._generate(self._presets[shader_id], cached=True)
                self._cache[shader_id] = entry
        return entry

    def get_shader_by_name(self, name: str) -> ShaderEntry:
        for shader_id, config in self._presets.items():
            if config.name == name:
                return self.get_shader_by_id(shader_id)
        self._logger.debug("Unknown shader name %r; using %s", name, DEFAULT_SHADER_ID)
        return self.get_shader_by_id(DEFAULT_SHADER_ID)

    def get_all_shaders(self) -> List[ShaderEntry]:
        return [self.get_shader_by_id(shader_id) for shader_id in self._presets]

    def create_custom_shader(self, config: ShaderConfig) -> ShaderEntry:
        """Generate an uncached entry for an ad hoc *config*."""

        result = validate_config(config)
        if not result["ok"]:
            if self.strict:
                raise ShaderConfigError(
                    f"invalid custom shader config {config.name!r}: {result['reason']}",
                    result["errors"],
                )
            self._logger.warning(
                "Custom shader %r failed validation (%d errors); generating anyway",
                config.name,
                len(result["errors"]),
            )
        return self._generate(config, cached=False)

    def get_shader_config(self, shader_id: int) -> Optional[ShaderConfig]:
        return self._presets.get(shader_id)

    def cached_ids(self) -> List[int]:
        with self._lock:
            return sorted(self._cache)

    def _generate(self, config: ShaderConfig, *, cached: bool) -> ShaderEntry:
        source = self._composer.compose(config)
        entry = ShaderEntry.from_config(config, source)
        self._logger.info("Generated shader %s (id=%s)", config.name, config.id)

        if self.log_path:
            log_generation(
                {
                    "id": config.id,
                    "name": config.name,
                    "effect": effect_name(config),
                    "noise": getattr(config.noise, "value", str(config.noise)),
                    "cached": cached,
                    "length": len(source),
                    "sha1": hashlib.sha1(source.encode("utf-8")).hexdigest(),
                },
                path=self.log_path,
            )
        return entry


_DEFAULT_REGISTRY: Optional[ShaderRegistry] = None
_DEFAULT_LOCK = threading.Lock()


def default_registry() -> ShaderRegistry:
    """Return the process-wide registry, built once from environment settings."""

    global _DEFAULT_REGISTRY
    with _DEFAULT_LOCK:
        if _DEFAULT_REGISTRY is None:
            load_env_file()
            _DEFAULT_REGISTRY = ShaderRegistry(
                log_path=generation_log_path(),
                strict=strict_mode_enabled(),
            )
        return _DEFAULT_REGISTRY


def get_shader_by_id(shader_id: int) -> ShaderEntry:
    return default_registry().get_shader_by_id(shader_id)


def get_shader_by_name(name: str) -> ShaderEntry:
    return default_registry().get_shader_by_name(name)


def get_all_shaders() -> List[ShaderEntry]:
    return default_registry().get_all_shaders()


def create_custom_shader(config: ShaderConfig) -> ShaderEntry:
    return default_registry().create_custom_shader(config)


def get_shader_config(shader_id: int) -> Optional[ShaderConfig]:
    return default_registry().get_shader_config(shader_id)


__all__ = [
    "DEFAULT_SHADER_ID",
    "ShaderRegistry",
    "default_registry",
    "get_shader_by_id",
    "get_shader_by_name",
    "get_all_shaders",
    "create_custom_shader",
    "get_shader_config",
]
