"""Environment-driven settings for the shader factory."""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

FAIL_FAST_ENV = "VIBESHADERS_FAIL_FAST"
GENERATION_LOG_ENV = "VIBESHADERS_GENERATION_LOG"
LOG_LEVEL_ENV = "VIBESHADERS_LOG_LEVEL"

_LOGGER = logging.getLogger("vibeshaders.config")


def load_env_file(path: Optional[str] = None) -> bool:
    """Load variables from a ``.env`` file without overriding the process env.

    Returns ``True`` when a file was found and loaded.
    """

    env_path = path or os.path.join(os.getcwd(), ".env")
    loaded = load_dotenv(dotenv_path=env_path, override=False)
    if loaded:
        _LOGGER.debug("Loaded environment from %s", env_path)
    return loaded


def strict_mode_enabled() -> bool:
    raw = os.getenv(FAIL_FAST_ENV)
    if raw is None:
        return True
    lowered = raw.strip().lower()
    return lowered not in {"0", "false", "no", "off"}


def generation_log_path() -> Optional[str]:
    """Return the JSONL path for generation records, or ``None`` when disabled."""

    raw = os.getenv(GENERATION_LOG_ENV)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def configure_logging() -> int:
    """Apply ``VIBESHADERS_LOG_LEVEL`` to the root logger and return the level."""

    log_level = os.getenv(LOG_LEVEL_ENV, "INFO")
    level = getattr(logging, log_level.strip().upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(level)
    return level


__all__ = [
    "FAIL_FAST_ENV",
    "GENERATION_LOG_ENV",
    "LOG_LEVEL_ENV",
    "load_env_file",
    "strict_mode_enabled",
    "generation_log_path",
    "configure_logging",
]
