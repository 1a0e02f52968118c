"""Utilities for structured logging of shader generation."""

from __future__ import annotations

import datetime as _dt
import json
import os
from typing import Any, Dict, Iterator, Optional

_GENERATION_LOG_PATH = "meta/output/vibeshaders/generation.jsonl"
GENERATION_RECORD_KEYS = ("id", "name", "sha1")
GENERATOR_TAG = "vibeshaders/0.1.0"


def log_jsonl(path: str, record: Dict[str, Any]) -> None:
    """Append *record* as a JSON line to *path*, creating directories as needed."""

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, "a", encoding="utf-8") as handle:
        handle.write(json.dumps(record, sort_keys=True))
        handle.write("\n")


def log_generation(record: Dict[str, Any], *, path: Optional[str] = None) -> None:
    """Append a shader generation record to the generation log.

    Records must identify the shader (``id``, ``name``) and the digest of the
    emitted source (``sha1``) so repeated runs can be diffed. A UTC
    ``timestamp`` and the ``generator`` tag are stamped unless already set.
    """

    missing = [key for key in GENERATION_RECORD_KEYS if key not in record]
    if missing:
        raise ValueError(f"generation record missing keys: {', '.join(missing)}")

    payload = dict(record)
    payload.setdefault("generator", GENERATOR_TAG)
    payload.setdefault("timestamp", _dt.datetime.now(tz=_dt.timezone.utc).isoformat())
    log_jsonl(path or _GENERATION_LOG_PATH, payload)


def read_generation_log(path: Optional[str] = None) -> Iterator[Dict[str, Any]]:
    """Yield generation records from *path*, skipping blank lines."""

    with open(path or _GENERATION_LOG_PATH, "r", encoding="utf-8") as handle:
        for line in handle:
            if line.strip():
                yield json.loads(line)


__all__ = ["GENERATION_RECORD_KEYS", "GENERATOR_TAG", "log_jsonl", "log_generation", "read_generation_log"]
