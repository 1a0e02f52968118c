"""Environment configuration tests."""

from __future__ import annotations

import logging
import os

import pytest

from vibeshaders.config import (
    FAIL_FAST_ENV,
    GENERATION_LOG_ENV,
    LOG_LEVEL_ENV,
    configure_logging,
    generation_log_path,
    load_env_file,
    strict_mode_enabled,
)


def test_strict_mode_defaults_on() -> None:
    assert strict_mode_enabled() is True


@pytest.mark.parametrize("value", ["0", "false", "No", " OFF "])
def test_strict_mode_disabled_values(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv(FAIL_FAST_ENV, value)

    assert strict_mode_enabled() is False


@pytest.mark.parametrize("value", ["1", "true", "yes", ""])
def test_strict_mode_enabled_values(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv(FAIL_FAST_ENV, value)

    assert strict_mode_enabled() is True


def test_generation_log_path(monkeypatch: pytest.MonkeyPatch) -> None:
    assert generation_log_path() is None

    monkeypatch.setenv(GENERATION_LOG_ENV, "   ")
    assert generation_log_path() is None

    monkeypatch.setenv(GENERATION_LOG_ENV, " logs/gen.jsonl ")
    assert generation_log_path() == "logs/gen.jsonl"


def test_load_env_file_does_not_override(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(f"{FAIL_FAST_ENV}=off\n{GENERATION_LOG_ENV}=from-file.jsonl\n", encoding="utf-8")
    # Track the unset variable so the value loaded from the file is removed afterwards.
    monkeypatch.setenv(FAIL_FAST_ENV, "placeholder")
    monkeypatch.delenv(FAIL_FAST_ENV)
    monkeypatch.setenv(GENERATION_LOG_ENV, "from-process.jsonl")
    monkeypatch.chdir(tmp_path)

    assert load_env_file() is True

    assert os.environ[FAIL_FAST_ENV] == "off"
    assert generation_log_path() == "from-process.jsonl"
    assert strict_mode_enabled() is False


def test_load_env_file_missing(tmp_path) -> None:
    assert load_env_file(str(tmp_path / "absent.env")) is False


@pytest.mark.parametrize(
    ("value", "expected"),
    [("debug", logging.DEBUG), (" WARNING ", logging.WARNING), ("chatty", logging.INFO)],
)
def test_configure_logging_uses_env_level(monkeypatch: pytest.MonkeyPatch, value: str, expected: int) -> None:
    root = logging.getLogger()
    original = root.level
    monkeypatch.setenv(LOG_LEVEL_ENV, value)

    try:
        assert configure_logging() == expected
        assert root.level == expected
    finally:
        root.setLevel(original)
