"""Logging helper tests."""

from __future__ import annotations

import json

import pytest

from vibeshaders.logging import GENERATOR_TAG, log_generation, log_jsonl, read_generation_log


def test_log_generation_stamps_record(tmp_path) -> None:
    path = tmp_path / "generation.jsonl"
    record = {"id": 16, "name": "INK_BLOOM", "sha1": "0" * 40, "effect": "ink_bloom"}

    log_generation(record, path=str(path))

    lines = list(read_generation_log(str(path)))
    assert len(lines) == 1
    assert lines[0]["name"] == "INK_BLOOM"
    assert lines[0]["effect"] == "ink_bloom"
    assert lines[0]["generator"] == GENERATOR_TAG
    assert "timestamp" in lines[0]
    assert "timestamp" not in record


def test_log_generation_requires_identity_keys(tmp_path) -> None:
    path = tmp_path / "generation.jsonl"

    with pytest.raises(ValueError) as excinfo:
        log_generation({"name": "INK_BLOOM"}, path=str(path))

    assert "id" in str(excinfo.value)
    assert "sha1" in str(excinfo.value)
    assert not path.exists()


def test_log_jsonl_creates_directories_and_appends(tmp_path) -> None:
    path = tmp_path / "nested" / "dir" / "records.jsonl"

    log_jsonl(str(path), {"b": 2, "a": 1})
    log_jsonl(str(path), {"c": 3})

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == ['{"a": 1, "b": 2}', '{"c": 3}']
    assert [json.loads(line) for line in lines][1] == {"c": 3}
