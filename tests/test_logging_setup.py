"""Tests for the JSONL logging sink."""

import json
import logging

import pytest

from please_bundle.logging_setup import JsonlHandler
from please_bundle.logging_setup import init_json_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


def _read_lines(path):
    return [json.loads(line) for line in path.read_text().splitlines()]


def test_writes_one_json_object_per_record(tmp_path, restore_root_logger):
    log_path = tmp_path / "logs" / "run.jsonl"
    init_json_logging(log_path, "debug")

    logger = logging.getLogger("please_bundle.test")
    logger.info("Built package registry with 2 exported names")
    logger.debug("resolved", extra={"specifier": "leftpad", "layer": "registry"})

    first, second = _read_lines(log_path)
    assert first["lvl"] == "INFO"
    assert first["logger"] == "please_bundle.test"
    assert first["message"] == "Built package registry with 2 exported names"
    assert first["schema"] == {"name": "please-bundle.log", "ver": "1.0.0"}
    assert "ts" in first
    assert second["specifier"] == "leftpad"
    assert second["layer"] == "registry"


def test_non_json_extras_are_stringified(tmp_path, restore_root_logger):
    log_path = tmp_path / "run.jsonl"
    init_json_logging(log_path)

    logging.getLogger("please_bundle.test").warning("dup", extra={"manifest": tmp_path / "package.json"})

    [record] = _read_lines(log_path)
    assert record["manifest"] == str(tmp_path / "package.json")


def test_reinit_replaces_handler(tmp_path, restore_root_logger):
    init_json_logging(tmp_path / "a.jsonl")
    init_json_logging(tmp_path / "b.jsonl")

    handlers = [h for h in restore_root_logger.handlers if isinstance(h, JsonlHandler)]
    assert len(handlers) == 1
    assert handlers[0].path == tmp_path / "b.jsonl"


def test_level_from_argument(tmp_path, restore_root_logger):
    init_json_logging(tmp_path / "run.jsonl", "warning")

    assert restore_root_logger.level == logging.WARNING
