"""Tests for the JSONL logging bootstrap."""

import json
import logging
from pathlib import Path

from sass_module_importer.logging_setup import JsonlHandler
from sass_module_importer.logging_setup import init_json_logging


def test_writes_jsonl_records(tmp_path: Path, restore_root_logger):
    log_path = tmp_path / "logs" / "out.jsonl"
    init_json_logging(str(log_path), "debug")

    logging.getLogger("sass_module_importer.test").debug("resolved %s", "foo", extra={"specifier": "foo"})

    lines = log_path.read_text().splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["lvl"] == "DEBUG"
    assert record["logger"] == "sass_module_importer.test"
    assert record["message"] == "resolved foo"
    assert record["specifier"] == "foo"


def test_replaces_previous_jsonl_handler(tmp_path: Path, restore_root_logger):
    init_json_logging(str(tmp_path / "a.jsonl"), "INFO")
    init_json_logging(str(tmp_path / "b.jsonl"), "INFO")

    jsonl_handlers = [h for h in restore_root_logger.handlers if isinstance(h, JsonlHandler)]
    assert len(jsonl_handlers) == 1
    assert Path(jsonl_handlers[0].baseFilename) == tmp_path / "b.jsonl"


def test_level_applied(tmp_path: Path, restore_root_logger):
    init_json_logging(str(tmp_path / "a.jsonl"), "warning")
    assert restore_root_logger.level == logging.WARNING


def test_exception_info_recorded(tmp_path: Path, restore_root_logger):
    log_path = tmp_path / "a.jsonl"
    init_json_logging(str(log_path), "INFO")

    try:
        raise ValueError("boom")
    except ValueError:
        logging.getLogger("x").exception("failed")

    record = json.loads(log_path.read_text().splitlines()[0])
    assert "ValueError: boom" in record["exc"]


def test_env_defaults_read_at_call_time(tmp_path: Path, monkeypatch, restore_root_logger):
    log_path = tmp_path / "env.jsonl"
    monkeypatch.setenv("SASS_IMPORTER_LOG_PATH", str(log_path))
    monkeypatch.setenv("SASS_IMPORTER_LOG_LEVEL", "error")

    handler = init_json_logging()

    assert Path(handler.baseFilename) == log_path
    assert restore_root_logger.level == logging.ERROR


def test_standard_record_attributes_not_copied(tmp_path: Path, restore_root_logger):
    log_path = tmp_path / "a.jsonl"
    init_json_logging(str(log_path), "INFO")

    logging.getLogger("x").info("plain")

    record = json.loads(log_path.read_text().splitlines()[0])
    assert set(record) == {"ts", "lvl", "logger", "message"}
