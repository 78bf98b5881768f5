"""SPDX-License-Identifier: GPL-3.0-only

Tests for centralized console logging configuration.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from console import logging_config


def _flush_root():
    for handler in logging.getLogger().handlers:
        handler.flush()


def test_normalize_level():
    assert logging_config.normalize_level("debug") == "DEBUG"
    assert logging_config.normalize_level(" error ") == "ERROR"
    assert logging_config.normalize_level("chatty") == "WARNING"
    assert logging_config.normalize_level(None) == "WARNING"


def test_configure_is_idempotent(tmp_path: Path):
    log_path = tmp_path / "a.log"
    logging_config.configure_logging("INFO", log_path=log_path)
    logging_config.configure_logging("DEBUG", log_path=tmp_path / "ignored.log")
    assert logging_config.get_runtime_level() == "DEBUG"
    assert logging.getLogger().level == logging.DEBUG
    logging.getLogger("people_search.test").debug("hello")
    assert "hello" in log_path.read_text(encoding="utf-8")
    assert not (tmp_path / "ignored.log").exists()


def test_human_format(tmp_path: Path):
    log_path = tmp_path / "human.log"
    logging_config.configure_logging("INFO", log_path=log_path)
    logging.getLogger("people_search.test").info("loaded %s", 3)
    line = log_path.read_text(encoding="utf-8").strip()
    assert line.startswith("[")
    assert line.endswith("INFO people_search.test: loaded 3")


def test_json_format_includes_exception(tmp_path: Path):
    log_path = tmp_path / "json.log"
    logging_config.configure_logging("INFO", json_mode=True, log_path=log_path)
    try:
        raise ValueError("boom")
    except ValueError:
        logging.getLogger("people_search.test").exception("failed")
    entry = json.loads(log_path.read_text(encoding="utf-8").splitlines()[0])
    assert entry["level"] == "ERROR"
    assert entry["logger"] == "people_search.test"
    assert entry["msg"] == "failed"
    assert "ValueError: boom" in entry["exc"]


def test_set_runtime_level_filters(tmp_path: Path):
    log_path = tmp_path / "level.log"
    logging_config.configure_logging("INFO", log_path=log_path)
    logging_config.set_runtime_level("ERROR")
    logging.getLogger("people_search.test").warning("hidden")
    logging.getLogger("people_search.test").error("shown")
    text = log_path.read_text(encoding="utf-8")
    assert "hidden" not in text
    assert "shown" in text


def test_rotation_keeps_single_backup(tmp_path: Path):
    log_path = tmp_path / "rot.log"
    handler = logging_config._RotatingFileHandler(log_path, max_bytes=1024)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger("people_search.rotation")
    logger.propagate = False
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        for i in range(60):
            logger.info("line %03d %s", i, "x" * 40)
    finally:
        logger.removeHandler(handler)
        logger.propagate = True
    backup = tmp_path / "rot.log.1"
    assert backup.exists()
    assert not (tmp_path / "rot.log.1.1").exists()
    assert log_path.stat().st_size <= 1024
    assert "line 059" in log_path.read_text(encoding="utf-8")


def test_default_handler_is_stderr(capsys):
    logging_config.configure_logging("WARNING")
    logging.getLogger("people_search.test").warning("to stderr")
    _flush_root()
    captured = capsys.readouterr()
    assert "to stderr" in captured.err
    assert "to stderr" not in captured.out
