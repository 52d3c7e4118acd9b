"""Tests for logger setup."""

from __future__ import annotations

import logging
from pathlib import Path

from checkmark.verbose import setup_logger


def test_writes_to_debug_file(tmp_path: Path):
    debug_file = tmp_path / "logs" / "debug.log"
    logger = setup_logger(debug_file, logger_name="checkmark_file_test")
    logger.debug("hello from the file logger")

    assert "hello from the file logger" in debug_file.read_text()


def test_verbose_adds_stderr_handler(tmp_path: Path):
    logger = setup_logger(tmp_path / "debug.log", verbose=True, logger_name="checkmark_verbose_test")
    assert any(type(h) is logging.StreamHandler for h in logger.handlers)
    assert logger.level == logging.DEBUG


def test_no_file_and_not_verbose_is_silent():
    logger = setup_logger(logger_name="checkmark_silent_test")
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.NullHandler)


def test_reconfiguring_replaces_handlers(tmp_path: Path):
    log1 = tmp_path / "one.log"
    log2 = tmp_path / "two.log"
    setup_logger(log1, logger_name="checkmark_reuse_test")
    logger = setup_logger(log2, logger_name="checkmark_reuse_test")
    logger.debug("second only")

    assert "second only" in log2.read_text()
    assert "second only" not in log1.read_text()


def test_unique_logger_names_are_isolated(tmp_path: Path):
    log1 = tmp_path / "a.log"
    log2 = tmp_path / "b.log"
    logger1 = setup_logger(log1, logger_name="checkmark_case_a")
    logger2 = setup_logger(log2, logger_name="checkmark_case_b")

    logger1.debug("from a")
    logger2.debug("from b")

    assert "from b" not in log1.read_text()
    assert "from a" not in log2.read_text()
