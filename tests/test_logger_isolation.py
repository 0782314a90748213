"""Test logger isolation so concurrent runs never share a debug.log."""

from __future__ import annotations

from pathlib import Path

import pytest

from matchbook.verbose import setup_logger


def test_unique_logger_names_create_separate_instances(tmp_path: Path):
    log1 = tmp_path / "run1.log"
    log2 = tmp_path / "run2.log"

    logger1 = setup_logger(log1, verbose=False, logger_name="matchbook_run1")
    logger2 = setup_logger(log2, verbose=False, logger_name="matchbook_run2")

    assert logger1 is not logger2

    logger1.debug("Message from run1")
    logger2.debug("Message from run2")

    log1_content = log1.read_text()
    log2_content = log2.read_text()

    assert "Message from run1" in log1_content
    assert "Message from run2" not in log1_content
    assert "Message from run2" in log2_content
    assert "Message from run1" not in log2_content


def test_same_logger_name_raises_error(tmp_path: Path):
    setup_logger(tmp_path / "a.log", verbose=False, logger_name="matchbook_shared")

    with pytest.raises(RuntimeError) as exc_info:
        setup_logger(tmp_path / "b.log", verbose=False, logger_name="matchbook_shared")

    assert "matchbook_shared" in str(exc_info.value)
    assert "already exists" in str(exc_info.value)


def test_verbose_adds_stderr_handler(tmp_path: Path):
    quiet = setup_logger(tmp_path / "q.log", verbose=False, logger_name="matchbook_quiet")
    loud = setup_logger(tmp_path / "l.log", verbose=True, logger_name="matchbook_loud")
    assert len(quiet.handlers) == 1
    assert len(loud.handlers) == 2


def test_debug_file_parent_is_created(tmp_path: Path):
    debug_file = tmp_path / "nested" / "dir" / "debug.log"
    logger = setup_logger(debug_file, logger_name="matchbook_nested")
    logger.debug("hello")
    assert debug_file.exists()
