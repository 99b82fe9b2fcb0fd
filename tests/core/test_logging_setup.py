"""Tests for logging setup."""

import logging
import pytest
from pathlib import Path
from clientdb.core.config import LoggingConfig
from clientdb.core.logging import setup_logging, setup_logging_from_config


@pytest.fixture(autouse=True)
def _clear_handlers():
    yield
    logger = logging.getLogger("clientdb")
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.setLevel(logging.NOTSET)


def test_console_only_by_default():
    logger = setup_logging(level=logging.WARNING)
    assert logger.name == "clientdb"
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.WARNING


def test_file_handler_when_log_dir_given(tmp_path: Path):
    logger = setup_logging(log_dir=tmp_path / "logs")

    assert len(logger.handlers) == 2
    log_files = list((tmp_path / "logs").glob("clientdb_*.log"))
    assert len(log_files) == 1


def test_repeated_setup_does_not_stack_handlers():
    setup_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_setup_from_config(tmp_path: Path):
    logger = setup_logging_from_config(
        LoggingConfig(level="debug", log_dir=str(tmp_path), file_level="info")
    )

    levels = sorted(h.level for h in logger.handlers)
    assert levels == [logging.DEBUG, logging.INFO]
