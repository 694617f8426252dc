"""Tests for the logging setup used by entry points."""
import logging

import pytest

from utils.logger import LOGGER_NAME, setup_logger


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved


def test_setup_logger_creates_log_file(tmp_path, clean_logger):
    log_dir = tmp_path / "logs"
    logger = setup_logger(log_dir=log_dir, console=False)
    assert logger is clean_logger
    assert (log_dir / "inventory.log").exists()


def test_setup_logger_is_idempotent(tmp_path, clean_logger):
    setup_logger(log_dir=tmp_path)
    count = len(clean_logger.handlers)
    setup_logger(log_dir=tmp_path)
    assert len(clean_logger.handlers) == count == 2
