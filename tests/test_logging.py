"""Tests for the logging setup run at app start."""

import logging
import sys

import pytest

from core.logging import LOG_FORMAT, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_single_stdout_handler(root_logger):
    setup_logging("debug")
    setup_logging("debug")

    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1
    handler = root_logger.handlers[0]
    assert handler.stream is sys.stdout
    assert handler.formatter._fmt == LOG_FORMAT


def test_unknown_level_falls_back_to_info(root_logger):
    setup_logging("chatty")
    assert root_logger.level == logging.INFO
