"""Tests for singleton logging configuration."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from driftscope.logging_config import (
    _SUPPRESSED_LOGGERS,
    LOG_DATEFMT,
    LOG_FORMAT,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _reset_flag() -> None:
    """Reset the singleton flag before each test."""
    import driftscope.logging_config as mod

    mod._configured = False


def test_setup_logging_is_idempotent() -> None:
    with patch("driftscope.logging_config.logging.basicConfig") as mock_bc:
        setup_logging()
        setup_logging()  # second call is no-op
        mock_bc.assert_called_once()


def test_format_and_level_passed_to_basic_config() -> None:
    with patch("driftscope.logging_config.logging.basicConfig") as mock_bc:
        setup_logging("debug")
    mock_bc.assert_called_once_with(
        level=logging.DEBUG,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def test_suppressed_loggers_at_warning() -> None:
    with patch("driftscope.logging_config.logging.basicConfig"):
        setup_logging()
    for name in _SUPPRESSED_LOGGERS:
        lg = logging.getLogger(name)
        assert lg.level == logging.WARNING, (
            f"{name} should be WARNING, got {lg.level}"
        )


def test_format_names_the_logger() -> None:
    assert "[%(name)s]" in LOG_FORMAT
