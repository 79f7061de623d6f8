"""Tests for deadswitch.logging module."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest

from deadswitch.logging import _get_log_level, _init_logging, get_logger, set_debug, set_level


class TestGetLogLevel:
    """Tests for _get_log_level function."""

    def test_default_is_info(self) -> None:
        """Default log level is INFO so removals are recorded."""
        with patch.dict(os.environ, {}, clear=True):
            assert _get_log_level() == logging.INFO

    @pytest.mark.parametrize("value", ["1", "true", "yes", "TRUE"])
    def test_debug_enabled(self, value: str) -> None:
        with patch.dict(os.environ, {"DEADSWITCH_DEBUG": value}, clear=True):
            assert _get_log_level() == logging.DEBUG

    def test_invalid_debug_value_is_info(self) -> None:
        with patch.dict(os.environ, {"DEADSWITCH_DEBUG": "invalid"}, clear=True):
            assert _get_log_level() == logging.INFO

    def test_level_name_from_env(self) -> None:
        with patch.dict(os.environ, {"DEADSWITCH_LOG_LEVEL": "warning"}, clear=True):
            assert _get_log_level() == logging.WARNING

    def test_unknown_level_name_is_info(self) -> None:
        with patch.dict(os.environ, {"DEADSWITCH_LOG_LEVEL": "chatty"}, clear=True):
            assert _get_log_level() == logging.INFO

    def test_debug_wins_over_level_name(self) -> None:
        env = {"DEADSWITCH_DEBUG": "1", "DEADSWITCH_LOG_LEVEL": "error"}
        with patch.dict(os.environ, env, clear=True):
            assert _get_log_level() == logging.DEBUG


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_with_deadswitch(self) -> None:
        logger = get_logger("my_module")
        assert logger.name == "deadswitch.my_module"

    def test_prefix_not_duplicated(self) -> None:
        logger = get_logger("deadswitch.countdown")
        assert logger.name == "deadswitch.countdown"

    def test_caches_loggers(self) -> None:
        assert get_logger("cached_module") is get_logger("cached_module")


class TestLevels:
    """Tests for set_debug and set_level."""

    def test_enable_debug(self) -> None:
        set_debug(True)
        assert logging.getLogger("deadswitch").level == logging.DEBUG

    def test_disable_debug_falls_back_to_info(self) -> None:
        set_debug(False)
        assert logging.getLogger("deadswitch").level == logging.INFO

    def test_set_level_updates_handlers(self) -> None:
        set_level(logging.ERROR)
        root_logger = logging.getLogger("deadswitch")
        assert all(h.level == logging.ERROR for h in root_logger.handlers)
        set_level(logging.INFO)


class TestInitLogging:
    """Tests for _init_logging function."""

    def test_idempotent(self) -> None:
        _init_logging()
        _init_logging()
        assert len(logging.getLogger("deadswitch").handlers) == 1

    def test_logger_can_log(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="deadswitch"):
            get_logger("integration_test").debug("Test message")
        assert "Test message" in caplog.text
