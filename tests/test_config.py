# tests/test_config.py
"""Tests for chuk_tool_format.config: env helpers and from_env() constructors."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from chuk_tool_format.config import (
    ENV_PREFIX,
    FormatConfig,
    ParserConfig,
    ScannerConfig,
    _get_bool,
    _get_int,
    _get_str,
)


# ------------------------------------------------------------------ #
# _get_bool
# ------------------------------------------------------------------ #
class TestGetBool:
    """Tests for _get_bool helper."""

    def test_true_values(self):
        for val in ("true", "1", "yes", "on", "TRUE", "Yes", "ON"):
            with patch.dict(os.environ, {"TEST_KEY": val}):
                assert _get_bool("TEST_KEY") is True

    def test_false_values(self):
        for val in ("false", "0", "no", "off", "FALSE", "No", "OFF"):
            with patch.dict(os.environ, {"TEST_KEY": val}):
                assert _get_bool("TEST_KEY", default=True) is False

    def test_unrecognised_returns_default(self):
        with patch.dict(os.environ, {"TEST_KEY": "maybe"}):
            assert _get_bool("TEST_KEY") is False
            assert _get_bool("TEST_KEY", default=True) is True

    def test_missing_key_returns_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert _get_bool("TEST_KEY") is False
            assert _get_bool("TEST_KEY", default=True) is True


# ------------------------------------------------------------------ #
# _get_int / _get_str
# ------------------------------------------------------------------ #
class TestGetInt:
    def test_valid(self):
        with patch.dict(os.environ, {"TEST_KEY": "42"}):
            assert _get_int("TEST_KEY") == 42

    def test_invalid_returns_default(self):
        with patch.dict(os.environ, {"TEST_KEY": "abc"}):
            assert _get_int("TEST_KEY", 7) == 7

    def test_missing_returns_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert _get_int("TEST_KEY") is None
            assert _get_int("TEST_KEY", 3) == 3


class TestGetStr:
    def test_value(self):
        with patch.dict(os.environ, {"TEST_KEY": "hello"}):
            assert _get_str("TEST_KEY") == "hello"

    def test_empty_returns_default(self):
        with patch.dict(os.environ, {"TEST_KEY": ""}):
            assert _get_str("TEST_KEY", "fallback") == "fallback"


# ------------------------------------------------------------------ #
# ParserConfig
# ------------------------------------------------------------------ #
class TestParserConfig:
    def test_defaults(self):
        cfg = ParserConfig()
        assert cfg.require_line_end is True
        assert cfg.strip_info_string is True

    def test_from_env(self):
        env = {
            f"{ENV_PREFIX}REQUIRE_LINE_END": "false",
            f"{ENV_PREFIX}STRIP_INFO_STRING": "0",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = ParserConfig.from_env()
        assert cfg.require_line_end is False
        assert cfg.strip_info_string is False

    def test_from_env_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            assert ParserConfig.from_env() == ParserConfig()


# ------------------------------------------------------------------ #
# ScannerConfig
# ------------------------------------------------------------------ #
class TestScannerConfig:
    def test_defaults(self):
        cfg = ScannerConfig()
        assert cfg.text_flush_threshold == 80
        assert cfg.incomplete_marker == "[Incomplete tool call: {raw}]"

    def test_threshold_must_be_positive(self):
        with pytest.raises(ValidationError):
            ScannerConfig(text_flush_threshold=0)

    def test_format_incomplete(self):
        assert ScannerConfig().format_incomplete("shell(") == "[Incomplete tool call: shell(]"

    def test_format_incomplete_keeps_braces_in_raw(self):
        cfg = ScannerConfig(incomplete_marker="<{raw}>")
        assert cfg.format_incomplete("edit({a: 1}") == "<edit({a: 1}>"

    def test_from_env(self):
        env = {
            f"{ENV_PREFIX}TEXT_FLUSH_THRESHOLD": "16",
            f"{ENV_PREFIX}INCOMPLETE_MARKER": "!! {raw}",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = ScannerConfig.from_env()
        assert cfg.text_flush_threshold == 16
        assert cfg.incomplete_marker == "!! {raw}"

    @pytest.mark.parametrize("value", ["0", "-5", "lots"])
    def test_from_env_bad_threshold_falls_back(self, value):
        with patch.dict(os.environ, {f"{ENV_PREFIX}TEXT_FLUSH_THRESHOLD": value}, clear=True):
            assert ScannerConfig.from_env().text_flush_threshold == 80


# ------------------------------------------------------------------ #
# FormatConfig
# ------------------------------------------------------------------ #
class TestFormatConfig:
    def test_defaults(self):
        cfg = FormatConfig()
        assert cfg.parser == ParserConfig()
        assert cfg.scanner == ScannerConfig()
        assert cfg.log_level == "INFO"
        assert cfg.level == logging.INFO
        assert cfg.structured_logging is True

    def test_level_normalised(self):
        cfg = FormatConfig(log_level="debug")
        assert cfg.log_level == "DEBUG"
        assert cfg.level == logging.DEBUG

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            FormatConfig(log_level="chatty")

    def test_from_env(self):
        env = {
            f"{ENV_PREFIX}LOG_LEVEL": "warning",
            f"{ENV_PREFIX}STRUCTURED_LOGGING": "no",
            f"{ENV_PREFIX}REQUIRE_LINE_END": "off",
            f"{ENV_PREFIX}TEXT_FLUSH_THRESHOLD": "5",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = FormatConfig.from_env()
        assert cfg.log_level == "WARNING"
        assert cfg.structured_logging is False
        assert cfg.parser.require_line_end is False
        assert cfg.scanner.text_flush_threshold == 5

    def test_from_env_invalid_level_falls_back(self):
        with patch.dict(os.environ, {f"{ENV_PREFIX}LOG_LEVEL": "chatty"}, clear=True):
            assert FormatConfig.from_env().log_level == "INFO"
