# chuk_tool_format/config.py
"""
Environment-driven configuration.

Every setting has a sensible default; ``from_env()`` reads the matching
``CHUK_TOOL_FORMAT_*`` variable and silently falls back to the default when the
variable is missing or cannot be parsed.

    CHUK_TOOL_FORMAT_REQUIRE_LINE_END      true
    CHUK_TOOL_FORMAT_STRIP_INFO_STRING     true
    CHUK_TOOL_FORMAT_TEXT_FLUSH_THRESHOLD  80
    CHUK_TOOL_FORMAT_INCOMPLETE_MARKER     "[Incomplete tool call: {raw}]"
    CHUK_TOOL_FORMAT_LOG_LEVEL             INFO
    CHUK_TOOL_FORMAT_STRUCTURED_LOGGING    true
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "CHUK_TOOL_FORMAT_"

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


# ------------------------------------------------------------------ #
# env helpers
# ------------------------------------------------------------------ #
def _get_bool(key: str, default: bool = False) -> bool:
    raw = os.environ.get(key, "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return default


def _get_int(key: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_str(key: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(key)
    return raw if raw else default


# ------------------------------------------------------------------ #
# models
# ------------------------------------------------------------------ #
class ParserConfig(BaseModel):
    """Options for :class:`~chuk_tool_format.syntax.call_parser.CallParser`."""

    require_line_end: bool = True
    strip_info_string: bool = True

    @classmethod
    def from_env(cls) -> "ParserConfig":
        return cls(
            require_line_end=_get_bool(f"{ENV_PREFIX}REQUIRE_LINE_END", True),
            strip_info_string=_get_bool(f"{ENV_PREFIX}STRIP_INFO_STRING", True),
        )


class ScannerConfig(BaseModel):
    """Options for :class:`~chuk_tool_format.streaming.scanner.StreamScanner`."""

    text_flush_threshold: int = Field(default=80, ge=1)
    incomplete_marker: str = "[Incomplete tool call: {raw}]"

    @classmethod
    def from_env(cls) -> "ScannerConfig":
        threshold = _get_int(f"{ENV_PREFIX}TEXT_FLUSH_THRESHOLD", 80)
        if threshold is None or threshold < 1:
            threshold = 80
        return cls(
            text_flush_threshold=threshold,
            incomplete_marker=_get_str(
                f"{ENV_PREFIX}INCOMPLETE_MARKER", "[Incomplete tool call: {raw}]"
            ),
        )

    def format_incomplete(self, raw: str) -> str:
        return self.incomplete_marker.replace("{raw}", raw)


class FormatConfig(BaseModel):
    """Top-level configuration bundle."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    scanner: ScannerConfig = Field(default_factory=ScannerConfig)
    log_level: str = "INFO"
    structured_logging: bool = True

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"unknown log level: {v}")
        return v

    @classmethod
    def from_env(cls) -> "FormatConfig":
        level = (_get_str(f"{ENV_PREFIX}LOG_LEVEL", "INFO") or "INFO").upper()
        if not isinstance(logging.getLevelName(level), int):
            level = "INFO"
        return cls(
            parser=ParserConfig.from_env(),
            scanner=ScannerConfig.from_env(),
            log_level=level,
            structured_logging=_get_bool(f"{ENV_PREFIX}STRUCTURED_LOGGING", True),
        )

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)
