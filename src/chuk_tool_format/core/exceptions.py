# chuk_tool_format/core/exceptions.py
"""
Exception hierarchy for chuk_tool_format.

The grammar itself has a single failure outcome (``None``); these exceptions
only surface from the *strict* entry points and from misconfiguration.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Any, Dict, Optional

_MAX_SAMPLE = 200


class ErrorCode(StrEnum):
    """Machine-readable error codes."""

    PARSER_ERROR = "PARSER_ERROR"
    PARSER_INVALID_FORMAT = "PARSER_INVALID_FORMAT"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class ToolFormatError(Exception):
    """Base class for every error raised by this package."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.PARSER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class ParserError(ToolFormatError):
    """Text could not be parsed as a tool call."""

    def __init__(
        self,
        message: str,
        parser_name: Optional[str] = None,
        input_sample: Optional[str] = None,
        code: ErrorCode = ErrorCode.PARSER_ERROR,
    ) -> None:
        details: Dict[str, Any] = {}
        if parser_name:
            details["parser_name"] = parser_name
        if input_sample is not None:
            if len(input_sample) > _MAX_SAMPLE:
                details["input_sample"] = input_sample[:_MAX_SAMPLE] + "..."
            else:
                details["input_sample"] = input_sample
        super().__init__(message, code, details)
        self.parser_name = parser_name
        self.input_sample = input_sample


class ConfigurationError(ToolFormatError):
    """Invalid construction argument or configuration value."""

    def __init__(self, message: str, setting: Optional[str] = None) -> None:
        details = {"setting": setting} if setting else {}
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)
        self.setting = setting
