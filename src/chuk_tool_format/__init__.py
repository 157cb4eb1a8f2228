# chuk_tool_format/__init__.py
"""
chuk_tool_format - recognise function-call style tool invocations in LLM output.

    from chuk_tool_format import parse_call, StreamScanner

    call = parse_call('read_file(path: "/a.txt")')
    call.name              # "read_file"
    call.arguments         # {"path": "/a.txt"}

    scanner = StreamScanner({"read_file"}, on_text=print, on_tool=run_tool)
    for chunk in stream:
        scanner.feed(chunk)
    scanner.finalize()
"""
from chuk_tool_format.config import FormatConfig, ParserConfig, ScannerConfig
from chuk_tool_format.core.exceptions import (
    ConfigurationError,
    ErrorCode,
    ParserError,
    ToolFormatError,
)
from chuk_tool_format.models import ParsedCall, ParsedValue, ValueKind
from chuk_tool_format.plugins.parsers import CallSyntaxPlugin, ParserPlugin
from chuk_tool_format.streaming import QuoteState, ScanState, StreamScanner
from chuk_tool_format.syntax import parse_call, parse_call_strict, try_parse_call

__version__ = "0.1.0"

__all__ = [
    "CallSyntaxPlugin",
    "ConfigurationError",
    "ErrorCode",
    "FormatConfig",
    "ParsedCall",
    "ParsedValue",
    "ParserConfig",
    "ParserError",
    "ParserPlugin",
    "QuoteState",
    "ScanState",
    "ScannerConfig",
    "StreamScanner",
    "ToolFormatError",
    "ValueKind",
    "parse_call",
    "parse_call_strict",
    "try_parse_call",
]
