# chuk_tool_format/syntax/__init__.py
from chuk_tool_format.syntax.call_parser import (
    CallParser,
    parse_call,
    parse_call_strict,
    try_parse_call,
)
from chuk_tool_format.syntax.values import ValueParser, clean_block, dedent

__all__ = [
    "CallParser",
    "ValueParser",
    "clean_block",
    "dedent",
    "parse_call",
    "parse_call_strict",
    "try_parse_call",
]
