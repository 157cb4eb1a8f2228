# chuk_tool_format/plugins/parsers/__init__.py
from chuk_tool_format.plugins.parsers.base import ParserPlugin
from chuk_tool_format.plugins.parsers.call_syntax_plugin import CallSyntaxPlugin

__all__ = ["CallSyntaxPlugin", "ParserPlugin"]
