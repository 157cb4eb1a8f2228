# chuk_tool_format/plugins/parsers/call_syntax_plugin.py
"""Async parser for complete messages written in the function-call syntax."""
from __future__ import annotations

from typing import Iterable, List, Optional

from chuk_tool_format.config import ParserConfig, ScannerConfig
from chuk_tool_format.logging import get_logger, log_context
from chuk_tool_format.models.parsed_call import ParsedCall
from chuk_tool_format.streaming.scanner import StreamScanner
from .base import ParserPlugin

logger = get_logger(__name__)


class CallSyntaxPlugin(ParserPlugin):
    """
    Extract every ``name(args) [content]`` call from a finished message.

    The message is run through a fresh :class:`StreamScanner`, so the
    line-start and trailing-text rules are exactly those applied to live
    streams.
    """

    def __init__(
        self,
        known_tools: Iterable[str],
        *,
        scanner_config: Optional[ScannerConfig] = None,
        parser_config: Optional[ParserConfig] = None,
    ) -> None:
        self.known_tools = frozenset(known_tools)
        self.scanner_config = scanner_config
        self.parser_config = parser_config

    async def try_parse(self, raw: str | object) -> List[ParsedCall]:
        if not isinstance(raw, str) or not self.known_tools:
            return []

        calls: List[ParsedCall] = []
        scanner = StreamScanner(
            self.known_tools,
            on_text=lambda _text: None,
            on_tool=calls.append,
            config=self.scanner_config,
            parser_config=self.parser_config,
        )

        async with log_context.context_scope(parser="call_syntax"):
            scanner.feed(raw)
            scanner.finalize()
            logger.debug("Extracted %d tool call(s)", len(calls))

        return calls
