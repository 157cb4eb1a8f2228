# chuk_tool_format/streaming/scanner.py
"""
Incremental tool-call recogniser for token streams.

Plain text is forwarded through ``on_text`` as soon as it cannot be part of a
call; a call is only reported once it is unambiguous:

* detection starts only at the beginning of a line (leading spaces/tabs ok)
* the identifier must be one of ``known_tools`` and be followed by ``(``
* after the matching ``)`` only a newline, end of stream or a fenced content
  block may follow on the same line

Buffered call text is always validated by :func:`parse_call`; anything the
parser rejects is forwarded as text, so no input is ever dropped.

Usage::

    scanner = StreamScanner({"read_file"}, on_text=print, on_tool=handle)
    for chunk in llm_stream:
        scanner.feed(chunk)
    scanner.finalize()
"""
from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from chuk_tool_format.config import ParserConfig, ScannerConfig
from chuk_tool_format.core.exceptions import ConfigurationError
from chuk_tool_format.logging import get_logger
from chuk_tool_format.models.parsed_call import ParsedCall
from chuk_tool_format.streaming.states import QuoteState, ScanState
from chuk_tool_format.syntax.call_parser import parse_call
from chuk_tool_format.syntax.cursor import MIN_FENCE, is_ident_char, is_ident_start

__all__ = ["StreamScanner"]

logger = get_logger(__name__)

TextCallback = Callable[[str], None]
ToolCallback = Callable[[ParsedCall], None]

_QUOTED = (QuoteState.SINGLE, QuoteState.DOUBLE, QuoteState.TRIPLE)


class StreamScanner:
    """
    Character-driven state machine over streamed model output.

    A scanner is owned by one stream at a time.  Call :meth:`finalize` once
    at end of stream; :meth:`reset` makes the instance reusable.
    """

    def __init__(
        self,
        known_tools: Iterable[str],
        on_text: TextCallback,
        on_tool: ToolCallback,
        on_status: Optional[TextCallback] = None,
        *,
        config: Optional[ScannerConfig] = None,
        parser_config: Optional[ParserConfig] = None,
    ) -> None:
        for label, cb in (("on_text", on_text), ("on_tool", on_tool)):
            if not callable(cb):
                raise ConfigurationError(f"{label} must be callable", setting=label)
        if on_status is not None and not callable(on_status):
            raise ConfigurationError("on_status must be callable", setting="on_status")

        self.known_tools = frozenset(known_tools)
        self.config = config or ScannerConfig()
        self.parser_config = parser_config or ParserConfig()

        self._on_text = on_text
        self._on_tool = on_tool
        self._on_status = on_status

        self._text: List[str] = []
        self._ident: List[str] = []
        self._call: List[str] = []
        self.reset()

    # ------------------------------------------------------------------ #
    # public API
    # ------------------------------------------------------------------ #
    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def pending(self) -> str:
        """Text held back while a call is being recognised."""
        if self._state is ScanState.IDENT:
            return "".join(self._ident)
        return "".join(self._call)

    def feed(self, chunk: str) -> None:
        """Consume *chunk*; may emit any number of text/tool events."""
        for c in chunk:
            self._step(c)

    def feed_all(self, chunks: Iterable[str]) -> None:
        """Consume every chunk, then :meth:`finalize`."""
        for chunk in chunks:
            self.feed(chunk)
        self.finalize()

    def finalize(self) -> None:
        """Resolve everything still buffered and return to the initial state."""
        self._flush_text()

        state = self._state
        if state is ScanState.POST_PAREN:
            self._complete_call()
        elif state in (ScanState.CALL, ScanState.CONTENT):
            raw = self._take(self._call)
            logger.debug(
                "Stream ended inside a tool call",
                extra={"context": {"state": state.value, "length": len(raw)}},
            )
            self._resolve(raw, self.config.format_incomplete(raw))
        elif state is ScanState.IDENT:
            self._emit_text(self._take(self._ident))

        self._flush_text()
        self.reset()

    def reset(self) -> None:
        """Drop all buffered input and state."""
        self._text.clear()
        self._ident.clear()
        self._call.clear()
        self._text_size = 0

        self._state = ScanState.TEXT
        self._at_line_start = True

        self._quote = QuoteState.NONE
        self._depth = 0
        self._escape_next = False
        self._dq_run = 0
        self._tq_run = 0

        self._tick_run = 0
        self._fence_len = 0
        self._content_open = False

    # ------------------------------------------------------------------ #
    # dispatch
    # ------------------------------------------------------------------ #
    def _step(self, c: str) -> None:
        state = self._state
        if state is ScanState.TEXT:
            self._text_char(c)
        elif state is ScanState.IDENT:
            self._ident_char(c)
        elif state is ScanState.CALL:
            self._call_char(c)
        elif state is ScanState.POST_PAREN:
            self._post_paren_char(c)
        else:
            self._content_char(c)

    # ------------------------------------------------------------------ #
    # TEXT
    # ------------------------------------------------------------------ #
    def _text_char(self, c: str) -> None:
        if self._at_line_start and is_ident_start(c):
            self._flush_text()
            self._state = ScanState.IDENT
            self._ident.append(c)
            self._at_line_start = False
            return

        self._append_text(c)
        # indentation keeps line-start status
        if not (self._at_line_start and c in " \t"):
            self._at_line_start = c == "\n"
        if c == "\n" or self._text_size > self.config.text_flush_threshold:
            self._flush_text()

    # ------------------------------------------------------------------ #
    # IDENT
    # ------------------------------------------------------------------ #
    def _ident_char(self, c: str) -> None:
        if is_ident_char(c):
            self._ident.append(c)
            return

        name = self._take(self._ident)
        if c == "(" and name in self.known_tools:
            self._state = ScanState.CALL
            self._depth = 1
            self._call.append(name)
            self._call.append(c)
            if self._on_status is not None:
                self._on_status(name)
            return

        if c == "(":
            logger.debug("Unknown tool %s, forwarding as text", name, extra={"context": {"tool": name}})
        self._back_to_text(name, c)

    # ------------------------------------------------------------------ #
    # CALL
    # ------------------------------------------------------------------ #
    def _call_char(self, c: str) -> None:
        self._call.append(c)

        if self._escape_next:
            self._escape_next = False
            self._dq_run = 0
            self._tq_run = 0
            return

        self._track_quotes(c)
        self._dq_run = self._dq_run + 1 if c == '"' else 0

        if self._depth == 0 and self._quote is QuoteState.NONE:
            self._state = ScanState.POST_PAREN
            self._tick_run = 0

    def _track_quotes(self, c: str) -> None:
        quote = self._quote

        if quote is QuoteState.FENCE:
            if c == "`":
                self._tick_run += 1
                return
            closed = self._tick_run == self._fence_len
            self._tick_run = 0
            if not closed:
                return
            self._quote = QuoteState.NONE
        elif quote in _QUOTED:
            self._track_string(c)
            return
        elif self._tick_run:
            if c == "`":
                self._tick_run += 1
                return
            run, self._tick_run = self._tick_run, 0
            if run >= MIN_FENCE:
                self._quote = QuoteState.FENCE
                self._fence_len = run
                return

        # unquoted
        if c == "`":
            self._tick_run = 1
        elif c == '"':
            self._quote = QuoteState.TRIPLE if self._dq_run == 2 else QuoteState.DOUBLE
            self._tq_run = 0
        elif c == "'":
            self._quote = QuoteState.SINGLE
        elif c == "(":
            self._depth += 1
        elif c == ")":
            self._depth -= 1

    def _track_string(self, c: str) -> None:
        if c == "\\":
            self._escape_next = True
            return
        quote = self._quote
        if quote is QuoteState.DOUBLE and c == '"':
            self._quote = QuoteState.NONE
        elif quote is QuoteState.SINGLE and c == "'":
            self._quote = QuoteState.NONE
        elif quote is QuoteState.TRIPLE:
            self._tq_run = self._tq_run + 1 if c == '"' else 0
            if self._tq_run == 3:
                self._quote = QuoteState.NONE
                self._tq_run = 0

    # ------------------------------------------------------------------ #
    # POST_PAREN
    # ------------------------------------------------------------------ #
    def _post_paren_char(self, c: str) -> None:
        if c == "`":
            self._call.append(c)
            self._tick_run += 1
            if self._tick_run >= MIN_FENCE:
                self._state = ScanState.CONTENT
                self._fence_len = self._tick_run
                self._tick_run = 0
                self._content_open = False
        elif self._tick_run:
            # one or two stray backticks after ")"
            self._abort_call(c)
        elif c in " \t\r":
            self._call.append(c)
        elif c == "\n":
            self._complete_call()
            self._text_char(c)
        else:
            self._abort_call(c)

    # ------------------------------------------------------------------ #
    # CONTENT
    # ------------------------------------------------------------------ #
    def _content_char(self, c: str) -> None:
        if not self._content_open:
            self._call.append(c)
            if c == "`":
                self._fence_len += 1
            else:
                self._content_open = True
            return

        if c == "`":
            self._call.append(c)
            self._tick_run += 1
            return

        if self._tick_run == self._fence_len:
            # closing fence ended; c belongs to the text after the call
            self._complete_call()
            self._text_char(c)
            return

        self._tick_run = 0
        self._call.append(c)

    # ------------------------------------------------------------------ #
    # resolution
    # ------------------------------------------------------------------ #
    def _complete_call(self) -> None:
        raw = self._take(self._call)
        self._resolve(raw, raw)

    def _abort_call(self, c: str) -> None:
        """Trailing text after ``)``: the whole span is plain text."""
        raw = self._take(self._call)
        self._reset_call_tracking()
        self._state = ScanState.TEXT
        self._at_line_start = False
        self._append_text(raw)
        self._text_char(c)

    def _resolve(self, raw: str, fallback: str) -> None:
        self._reset_call_tracking()
        self._state = ScanState.TEXT
        self._at_line_start = False
        self._flush_text()

        call = parse_call(raw, require_line_end=False, config=self.parser_config)
        if call is None:
            logger.debug(
                "Buffered call rejected by parser, forwarding as text",
                extra={"context": {"length": len(raw)}},
            )
            self._emit_text(fallback)
            return

        self._on_tool(call)
        tail = raw[len(call.raw):]
        if tail:
            self._append_text(tail)

    def _back_to_text(self, prefix: str, c: str) -> None:
        self._state = ScanState.TEXT
        self._at_line_start = False
        self._append_text(prefix)
        self._text_char(c)

    def _reset_call_tracking(self) -> None:
        self._quote = QuoteState.NONE
        self._depth = 0
        self._escape_next = False
        self._dq_run = 0
        self._tq_run = 0
        self._tick_run = 0
        self._fence_len = 0
        self._content_open = False

    # ------------------------------------------------------------------ #
    # buffers
    # ------------------------------------------------------------------ #
    @staticmethod
    def _take(buf: List[str]) -> str:
        out = "".join(buf)
        buf.clear()
        return out

    def _append_text(self, s: str) -> None:
        self._text.append(s)
        self._text_size += len(s)

    def _flush_text(self) -> None:
        if self._text:
            text = self._take(self._text)
            self._text_size = 0
            self._emit_text(text)

    def _emit_text(self, s: str) -> None:
        if s:
            self._on_text(s)
