# chuk_tool_format/syntax/call_parser.py
"""
Parser for a single function-call style tool invocation.

    call    := identifier '(' params ')' [content]
    params  := param ((',' | <juxtaposition>) param)*
    param   := identifier ':' value | value
    content := fence                      (after optional spaces/tabs)

Supported shapes::

    read_file(path: "/file.txt")
    edit("/f.txt", old: "a", new: "b")       # positional keys _0, _1, ...
    shell(lang: "sh") ```
    ls -la
    ```

A failed parse returns ``None`` and never a partial call.
"""
from __future__ import annotations

from typing import Collection, Dict, Optional, Tuple

from chuk_tool_format.config import ParserConfig
from chuk_tool_format.core.exceptions import ErrorCode, ParserError
from chuk_tool_format.logging import get_logger
from chuk_tool_format.models.parsed_call import ParsedCall
from chuk_tool_format.models.parsed_value import ParsedValue
from chuk_tool_format.syntax.cursor import MIN_FENCE, can_start_value
from chuk_tool_format.syntax.values import ValueParser, clean_block, read_fence

__all__ = ["CallParser", "parse_call", "parse_call_strict", "try_parse_call"]

logger = get_logger(__name__)


class CallParser(ValueParser):
    """
    One-shot parser: build it with the text, call :meth:`parse` once.

    Instances hold only their cursor, so separate instances may run on
    separate threads.
    """

    def __init__(self, text: str, config: Optional[ParserConfig] = None) -> None:
        config = config or ParserConfig()
        super().__init__(text, strip_info_string=config.strip_info_string)
        self.config = config

    # ------------------------------------------------------------------ #
    # parameters
    # ------------------------------------------------------------------ #
    def parse_params(self) -> Optional[Dict[str, ParsedValue]]:
        cur = self.cur
        kwargs: Dict[str, ParsedValue] = {}
        positional = 0

        cur.skip_whitespace()
        if cur.current() == ")":
            return kwargs

        while not cur.eof:
            cur.skip_whitespace()
            saved = cur.pos

            name = self.parse_identifier()
            if name is not None:
                cur.skip_whitespace()
                if cur.current() == ":":
                    cur.advance()
                    val = self.parse_value()
                    if val is None:
                        return None
                    kwargs[name] = val
                else:
                    # bareword such as true/false/null: reparse as a value
                    cur.pos = saved

            if cur.pos == saved:
                val = self.parse_value()
                if val is None:
                    return None
                kwargs[f"_{positional}"] = val
                positional += 1

            cur.skip_whitespace()
            c = cur.current()
            if c == ")":
                return kwargs
            if c == ",":
                cur.advance()
            elif not can_start_value(c):
                return None

        return None

    # ------------------------------------------------------------------ #
    # after the closing paren
    # ------------------------------------------------------------------ #
    def has_valid_line_ending(self) -> bool:
        """Newline, end of input or a fence after optional spaces/tabs."""
        cur = self.cur
        i = cur.pos
        text = cur.text
        while i < cur.end and text[i] in " \t":
            i += 1
        if i >= cur.end or text[i] in "\r\n":
            return True
        return cur.backtick_run(i) >= MIN_FENCE

    def parse_content_block(self) -> Optional[str]:
        """
        Consume a trailing fence.

        Returns ``""`` when no fence follows (cursor untouched) and ``None``
        when a fence opens but never closes.
        """
        cur = self.cur
        saved = cur.pos
        cur.skip_horizontal()
        if cur.backtick_run() < MIN_FENCE:
            cur.pos = saved
            return ""
        fenced = read_fence(cur)
        if fenced is None:
            return None
        body, _raw = fenced
        return clean_block(body, self.strip_info_string)

    # ------------------------------------------------------------------ #
    def parse(self, require_line_end: Optional[bool] = None) -> Optional[ParsedCall]:
        if require_line_end is None:
            require_line_end = self.config.require_line_end
        cur = self.cur

        name = self.parse_identifier()
        if name is None:
            return None

        cur.skip_whitespace()
        if cur.current() != "(":
            return None
        cur.advance()

        kwargs = self.parse_params()
        if kwargs is None:
            return None

        cur.skip_whitespace()
        if cur.current() != ")":
            return None
        cur.advance()

        if require_line_end and not self.has_valid_line_ending():
            return None

        content = self.parse_content_block()
        if content is None:
            return None

        return ParsedCall(name=name, kwargs=kwargs, content=content, raw=cur.text[:cur.pos])


# --------------------------------------------------------------------------- #
# public helpers
# --------------------------------------------------------------------------- #
def parse_call(
    text: str,
    require_line_end: bool = True,
    *,
    config: Optional[ParserConfig] = None,
) -> Optional[ParsedCall]:
    """Parse *text* as one tool call; ``None`` if it is not a valid call."""
    return CallParser(text, config).parse(require_line_end)


def parse_call_strict(
    text: str,
    require_line_end: bool = True,
    *,
    config: Optional[ParserConfig] = None,
) -> ParsedCall:
    """Like :func:`parse_call` but raise :class:`ParserError` on failure."""
    call = parse_call(text, require_line_end, config=config)
    if call is None:
        raise ParserError(
            "Text is not a valid tool call",
            parser_name="call_syntax",
            input_sample=text,
            code=ErrorCode.PARSER_INVALID_FORMAT,
        )
    return call


def try_parse_call(
    text: str,
    known_names: Collection[str],
    *,
    config: Optional[ParserConfig] = None,
) -> Tuple[Optional[ParsedCall], str]:
    """
    Parse a call at the start of *text* if its name is in *known_names*.

    Returns ``(call, remaining_text)`` on success and ``(None, text)``
    otherwise.
    """
    lookahead = ValueParser(text)
    lookahead.cur.skip_whitespace()
    start = lookahead.cur.pos

    name = lookahead.parse_identifier()
    if name is None or name not in known_names:
        return None, text

    lookahead.cur.skip_whitespace()
    if lookahead.cur.current() != "(":
        return None, text

    call = CallParser(text[start:], config).parse(True)
    if call is None:
        logger.debug("Known tool %s failed to parse", name)
        return None, text

    return call, text[start + len(call.raw):]
