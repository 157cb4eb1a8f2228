# chuk_tool_format/syntax/values.py
"""
Recursive-descent grammar for argument literals.

    value   := string | number | true | false | null | array | object | fence
    string  := '"' ... '"' | "'" ... "'"        (escapes: \\n \\t \\r \\\\ \\<quote>)
    number  := '-'? digit+ ('.' digit+)?
    array   := '[' (value (',' value)*)? ']'
    object  := '{' (key ':' value (',' key ':' value)*)? '}'
    key     := identifier | string
    fence   := '`'{N} body '`'{N}              (N >= 3, closing run exactly N)

Every ``parse_*`` method either returns a value and leaves the cursor after it,
or returns ``None``.  Callers treat ``None`` as "not a call" and never inspect
partial state.
"""
from __future__ import annotations

import re
from functools import partial
from typing import Callable, Dict, List, Optional, Tuple

from chuk_tool_format.models.parsed_value import ParsedValue
from chuk_tool_format.syntax.cursor import (
    MIN_FENCE,
    QUOTES,
    Cursor,
    is_digit,
    is_ident_char,
    is_ident_start,
)

__all__ = ["ValueParser", "clean_block", "dedent", "read_fence"]

# bare language tag on the opening fence line: ```python\n
_INFO_STRING = re.compile(r"[\w+.#-]+(?=\r?\n)")

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\"}

# factories: every occurrence gets its own value
_KEYWORDS: Tuple[Tuple[str, Callable[[], ParsedValue]], ...] = (
    ("true", partial(ParsedValue.boolean, True)),
    ("false", partial(ParsedValue.boolean, False)),
    ("null", ParsedValue.null),
)

MAX_NESTING = 128


# --------------------------------------------------------------------------- #
# fenced blocks
# --------------------------------------------------------------------------- #
def dedent(text: str) -> str:
    """Strip the whitespace prefix shared by every non-blank line."""
    lines = text.split("\n")
    indents = [len(line) - len(line.lstrip(" \t")) for line in lines if line.strip()]
    if not indents:
        return text
    common = min(indents)
    if common == 0:
        return text
    return "\n".join(line[common:] if len(line) >= common else line for line in lines)


def clean_block(body: str, strip_info_string: bool = True) -> str:
    """Normalise raw fence content: language tag, edge newlines, indentation."""
    if strip_info_string:
        m = _INFO_STRING.match(body)
        if m:
            body = body[m.end():]
    # one blank line after the opening fence, one before the closing fence
    first_nl = body.find("\n")
    if first_nl != -1 and not body[:first_nl].strip(" \t\r"):
        body = body[first_nl + 1:]
    last_nl = body.rfind("\n")
    if last_nl != -1 and not body[last_nl + 1:].strip(" \t"):
        body = body[:last_nl]
        if body.endswith("\r"):
            body = body[:-1]
    return dedent(body)


def read_fence(cur: Cursor) -> Optional[Tuple[str, str]]:
    """
    Consume a fenced block at the cursor.

    Returns ``(body, raw)`` where *body* is the untouched text between the
    fences.  Runs of backticks shorter or longer than the opening run are
    content.  On failure the cursor is left where it was.
    """
    start = cur.pos
    opening = cur.backtick_run()
    if opening < MIN_FENCE:
        return None
    cur.advance(opening)
    body_start = cur.pos

    while not cur.eof:
        if cur.current() == "`":
            run_start = cur.pos
            run = cur.backtick_run()
            cur.advance(run)
            if run == opening:
                return cur.text[body_start:run_start], cur.span(start)
        else:
            cur.advance()

    cur.pos = start
    return None


# --------------------------------------------------------------------------- #
# value grammar
# --------------------------------------------------------------------------- #
class ValueParser:
    """Literal grammar over a shared :class:`Cursor`."""

    def __init__(self, text: str, *, strip_info_string: bool = True) -> None:
        self.cur = Cursor(text)
        self.strip_info_string = strip_info_string
        self._depth = 0

    # ------------------------------------------------------------------ #
    def parse_identifier(self) -> Optional[str]:
        cur = self.cur
        cur.skip_whitespace()
        if not is_ident_start(cur.current()):
            return None
        start = cur.pos
        while is_ident_char(cur.current()):
            cur.advance()
        return cur.span(start)

    def parse_string(self) -> Optional[ParsedValue]:
        cur = self.cur
        cur.skip_whitespace()
        quote = cur.current()
        if quote not in QUOTES:
            return None

        start = cur.pos
        cur.advance()
        out: List[str] = []
        while not cur.eof:
            c = cur.current()
            if c == "\\":
                cur.advance()
                if cur.eof:
                    break
                escaped = cur.current()
                if escaped == quote:
                    out.append(quote)
                elif escaped in _ESCAPES:
                    out.append(_ESCAPES[escaped])
                else:
                    out.append("\\" + escaped)
                cur.advance()
            elif c == quote:
                cur.advance()
                return ParsedValue.string("".join(out), raw=cur.span(start))
            else:
                out.append(c)
                cur.advance()

        return None  # unterminated

    def parse_number(self) -> Optional[ParsedValue]:
        cur = self.cur
        cur.skip_whitespace()
        start = cur.pos
        if cur.current() == "-":
            cur.advance()
        if not is_digit(cur.current()):
            cur.pos = start
            return None
        while is_digit(cur.current()):
            cur.advance()

        if cur.current() == "." and is_digit(cur.peek()):
            cur.advance()
            while is_digit(cur.current()):
                cur.advance()
            raw = cur.span(start)
            return ParsedValue.floating(float(raw), raw=raw)

        raw = cur.span(start)
        return ParsedValue.integer(int(raw), raw=raw)

    def parse_keyword(self) -> Optional[ParsedValue]:
        cur = self.cur
        cur.skip_whitespace()
        for word, make in _KEYWORDS:
            if cur.startswith(word):
                cur.advance(len(word))
                return make()
        return None

    def parse_array(self) -> Optional[ParsedValue]:
        cur = self.cur
        cur.skip_whitespace()
        if cur.current() != "[":
            return None
        start = cur.pos
        cur.advance()

        elements: List[ParsedValue] = []
        cur.skip_whitespace()
        if cur.current() == "]":
            cur.advance()
            return ParsedValue.array(elements, raw=cur.span(start))

        while not cur.eof:
            val = self.parse_value()
            if val is None:
                return None
            elements.append(val)

            cur.skip_whitespace()
            c = cur.current()
            if c == "]":
                cur.advance()
                return ParsedValue.array(elements, raw=cur.span(start))
            if c != ",":
                return None
            cur.advance()

        return None

    def parse_object(self) -> Optional[ParsedValue]:
        cur = self.cur
        cur.skip_whitespace()
        if cur.current() != "{":
            return None
        start = cur.pos
        cur.advance()

        members: Dict[str, ParsedValue] = {}
        cur.skip_whitespace()
        if cur.current() == "}":
            cur.advance()
            return ParsedValue.mapping(members, raw=cur.span(start))

        while not cur.eof:
            key = self.parse_identifier()
            if key is None:
                str_key = self.parse_string()
                if str_key is None:
                    return None
                key = str_key.value

            cur.skip_whitespace()
            if cur.current() != ":":
                return None
            cur.advance()

            val = self.parse_value()
            if val is None:
                return None
            members[key] = val

            cur.skip_whitespace()
            c = cur.current()
            if c == "}":
                cur.advance()
                return ParsedValue.mapping(members, raw=cur.span(start))
            if c != ",":
                return None
            cur.advance()

        return None

    def parse_codeblock(self) -> Optional[ParsedValue]:
        self.cur.skip_whitespace()
        fenced = read_fence(self.cur)
        if fenced is None:
            return None
        body, raw = fenced
        return ParsedValue.string(clean_block(body, self.strip_info_string), raw=raw)

    # ------------------------------------------------------------------ #
    def parse_value(self) -> Optional[ParsedValue]:
        """Dispatch on the first character of the literal."""
        cur = self.cur
        cur.skip_whitespace()
        c = cur.current()
        if c == "":
            return None

        if self._depth >= MAX_NESTING:
            return None
        self._depth += 1
        try:
            if c in QUOTES:
                return self.parse_string()
            if is_digit(c) or (c == "-" and is_digit(cur.peek())):
                return self.parse_number()
            if c == "[":
                return self.parse_array()
            if c == "{":
                return self.parse_object()
            if c == "`":
                return self.parse_codeblock()
            if c in "tfn":
                return self.parse_keyword()
            return None
        finally:
            self._depth -= 1
