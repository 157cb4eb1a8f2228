# chuk_tool_format/syntax/cursor.py
"""
Codepoint cursor over an input string plus the character classes the grammar
uses.  Python strings are indexed by codepoint, so a position never lands in
the middle of a multi-byte character.
"""
from __future__ import annotations

WHITESPACE = frozenset(" \t\n\r")
HORIZONTAL_WHITESPACE = frozenset(" \t")
DIGITS = frozenset("0123456789")
QUOTES = frozenset("\"'")
MIN_FENCE = 3


def is_ident_start(c: str) -> bool:
    return c != "" and (c.isalpha() or c == "_")


def is_ident_char(c: str) -> bool:
    return c != "" and (c.isalpha() or is_digit(c) or c == "_")


def is_digit(c: str) -> bool:
    return c in DIGITS


def can_start_value(c: str) -> bool:
    """True if *c* may begin a new parameter without a separating comma."""
    if not c:
        return False
    return is_ident_start(c) or is_digit(c) or c in "\"'`[{-"


class Cursor:
    """Mutable read position over an immutable text."""

    __slots__ = ("text", "pos", "end")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos
        self.end = len(text)

    @property
    def eof(self) -> bool:
        return self.pos >= self.end

    def current(self) -> str:
        """Character under the cursor, ``""`` at end of input."""
        return self.text[self.pos] if self.pos < self.end else ""

    def peek(self, offset: int = 1) -> str:
        idx = self.pos + offset
        return self.text[idx] if idx < self.end else ""

    def advance(self, n: int = 1) -> None:
        self.pos = min(self.pos + n, self.end)

    def skip_whitespace(self) -> None:
        while self.pos < self.end and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def skip_horizontal(self) -> None:
        while self.pos < self.end and self.text[self.pos] in HORIZONTAL_WHITESPACE:
            self.pos += 1

    def startswith(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def backtick_run(self, at: int | None = None) -> int:
        """Length of the backtick run starting at *at* (default: cursor)."""
        i = self.pos if at is None else at
        start = i
        while i < self.end and self.text[i] == "`":
            i += 1
        return i - start

    def span(self, start: int) -> str:
        return self.text[start:self.pos]
