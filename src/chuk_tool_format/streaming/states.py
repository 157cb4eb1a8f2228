# chuk_tool_format/streaming/states.py
"""
States of the incremental scanner.
"""

from enum import StrEnum


class ScanState(StrEnum):
    """
    Top-level scanner state.

    Attributes:
        TEXT: forwarding plain text
        IDENT: buffering a possible tool name at line start
        CALL: inside the parenthesised argument list
        POST_PAREN: just past the closing ``)``
        CONTENT: inside the fenced block trailing the call
    """

    TEXT = "text"
    IDENT = "ident"
    CALL = "call"
    POST_PAREN = "post_paren"
    CONTENT = "content"


class QuoteState(StrEnum):
    """Quoting context inside ``CALL``; parentheses only count in ``NONE``."""

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"
    FENCE = "fence"
