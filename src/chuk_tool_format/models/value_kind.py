# chuk_tool_format/models/value_kind.py
"""
The closed set of literal kinds a parsed argument can take.
"""

from enum import StrEnum


class ValueKind(StrEnum):
    """
    Discriminator for :class:`~chuk_tool_format.models.parsed_value.ParsedValue`.

    Attributes:
        STRING: quoted string literal or fenced code block
        INTEGER: digit run without a decimal point
        FLOAT: digit run with a decimal point
        BOOLEAN: ``true`` / ``false``
        NULL: ``null``
        ARRAY: ``[...]``
        OBJECT: ``{...}``
    """

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"
