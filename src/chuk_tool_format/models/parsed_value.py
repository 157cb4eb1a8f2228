# chuk_tool_format/models/parsed_value.py
"""
Typed literal extracted from a tool call, together with its source text.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from chuk_tool_format.models.value_kind import ValueKind

_SCALAR_TYPES: Dict[ValueKind, tuple] = {
    ValueKind.STRING: (str,),
    ValueKind.INTEGER: (int,),
    ValueKind.FLOAT: (float,),
    ValueKind.BOOLEAN: (bool,),
    ValueKind.ARRAY: (list,),
    ValueKind.OBJECT: (dict,),
}


class ParsedValue(BaseModel):
    """
    Immutable tagged value.

    ``value`` always holds the plain Python equivalent (arrays and objects are
    unwrapped recursively), so most callers never need to look at ``kind``.
    The typed children of arrays and objects stay available through
    ``elements`` and ``members``; ``raw`` is the literal exactly as written.
    """

    model_config = ConfigDict(frozen=True)

    kind: ValueKind
    value: Any = None
    raw: str = ""
    elements: Tuple["ParsedValue", ...] = ()
    members: Dict[str, "ParsedValue"] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_kind(self) -> "ParsedValue":
        if self.kind is ValueKind.NULL:
            if self.value is not None:
                raise ValueError("null value must be None")
            return self

        expected = _SCALAR_TYPES[self.kind]
        if not isinstance(self.value, expected):
            raise ValueError(f"{self.kind} value has type {type(self.value).__name__}")
        # bool subclasses int; keep the kinds disjoint
        if self.kind is ValueKind.INTEGER and isinstance(self.value, bool):
            raise ValueError("integer value must not be a bool")
        if self.kind is not ValueKind.ARRAY and self.elements:
            raise ValueError("only arrays carry elements")
        if self.kind is not ValueKind.OBJECT and self.members:
            raise ValueError("only objects carry members")
        return self

    # ------------------------------------------------------------------ #
    # constructors
    # ------------------------------------------------------------------ #
    @classmethod
    def string(cls, value: str, raw: str | None = None) -> "ParsedValue":
        return cls(kind=ValueKind.STRING, value=value, raw=raw if raw is not None else value)

    @classmethod
    def integer(cls, value: int, raw: str | None = None) -> "ParsedValue":
        return cls(kind=ValueKind.INTEGER, value=value, raw=raw if raw is not None else str(value))

    @classmethod
    def floating(cls, value: float, raw: str | None = None) -> "ParsedValue":
        return cls(kind=ValueKind.FLOAT, value=value, raw=raw if raw is not None else repr(value))

    @classmethod
    def boolean(cls, value: bool) -> "ParsedValue":
        return cls(kind=ValueKind.BOOLEAN, value=value, raw="true" if value else "false")

    @classmethod
    def null(cls) -> "ParsedValue":
        return cls(kind=ValueKind.NULL, value=None, raw="null")

    @classmethod
    def array(cls, elements: Iterable["ParsedValue"], raw: str = "") -> "ParsedValue":
        items = tuple(elements)
        return cls(
            kind=ValueKind.ARRAY,
            value=[e.value for e in items],
            raw=raw,
            elements=items,
        )

    @classmethod
    def mapping(cls, members: Dict[str, "ParsedValue"], raw: str = "") -> "ParsedValue":
        return cls(
            kind=ValueKind.OBJECT,
            value={k: v.value for k, v in members.items()},
            raw=raw,
            members=dict(members),
        )

    # ------------------------------------------------------------------ #
    def to_python(self) -> Any:
        return self.value

    def __str__(self) -> str:
        return self.raw


ParsedValue.model_rebuild()
