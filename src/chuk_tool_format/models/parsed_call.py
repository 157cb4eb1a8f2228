# chuk_tool_format/models/parsed_call.py
"""
A tool call recognised in model output.
"""
from __future__ import annotations

import re
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from chuk_tool_format.models.parsed_value import ParsedValue

_POSITIONAL_KEY = re.compile(r"_(\d+)")


class ParsedCall(BaseModel):
    """
    Immutable record produced by a successful parse.

    Attributes:
        name: tool name as written
        kwargs: argument key → value; positional arguments are keyed ``_0``,
            ``_1``, … in the order they appear
        content: body of the fenced block after ``)``, empty if there is none
        raw: the exact source span that was consumed
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    kwargs: Dict[str, ParsedValue] = Field(default_factory=dict)
    content: str = ""
    raw: str = ""

    @staticmethod
    def is_positional_key(key: str) -> bool:
        return _POSITIONAL_KEY.fullmatch(key) is not None

    @property
    def arguments(self) -> Dict[str, Any]:
        """Plain-Python view of ``kwargs``."""
        return {k: v.value for k, v in self.kwargs.items()}

    def positional(self) -> List[ParsedValue]:
        keyed = [
            (int(k[1:]), v) for k, v in self.kwargs.items() if self.is_positional_key(k)
        ]
        return [v for _, v in sorted(keyed, key=lambda kv: kv[0])]

    def named(self) -> Dict[str, ParsedValue]:
        return {k: v for k, v in self.kwargs.items() if not self.is_positional_key(k)}

    def __str__(self) -> str:
        args = ", ".join(f"{k}={v.raw}" for k, v in self.kwargs.items())
        return f"ParsedCall({self.name}({args}))"
