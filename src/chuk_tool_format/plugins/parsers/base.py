# chuk_tool_format/plugins/parsers/base.py
"""Async-native parser-plugin base interface."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from chuk_tool_format.models.parsed_call import ParsedCall


class ParserPlugin(ABC):
    """
    Every parser plugin **must** implement the async ``try_parse`` coroutine.

    It returns the :class:`ParsedCall` objects found in *raw*, in order, or an
    empty list when the input holds none.
    """

    @abstractmethod
    async def try_parse(self, raw: str | object) -> List[ParsedCall]:  # noqa: D401
        ...
