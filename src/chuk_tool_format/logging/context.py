# chuk_tool_format/logging/context.py
"""
Async-task-local logging context.

``log_context`` holds a dict in a :class:`contextvars.ContextVar`, so values set
inside one asyncio task never leak into another.  Loggers obtained through
:func:`get_logger` merge the current context into every record under
``extra["context"]``.
"""
from __future__ import annotations

import contextvars
import logging
import uuid
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

__all__ = ["LogContext", "log_context", "StructuredAdapter", "get_logger"]

_context_var: contextvars.ContextVar[Dict[str, Any] | None] = contextvars.ContextVar(
    "chuk_tool_format_log_context", default=None
)
_request_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "chuk_tool_format_request_id", default=None
)


class LogContext:
    """Key/value context attached to every structured log record."""

    @property
    def context(self) -> Dict[str, Any]:
        ctx = _context_var.get()
        if ctx is None:
            ctx = {}
            _context_var.set(ctx)
        return ctx

    @property
    def request_id(self) -> Optional[str]:
        return _request_var.get()

    def update(self, values: Dict[str, Any]) -> None:
        # copy-on-write so sibling tasks sharing a parent dict stay isolated
        _context_var.set({**self.context, **values})

    def clear(self) -> None:
        _context_var.set({})
        _request_var.set(None)

    def get_copy(self) -> Dict[str, Any]:
        return dict(self.context)

    # request helpers ----------------------------------------------------
    def start_request(self, request_id: Optional[str] = None) -> str:
        rid = request_id or str(uuid.uuid4())
        _request_var.set(rid)
        self.update({"request_id": rid})
        return rid

    def end_request(self) -> None:
        self.clear()

    # scopes -------------------------------------------------------------
    @asynccontextmanager
    async def context_scope(self, **values: Any) -> AsyncIterator[Dict[str, Any]]:
        previous = self.get_copy()
        self.update(values)
        try:
            yield self.context
        finally:
            _context_var.set(previous)

    @asynccontextmanager
    async def request_scope(self, request_id: Optional[str] = None) -> AsyncIterator[str]:
        previous = self.get_copy()
        previous_rid = self.request_id
        rid = self.start_request(request_id)
        try:
            yield rid
        finally:
            _context_var.set(previous)
            _request_var.set(previous_rid)


log_context = LogContext()


class StructuredAdapter(logging.LoggerAdapter):
    """Logger adapter that injects ``log_context`` into ``extra["context"]``."""

    def process(self, msg: Any, kwargs: Dict[str, Any]) -> tuple[Any, Dict[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        context = {**log_context.get_copy(), **(extra.get("context") or {})}
        if context:
            extra["context"] = context
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str) -> StructuredAdapter:
    """Return a context-aware logger for *name*."""
    return StructuredAdapter(logging.getLogger(name), {})
