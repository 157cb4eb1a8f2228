# chuk_tool_format/logging/formatter.py
"""JSON-lines formatter for structured logs."""
from __future__ import annotations

import json
import logging
from datetime import UTC, date, datetime
from typing import Any, Dict

from pydantic import BaseModel

__all__ = ["StructuredFormatter"]


class StructuredFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    @staticmethod
    def _json_default(obj: Any) -> Any:
        if isinstance(obj, BaseModel):
            return obj.model_dump()
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        if isinstance(obj, (set, frozenset)):
            return list(obj)
        return str(obj)

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "pid": record.process,
            "thread": record.thread,
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        context = getattr(record, "context", None)
        if isinstance(context, dict) and context:
            data["context"] = context

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            data.update(extra)

        if record.exc_info:
            data["traceback"] = self.formatException(record.exc_info)

        return json.dumps(data, default=self._json_default)
