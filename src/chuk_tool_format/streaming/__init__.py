# chuk_tool_format/streaming/__init__.py
from chuk_tool_format.streaming.scanner import StreamScanner
from chuk_tool_format.streaming.states import QuoteState, ScanState

__all__ = ["QuoteState", "ScanState", "StreamScanner"]
