"""Global pytest configuration and fixtures."""

import logging

import pytest

from chuk_tool_format.logging import log_context


class RecordingHandler(logging.Handler):
    """Keeps every record it receives."""

    def __init__(self) -> None:
        super().__init__(logging.DEBUG)
        self.records = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture(autouse=True, scope="function")
def reset_log_context():
    """
    Reset the task-local logging context before AND after each test so values
    set by one test never show up in another.
    """
    log_context.clear()
    yield
    log_context.clear()


@pytest.fixture
def log_records():
    """Records emitted under the ``chuk_tool_format`` logger at DEBUG and up."""
    logger = logging.getLogger("chuk_tool_format")
    handler = RecordingHandler()
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield handler.records
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)


@pytest.fixture
def events():
    """Ordered list of ("text", str) / ("tool", ParsedCall) scanner events."""
    return []


@pytest.fixture
def make_scanner(events):
    """Factory for a StreamScanner that records into ``events``."""
    from chuk_tool_format.streaming.scanner import StreamScanner

    def _make(known_tools=("read_file", "shell", "edit", "create"), **kwargs):
        return StreamScanner(
            set(known_tools),
            on_text=lambda s: events.append(("text", s)),
            on_tool=lambda c: events.append(("tool", c)),
            **kwargs,
        )

    return _make
