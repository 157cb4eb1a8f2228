# chuk_tool_format/models/__init__.py
from chuk_tool_format.models.parsed_call import ParsedCall
from chuk_tool_format.models.parsed_value import ParsedValue
from chuk_tool_format.models.value_kind import ValueKind

__all__ = ["ParsedCall", "ParsedValue", "ValueKind"]
