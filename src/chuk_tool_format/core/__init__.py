# chuk_tool_format/core/__init__.py
