# chuk_tool_format/plugins/__init__.py
