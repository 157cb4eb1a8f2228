# tests/models/test_parsed_call.py
import pytest
from pydantic import ValidationError

from chuk_tool_format.models.parsed_call import ParsedCall
from chuk_tool_format.models.parsed_value import ParsedValue


def _call() -> ParsedCall:
    return ParsedCall(
        name="edit",
        kwargs={
            "_1": ParsedValue.integer(2),
            "old": ParsedValue.string("a"),
            "_0": ParsedValue.string("/f.txt"),
            "_10": ParsedValue.boolean(True),
        },
        raw='edit("/f.txt", 2, old: "a")',
    )


def test_defaults():
    call = ParsedCall(name="noop")
    assert call.kwargs == {}
    assert call.content == ""
    assert call.raw == ""


@pytest.mark.parametrize("invalid_name", [None, 123, ""])
def test_invalid_name(invalid_name):
    with pytest.raises(ValidationError):
        ParsedCall(name=invalid_name)


def test_arguments_are_plain_values():
    assert _call().arguments == {"_1": 2, "old": "a", "_0": "/f.txt", "_10": True}


def test_positional_ordered_by_index():
    assert [v.value for v in _call().positional()] == ["/f.txt", 2, True]


def test_named_excludes_synthetic_keys():
    assert list(_call().named()) == ["old"]


@pytest.mark.parametrize(
    "key,expected",
    [("_0", True), ("_12", True), ("_", False), ("_a", False), ("x_0", False), ("_0x", False)],
)
def test_is_positional_key(key, expected):
    assert ParsedCall.is_positional_key(key) is expected


def test_frozen():
    call = _call()
    with pytest.raises(ValidationError):
        call.name = "other"  # type: ignore[misc]


def test_str_representation():
    text = str(ParsedCall(name="t", kwargs={"a": ParsedValue.integer(1)}))
    assert "t(" in text
    assert "a=1" in text
