# tests/models/test_parsed_value.py
import pytest
from pydantic import ValidationError

from chuk_tool_format.models.parsed_value import ParsedValue
from chuk_tool_format.models.value_kind import ValueKind


def test_scalar_constructors():
    assert ParsedValue.string("hi", raw='"hi"').value == "hi"
    assert ParsedValue.string("hi", raw='"hi"').raw == '"hi"'
    assert ParsedValue.integer(42).raw == "42"
    assert ParsedValue.floating(3.5, raw="3.5").value == 3.5
    assert ParsedValue.boolean(True).raw == "true"
    assert ParsedValue.boolean(False).value is False
    assert ParsedValue.null().value is None
    assert ParsedValue.null().kind is ValueKind.NULL


def test_array_unwraps_children():
    arr = ParsedValue.array(
        [ParsedValue.integer(1), ParsedValue.string("a", raw='"a"')],
        raw='[1, "a"]',
    )
    assert arr.kind is ValueKind.ARRAY
    assert arr.value == [1, "a"]
    assert arr.elements[1].raw == '"a"'
    assert arr.to_python() == [1, "a"]


def test_object_unwraps_members():
    obj = ParsedValue.mapping({"k": ParsedValue.boolean(True)}, raw="{k: true}")
    assert obj.kind is ValueKind.OBJECT
    assert obj.value == {"k": True}
    assert obj.members["k"].kind is ValueKind.BOOLEAN


@pytest.mark.parametrize(
    "kind,value",
    [
        (ValueKind.STRING, 1),
        (ValueKind.INTEGER, True),
        (ValueKind.INTEGER, 1.0),
        (ValueKind.FLOAT, 1),
        (ValueKind.BOOLEAN, 0),
        (ValueKind.NULL, ""),
        (ValueKind.ARRAY, (1, 2)),
        (ValueKind.OBJECT, []),
    ],
)
def test_kind_value_mismatch_rejected(kind, value):
    with pytest.raises(ValidationError):
        ParsedValue(kind=kind, value=value)


def test_children_only_on_containers():
    with pytest.raises(ValidationError):
        ParsedValue(kind=ValueKind.STRING, value="x", elements=(ParsedValue.null(),))


def test_frozen():
    pv = ParsedValue.string("x")
    with pytest.raises(ValidationError):
        pv.value = "y"  # type: ignore[misc]


def test_str_is_raw():
    assert str(ParsedValue.string("a\nb", raw='"a\\nb"')) == '"a\\nb"'
