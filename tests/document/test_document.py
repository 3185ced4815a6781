"""Tests for Document.

Why these tests exist:
- The document text is the only durable form of a copy
- Malformed clipboard text must read as "nothing to paste", not crash
"""

import json

import pytest

from propcopy.core.value import NULL, ExternalRef, FloatValue, IntValue, ObjectValue
from propcopy.document import Document, DocumentParseError


def test_to_text_preserves_insertion_order() -> None:
    doc = Document()
    doc["z"] = IntValue(1)
    doc["a"] = IntValue(2)
    doc["m"] = IntValue(3)

    assert list(json.loads(doc.to_text())) == ["z", "a", "m"]


def test_single_entry_text() -> None:
    doc = Document({"Speed": FloatValue(3.5)})
    assert json.loads(doc.to_text()) == {"Speed": 3.5}
    assert doc.to_text(indent=None) == '{"Speed": 3.5}'


def test_external_refs_render_in_wire_shape() -> None:
    doc = Document({"mat": ExternalRef(4, guid="g"), "target": ExternalRef(9), "none": NULL})
    assert json.loads(doc.to_text()) == {
        "mat": {"guid": "g", "instanceID": 4},
        "target": 9,
        "none": None,
    }


def test_parse_round_trip() -> None:
    doc = Document({"position.x": FloatValue(1.5), "count": IntValue(2)})
    assert Document.parse(doc.to_text()) == doc


def test_parse_nested_object() -> None:
    doc = Document.parse('{"tint": {"r": 1.0, "g": 0, "b": 0, "a": 1}}')
    assert isinstance(doc["tint"], ObjectValue)
    assert doc["tint"].get("g") == IntValue(0)


@pytest.mark.parametrize(
    "text",
    ["not json", "", "[1, 2]", "3.5", '"str"', '{"a": [1, 2]}', '{"a": '],
    ids=["garbage", "empty", "array", "number", "string", "nested-array", "truncated"],
)
def test_parse_rejects_non_documents(text) -> None:
    with pytest.raises(DocumentParseError):
        Document.parse(text)


@pytest.mark.parametrize("text", ["not json", "", None, "[1]"])
def test_try_parse_returns_none(text) -> None:
    assert Document.try_parse(text) is None


def test_first_value() -> None:
    assert Document().first_value() is None
    doc = Document.parse('{"b": 2, "a": 1}')
    assert doc.first_value() == IntValue(2)


def test_duplicate_key_warns_and_keeps_last() -> None:
    doc = Document()
    doc["x"] = IntValue(1)
    with pytest.warns(UserWarning, match="Only the last one will be kept"):
        doc["x"] = IntValue(2)
    assert doc["x"] == IntValue(2)
    assert len(doc) == 1


def test_equality_ignores_order() -> None:
    a = Document({"x": IntValue(1), "y": IntValue(2)})
    b = Document({"y": IntValue(2), "x": IntValue(1)})
    assert a == b
    assert a != Document({"x": IntValue(1)})


@pytest.mark.parametrize("number", [float("nan"), float("inf"), float("-inf")])
def test_to_text_rejects_non_finite_floats(number) -> None:
    """Why: NaN and Infinity are not JSON; a copy must fail rather than write them."""
    with pytest.raises(ValueError):
        Document({"speed": FloatValue(number)}).to_text()
