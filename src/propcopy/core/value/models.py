"""Structured values: the in-memory counterpart of one JSON value.

StructuredValue is a closed union. Codecs check the variant with isinstance
instead of inspecting raw Python types, so a JSON ``true`` can never be taken
for an integer and a float can never be silently truncated.

Usage:
    value = ObjectValue({"r": FloatValue(1.0), "g": FloatValue(0.5)})
    to_json(value)  # {"r": 1.0, "g": 0.5}
    from_json({"x": 1}) == ObjectValue({"x": IntValue(1)})
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

GUID_FIELD = "guid"
INSTANCE_ID_FIELD = "instanceID"


@dataclass(frozen=True, slots=True)
class NullValue:
    """JSON null."""


@dataclass(frozen=True, slots=True)
class BoolValue:
    value: bool


@dataclass(frozen=True, slots=True)
class IntValue:
    value: int


@dataclass(frozen=True, slots=True)
class FloatValue:
    value: float


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str


@dataclass(frozen=True, slots=True)
class ObjectValue:
    """JSON object. Field order is kept but never significant for equality."""

    fields: dict[str, StructuredValue] = field(default_factory=dict)

    def get(self, key: str) -> StructuredValue | None:
        """Get a field, None if absent."""
        return self.fields.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __len__(self) -> int:
        return len(self.fields)


@dataclass(frozen=True, slots=True)
class ExternalRef:
    """Reference to an external object.

    Durable when guid is set: the referenced object is a persisted asset and
    renders as ``{"guid": ..., "instanceID": ...}``. Transient otherwise:
    only the runtime instance id is known and it renders as a bare integer.
    """

    instance_id: int
    guid: str | None = None

    @property
    def is_durable(self) -> bool:
        return self.guid is not None

    def to_shape(self) -> ObjectValue | IntValue:
        """The JSON-shaped variant this reference is written as."""
        if self.guid is None:
            return IntValue(self.instance_id)
        return ObjectValue(
            {
                GUID_FIELD: StringValue(self.guid),
                INSTANCE_ID_FIELD: IntValue(self.instance_id),
            }
        )


type StructuredValue = (
    NullValue | BoolValue | IntValue | FloatValue | StringValue | ObjectValue | ExternalRef
)

NULL = NullValue()


def to_json(value: StructuredValue) -> Any:
    """Convert a structured value to plain JSON-compatible Python objects.

    Args:
        value: Value to convert.

    Returns:
        None, bool, int, float, str or dict.

    Raises:
        TypeError: If value is not a StructuredValue variant.
    """
    if isinstance(value, NullValue):
        return None
    if isinstance(value, BoolValue | IntValue | FloatValue | StringValue):
        return value.value
    if isinstance(value, ObjectValue):
        return {key: to_json(item) for key, item in value.fields.items()}
    if isinstance(value, ExternalRef):
        return to_json(value.to_shape())
    raise TypeError(f"Not a structured value: {type(value).__name__}")


def from_json(obj: Any) -> StructuredValue:
    """Convert parsed JSON into a structured value.

    External references come back in their JSON shape (object or integer);
    the codec decides what they mean from the target property's kind.

    Args:
        obj: Output of json.loads (or an equivalent plain object).

    Returns:
        The matching StructuredValue variant.

    Raises:
        TypeError: If obj (or anything nested in it) has no variant,
            e.g. a list or a non-string object key.
    """
    if obj is None:
        return NULL
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return BoolValue(obj)
    if isinstance(obj, int):
        return IntValue(obj)
    if isinstance(obj, float):
        return FloatValue(obj)
    if isinstance(obj, str):
        return StringValue(obj)
    if isinstance(obj, dict):
        fields: dict[str, StructuredValue] = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be strings, got {type(key).__name__}")
            fields[key] = from_json(item)
        return ObjectValue(fields)
    raise TypeError(f"No structured value for {type(obj).__name__}")
