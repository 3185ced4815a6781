"""Leaf property codec: one property value to and from a StructuredValue.

Encoding is exact: a kind with no rule raises UnsupportedKindError so an
incomplete copy never reaches the clipboard. Decoding is forgiving: a value
whose shape does not fit the property's kind is ignored and the property is
left untouched.

Usage:
    codec = PropertyValueCodec(identity=registry)
    value = codec.to_structured(source)
    codec.from_structured(target, value)
"""

from __future__ import annotations

import logging

from propcopy.core.identity.protocol import AssetIdentityService
from propcopy.core.property.models import Color, PropertyKind
from propcopy.core.property.protocol import PropertyHandle
from propcopy.core.value.models import (
    GUID_FIELD,
    INSTANCE_ID_FIELD,
    NULL,
    BoolValue,
    ExternalRef,
    FloatValue,
    IntValue,
    NullValue,
    ObjectValue,
    StringValue,
    StructuredValue,
)

logger = logging.getLogger(__name__)

COLOR_CHANNELS = ("r", "g", "b", "a")

INTEGER_KINDS = frozenset({PropertyKind.INTEGER, PropertyKind.ENUM, PropertyKind.ARRAY_SIZE})

# Kinds encoded as one value even when the host reports children for them
ATOMIC_KINDS = frozenset(
    {
        PropertyKind.BOOLEAN,
        PropertyKind.FLOAT,
        PropertyKind.STRING,
        PropertyKind.COLOR,
        PropertyKind.EXTERNAL_REFERENCE,
        *INTEGER_KINDS,
    }
)


class UnsupportedKindError(ValueError):
    """Raised when a leaf property has a kind with no encoding rule."""

    def __init__(self, kind: PropertyKind, path: str | None = None):
        self.kind = kind
        self.path = path
        where = f" (property '{path}')" if path else ""
        super().__init__(f"{kind.name} is not supported{where}")


class PropertyValueCodec:
    """Converts single leaf properties to and from structured values.

    Args:
        identity: Service resolving object references to durable ids.
            Without one, every non-null reference is treated as transient
            and durable references decode to None.
    """

    def __init__(self, identity: AssetIdentityService | None = None):
        self._identity = identity

    def to_structured(self, handle: PropertyHandle) -> StructuredValue:
        """Encode the current value of a leaf property.

        Args:
            handle: Property to read.

        Returns:
            Structured value for the property's declared kind.

        Raises:
            UnsupportedKindError: If the kind has no encoding rule.
        """
        kind = handle.kind
        if kind is PropertyKind.BOOLEAN:
            return BoolValue(handle.bool_value)
        if kind in INTEGER_KINDS:
            return IntValue(handle.int_value)
        if kind is PropertyKind.FLOAT:
            return FloatValue(float(handle.float_value))
        if kind is PropertyKind.STRING:
            return StringValue(handle.string_value)
        if kind is PropertyKind.COLOR:
            color = handle.color_value
            return ObjectValue(
                {channel: FloatValue(float(getattr(color, channel))) for channel in COLOR_CHANNELS}
            )
        if kind is PropertyKind.EXTERNAL_REFERENCE:
            return self._encode_reference(handle)
        raise UnsupportedKindError(kind, handle.path)

    def from_structured(self, handle: PropertyHandle, value: StructuredValue) -> bool:
        """Write a structured value into a property if its shape fits.

        Args:
            handle: Property to write.
            value: Value to apply.

        Returns:
            True if the property was written, False if the value was ignored.
        """
        kind = handle.kind
        applied = False
        if kind is PropertyKind.BOOLEAN:
            if isinstance(value, BoolValue):
                handle.bool_value = value.value
                applied = True
        elif kind in INTEGER_KINDS:
            if isinstance(value, IntValue):
                handle.int_value = value.value
                applied = True
        elif kind is PropertyKind.FLOAT:
            if isinstance(value, FloatValue):
                handle.float_value = value.value
                applied = True
        elif kind is PropertyKind.STRING:
            if isinstance(value, StringValue):
                handle.string_value = value.value
                applied = True
        elif kind is PropertyKind.COLOR:
            color = _decode_color(value)
            if color is not None:
                handle.color_value = color
                applied = True
        elif kind is PropertyKind.EXTERNAL_REFERENCE:
            applied = self._decode_reference(handle, value)

        if not applied:
            logger.debug(
                "Ignoring %s for %s property '%s'", type(value).__name__, kind.name, handle.path
            )
        return applied

    def _encode_reference(self, handle: PropertyHandle) -> StructuredValue:
        obj = handle.object_reference
        if obj is None:
            return NULL
        durable = self._identity.to_durable_id(obj) if self._identity is not None else None
        if durable is not None:
            return ExternalRef(instance_id=handle.object_reference_instance_id, guid=durable.guid)
        return ExternalRef(instance_id=handle.object_reference_instance_id)

    def _decode_reference(self, handle: PropertyHandle, value: StructuredValue) -> bool:
        if isinstance(value, ExternalRef):
            value = value.to_shape()

        if isinstance(value, NullValue):
            handle.object_reference = None
            return True
        if isinstance(value, IntValue):
            handle.object_reference_instance_id = value.value
            return True
        if not isinstance(value, ObjectValue):
            return False

        guid = value.get(GUID_FIELD)
        if guid is None:
            handle.object_reference = None
            return True
        if not isinstance(guid, StringValue):
            return False

        asset = self._identity.from_durable_id(guid.value) if self._identity is not None else None
        if asset is None:
            logger.debug("Asset %s not found for '%s'", guid.value, handle.path)
        instance_id = value.get(INSTANCE_ID_FIELD)
        # Hint first: the resolved asset is authoritative over a stale instance id
        handle.object_reference_instance_id = (
            instance_id.value if isinstance(instance_id, IntValue) else 0
        )
        handle.object_reference = asset
        return True


def _decode_color(value: StructuredValue) -> Color | None:
    """Build a Color from an object holding all four numeric channels."""
    if not isinstance(value, ObjectValue):
        return None
    channels: dict[str, float] = {}
    for channel in COLOR_CHANNELS:
        item = value.get(channel)
        if not isinstance(item, FloatValue | IntValue):
            return None
        channels[channel] = float(item.value)
    return Color(**channels)
