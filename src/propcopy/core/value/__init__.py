"""Structured values and the leaf property codec."""

from propcopy.core.value.codec import (
    ATOMIC_KINDS,
    PropertyValueCodec,
    UnsupportedKindError,
)
from propcopy.core.value.models import (
    NULL,
    BoolValue,
    ExternalRef,
    FloatValue,
    IntValue,
    NullValue,
    ObjectValue,
    StringValue,
    StructuredValue,
    from_json,
    to_json,
)

__all__ = [
    # Models
    "StructuredValue",
    "NullValue",
    "BoolValue",
    "IntValue",
    "FloatValue",
    "StringValue",
    "ObjectValue",
    "ExternalRef",
    "NULL",
    "to_json",
    "from_json",
    # Codec
    "PropertyValueCodec",
    "UnsupportedKindError",
    "ATOMIC_KINDS",
]
