"""Core functionalities: property model, structured values, identity.

Architecture Note:
    core/ holds the stateless pieces: value types, protocols and the leaf
    codec. Tree walking lives in transcoder/, hosts in host/ and the
    clipboard commands in clipboard/.
"""

from propcopy.core.identity import AssetIdentityService, InMemoryAssetRegistry
from propcopy.core.property import Color, DurableId, PropertyHandle, PropertyKind, PropertyTree
from propcopy.core.value import (
    NULL,
    BoolValue,
    ExternalRef,
    FloatValue,
    IntValue,
    NullValue,
    ObjectValue,
    PropertyValueCodec,
    StringValue,
    StructuredValue,
    UnsupportedKindError,
    from_json,
    to_json,
)

__all__ = [
    # Property
    "PropertyKind",
    "PropertyHandle",
    "PropertyTree",
    "Color",
    "DurableId",
    # Identity
    "AssetIdentityService",
    "InMemoryAssetRegistry",
    # Values
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
    "PropertyValueCodec",
    "UnsupportedKindError",
]
