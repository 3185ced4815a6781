"""Property model: kinds, value types and host protocols."""

from propcopy.core.property.models import Color, DurableId, PropertyKind
from propcopy.core.property.protocol import PropertyHandle, PropertyTree

__all__ = [
    "Color",
    "DurableId",
    "PropertyKind",
    "PropertyHandle",
    "PropertyTree",
]
