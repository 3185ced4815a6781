"""Property hosts."""

from propcopy.host.local import (
    FieldSpec,
    LocalProperty,
    LocalPropertyTree,
    RuntimeObjects,
    hidden,
    reference,
)

__all__ = [
    "LocalPropertyTree",
    "LocalProperty",
    "RuntimeObjects",
    "FieldSpec",
    "reference",
    "hidden",
]
