"""Asset identity lookup protocol.

Maps live objects to durable asset identifiers and back. Objects that exist
only at runtime have no durable identity.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from propcopy.core.property.models import DurableId


@runtime_checkable
class AssetIdentityService(Protocol):
    """Resolve objects to and from durable asset identifiers."""

    def to_durable_id(self, obj: Any) -> DurableId | None:
        """Get the durable id of a persisted asset.

        Args:
            obj: Live object referenced by a property.

        Returns:
            DurableId if the object is a persisted asset, None otherwise.
        """
        ...

    def from_durable_id(self, guid: str) -> Any | None:
        """Load the asset identified by guid.

        Args:
            guid: Asset guid as produced by to_durable_id.

        Returns:
            The live object, or None if the guid is unknown.
        """
        ...
