"""In-memory asset registry.

Dict-backed identity service for a single process and for tests.

Usage:
    registry = InMemoryAssetRegistry()
    guid = registry.register(material)
    registry.from_durable_id(guid) is material
"""

from __future__ import annotations

import uuid
from typing import Any

from propcopy.core.property.models import DurableId


class InMemoryAssetRegistry:
    """Bidirectional mapping between live objects and durable ids.

    Objects are tracked by identity, so unhashable assets are fine.
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._by_object: dict[int, DurableId] = {}
        self._by_guid: dict[str, Any] = {}

    def register(self, obj: Any, guid: str | None = None, local_id: int = 0) -> str:
        """Register an object as a persisted asset.

        Args:
            obj: Object to register.
            guid: Explicit guid. A random hex guid is generated when omitted.
            local_id: Local file identifier within the asset.

        Returns:
            The guid the object is registered under.

        Raises:
            ValueError: If guid is already registered to another object.
        """
        existing = self._by_object.get(id(obj))
        if existing is not None and guid is None:
            return existing.guid

        guid = guid or uuid.uuid4().hex
        owner = self._by_guid.get(guid)
        if owner is not None and owner is not obj:
            raise ValueError(f"Guid {guid} is already registered to {owner!r}")
        if existing is not None and existing.guid != guid:
            del self._by_guid[existing.guid]

        self._by_object[id(obj)] = DurableId(guid=guid, local_id=local_id)
        self._by_guid[guid] = obj
        return guid

    def unregister(self, guid: str) -> bool:
        """Forget an asset. Returns True if it was registered."""
        obj = self._by_guid.pop(guid, None)
        if obj is None:
            return False
        self._by_object.pop(id(obj), None)
        return True

    def to_durable_id(self, obj: Any) -> DurableId | None:
        """Get the durable id of a registered object, None if transient."""
        if obj is None:
            return None
        durable = self._by_object.get(id(obj))
        if durable is None or self._by_guid.get(durable.guid) is not obj:
            return None
        return durable

    def from_durable_id(self, guid: str) -> Any | None:
        """Get the object registered under guid, None if unknown."""
        return self._by_guid.get(guid)

    def __len__(self) -> int:
        return len(self._by_guid)
