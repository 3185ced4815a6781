"""Asset identity: protocol and in-memory registry."""

from propcopy.core.identity.protocol import AssetIdentityService
from propcopy.core.identity.registry import InMemoryAssetRegistry

__all__ = ["AssetIdentityService", "InMemoryAssetRegistry"]
