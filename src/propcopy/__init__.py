"""propcopy: copy and paste of property trees through the clipboard as JSON.

Usage:
    from propcopy import (
        LocalPropertyTree,
        MemoryClipboard,
        PropertyClipboardService,
        PropertyRequest,
    )

    source = LocalPropertyTree.from_fields({"position": {"x": 1, "y": 2, "z": 3}})
    target = LocalPropertyTree.from_fields({"position": {"x": 0, "y": 0, "z": 0}})

    service = PropertyClipboardService(MemoryClipboard())
    service.copy_property(PropertyRequest(source.find_property("position"), source))
    service.paste_property(PropertyRequest(target.find_property("position"), target))
"""

__version__ = "0.1.0"

# Clipboard commands
from propcopy.clipboard import (
    Clipboard,
    ClipboardUnavailableError,
    MemoryClipboard,
    MenuItem,
    PropertyClipboardService,
    PropertyRequest,
    SystemClipboard,
    create_clipboard,
)

# Configuration
from propcopy.config import TransferSettings

# Core primitives
from propcopy.core import (
    AssetIdentityService,
    Color,
    DurableId,
    InMemoryAssetRegistry,
    PropertyHandle,
    PropertyKind,
    PropertyTree,
    PropertyValueCodec,
    StructuredValue,
    UnsupportedKindError,
)

# Documents
from propcopy.document import Document, DocumentParseError

# Hosts
from propcopy.host import LocalPropertyTree, RuntimeObjects, reference

# Transcoding
from propcopy.transcoder import PropertyTreeTranscoder, should_descend

__all__ = [
    # Version
    "__version__",
    # Core
    "PropertyKind",
    "PropertyHandle",
    "PropertyTree",
    "Color",
    "DurableId",
    "AssetIdentityService",
    "InMemoryAssetRegistry",
    "StructuredValue",
    "PropertyValueCodec",
    "UnsupportedKindError",
    # Documents
    "Document",
    "DocumentParseError",
    # Transcoding
    "PropertyTreeTranscoder",
    "should_descend",
    # Hosts
    "LocalPropertyTree",
    "RuntimeObjects",
    "reference",
    # Clipboard
    "Clipboard",
    "MemoryClipboard",
    "SystemClipboard",
    "ClipboardUnavailableError",
    "create_clipboard",
    "PropertyClipboardService",
    "PropertyRequest",
    "MenuItem",
    # Config
    "TransferSettings",
]
