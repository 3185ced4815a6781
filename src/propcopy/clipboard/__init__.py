"""Clipboard backends and copy/paste commands."""

from propcopy.clipboard.backends import (
    ClipboardUnavailableError,
    MemoryClipboard,
    SystemClipboard,
    create_clipboard,
)
from propcopy.clipboard.protocol import Clipboard
from propcopy.clipboard.service import MenuItem, PropertyClipboardService, PropertyRequest

__all__ = [
    "Clipboard",
    "MemoryClipboard",
    "SystemClipboard",
    "ClipboardUnavailableError",
    "create_clipboard",
    "PropertyClipboardService",
    "PropertyRequest",
    "MenuItem",
]
