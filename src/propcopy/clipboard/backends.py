"""Clipboard backends.

Usage:
    clipboard = create_clipboard(TransferSettings(clipboard_backend="memory"))
    clipboard.set_text("{}")
"""

from __future__ import annotations

import pyperclip

from propcopy.clipboard.protocol import Clipboard
from propcopy.config.settings import TransferSettings


class ClipboardUnavailableError(RuntimeError):
    """Raised when the system clipboard cannot be accessed."""

    pass


class MemoryClipboard:
    """In-process clipboard, for tests and headless hosts."""

    def __init__(self, text: str = ""):
        self._text = text

    def get_text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text


class SystemClipboard:
    """OS clipboard via pyperclip."""

    def get_text(self) -> str:
        """Read the OS clipboard.

        Raises:
            ClipboardUnavailableError: If no clipboard mechanism is available.
        """
        try:
            return pyperclip.paste() or ""
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailableError(f"Clipboard access failed: {e}") from e

    def set_text(self, text: str) -> None:
        """Write the OS clipboard.

        Raises:
            ClipboardUnavailableError: If no clipboard mechanism is available.
        """
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailableError(f"Clipboard access failed: {e}") from e


def create_clipboard(settings: TransferSettings | None = None) -> Clipboard:
    """Create the clipboard backend selected by settings.

    Args:
        settings: Transfer settings (loaded from the environment if None).

    Returns:
        SystemClipboard or MemoryClipboard.
    """
    settings = settings or TransferSettings()
    if settings.clipboard_backend == "memory":
        return MemoryClipboard()
    return SystemClipboard()
