"""Clipboard protocol: opaque get/set of one text blob."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clipboard(Protocol):
    """Text clipboard."""

    def get_text(self) -> str:
        """Current clipboard text, empty string if there is none."""
        ...

    def set_text(self, text: str) -> None:
        """Replace the clipboard text."""
        ...
