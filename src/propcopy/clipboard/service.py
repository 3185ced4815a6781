"""Copy and paste commands for properties and whole components.

The context menu builds one PropertyRequest when it opens and hands the
same request to the command it invokes, so no property is cached between
building the menu and running the action.

Usage:
    service = PropertyClipboardService(clipboard, transcoder)
    request = PropertyRequest(tree.find_property("position"), tree)
    for item in service.property_menu(request):
        render(item.label, enabled=item.enabled)
    service.paste_property(request)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from propcopy.clipboard.protocol import Clipboard
from propcopy.config.settings import TransferSettings
from propcopy.core.property.protocol import PropertyHandle, PropertyTree
from propcopy.document.models import Document
from propcopy.transcoder.tree import PropertyTreeTranscoder

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PropertyRequest:
    """Property targeted by a context menu, with the tree that owns it."""

    property: PropertyHandle
    tree: PropertyTree


@dataclass(frozen=True, slots=True)
class MenuItem:
    """One context menu entry."""

    label: str
    enabled: bool
    action: Callable[[], object]


class PropertyClipboardService:
    """Clipboard commands backed by a transcoder.

    Args:
        clipboard: Text clipboard to read and write.
        transcoder: Tree transcoder (default codec without identity service
            when omitted).
        settings: Transfer settings (loaded from the environment if None).
    """

    def __init__(
        self,
        clipboard: Clipboard,
        transcoder: PropertyTreeTranscoder | None = None,
        settings: TransferSettings | None = None,
    ):
        self.clipboard = clipboard
        self.transcoder = transcoder or PropertyTreeTranscoder()
        self.settings = settings or TransferSettings()

    def clipboard_document(self) -> Document | None:
        """Parse the clipboard, None when there is nothing to paste."""
        return Document.try_parse(self.clipboard.get_text())

    def _write(self, document: Document) -> None:
        self.clipboard.set_text(document.to_text(indent=self.settings.indent))

    # Property commands

    def copy_property(self, request: PropertyRequest) -> Document:
        """Copy a property to the clipboard.

        The clipboard is left untouched when the document is empty.

        Returns:
            The copied document.

        Raises:
            UnsupportedKindError: If a leaf cannot be encoded. Nothing is
                written in that case.
            ValueError: If a float is NaN or infinite. Nothing is written.
        """
        document = self.transcoder.encode_subtree(request.property)
        if document:
            self._write(document)
            logger.info("Copied %d entries from '%s'", len(document), request.property.path)
        return document

    def can_paste_property(self, request: PropertyRequest) -> bool:
        """Whether the clipboard holds a document compatible with the property."""
        document = self.clipboard_document()
        return document is not None and self.transcoder.paste_compatible(
            document, request.property
        )

    def paste_property(self, request: PropertyRequest) -> bool:
        """Paste the clipboard onto a property.

        Returns:
            False if the clipboard holds nothing to paste, True otherwise.
        """
        document = self.clipboard_document()
        if document is None:
            logger.info("Nothing to paste onto '%s'", request.property.path)
            return False
        self.transcoder.paste_subtree(document, request.property, request.tree)
        return True

    def property_menu(self, request: PropertyRequest) -> list[MenuItem]:
        """Context menu entries for a property."""
        return [
            MenuItem("Copy", True, lambda: self.copy_property(request)),
            MenuItem("Paste", self.can_paste_property(request), lambda: self.paste_property(request)),
        ]

    # Component commands

    def copy_component(self, tree: PropertyTree) -> Document:
        """Copy every visible field of a component to the clipboard.

        Raises:
            UnsupportedKindError: If a leaf cannot be encoded. Nothing is
                written in that case.
        """
        document = self.transcoder.encode_component(
            tree,
            skip_script=self.settings.skip_script_field,
            script_field=self.settings.script_field_name,
        )
        self._write(document)
        logger.info("Copied %d component entries", len(document))
        return document

    def can_paste_component(self) -> bool:
        """Whether the clipboard holds a parseable document."""
        return self.clipboard_document() is not None

    def paste_component(self, tree: PropertyTree) -> bool:
        """Paste the clipboard onto a component by full property path.

        Returns:
            False if the clipboard holds nothing to paste, True otherwise.
        """
        document = self.clipboard_document()
        if document is None:
            logger.info("Nothing to paste onto component")
            return False
        self.transcoder.paste_component(document, tree)
        return True

    def component_menu(self, tree: PropertyTree) -> list[MenuItem]:
        """Context menu entries for a whole component."""
        return [
            MenuItem("Copy All Fields", True, lambda: self.copy_component(tree)),
            MenuItem(
                "Paste All Fields", self.can_paste_component(), lambda: self.paste_component(tree)
            ),
        ]
