"""Property tree transcoder: walks property trees into documents and back.

A property is either a leaf, encoded in one piece by the codec, or a
composite whose visible children are visited individually. Colors and
object references are leaves even when the host reports children for them.

Usage:
    transcoder = PropertyTreeTranscoder(PropertyValueCodec(identity=registry))
    doc = transcoder.encode_subtree(tree.find_property("position"))
    if transcoder.paste_compatible(doc, target):
        transcoder.paste_subtree(doc, target, other_tree)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from propcopy.config.settings import DEFAULT_SCRIPT_FIELD
from propcopy.core.property.models import PropertyKind
from propcopy.core.property.protocol import PropertyHandle, PropertyTree
from propcopy.core.value.codec import ATOMIC_KINDS, PropertyValueCodec
from propcopy.document.models import Document

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."
type Resolver = Callable[[str], PropertyHandle | None]


def should_descend(handle: PropertyHandle) -> bool:
    """Check if a property is a composite whose children are visited.

    Args:
        handle: Property to check.

    Returns:
        True for properties with visible children and no atomic encoding.
    """
    return handle.has_visible_children and handle.kind not in ATOMIC_KINDS


def is_empty_composite(handle: PropertyHandle) -> bool:
    """Check if a property is a composite with nothing visible to copy.

    Such properties are skipped by the walk rather than encoded as leaves.
    """
    return handle.kind is PropertyKind.GENERIC and not handle.has_visible_children


def iter_leaves(handle: PropertyHandle) -> Iterator[PropertyHandle]:
    """Yield the leaves below a composite in depth-first visible order.

    Composites are descended without being yielded; leaves are yielded and
    never descended. Composites without visible children are skipped.
    """
    for child in handle.visible_children():
        if should_descend(child):
            yield from iter_leaves(child)
        elif not is_empty_composite(child):
            yield child


class PropertyTreeTranscoder:
    """Builds and consumes path-keyed documents for property subtrees.

    Args:
        codec: Leaf codec used for every emitted or applied value.
    """

    def __init__(self, codec: PropertyValueCodec | None = None):
        self.codec = codec or PropertyValueCodec()

    def encode_subtree(self, root: PropertyHandle) -> Document:
        """Encode a property and everything below it.

        Args:
            root: Property to copy.

        Returns:
            ``{root.name: value}`` for a leaf root, otherwise one entry per
            leaf keyed by its path relative to root. Empty for a
            composite with no visible children.

        Raises:
            UnsupportedKindError: If any visited leaf has no encoding rule.
        """
        document = Document()
        if is_empty_composite(root):
            return document
        if not should_descend(root):
            document[root.name] = self.codec.to_structured(root)
            return document

        prefix = root.path + PATH_SEPARATOR
        for leaf in iter_leaves(root):
            document[leaf.path.removeprefix(prefix)] = self.codec.to_structured(leaf)
        return document

    def encode_component(
        self, tree: PropertyTree, skip_script: bool = True, script_field: str = DEFAULT_SCRIPT_FIELD
    ) -> Document:
        """Encode every visible field of a component, keyed by full path.

        Args:
            tree: Component to copy.
            skip_script: Leave out the leading script field.
            script_field: Name of the script field.

        Returns:
            Document with one entry per leaf field.

        Raises:
            UnsupportedKindError: If any visited leaf has no encoding rule.
        """
        document = Document()
        for index, prop in enumerate(tree.root_properties()):
            if skip_script and index == 0 and prop.name == script_field:
                continue
            if is_empty_composite(prop):
                continue
            leaves = iter_leaves(prop) if should_descend(prop) else iter((prop,))
            for leaf in leaves:
                document[leaf.path] = self.codec.to_structured(leaf)
        return document

    def decode_subtree(self, document: Document, root_name: str | None, resolve: Resolver) -> int:
        """Apply document entries to the properties their paths resolve to.

        Entries whose path does not resolve, or whose value does not fit the
        target, are skipped. Nothing is committed; the caller applies.

        Args:
            document: Parsed document.
            root_name: Path of the target composite, None for whole-component
                documents keyed by full path.
            resolve: Path lookup, usually ``tree.find_property``.

        Returns:
            Number of entries applied.
        """
        applied = 0
        for key, value in document.items():
            path = key if root_name is None else f"{root_name}{PATH_SEPARATOR}{key}"
            target = resolve(path)
            if target is None:
                logger.debug("Skipping '%s': no such property", path)
                continue
            if self.codec.from_structured(target, value):
                applied += 1
        return applied

    def paste_subtree(self, document: Document, root: PropertyHandle, tree: PropertyTree) -> int:
        """Apply a document to a property and commit the changes at once.

        A leaf root takes the first value of the document whatever its key.

        Args:
            document: Parsed document.
            root: Target property.
            tree: Tree owning root, used for path lookup and the commit.

        Returns:
            Number of entries applied.
        """
        if should_descend(root):
            applied = self.decode_subtree(document, root.path, tree.find_property)
        else:
            value = document.first_value()
            applied = int(value is not None and self.codec.from_structured(root, value))
        tree.apply_modified_properties()
        logger.info("Pasted %d of %d entries onto '%s'", applied, len(document), root.path)
        return applied

    def paste_component(self, document: Document, tree: PropertyTree) -> int:
        """Apply a whole-component document and commit the changes at once.

        Returns:
            Number of entries applied.
        """
        applied = self.decode_subtree(document, None, tree.find_property)
        tree.apply_modified_properties()
        logger.info("Pasted %d of %d component entries", applied, len(document))
        return applied

    def paste_compatible(self, document: Document, target: PropertyHandle) -> bool:
        """Check whether a document may be offered for pasting onto target.

        Multi-entry documents go to composites, single-entry documents to
        leaves. This is a heuristic: a compatible document can still have
        every entry skipped on decode.
        """
        return (len(document) > 1) == should_descend(target)
