"""Host property protocols.

The transcoder only needs a narrow view of the host object model: a handle
per property with a kind tag, a path, its visible children and typed
accessors, plus a tree that resolves paths and commits staged writes.

Usage:
    tree: PropertyTree = LocalPropertyTree(...)
    speed = tree.find_property("speed")
    speed.float_value = 3.5
    tree.apply_modified_properties()
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable

from propcopy.core.property.models import Color, PropertyKind


@runtime_checkable
class PropertyHandle(Protocol):
    """Cursor onto one property of a host tree. Borrowed for a single call."""

    @property
    def kind(self) -> PropertyKind:
        """Declared value kind."""
        ...

    @property
    def name(self) -> str:
        """Last path segment."""
        ...

    @property
    def path(self) -> str:
        """Dot-separated path, unique within the owning tree."""
        ...

    @property
    def has_visible_children(self) -> bool:
        """Whether the property exposes visible child properties."""
        ...

    def visible_children(self) -> Iterator[PropertyHandle]:
        """Direct visible children in declaration order."""
        ...

    bool_value: bool
    int_value: int
    float_value: float
    string_value: str
    color_value: Color
    object_reference: Any
    object_reference_instance_id: int


@runtime_checkable
class PropertyTree(Protocol):
    """Owning object of a set of properties (one component)."""

    def root_properties(self) -> Iterator[PropertyHandle]:
        """Top-level visible properties in declaration order."""
        ...

    def find_property(self, path: str) -> PropertyHandle | None:
        """Resolve a dot-separated path. None if no such property exists."""
        ...

    def apply_modified_properties(self) -> bool:
        """Commit all staged writes at once. Returns True if anything changed."""
        ...
