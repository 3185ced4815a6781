"""Local in-memory property host.

Simple object-backed property tree suitable for single-process use and
testing. Writes through a handle are staged on the tree and only become
visible in the committed values after apply_modified_properties().

Usage:
    objects = RuntimeObjects()
    tree = LocalPropertyTree.from_fields(
        {
            "speed": 3.5,
            "position": {"x": 1, "y": 2, "z": 3},
            "tint": Color(1.0, 0.0, 0.0, 1.0),
            "target": reference(material),
        },
        objects=objects,
    )
    tree.find_property("position.x").int_value = 10
    tree.apply_modified_properties()
"""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from propcopy.core.property.models import Color, PropertyKind

_NUMERIC_KINDS = (PropertyKind.INTEGER, PropertyKind.ENUM, PropertyKind.ARRAY_SIZE)


class RuntimeObjects:
    """Session-local table of runtime instance ids.

    Ids are handed out on first sight and stay stable for the lifetime of
    the table. Trees that share a table share instance ids.
    """

    def __init__(self) -> None:
        """Initialize empty table."""
        self._ids: dict[int, int] = {}
        self._objects: dict[int, Any] = {}
        self._next_id = 1

    def instance_id(self, obj: Any) -> int:
        """Get (or assign) the instance id of obj."""
        key = id(obj)
        if key not in self._ids:
            self._ids[key] = self._next_id
            self._objects[self._next_id] = obj
            self._next_id += 1
        return self._ids[key]

    def resolve(self, instance_id: int) -> Any | None:
        """Get the object with this instance id, None if unknown."""
        return self._objects.get(instance_id)


@dataclass(slots=True)
class FieldSpec:
    """Explicit declaration of a field when the kind cannot be inferred."""

    kind: PropertyKind
    value: Any = None
    children: dict[str, Any] | None = None
    visible: bool = True


def reference(obj: Any) -> FieldSpec:
    """Declare an object reference field."""
    return FieldSpec(PropertyKind.EXTERNAL_REFERENCE, obj)


def hidden(value: Any) -> FieldSpec:
    """Declare a field that is not visible to the walk."""
    declared = _infer_spec(value)
    declared.visible = False
    return declared


def _infer_spec(value: Any) -> FieldSpec:
    """Infer the field kind from a plain Python value."""
    if isinstance(value, FieldSpec):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return FieldSpec(PropertyKind.BOOLEAN, value)
    if isinstance(value, enum.Enum):
        return FieldSpec(PropertyKind.ENUM, int(value.value))
    if isinstance(value, int):
        return FieldSpec(PropertyKind.INTEGER, value)
    if isinstance(value, float):
        return FieldSpec(PropertyKind.FLOAT, value)
    if isinstance(value, str):
        return FieldSpec(PropertyKind.STRING, value)
    if isinstance(value, Color):
        return FieldSpec(PropertyKind.COLOR, value)
    if isinstance(value, dict):
        return FieldSpec(PropertyKind.GENERIC, children=value)
    raise TypeError(f"Cannot infer property kind for {type(value).__name__}")


class LocalProperty:
    """Handle onto one property of a LocalPropertyTree.

    Typed accessors raise TypeError when used on a property of another kind.
    """

    def __init__(
        self,
        tree: LocalPropertyTree,
        kind: PropertyKind,
        name: str,
        path: str,
        value: Any = None,
        visible: bool = True,
    ):
        self._tree = tree
        self._kind = kind
        self._name = name
        self._path = path
        self._value = value
        self._visible = visible
        self._children: list[LocalProperty] = []

    def __repr__(self) -> str:
        return f"LocalProperty({self._path!r}, {self._kind.name})"

    @property
    def kind(self) -> PropertyKind:
        return self._kind

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        return self._path

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def has_children(self) -> bool:
        return bool(self._children)

    @property
    def has_visible_children(self) -> bool:
        return any(child.visible for child in self._children)

    def visible_children(self) -> Iterator[LocalProperty]:
        return (child for child in self._children if child.visible)

    def _read(self, *kinds: PropertyKind) -> Any:
        if self._kind not in kinds:
            raise TypeError(f"'{self._path}' is {self._kind.name}, not {kinds[0].name}")
        return self._tree._read(self)

    def _write(self, value: Any, *kinds: PropertyKind) -> None:
        if self._kind not in kinds:
            raise TypeError(f"'{self._path}' is {self._kind.name}, not {kinds[0].name}")
        self._tree._stage(self, value)

    @property
    def bool_value(self) -> bool:
        return self._read(PropertyKind.BOOLEAN)

    @bool_value.setter
    def bool_value(self, value: bool) -> None:
        self._write(bool(value), PropertyKind.BOOLEAN)

    @property
    def int_value(self) -> int:
        return self._read(*_NUMERIC_KINDS)

    @int_value.setter
    def int_value(self, value: int) -> None:
        self._write(int(value), *_NUMERIC_KINDS)

    @property
    def float_value(self) -> float:
        return self._read(PropertyKind.FLOAT)

    @float_value.setter
    def float_value(self, value: float) -> None:
        self._write(float(value), PropertyKind.FLOAT)

    @property
    def string_value(self) -> str:
        return self._read(PropertyKind.STRING)

    @string_value.setter
    def string_value(self, value: str) -> None:
        self._write(str(value), PropertyKind.STRING)

    @property
    def color_value(self) -> Color:
        return self._read(PropertyKind.COLOR)

    @color_value.setter
    def color_value(self, value: Color) -> None:
        self._write(value, PropertyKind.COLOR)

    @property
    def object_reference(self) -> Any:
        return self._read(PropertyKind.EXTERNAL_REFERENCE)

    @object_reference.setter
    def object_reference(self, value: Any) -> None:
        self._write(value, PropertyKind.EXTERNAL_REFERENCE)

    @property
    def object_reference_instance_id(self) -> int:
        obj = self.object_reference
        return 0 if obj is None else self._tree.objects.instance_id(obj)

    @object_reference_instance_id.setter
    def object_reference_instance_id(self, value: int) -> None:
        self.object_reference = self._tree.objects.resolve(value)


class _ColorChannel(LocalProperty):
    """Float view onto one channel of a color property."""

    def __init__(self, tree: LocalPropertyTree, parent: LocalProperty, channel: str):
        super().__init__(tree, PropertyKind.FLOAT, channel, f"{parent.path}.{channel}")
        self._parent = parent

    @property
    def float_value(self) -> float:
        return getattr(self._parent.color_value, self._name)

    @float_value.setter
    def float_value(self, value: float) -> None:
        color = self._parent.color_value
        self._parent.color_value = dataclasses.replace(color, **{self._name: float(value)})


class LocalPropertyTree:
    """In-memory component: ordered fields with staged writes.

    Args:
        objects: Instance id table. Share one between trees to paste
            transient references across them.
    """

    def __init__(self, objects: RuntimeObjects | None = None):
        """Initialize empty tree.

        Args:
            objects: Instance id table (a fresh one when omitted).
        """
        self.objects = objects or RuntimeObjects()
        self._roots: list[LocalProperty] = []
        self._by_path: dict[str, LocalProperty] = {}
        self._pending: dict[str, Any] = {}

    @classmethod
    def from_fields(
        cls, fields: dict[str, Any], objects: RuntimeObjects | None = None
    ) -> LocalPropertyTree:
        """Build a tree from a dict of field values or FieldSpecs.

        Args:
            fields: Field name to plain value, nested dict or FieldSpec.
            objects: Instance id table.

        Returns:
            Tree holding one top-level property per field.
        """
        tree = cls(objects)
        for name, value in fields.items():
            tree.add(name, value)
        return tree

    def add(self, name: str, value: Any, parent: LocalProperty | None = None) -> LocalProperty:
        """Add a property (and its children) under parent or at top level.

        Raises:
            ValueError: If the resulting path already exists.
            TypeError: If the kind cannot be inferred from value.
        """
        declared = _infer_spec(value)
        path = name if parent is None else f"{parent.path}.{name}"
        if path in self._by_path:
            raise ValueError(f"Property '{path}' already exists")

        prop = LocalProperty(self, declared.kind, name, path, declared.value, declared.visible)
        self._register(prop, parent)

        if declared.kind is PropertyKind.COLOR:
            if declared.value is None:
                prop._value = Color()
            for channel in ("r", "g", "b", "a"):
                self._register(_ColorChannel(self, prop, channel), prop)
        for child_name, child_value in (declared.children or {}).items():
            self.add(child_name, child_value, parent=prop)
        return prop

    def _register(self, prop: LocalProperty, parent: LocalProperty | None) -> None:
        self._by_path[prop.path] = prop
        if parent is None:
            self._roots.append(prop)
        else:
            parent._children.append(prop)

    def _read(self, prop: LocalProperty) -> Any:
        if prop.path in self._pending:
            return self._pending[prop.path]
        return prop._value

    def _stage(self, prop: LocalProperty, value: Any) -> None:
        self._pending[prop.path] = value

    def root_properties(self) -> Iterator[LocalProperty]:
        """Top-level visible properties in declaration order."""
        return (prop for prop in self._roots if prop.visible)

    def find_property(self, path: str) -> LocalProperty | None:
        """Resolve a dot-separated path, None if absent."""
        return self._by_path.get(path)

    @property
    def has_modified_properties(self) -> bool:
        """Whether there are staged writes waiting for apply."""
        return bool(self._pending)

    def apply_modified_properties(self) -> bool:
        """Commit staged writes. Returns True if any committed value changed."""
        changed = False
        for path, value in self._pending.items():
            prop = self._by_path[path]
            if prop._value is not value and prop._value != value:
                changed = True
            prop._value = value
        self._pending.clear()
        return changed

    def committed_value(self, path: str) -> Any:
        """Committed (applied) value of a property, ignoring staged writes.

        Raises:
            KeyError: If there is no such property.
        """
        return self._by_path[path]._value

    def to_dict(self) -> dict[str, Any]:
        """Committed values as nested dicts keyed by field name."""
        return {prop.name: _committed(prop) for prop in self._roots}


def _committed(prop: LocalProperty) -> Any:
    if prop.kind is PropertyKind.GENERIC:
        return {child.name: _committed(child) for child in prop._children}
    return prop._value
