"""Property models: kinds and small value types exposed by host property trees.

Usage:
    handle.kind is PropertyKind.COLOR
    handle.color_value = Color(1.0, 0.5, 0.0, 1.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class PropertyKind(Enum):
    """Declared value kind of a host property."""

    BOOLEAN = auto()
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()
    COLOR = auto()
    EXTERNAL_REFERENCE = auto()  # Reference to an asset or runtime object
    GENERIC = auto()  # Composite whose children are visited individually
    ENUM = auto()
    ARRAY_SIZE = auto()
    ANIMATION_CURVE = auto()
    GRADIENT = auto()


@dataclass(frozen=True, slots=True)
class Color:
    """Four-channel RGBA color."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


@dataclass(frozen=True, slots=True)
class DurableId:
    """Persistent identity of an asset: guid plus local file id."""

    guid: str
    local_id: int = 0
