"""Transfer document: flat path -> value mapping and its JSON text form.

Usage:
    doc = Document()
    doc["position.x"] = FloatValue(1.0)
    text = doc.to_text()
    Document.parse(text) == doc
"""

from __future__ import annotations

import json
import warnings
from collections.abc import Iterator, MutableMapping
from typing import Any

from propcopy.core.value.models import StructuredValue, from_json, to_json


class DocumentParseError(ValueError):
    """Raised when text is not a JSON object of structured values."""

    pass


class Document(MutableMapping[str, StructuredValue]):
    """Insertion-ordered mapping of relative property paths to values.

    Built fresh on every copy and parsed fresh on every paste. Key order is
    kept on output and ignored for equality.
    """

    def __init__(self, entries: dict[str, StructuredValue] | None = None):
        self._entries: dict[str, StructuredValue] = dict(entries or {})

    def __getitem__(self, path: str) -> StructuredValue:
        return self._entries[path]

    def __setitem__(self, path: str, value: StructuredValue) -> None:
        if path in self._entries:
            warnings.warn(
                f"Document already has an entry for '{path}'. Only the last one will be kept.",
                stacklevel=2,
            )
        self._entries[path] = value

    def __delitem__(self, path: str) -> None:
        del self._entries[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Document):
            return self._entries == other._entries
        return NotImplemented

    def __repr__(self) -> str:
        return f"Document({self._entries!r})"

    def first_value(self) -> StructuredValue | None:
        """Value of the first entry in insertion order, None if empty."""
        return next(iter(self._entries.values()), None)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {path: to_json(value) for path, value in self._entries.items()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Document:
        """Create from a parsed JSON object.

        Raises:
            TypeError: If a value has no structured variant.
        """
        return cls({str(path): from_json(value) for path, value in data.items()})

    def to_text(self, indent: int | None = 2) -> str:
        """Render as JSON text.

        Args:
            indent: Indentation width, None for a single line.

        Returns:
            JSON object text, keys in insertion order.

        Raises:
            ValueError: If a float is NaN or infinite (not representable in JSON).
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False, allow_nan=False)

    @classmethod
    def parse(cls, text: str) -> Document:
        """Parse JSON text into a document.

        Args:
            text: Clipboard text.

        Returns:
            Parsed document.

        Raises:
            DocumentParseError: If text is not JSON, not a JSON object, or
                holds values with no structured variant (e.g. arrays).
        """
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            raise DocumentParseError(f"Not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise DocumentParseError(f"Expected a JSON object, got {type(data).__name__}")
        try:
            return cls.from_dict(data)
        except TypeError as e:
            raise DocumentParseError(str(e)) from e

    @classmethod
    def try_parse(cls, text: str | None) -> Document | None:
        """Parse text, returning None instead of raising when it is not a document."""
        if not text:
            return None
        try:
            return cls.parse(text)
        except DocumentParseError:
            return None
