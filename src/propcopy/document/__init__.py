"""Transfer document."""

from propcopy.document.models import Document, DocumentParseError

__all__ = ["Document", "DocumentParseError"]
