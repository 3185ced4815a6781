"""Configuration settings using Pydantic Settings.

Usage:
    from propcopy.config import TransferSettings

    # Load from environment variables (PROPCOPY_*)
    settings = TransferSettings()

    # Or override with explicit values
    settings = TransferSettings(clipboard_backend="memory", indent=None)
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SCRIPT_FIELD = "m_Script"


class TransferSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for copy and paste.

    Attributes:
        indent: JSON indentation written to the clipboard (None for one line).
        skip_script_field: Leave the leading script field out of component copies.
        script_field_name: Name of the script field.
        clipboard_backend: "system" for the OS clipboard, "memory" for an
            in-process one.

    Environment Variables:
        PROPCOPY_INDENT
        PROPCOPY_SKIP_SCRIPT_FIELD
        PROPCOPY_SCRIPT_FIELD_NAME
        PROPCOPY_CLIPBOARD_BACKEND
    """

    model_config = SettingsConfigDict(
        env_prefix="PROPCOPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    indent: int | None = Field(default=2, ge=0)
    skip_script_field: bool = True
    script_field_name: str = DEFAULT_SCRIPT_FIELD
    clipboard_backend: Literal["system", "memory"] = "system"
