"""Configuration module using Pydantic Settings.

Usage:
    from propcopy.config import TransferSettings

    settings = TransferSettings(clipboard_backend="memory")
"""

from propcopy.config.settings import DEFAULT_SCRIPT_FIELD, TransferSettings

__all__ = ["TransferSettings", "DEFAULT_SCRIPT_FIELD"]
