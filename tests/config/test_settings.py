"""Tests for TransferSettings."""

import pytest
from pydantic import ValidationError

from propcopy.config import DEFAULT_SCRIPT_FIELD, TransferSettings


def test_defaults(monkeypatch) -> None:
    for name in ("INDENT", "SKIP_SCRIPT_FIELD", "SCRIPT_FIELD_NAME", "CLIPBOARD_BACKEND"):
        monkeypatch.delenv(f"PROPCOPY_{name}", raising=False)

    settings = TransferSettings(_env_file=None)

    assert settings.indent == 2
    assert settings.skip_script_field is True
    assert settings.script_field_name == DEFAULT_SCRIPT_FIELD == "m_Script"
    assert settings.clipboard_backend == "system"


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("PROPCOPY_INDENT", "4")
    monkeypatch.setenv("PROPCOPY_SKIP_SCRIPT_FIELD", "false")
    monkeypatch.setenv("PROPCOPY_CLIPBOARD_BACKEND", "memory")

    settings = TransferSettings(_env_file=None)

    assert settings.indent == 4
    assert settings.skip_script_field is False
    assert settings.clipboard_backend == "memory"


def test_explicit_values_override_environment(monkeypatch) -> None:
    monkeypatch.setenv("PROPCOPY_SCRIPT_FIELD_NAME", "from_env")
    settings = TransferSettings(_env_file=None, script_field_name="explicit")
    assert settings.script_field_name == "explicit"


@pytest.mark.parametrize("kwargs", [{"clipboard_backend": "cloud"}, {"indent": -1}])
def test_invalid_values_rejected(kwargs) -> None:
    with pytest.raises(ValidationError):
        TransferSettings(_env_file=None, **kwargs)
