"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from propcopy import (
    InMemoryAssetRegistry,
    LocalPropertyTree,
    MemoryClipboard,
    PropertyClipboardService,
    PropertyTreeTranscoder,
    PropertyValueCodec,
    RuntimeObjects,
    TransferSettings,
)


class Asset:
    """Stand-in for a loaded asset or scene object."""

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"Asset({self.name!r})"


@pytest.fixture
def asset_cls():
    return Asset


@pytest.fixture
def objects():
    """Instance id table shared by every tree of a test."""
    return RuntimeObjects()


@pytest.fixture
def registry():
    """Fresh asset registry."""
    return InMemoryAssetRegistry()


@pytest.fixture
def codec(registry):
    return PropertyValueCodec(identity=registry)


@pytest.fixture
def transcoder(codec):
    return PropertyTreeTranscoder(codec)


@pytest.fixture
def make_tree(objects):
    """Build a LocalPropertyTree sharing the test's instance id table."""

    def _make(fields):
        return LocalPropertyTree.from_fields(fields, objects=objects)

    return _make


@pytest.fixture
def clipboard():
    return MemoryClipboard()


@pytest.fixture
def service(clipboard, transcoder):
    return PropertyClipboardService(
        clipboard, transcoder, TransferSettings(clipboard_backend="memory")
    )
