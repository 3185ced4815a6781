"""End-to-end copy/paste journeys through the clipboard text."""

import json

from propcopy import (
    Color,
    InMemoryAssetRegistry,
    LocalPropertyTree,
    MemoryClipboard,
    PropertyClipboardService,
    PropertyRequest,
    PropertyTreeTranscoder,
    PropertyValueCodec,
    RuntimeObjects,
    TransferSettings,
    reference,
)


class Asset:
    def __init__(self, name: str):
        self.name = name


def _service(registry, clipboard):
    return PropertyClipboardService(
        clipboard,
        PropertyTreeTranscoder(PropertyValueCodec(identity=registry)),
        TransferSettings(clipboard_backend="memory"),
    )


def test_references_survive_component_copy() -> None:
    """Durable, transient and null references each use their own wire shape."""
    registry = InMemoryAssetRegistry()
    objects = RuntimeObjects()
    material = Asset("material")
    guid = registry.register(material)
    spawned = Asset("spawned")

    source = LocalPropertyTree.from_fields(
        {
            "m_Script": reference(Asset("script")),
            "material": reference(material),
            "follow": reference(spawned),
            "parent": reference(None),
        },
        objects=objects,
    )
    target = LocalPropertyTree.from_fields(
        {
            "m_Script": reference(None),
            "material": reference(None),
            "follow": reference(None),
            "parent": reference(Asset("stale")),
        },
        objects=objects,
    )
    clipboard = MemoryClipboard()
    service = _service(registry, clipboard)

    service.copy_component(source)
    wire = json.loads(clipboard.get_text())

    assert wire == {
        "material": {"guid": guid, "instanceID": objects.instance_id(material)},
        "follow": objects.instance_id(spawned),
        "parent": None,
    }

    assert service.paste_component(target)
    assert target.committed_value("material") is material
    assert target.committed_value("follow") is spawned
    assert target.committed_value("parent") is None


def test_durable_reference_resolves_in_new_session() -> None:
    """A guid reference resolves even when instance ids differ between sessions."""
    registry = InMemoryAssetRegistry()
    material = Asset("material")
    registry.register(material, guid="5e1f")
    clipboard = MemoryClipboard()
    service = _service(registry, clipboard)

    source = LocalPropertyTree.from_fields({"material": reference(material)})
    service.copy_property(PropertyRequest(source.find_property("material"), source))

    # Fresh instance id table: the copied instanceID means nothing here
    target = LocalPropertyTree.from_fields({"material": reference(None)})
    request = PropertyRequest(target.find_property("material"), target)

    assert service.can_paste_property(request)
    assert service.paste_property(request)
    assert target.committed_value("material") is material


def test_mixed_struct_copy_between_components() -> None:
    registry = InMemoryAssetRegistry()
    clipboard = MemoryClipboard()
    service = _service(registry, clipboard)
    settings = {
        "enabled": True,
        "label": "boss",
        "tint": Color(0.2, 0.4, 0.6, 1.0),
        "stats": {"hp": 100, "speed": 4.5},
    }
    source = LocalPropertyTree.from_fields({"config": settings})
    target = LocalPropertyTree.from_fields(
        {
            "config": {
                "enabled": False,
                "label": "",
                "tint": Color(),
                "stats": {"hp": 1, "speed": 0.0, "armor": 3},
            }
        }
    )

    service.copy_property(PropertyRequest(source.find_property("config"), source))
    assert list(json.loads(clipboard.get_text())) == [
        "enabled",
        "label",
        "tint",
        "stats.hp",
        "stats.speed",
    ]

    service.paste_property(PropertyRequest(target.find_property("config"), target))

    assert target.to_dict() == {
        "config": {
            "enabled": True,
            "label": "boss",
            "tint": Color(0.2, 0.4, 0.6, 1.0),
            "stats": {"hp": 100, "speed": 4.5, "armor": 3},
        }
    }
