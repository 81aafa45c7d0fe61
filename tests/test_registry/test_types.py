"""Tests for shadcn_registry.types."""

import pytest

from shadcn_registry import EntityKind, IndexEntry, RegistryItem


class TestRegistryItemFromDict:
    def test_minimal(self):
        item = RegistryItem.from_dict({"name": "badge"})
        assert item.name == "badge"
        assert item.dependencies == []
        assert item.files == []
        assert item.tailwind_config is None
        assert item.css_vars is None

    def test_path_key_for_files(self):
        item = RegistryItem.from_dict(
            {"name": "badge", "files": [{"path": "ui/badge.tsx", "content": "x"}]}
        )
        assert item.files[0].name == "ui/badge.tsx"

    @pytest.mark.parametrize(
        "data",
        [
            [],
            "button",
            {"type": "registry:ui"},
            {"name": ""},
            {"name": "b", "dependencies": "react"},
            {"name": "b", "dependencies": [1, 2]},
            {"name": "b", "files": [42]},
            {"name": "b", "files": [{"name": "b.tsx", "content": 7}]},
            {"name": "b", "tailwind": ["config"]},
            {"name": "b", "tailwind": {"config": "x"}},
            {"name": "b", "cssVars": "dark"},
        ],
    )
    def test_rejects_bad_shapes(self, data):
        with pytest.raises(ValueError):
            RegistryItem.from_dict(data)


class TestIndexEntry:
    def test_from_dict(self):
        entry = IndexEntry.from_dict({"name": "card", "type": "registry:ui"})
        assert entry.name == "card"
        assert entry.registry_dependencies == []

    def test_missing_name(self):
        with pytest.raises(ValueError):
            IndexEntry.from_dict({"type": "registry:ui"})


def test_entity_kind_values():
    assert EntityKind.COMPONENT.value == "ui"
    assert EntityKind("block") is EntityKind.BLOCK
