# tests/test_infrastructure/test_registry_loader.py

"""Tests for loading registry snapshots from JSON"""

# Standard library imports
from json import dumps

# Third party imports
import pytest

# Local imports
from cc_import_tool.core.domain.exceptions import RegistryLoadError
from cc_import_tool.infrastructure.persistence import load_registry_snapshot


class TestLoadRegistrySnapshot:
    """Accepted shapes and failures"""

    def test_none_gives_empty_snapshot(self):
        snapshot = load_registry_snapshot(None)

        assert snapshot.list_creators() == []
        assert snapshot.list_known_items() == []

    def test_bare_creator_list(self, tmp_path):
        path = tmp_path / "registry.json"
        path.write_text(dumps([{"id": "1", "name": "JaneDoe"}, {"id": "2", "name": "BobBuilder"}]))

        snapshot = load_registry_snapshot(path)

        assert [entry.name for entry in snapshot.list_creators()] == ["JaneDoe", "BobBuilder"]

    def test_object_with_items(self, tmp_path):
        path = tmp_path / "registry.json"
        path.write_text(
            dumps(
                {
                    "creators": [{"id": "1", "name": "JaneDoe"}],
                    "items": [
                        {
                            "creator_name": "JaneDoe",
                            "collection_name": "Kitchen Set",
                            "file_name": "table.package",
                        }
                    ],
                }
            )
        )

        snapshot = load_registry_snapshot(str(path))

        assert snapshot.list_known_items()[0].file_name == "table.package"

    def test_missing_file(self, tmp_path):
        with pytest.raises(RegistryLoadError) as exc_info:
            load_registry_snapshot(tmp_path / "absent.json")

        assert exc_info.value.path == str(tmp_path / "absent.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "registry.json"
        path.write_text("[{")

        with pytest.raises(RegistryLoadError):
            load_registry_snapshot(path)

    def test_wrong_top_level_type(self, tmp_path):
        path = tmp_path / "registry.json"
        path.write_text('"JaneDoe"')

        with pytest.raises(RegistryLoadError, match="expected a list or object"):
            load_registry_snapshot(path)

    def test_entry_missing_id(self, tmp_path):
        path = tmp_path / "registry.json"
        path.write_text(dumps([{"name": "JaneDoe"}]))

        with pytest.raises(RegistryLoadError):
            load_registry_snapshot(path)
