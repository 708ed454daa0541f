# tests/unit/core/domain/test_provenance.py

"""Tests for deriving creator/collection provenance from archive entry paths"""

# Third party imports
import pytest

# Local imports
from cc_import_tool.core.domain.provenance import GENERAL_COLLECTION
from cc_import_tool.core.domain.provenance import UNKNOWN_CREATOR
from cc_import_tool.core.domain.provenance import derive_provenance
from cc_import_tool.core.domain.provenance import is_content_entry


class TestDeriveProvenance:
    """Path-to-provenance rules for both archive layouts"""

    @pytest.mark.parametrize(
        "entry_name,creator,collection,file_name",
        [
            ("Mods/JaneDoe/Kitchen Set/table.package", "JaneDoe", "Kitchen Set", "table.package"),
            ("Mods/JaneDoe/chair.package", "JaneDoe", "General", "chair.package"),
            ("BobBuilder/Bathroom/tub.package", "BobBuilder", "Bathroom", "tub.package"),
            ("BobBuilder/sink.package", "BobBuilder", "General", "sink.package"),
        ],
    )
    def test_layouts(self, entry_name, creator, collection, file_name):
        item = derive_provenance(entry_name)

        assert item.creator_name == creator
        assert item.collection_name == collection
        assert item.file_name == file_name

    def test_root_file_keeps_sentinels(self):
        item = derive_provenance("loose.package")

        assert item.creator_name == UNKNOWN_CREATOR
        assert item.collection_name == GENERAL_COLLECTION
        assert item.file_name == "loose.package"

    def test_file_directly_under_mods_is_treated_as_creator(self):
        """The Mods branch takes the second segment even when it is the file itself"""
        item = derive_provenance("Mods/stray.package")

        assert item.creator_name == "stray.package"
        assert item.collection_name == GENERAL_COLLECTION

    def test_file_directly_under_mods_creator_lands_in_general(self):
        """A file as third segment is not mistaken for a collection folder"""
        item = derive_provenance("Mods/JaneDoe/chair.package")

        assert item.provenance == ("JaneDoe", GENERAL_COLLECTION)

    def test_deep_paths_use_only_leading_segments(self):
        item = derive_provenance("Mods/JaneDoe/Kitchen Set/Extra/Deeper/table.package")

        assert item.provenance == ("JaneDoe", "Kitchen Set")
        assert item.file_name == "table.package"

    def test_mods_match_is_case_sensitive(self):
        """Only the literal folder name "Mods" selects the game layout"""
        item = derive_provenance("mods/JaneDoe/table.package")

        assert item.creator_name == "mods"
        assert item.collection_name == "JaneDoe"

    def test_custom_extension_for_creator_layout(self):
        item = derive_provenance("BobBuilder/sink.ts4script", content_extension=".ts4script")

        assert item.collection_name == GENERAL_COLLECTION


class TestIsContentEntry:
    """Entry acceptance rules"""

    @pytest.mark.parametrize(
        "entry_name,expected",
        [
            ("Mods/JaneDoe/Kitchen Set/table.package", True),
            ("loose.package", True),
            ("readme.txt", False),
            ("textures/", False),
            ("odd.package/", False),
            ("Mods/JaneDoe/table.PACKAGE", False),
            ("Mods/JaneDoe/table.package.bak", False),
        ],
    )
    def test_acceptance(self, entry_name, expected):
        assert is_content_entry(entry_name) is expected

    def test_extension_only_checked_on_basename(self):
        assert is_content_entry("folder.package/readme.txt") is False
