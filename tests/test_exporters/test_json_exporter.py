# tests/test_exporters/test_json_exporter.py

"""Tests for JSON and CSV export of a scan analysis"""

# Standard library imports
from csv import reader
import gzip
import json

# Third party imports
import pytest

# Local imports
from cc_import_tool.adapters.exporters import CSVExporter
from cc_import_tool.adapters.exporters import save_analysis_json
from cc_import_tool.adapters.exporters.csv_exporter import HEADER
from cc_import_tool.application.models.scan_result import ScanAnalysis
from cc_import_tool.application.models.scan_result import ScanStatistics
from cc_import_tool.core.domain.creator_match import CreatorMatch
from cc_import_tool.core.domain.creator_match import RegistryEntry
from cc_import_tool.core.domain.discovered_item import DiscoveredItem
from cc_import_tool.core.domain.discovered_item import DuplicateItem

JANE = RegistryEntry(id="1", name="JaneDoe")


@pytest.fixture
def analysis() -> ScanAnalysis:
    items = [
        DiscoveredItem(creator_name="JaneDo", collection_name="Kitchen Set", file_name="table.package"),
        DiscoveredItem(creator_name="BobBuilder", collection_name="General", file_name="sink.package"),
        DiscoveredItem(creator_name="Unknown", collection_name="General", file_name="loose.package"),
    ]
    matches = [CreatorMatch.new_creator("BobBuilder"), CreatorMatch.candidate("JaneDo", JANE, 6 / 7)]
    duplicates = [
        DuplicateItem(
            file_name="sink.package",
            found_creator_name="BobBuilder",
            found_collection_name="General",
            existing_creator_name="Bob",
            existing_collection_name="Bath",
        )
    ]
    return ScanAnalysis(
        archive_path="downloads.zip",
        items=items,
        matches=matches,
        duplicates=duplicates,
        statistics=ScanStatistics.from_results(items, matches, duplicates),
    )


class TestJSONExport:
    """JSON structure"""

    def test_structure(self, analysis, tmp_path):
        path = save_analysis_json(analysis, str(tmp_path / "out.json"), parameters={"metric": "levenshtein"})

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        assert set(data) == {"metadata", "matches", "items", "duplicates"}
        assert data["metadata"]["archive_path"] == "downloads.zip"
        assert data["metadata"]["statistics"]["total_items"] == 3
        assert data["metadata"]["parameters"] == {"metric": "levenshtein"}
        assert [m["verdict"] for m in data["matches"]] == ["NEW", "FUZZY"]
        assert data["items"][0]["file_name"] == "table.package"
        assert data["duplicates"][0]["existing_creator_name"] == "Bob"

    def test_compressed(self, analysis, tmp_path):
        path = save_analysis_json(analysis, str(tmp_path / "out.json"), compress=True)

        assert path.endswith(".json.gz")
        with gzip.open(path, "rt", encoding="utf-8") as f:
            assert json.load(f)["metadata"]["archive_path"] == "downloads.zip"

    def test_compact(self, analysis, tmp_path):
        path = save_analysis_json(analysis, str(tmp_path / "out.json"), pretty=False)

        with open(path, encoding="utf-8") as f:
            assert "\n" not in f.read()


class TestCSVExport:
    """CSV rows derived from the JSON"""

    def read_rows(self, analysis, tmp_path, compress=False):
        json_path = save_analysis_json(analysis, str(tmp_path / "out.json"), compress=compress)
        csv_path = str(tmp_path / "out.csv")
        CSVExporter(json_path, csv_path).export()
        with open(csv_path, newline="", encoding="utf-8") as f:
            return list(reader(f))

    def test_header_and_rows(self, analysis, tmp_path):
        rows = self.read_rows(analysis, tmp_path)

        assert rows[0] == HEADER
        assert rows[1] == [
            "JaneDo",
            "Kitchen Set",
            "table.package",
            "FUZZY",
            "JaneDoe",
            "1",
            "0.857",
            "Yes",
            "No",
        ]

    def test_new_creator_and_duplicate(self, analysis, tmp_path):
        rows = self.read_rows(analysis, tmp_path)

        assert rows[2] == [
            "BobBuilder",
            "General",
            "sink.package",
            "NEW",
            "",
            "",
            "0.000",
            "Yes",
            "Yes",
        ]

    def test_unknown_creator_has_empty_verdict(self, analysis, tmp_path):
        rows = self.read_rows(analysis, tmp_path)

        assert rows[3] == ["Unknown", "General", "loose.package", "", "", "", "", "", "No"]

    def test_reads_compressed_json(self, analysis, tmp_path):
        rows = self.read_rows(analysis, tmp_path, compress=True)

        assert len(rows) == 4
