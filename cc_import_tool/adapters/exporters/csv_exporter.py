# cc_import_tool/adapters/exporters/csv_exporter.py

"""CSV export of scanned items alongside their creator verdicts"""

# Standard library imports
from csv import writer

# Local imports
from cc_import_tool.adapters.exporters.base_exporter import BaseJSONExporter
from cc_import_tool.core.types.json import JSONDict
from cc_import_tool.core.types.protocols import CSVWriter

HEADER = [
    "Creator",
    "Collection",
    "File",
    "Verdict",
    "Suggested Creator",
    "Suggested Creator ID",
    "Similarity",
    "Needs Confirmation",
    "Already In Registry",
]


class CSVExporter(BaseJSONExporter):
    """Export one CSV row per discovered item

    Each row carries the verdict of the item's creator so the file can be
    reviewed in a spreadsheet. Items without a creator folder have an empty
    verdict.
    """

    __slots__ = ()

    def export(self) -> None:
        """Write the CSV file"""
        matches_by_name: dict[str, JSONDict] = {}
        for match in self.get_matches():
            if isinstance(match, dict):
                matches_by_name[str(match["found_name"])] = match

        duplicate_files = {
            str(duplicate["file_name"])
            for duplicate in self.get_duplicates()
            if isinstance(duplicate, dict)
        }

        with open(self.output_path, "w", newline="", encoding="utf-8") as f:
            csv_writer = writer(f)
            csv_writer.writerow(HEADER)
            for item in self.get_items():
                if isinstance(item, dict):
                    self._write_item(csv_writer, item, matches_by_name, duplicate_files)

    def _write_item(
        self,
        csv_writer: CSVWriter,
        item: JSONDict,
        matches_by_name: dict[str, JSONDict],
        duplicate_files: set[str],
    ) -> None:
        creator_name = str(item["creator_name"])
        match = matches_by_name.get(creator_name)

        if match is None:
            verdict_columns: list[str | int | float | bool | None] = ["", "", "", "", ""]
        else:
            similarity = match.get("similarity")
            verdict_columns = [
                str(match.get("verdict", "")),
                str(match.get("existing_name") or ""),
                str(match.get("existing_id") or ""),
                f"{similarity:.3f}" if isinstance(similarity, (int, float)) else "",
                "Yes" if match.get("needs_confirmation") else "No",
            ]

        file_name = str(item["file_name"])
        csv_writer.writerow(
            [creator_name, str(item["collection_name"]), file_name]
            + verdict_columns
            + ["Yes" if file_name in duplicate_files else "No"]
        )
