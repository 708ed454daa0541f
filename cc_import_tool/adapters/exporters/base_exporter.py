# cc_import_tool/adapters/exporters/base_exporter.py

"""Base exporter class that reads from JSON data"""

# Standard library imports
from abc import ABC
from abc import abstractmethod
import gzip
import json
from pathlib import Path
from typing import cast

# Local imports
from cc_import_tool.core.types.json import JSONDict
from cc_import_tool.core.types.json import JSONList


class BaseJSONExporter(ABC):
    """Base class for exporters that read from the analysis JSON

    Exporters read the saved JSON rather than live models so JSON stays the
    single source of truth for every output format.
    """

    __slots__ = ("json_data", "output_path")

    def __init__(self, json_path: str, output_path: str):
        """Initialize the exporter with JSON data

        Args:
            json_path: Path to the JSON file (can be .json or .json.gz)
            output_path: Path for the output file
        """
        self.output_path = output_path
        self.json_data = self._load_json(json_path)

    def _load_json(self, json_path: str) -> JSONDict:
        if str(Path(json_path)).endswith(".gz"):
            with gzip.open(json_path, "rt", encoding="utf-8") as f:
                return cast(JSONDict, json.load(f))
        with open(json_path, "r", encoding="utf-8") as f:
            return cast(JSONDict, json.load(f))

    @abstractmethod
    def export(self) -> None:
        """Export the data in the specific format"""
        pass

    def get_items(self) -> JSONList:
        return cast(JSONList, self.json_data.get("items", []))

    def get_matches(self) -> JSONList:
        return cast(JSONList, self.json_data.get("matches", []))

    def get_duplicates(self) -> JSONList:
        return cast(JSONList, self.json_data.get("duplicates", []))

    def get_metadata(self) -> JSONDict:
        return cast(JSONDict, self.json_data.get("metadata", {}))
