# cc_import_tool/adapters/exporters/json_exporter.py

"""JSON export of a scan analysis, the source format for every other exporter"""

# Standard library imports
from datetime import datetime
import gzip
import json

# Local imports
from cc_import_tool.application.models.scan_result import ScanAnalysis
from cc_import_tool.core.domain.creator_match import CreatorMatch
from cc_import_tool.core.types.json import JSONDict

TOOL_VERSION = "0.1.0"


def save_analysis_json(
    analysis: ScanAnalysis,
    json_file: str,
    pretty: bool = True,
    compress: bool = False,
    parameters: dict[str, str | int | float | bool] | None = None,
) -> str:
    """Save a scan analysis to JSON

    Args:
        analysis: Analysis to save
        json_file: Output filename
        pretty: If True, format JSON with indentation
        compress: If True, use gzip compression (".gz" is appended)
        parameters: Processing parameters used (for metadata)

    Returns:
        Path of the written file
    """
    data = {
        "metadata": _create_metadata(analysis, parameters=parameters),
        "matches": [_match_to_dict(match) for match in analysis.matches],
        "items": [item.model_dump() for item in analysis.items],
        "duplicates": [duplicate.model_dump() for duplicate in analysis.duplicates],
    }

    indent = 2 if pretty else None
    output_path = json_file if not compress else f"{json_file}.gz"
    if compress:
        with gzip.open(output_path, "wt", encoding="utf-8") as f:
            json.dump(data, f, indent=indent, ensure_ascii=False, default=str)
    else:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent, ensure_ascii=False, default=str)
    return output_path


def _create_metadata(
    analysis: ScanAnalysis, parameters: dict[str, str | int | float | bool] | None = None
) -> JSONDict:
    metadata: JSONDict = {
        "processing_date": datetime.now().isoformat(),
        "archive_path": analysis.archive_path,
        "tool_version": TOOL_VERSION,
        "statistics": analysis.statistics.to_dict(),
    }
    if parameters:
        metadata["parameters"] = parameters
    return metadata


def _match_to_dict(match: CreatorMatch) -> JSONDict:
    data = match.model_dump()
    data["verdict"] = match.verdict.value
    return data
