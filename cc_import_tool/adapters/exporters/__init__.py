# cc_import_tool/adapters/exporters/__init__.py

"""Output generation and export functionality"""

# Local imports
from cc_import_tool.adapters.exporters.base_exporter import BaseJSONExporter
from cc_import_tool.adapters.exporters.csv_exporter import CSVExporter
from cc_import_tool.adapters.exporters.json_exporter import save_analysis_json

__all__: list[str] = [
    "BaseJSONExporter",
    "CSVExporter",
    "save_analysis_json",
]
