# cc_import_tool/application/models/__init__.py

"""Result and plan models produced by the application layer"""

# Local imports
from cc_import_tool.application.models.import_plan import ImportPlan
from cc_import_tool.application.models.import_plan import PlannedCollection
from cc_import_tool.application.models.import_plan import PlannedCreator
from cc_import_tool.application.models.import_plan import PlannedItem
from cc_import_tool.application.models.registry_snapshot import RegistrySnapshot
from cc_import_tool.application.models.scan_result import ScanAnalysis
from cc_import_tool.application.models.scan_result import ScanResult
from cc_import_tool.application.models.scan_result import ScanStatistics

__all__ = [
    "ImportPlan",
    "PlannedCollection",
    "PlannedCreator",
    "PlannedItem",
    "RegistrySnapshot",
    "ScanAnalysis",
    "ScanResult",
    "ScanStatistics",
]
