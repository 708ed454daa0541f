# cc_import_tool/application/processing/__init__.py

"""Core processing logic for scanning, reconciliation, and import planning"""

# Local imports
from cc_import_tool.application.processing.archive_walker import ArchiveWalker
from cc_import_tool.application.processing.duplicate_detector import find_duplicates
from cc_import_tool.application.processing.import_planner import build_import_plan
from cc_import_tool.application.processing.name_reconciler import NameReconciler
from cc_import_tool.application.processing.review import propose_decisions
from cc_import_tool.application.processing.similarity import get_metric
from cc_import_tool.application.processing.similarity import levenshtein_distance
from cc_import_tool.application.processing.similarity import normalized_similarity

__all__: list[str] = [
    "ArchiveWalker",
    "NameReconciler",
    "build_import_plan",
    "find_duplicates",
    "get_metric",
    "levenshtein_distance",
    "normalized_similarity",
    "propose_decisions",
]
