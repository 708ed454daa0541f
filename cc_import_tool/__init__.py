# cc_import_tool/__init__.py

"""Custom Content Import Tool Package

A library for scanning archives of game custom content, deriving each
file's creator and collection from its path, and reconciling the
discovered creators against an existing registry before import.
"""

# Local imports
# High-level API
from cc_import_tool.adapters.api import ArchiveImportAnalyzer
from cc_import_tool.adapters.api import ScanAnalysis

# Lower-level processing
from cc_import_tool.application.models import ImportPlan
from cc_import_tool.application.models import RegistrySnapshot
from cc_import_tool.application.processing import ArchiveWalker
from cc_import_tool.application.processing import NameReconciler
from cc_import_tool.application.processing import build_import_plan
from cc_import_tool.application.processing import propose_decisions

# Data models
from cc_import_tool.core.domain import ArchiveError
from cc_import_tool.core.domain import ArchiveOpenError
from cc_import_tool.core.domain import ArchiveReadError
from cc_import_tool.core.domain import CreatorDecision
from cc_import_tool.core.domain import CreatorMatch
from cc_import_tool.core.domain import DiscoveredItem
from cc_import_tool.core.domain import MatchVerdict
from cc_import_tool.core.domain import RegistryEntry
from cc_import_tool.core.domain import derive_provenance

# Infrastructure
from cc_import_tool.infrastructure.config import ConfigLoader
from cc_import_tool.infrastructure.persistence import load_registry_snapshot

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Primary API
    "ArchiveImportAnalyzer",
    "ScanAnalysis",
    # Processing
    "ArchiveWalker",
    "NameReconciler",
    "propose_decisions",
    "build_import_plan",
    "ImportPlan",
    "RegistrySnapshot",
    # Data models
    "DiscoveredItem",
    "RegistryEntry",
    "CreatorMatch",
    "CreatorDecision",
    "MatchVerdict",
    "derive_provenance",
    # Errors
    "ArchiveError",
    "ArchiveOpenError",
    "ArchiveReadError",
    # Infrastructure
    "ConfigLoader",
    "load_registry_snapshot",
    # Version
    "__version__",
]
