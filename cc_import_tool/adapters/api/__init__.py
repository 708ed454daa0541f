# cc_import_tool/adapters/api/__init__.py

"""API module for archive import analysis

This module provides the high-level API for scanning archives and
reconciling their creators against a registry snapshot.
"""

# Local imports
from cc_import_tool.adapters.api._analyzer import ArchiveImportAnalyzer
from cc_import_tool.application.models.scan_result import ScanAnalysis

__all__ = ["ArchiveImportAnalyzer", "ScanAnalysis"]
