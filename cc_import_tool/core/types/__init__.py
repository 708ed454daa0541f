# cc_import_tool/core/types/__init__.py

"""Type definitions for the CC import tool

This package contains type aliases and protocols used throughout the
codebase. These are pure type definitions with no implementation logic.
"""

# Local imports
from cc_import_tool.core.types.json import JSONDict
from cc_import_tool.core.types.json import JSONList
from cc_import_tool.core.types.json import JSONPrimitive
from cc_import_tool.core.types.json import JSONType
from cc_import_tool.core.types.protocols import ArchiveScannerProtocol
from cc_import_tool.core.types.protocols import CSVRow
from cc_import_tool.core.types.protocols import CSVWriter
from cc_import_tool.core.types.protocols import EntryCallback
from cc_import_tool.core.types.protocols import ImportSink
from cc_import_tool.core.types.protocols import ReconcilerProtocol
from cc_import_tool.core.types.protocols import RegistryProvider
from cc_import_tool.core.types.protocols import SimilarityMetric

__all__ = [
    "ArchiveScannerProtocol",
    "CSVRow",
    "CSVWriter",
    "EntryCallback",
    "ImportSink",
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
    "ReconcilerProtocol",
    "RegistryProvider",
    "SimilarityMetric",
]
