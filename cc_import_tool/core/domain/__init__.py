# cc_import_tool/core/domain/__init__.py

"""Domain models for the CC import tool"""

# Local imports
from cc_import_tool.core.domain.creator_match import CreatorMatch
from cc_import_tool.core.domain.creator_match import RegistryEntry
from cc_import_tool.core.domain.decisions import CollectionDecision
from cc_import_tool.core.domain.decisions import ConfirmedMapping
from cc_import_tool.core.domain.decisions import CreatorDecision
from cc_import_tool.core.domain.discovered_item import DiscoveredItem
from cc_import_tool.core.domain.discovered_item import DuplicateItem
from cc_import_tool.core.domain.discovered_item import KnownItem
from cc_import_tool.core.domain.enums import DecisionAction
from cc_import_tool.core.domain.enums import MatchVerdict
from cc_import_tool.core.domain.exceptions import ArchiveError
from cc_import_tool.core.domain.exceptions import ArchiveOpenError
from cc_import_tool.core.domain.exceptions import ArchiveReadError
from cc_import_tool.core.domain.exceptions import DecisionError
from cc_import_tool.core.domain.exceptions import RegistryLoadError
from cc_import_tool.core.domain.provenance import GENERAL_COLLECTION
from cc_import_tool.core.domain.provenance import MODS_FOLDER
from cc_import_tool.core.domain.provenance import UNKNOWN_CREATOR
from cc_import_tool.core.domain.provenance import derive_provenance
from cc_import_tool.core.domain.provenance import is_content_entry

__all__ = [
    "ArchiveError",
    "ArchiveOpenError",
    "ArchiveReadError",
    "CollectionDecision",
    "ConfirmedMapping",
    "CreatorDecision",
    "CreatorMatch",
    "DecisionAction",
    "DecisionError",
    "DiscoveredItem",
    "DuplicateItem",
    "GENERAL_COLLECTION",
    "KnownItem",
    "MODS_FOLDER",
    "MatchVerdict",
    "RegistryEntry",
    "RegistryLoadError",
    "UNKNOWN_CREATOR",
    "derive_provenance",
    "is_content_entry",
]
