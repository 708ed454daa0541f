# cc_import_tool/application/processing/duplicate_detector.py

"""Detection of discovered files the registry already stores"""

# Standard library imports
from logging import getLogger
from typing import Iterable

# Local imports
from cc_import_tool.core.domain.discovered_item import DiscoveredItem
from cc_import_tool.core.domain.discovered_item import DuplicateItem
from cc_import_tool.core.domain.discovered_item import KnownItem

logger = getLogger(__name__)


def find_duplicates(
    items: Iterable[DiscoveredItem], known_items: Iterable[KnownItem]
) -> list[DuplicateItem]:
    """Report discovered items whose file name is already in the registry

    File names are compared exactly. When the registry holds the same file
    under several collections, the first one listed is reported.

    Args:
        items: Items discovered in an archive
        known_items: Items the registry already stores

    Returns:
        One DuplicateItem per discovered item that is already known
    """
    known_by_file: dict[str, KnownItem] = {}
    for known in known_items:
        known_by_file.setdefault(known.file_name, known)

    if not known_by_file:
        return []

    duplicates = []
    for item in items:
        existing = known_by_file.get(item.file_name)
        if existing is None:
            continue
        duplicates.append(
            DuplicateItem(
                file_name=item.file_name,
                found_creator_name=item.creator_name,
                found_collection_name=item.collection_name,
                existing_creator_name=existing.creator_name,
                existing_collection_name=existing.collection_name,
            )
        )

    if duplicates:
        logger.info(f"{len(duplicates):,} discovered files are already in the registry")
    return duplicates
