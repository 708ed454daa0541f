# cc_import_tool/core/domain/provenance.py

"""Derivation of creator/collection provenance from archive entry paths

Two archive layouts are recognised:

- ``Mods/<creator>/<collection>/<file>`` (game folder layout), where the
  collection folder is optional
- ``<creator>/<collection>/<file>`` (creator folder layout), where a file
  sitting directly under the creator folder lands in the catch-all collection

Entries at archive root carry no provenance and keep the sentinel values.
"""

# Local imports
from cc_import_tool.core.domain.discovered_item import DiscoveredItem

MODS_FOLDER = "Mods"
UNKNOWN_CREATOR = "Unknown"
GENERAL_COLLECTION = "General"
CONTENT_EXTENSION = ".package"
PATH_SEPARATOR = "/"


def is_content_entry(entry_name: str, content_extension: str = CONTENT_EXTENSION) -> bool:
    """Return True for file entries whose basename has the content extension"""
    if entry_name.endswith(PATH_SEPARATOR):
        return False
    return entry_name.split(PATH_SEPARATOR)[-1].endswith(content_extension)


def _from_mods_layout(parts: list[str]) -> tuple[str, str]:
    """Mods/<creator>[/<collection>]/<file>"""
    creator_name = parts[1]
    # The third segment names a collection only when it is a folder
    if len(parts) >= 4:
        return creator_name, parts[2]
    return creator_name, GENERAL_COLLECTION


def _from_creator_layout(parts: list[str], content_extension: str) -> tuple[str, str]:
    """<creator>/<collection or file>/..."""
    creator_name = parts[0]
    # A file directly under the creator folder has no collection of its own
    if parts[1].endswith(content_extension):
        return creator_name, GENERAL_COLLECTION
    return creator_name, parts[1]


def derive_provenance(
    entry_name: str, content_extension: str = CONTENT_EXTENSION
) -> DiscoveredItem:
    """Build a DiscoveredItem from an archive entry's internal path

    Args:
        entry_name: Entry path inside the archive, ``/`` separated
        content_extension: Extension identifying content files

    Returns:
        DiscoveredItem with creator, collection and file name filled in

    Example:
        >>> derive_provenance("Mods/JaneDoe/Kitchen Set/table.package").collection_name
        'Kitchen Set'
    """
    parts = entry_name.split(PATH_SEPARATOR)
    file_name = parts[-1]

    creator_name = UNKNOWN_CREATOR
    collection_name = GENERAL_COLLECTION

    if len(parts) >= 2:
        if parts[0] == MODS_FOLDER:
            creator_name, collection_name = _from_mods_layout(parts)
        else:
            creator_name, collection_name = _from_creator_layout(parts, content_extension)

    return DiscoveredItem(
        creator_name=creator_name, collection_name=collection_name, file_name=file_name
    )
