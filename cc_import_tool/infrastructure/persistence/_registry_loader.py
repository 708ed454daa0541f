# cc_import_tool/infrastructure/persistence/_registry_loader.py

"""Loading registry snapshots exported by the persistence layer

Two JSON shapes are accepted:

- a bare list of creators: ``[{"id": "1", "name": "JaneDoe"}, ...]``
- an object with creators and known items:
  ``{"creators": [...], "items": [{"creator_name", "collection_name", "file_name"}]}``
"""

# Standard library imports
import json
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import ValidationError

# Local imports
from cc_import_tool.application.models.registry_snapshot import RegistrySnapshot
from cc_import_tool.core.domain.exceptions import RegistryLoadError

logger = getLogger(__name__)


def load_registry_snapshot(path: Path | str | None) -> RegistrySnapshot:
    """Read a registry snapshot from a JSON file

    Args:
        path: Snapshot file, or None for an empty registry

    Returns:
        Validated RegistrySnapshot

    Raises:
        RegistryLoadError: If the file cannot be read or does not validate
    """
    if path is None:
        logger.info("No registry snapshot given; every creator will be proposed as new")
        return RegistrySnapshot()

    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise RegistryLoadError(str(path), str(e)) from e

    if isinstance(data, list):
        data = {"creators": data}
    elif not isinstance(data, dict):
        raise RegistryLoadError(str(path), f"expected a list or object, got {type(data).__name__}")

    try:
        snapshot = RegistrySnapshot.model_validate(data)
    except ValidationError as e:
        raise RegistryLoadError(str(path), str(e)) from e

    logger.info(
        f"Loaded registry snapshot from {path}: {len(snapshot.creators):,} creators, "
        f"{len(snapshot.items):,} known items"
    )
    return snapshot
