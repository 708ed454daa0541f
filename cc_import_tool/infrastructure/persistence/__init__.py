# cc_import_tool/infrastructure/persistence/__init__.py

"""Persistence infrastructure for reading registry snapshots."""

# Local imports
from cc_import_tool.infrastructure.persistence._registry_loader import (
    load_registry_snapshot,
)

__all__ = ["load_registry_snapshot"]
