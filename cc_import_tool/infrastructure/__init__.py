# cc_import_tool/infrastructure/__init__.py

"""System infrastructure components for configuration, logging, and persistence.

This module provides infrastructure services including configuration
management and registry snapshot loading.
"""

# Local imports
from cc_import_tool.infrastructure.config import ConfigLoader
from cc_import_tool.infrastructure.persistence import load_registry_snapshot

__all__ = ["ConfigLoader", "load_registry_snapshot"]
