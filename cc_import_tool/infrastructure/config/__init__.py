# cc_import_tool/infrastructure/config/__init__.py

"""Configuration infrastructure for the CC import tool.

This module manages configuration loading, validation, and models.
"""

# Local imports
from cc_import_tool.infrastructure.config._loader import ConfigLoader
from cc_import_tool.infrastructure.config._loader import get_config
from cc_import_tool.infrastructure.config._models import AppConfig
from cc_import_tool.infrastructure.config._models import KNOWN_METRICS
from cc_import_tool.infrastructure.config._models import ReconciliationConfig
from cc_import_tool.infrastructure.config._models import ReviewConfig
from cc_import_tool.infrastructure.config._models import ScanningConfig

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "get_config",
    "KNOWN_METRICS",
    "ReconciliationConfig",
    "ReviewConfig",
    "ScanningConfig",
]
