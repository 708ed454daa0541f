# cc_import_tool/shared/mixins/mixins.py

"""Common mixins for reducing code duplication across classes

Current mixins:
- ConfigurableMixin: Used by the walker, reconciler and analyzer for config access
"""

# Standard library imports
from logging import getLogger

# Local imports
from cc_import_tool.infrastructure.config import ConfigLoader
from cc_import_tool.infrastructure.config import get_config

logger = getLogger(__name__)


class ConfigurableMixin:
    """Mixin for classes that need configuration access

    Provides standardized config initialization pattern used across:
    - ArchiveWalker
    - NameReconciler
    - ArchiveImportAnalyzer
    """

    def _init_config(self, config: ConfigLoader | None = None) -> ConfigLoader:
        """Initialize configuration, using default if not provided

        Args:
            config: Optional ConfigLoader instance

        Returns:
            ConfigLoader instance (provided or default)
        """
        if config is None:
            config = get_config()
        return config
