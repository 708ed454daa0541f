# cc_import_tool/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger

# Local imports
from cc_import_tool.core.types.json import JSONDict
from cc_import_tool.infrastructure.config._models import AppConfig
from cc_import_tool.infrastructure.config._models import LoggingConfig
from cc_import_tool.infrastructure.config._models import OutputConfig
from cc_import_tool.infrastructure.config._models import ReconciliationConfig
from cc_import_tool.infrastructure.config._models import ReviewConfig
from cc_import_tool.infrastructure.config._models import ScanningConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader giving typed access to each config section"""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
        """
        self.config_path = config_path
        self._app_config = AppConfig.load(config_path)

    @classmethod
    def from_app_config(cls, app_config: AppConfig) -> "ConfigLoader":
        """Wrap an already-built AppConfig (used for CLI overrides and tests)"""
        loader = cls.__new__(cls)
        loader.config_path = None
        loader._app_config = app_config
        return loader

    @property
    def config(self) -> JSONDict:
        """Full config as dict"""
        return self._app_config.model_dump()

    @property
    def app_config(self) -> AppConfig:
        """Underlying validated model"""
        return self._app_config

    @property
    def scanning(self) -> ScanningConfig:
        """Archive scanning configuration"""
        return self._app_config.scanning

    @property
    def reconciliation(self) -> ReconciliationConfig:
        """Reconciliation configuration"""
        return self._app_config.reconciliation

    @property
    def review(self) -> ReviewConfig:
        """Review proposal configuration"""
        return self._app_config.review

    @property
    def output(self) -> OutputConfig:
        """Output configuration"""
        return self._app_config.output

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging

    def with_overrides(self, **sections: dict[str, object]) -> "ConfigLoader":
        """Return a new loader with some section fields replaced

        Example:
            config.with_overrides(reconciliation={"fuzzy_threshold": 0.8})
        """
        data = self._app_config.model_dump()
        for section, values in sections.items():
            if section not in data:
                raise ValueError(f"Unknown config section: {section}")
            data[section].update(values)
        return ConfigLoader.from_app_config(AppConfig.model_validate(data))


# Default instance, created lazily
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config
