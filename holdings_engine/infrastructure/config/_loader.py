# holdings_engine/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger
from pathlib import Path

# Local imports
from holdings_engine.core.types.json import JSONDict
from holdings_engine.infrastructure.config._models import AppConfig
from holdings_engine.infrastructure.config._models import HoldingsConfig
from holdings_engine.infrastructure.config._models import LoggingConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader giving typed access to each configuration section"""

    def __init__(self, config_path: Path | str | None = None, app_config: AppConfig | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
            app_config: Already validated configuration, used instead of a file
        """
        self.config_path = config_path
        if app_config is not None:
            self._app_config = app_config
        else:
            self._app_config = AppConfig.load(config_path)
        logger.debug(f"Configuration loaded from {config_path or 'defaults'}")

    @classmethod
    def from_dict(cls, data: JSONDict) -> "ConfigLoader":
        """Build a loader from configuration data instead of a file"""
        return cls(app_config=AppConfig.model_validate(data))

    @property
    def config(self) -> JSONDict:
        """Full config as dict"""
        return self._app_config.to_dict()

    @property
    def app_config(self) -> AppConfig:
        """Root configuration model"""
        return self._app_config

    @property
    def holdings(self) -> HoldingsConfig:
        """Holdings configuration"""
        return self._app_config.holdings

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging


# Global default instance
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
