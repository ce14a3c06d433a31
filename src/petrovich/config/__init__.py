"""
Configuration module for petrovich
Centralized configuration management with environment-specific settings
"""

import os
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..exceptions import ConfigurationError
from .settings import BUNDLED_RULES_PATH, ApiConfig, LoggingConfig, RulesConfig


class Config:
    """Main configuration class for petrovich"""

    def __init__(self, environment: Optional[str] = None):
        """
        Initialize configuration

        Args:
            environment: Environment name (development, staging, production)
        """
        self.environment = environment or os.getenv("APP_ENV", "development")
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration based on environment"""
        try:
            self.rules = RulesConfig()
            self.api = ApiConfig()
        except (ValidationError, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
        self.logging = LoggingConfig(environment=self.environment)

    def get_all_config(self) -> Dict[str, Any]:
        """Get all configuration as dictionary"""
        return {
            "environment": self.environment,
            "rules": self.rules.model_dump(mode="json"),
            "api": self.api.model_dump(),
            "logging": self.logging.to_dict(),
        }

    def reload(self) -> None:
        """Re-read settings from the environment"""
        self._load_config()


_config: Optional[Config] = None


def get_config() -> Config:
    """Return the process-wide configuration, creating it on first use"""
    global _config
    if _config is None:
        _config = Config()
    return _config


__all__ = [
    "BUNDLED_RULES_PATH",
    "ApiConfig",
    "Config",
    "LoggingConfig",
    "RulesConfig",
    "get_config",
]
