"""
Centralized logging configuration for petrovich
"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_LOGGING_CONFIG = Path(__file__).parent.parent / "config" / "logging.yml"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
) -> None:
    """
    Setup centralized logging configuration

    Args:
        config_path: Path to logging configuration YAML file
        log_level: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    if config_path is None:
        # Check if custom logging config is specified in environment
        if "LOGGING_CONFIG" in os.environ:
            config_path = os.environ["LOGGING_CONFIG"]
        else:
            config_path = DEFAULT_LOGGING_CONFIG

    config = None
    if Path(config_path).exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logging.getLogger(__name__).warning(f"Failed to load logging config {config_path}: {e}")

    if config:
        # Override log level if specified
        if log_level:
            level = getattr(logging, log_level.upper(), logging.INFO)
            config.setdefault("root", {})["level"] = level
            for logger_config in config.get("loggers", {}).values():
                logger_config["level"] = level
        logging.config.dictConfig(config)
        return

    # Fallback to basic configuration
    logging.basicConfig(
        level=getattr(logging, log_level.upper() if log_level else "INFO", logging.INFO),
        format=DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with proper configuration

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_error(logger: logging.Logger, error: Exception, context: str = "") -> None:
    """
    Log error with context

    Args:
        logger: Logger instance
        error: Exception instance
        context: Additional context information
    """
    error_msg = f"{type(error).__name__}: {str(error)}"
    if context:
        error_msg = f"{context} - {error_msg}"

    logger.error(error_msg)


class LoggingMixin:
    """
    Mixin class to add logging capabilities to any class
    """

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class"""
        if not hasattr(self, "_logger"):
            self._logger = get_logger(f"{self.__module__}.{self.__class__.__name__}")
        return self._logger
