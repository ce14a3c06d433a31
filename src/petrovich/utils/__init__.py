"""
Utility modules for petrovich
"""

from .logging_config import LoggingMixin, get_logger, log_error, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "log_error",
    "LoggingMixin",
]
