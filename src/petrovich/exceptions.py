"""
Custom exceptions for petrovich
Centralized exception handling with proper error codes and messages
"""

from typing import Any, Dict, Optional


class PetrovichException(Exception):
    """Base exception for petrovich"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize exception

        Args:
            message: Error message
            error_code: Error code for API responses
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(PetrovichException):
    """Configuration related errors"""
    pass


class RulesNotLoaded(PetrovichException):
    """Inflection requested before a rule table was supplied"""

    def __init__(self, message: str = "Rules not loaded: supply a rule table before inflecting names"):
        super().__init__(message, "RULES_NOT_LOADED")


class RulesFormatError(PetrovichException):
    """Rule table is missing or malformed"""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message, "RULES_FORMAT_ERROR", {"source": source} if source else None)


class InvalidCase(PetrovichException):
    """Unknown grammatical case"""

    def __init__(self, case: Any):
        super().__init__(
            f"Unknown grammatical case: {case!r}",
            "INVALID_CASE",
            {"case": str(case)},
        )


class InvalidGender(PetrovichException):
    """Unknown gender value"""

    def __init__(self, gender: Any):
        super().__init__(
            f"Unknown gender: {gender!r}",
            "INVALID_GENDER",
            {"gender": str(gender)},
        )
