"""
Configuration settings for petrovich
Structured configuration classes with validation and type hints
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from ..constants import DEFAULT_RULES_FILE

BUNDLED_RULES_PATH = Path(__file__).resolve().parent.parent / "data" / DEFAULT_RULES_FILE


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class RulesConfig(BaseModel):
    """Rule table location and loading behaviour"""

    rules_path: Path = Field(
        default_factory=lambda: Path(os.getenv("PETROVICH_RULES_PATH", str(BUNDLED_RULES_PATH)))
    )
    autoload: bool = Field(default_factory=lambda: _env_flag("PETROVICH_AUTOLOAD_RULES", "true"))

    @field_validator("rules_path")
    @classmethod
    def expand_path(cls, v: Path) -> Path:
        return v.expanduser()


@dataclass
class LoggingConfig:
    """Logging configuration settings"""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    config_path: Optional[str] = field(default_factory=lambda: os.getenv("LOGGING_CONFIG"))
    environment: str = "development"

    def __post_init__(self):
        """Post-initialization setup"""
        if self.environment == "production":
            self.level = "WARNING"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "level": self.level,
            "config_path": self.config_path,
            "environment": self.environment,
        }


class ApiConfig(BaseModel):
    """HTTP API settings"""

    host: str = Field(default_factory=lambda: os.getenv("PETROVICH_HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PETROVICH_PORT", "8000")))
    max_name_length: int = Field(
        default_factory=lambda: int(os.getenv("PETROVICH_MAX_NAME_LENGTH", "256"))
    )

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError(f"port out of range: {v}")
        return v

    @field_validator("max_name_length")
    @classmethod
    def validate_max_name_length(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_name_length must be positive")
        return v
