"""Logging configuration schema."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from pattern_gallery.config.defaults import LogDestination, LogLevel


class LogFileConfig(BaseModel):
    """Rotating log file configuration."""

    path: str = Field("logs/pattern-gallery.log", description="Log file path")
    max_size_mb: int = Field(10, gt=0, description="Rotate after this many megabytes")
    backup_count: int = Field(5, ge=0, description="Rotated files to keep")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(LogDestination.STDOUT, description="Where logs are written")
    format: Optional[str] = Field(None, description="stdlib logging format string")
    file: LogFileConfig = Field(default_factory=LogFileConfig)

    @field_validator("level", mode="before")
    @classmethod
    def normalise_level(cls, value):
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.upper()
        return value
