"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .common_schema import OutputConfig, StockConfig
from .logging_schema import LogFileConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "LogFileConfig",
    "LoggingConfig",
    "OutputConfig",
    "StockConfig",
    "validate_config",
]
