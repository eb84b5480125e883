"""Configuration package with clean public API."""

from .schemas import AppConfig, LoggingConfig, OutputConfig, StockConfig, validate_config
from .manager import ConfigurationManager, get_config_manager

__all__ = [
    "AppConfig",
    "ConfigurationManager",
    "LoggingConfig",
    "OutputConfig",
    "StockConfig",
    "get_config_manager",
    "validate_config",
]
