"""Unified configuration management for the application."""
from __future__ import annotations

import copy
import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from pattern_gallery._package import ENV_PREFIX
from pattern_gallery.config.defaults import DEFAULT_CONFIG
from pattern_gallery.config.schemas import AppConfig
from pattern_gallery.config.utils.env_expansion import expand_config_env_vars
from pattern_gallery.domain.base.exceptions import ConfigurationError
from pattern_gallery.infrastructure.logging.logger import get_logger
from pattern_gallery.infrastructure.patterns.singleton_access import get_singleton

logger = get_logger(__name__)

# Environment variable -> configuration path
ENV_OVERRIDES: Dict[str, Tuple[str, ...]] = {
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}LOG_DESTINATION": ("logging", "destination"),
    f"{ENV_PREFIX}OUTPUT_FORMAT": ("output", "format"),
    f"{ENV_PREFIX}STOCK_INITIAL_PRICE": ("stock", "initial_price"),
}

CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG"


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is assembled lazily from, in increasing priority:
    - DEFAULT_CONFIG
    - an optional JSON or YAML file
    - ``PATTERN_GALLERY_*`` environment variables

    and validated into an AppConfig.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_file:
            config_data = _deep_merge(config_data, self.load_from_file(self._config_file))

        config_data = expand_config_env_vars(config_data)
        config_data = self.apply_environment_overrides(config_data)

        app_config = AppConfig.from_dict(config_data)
        logger.debug("Configuration loaded", config_file=self._config_file)
        return app_config

    @staticmethod
    def load_from_file(config_file: str) -> Dict[str, Any]:
        """
        Read a JSON or YAML configuration file.

        Raises:
            ConfigurationError: If the file is missing, unreadable or not a mapping
        """
        path = Path(config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Could not parse configuration file {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_file} must contain a mapping")
        return data

    @staticmethod
    def apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ``PATTERN_GALLERY_*`` environment variables on top of the configuration."""
        result = copy.deepcopy(config_data)
        for env_name, path in ENV_OVERRIDES.items():
            if env_name not in os.environ:
                continue
            section = result
            for key in path[:-1]:
                section = section.setdefault(key, {})
            section[path[-1]] = os.environ[env_name]
            logger.debug("Environment override applied", variable=env_name)
        return result

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dotted key, e.g. ``"stock.initial_price"``.

        Returns ``default`` if any part of the key is missing.
        """
        value: Any = self.app_config.to_dict()
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def reload(self) -> AppConfig:
        """Discard the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Get the process-wide configuration manager.

    ``config_file`` only takes effect on the call that creates the manager.
    """
    return get_singleton(ConfigurationManager, config_file)
