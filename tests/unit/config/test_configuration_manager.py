"""Tests for configuration loading and validation."""
import json

import pytest

from pattern_gallery.config import AppConfig, ConfigurationManager, get_config_manager, validate_config
from pattern_gallery.config.defaults import LogDestination, LogLevel, OutputFormat
from pattern_gallery.domain.base.exceptions import ConfigurationError


class TestConfigurationManager:
    """Test cases for ConfigurationManager."""

    def test_defaults(self, clean_env):
        config = ConfigurationManager().app_config

        assert config.logging.level == LogLevel.WARNING
        assert config.logging.destination == LogDestination.STDOUT
        assert config.logging.file.path == "logs/pattern-gallery.log"
        assert config.stock.initial_price == 100
        assert config.output.format == OutputFormat.LIST

    def test_json_file_overrides_defaults(self, clean_env, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"stock": {"initial_price": 250}}))

        config = ConfigurationManager(str(config_file)).app_config

        assert config.stock.initial_price == 250
        assert config.logging.level == LogLevel.WARNING

    def test_yaml_file(self, clean_env, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("logging:\n  level: debug\noutput:\n  format: table\n")

        config = ConfigurationManager(str(config_file)).app_config

        assert config.logging.level == LogLevel.DEBUG
        assert config.output.format == OutputFormat.TABLE

    def test_empty_yaml_file_uses_defaults(self, clean_env, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert ConfigurationManager(str(config_file)).app_config.stock.initial_price == 100

    def test_environment_beats_file(self, clean_env, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"stock": {"initial_price": 250}}))
        clean_env.setenv("PATTERN_GALLERY_STOCK_INITIAL_PRICE", "300")
        clean_env.setenv("PATTERN_GALLERY_LOG_LEVEL", "error")

        config = ConfigurationManager(str(config_file)).app_config

        assert config.stock.initial_price == 300
        assert config.logging.level == LogLevel.ERROR

    def test_config_file_from_environment(self, clean_env, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"output": {"format": "yaml"}}))
        clean_env.setenv("PATTERN_GALLERY_CONFIG", str(config_file))

        manager = ConfigurationManager()

        assert manager.config_file == str(config_file)
        assert manager.app_config.output.format == OutputFormat.YAML

    def test_log_dir_placeholder_expanded(self, clean_env):
        clean_env.setenv("PATTERN_GALLERY_LOG_DIR", "/tmp/gallery")

        config = ConfigurationManager().app_config

        assert config.logging.file.path == "/tmp/gallery/pattern-gallery.log"

    def test_missing_file(self, clean_env, tmp_path):
        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(tmp_path / "missing.json")).app_config

    def test_malformed_file(self, clean_env, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(config_file)).app_config

    def test_file_must_be_mapping(self, clean_env, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(config_file)).app_config

    def test_invalid_value(self, clean_env, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"stock": {"initial_price": -1}}))

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(str(config_file)).app_config

        assert "stock.initial_price" in exc_info.value.missing_fields

    def test_get_dotted_key(self, clean_env):
        manager = ConfigurationManager()

        assert manager.get("stock.initial_price") == 100
        assert manager.get("logging.level") == "WARNING"
        assert manager.get("stock.missing", "fallback") == "fallback"
        assert manager.get("stock.initial_price.deeper") is None

    def test_reload(self, clean_env):
        manager = ConfigurationManager()
        assert manager.app_config.stock.initial_price == 100

        clean_env.setenv("PATTERN_GALLERY_STOCK_INITIAL_PRICE", "42")

        assert manager.app_config.stock.initial_price == 100
        assert manager.reload().stock.initial_price == 42

    def test_get_config_manager_is_singleton(self, clean_env):
        assert get_config_manager() is get_config_manager()


def test_validate_config_builds_app_config():
    config = validate_config({"logging": {"level": "info", "destination": "both"}})

    assert isinstance(config, AppConfig)
    assert config.logging.level == LogLevel.INFO
    assert config.logging.destination == LogDestination.BOTH


def test_validate_config_rejects_unknown_destination():
    with pytest.raises(ConfigurationError):
        validate_config({"logging": {"destination": "syslog"}})
