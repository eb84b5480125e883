"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from pattern_gallery.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = expand_env_vars("$TEST_VAR")
            assert result == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = expand_env_vars("${TEST_VAR}/subdir")
            assert result == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        """Test expansion of non-existent environment variable."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"
            assert expand_env_vars("${NONEXISTENT_VAR}") == "${NONEXISTENT_VAR}"

    def test_default_used_when_unset(self):
        """Test ${VAR:default} falls back to the default."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${LOG_DIR:logs}/app.log") == "logs/app.log"

    def test_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${PROXY:}") == ""

    def test_set_variable_beats_default(self):
        with patch.dict(os.environ, {"LOG_DIR": "/var/log"}):
            assert expand_env_vars("${LOG_DIR:logs}/app.log") == "/var/log/app.log"

    def test_expand_nested_dict_and_list_values(self):
        """Test expansion inside nested dictionaries and lists."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file": {"path": "$TEST_VAR/app.log"}},
                "paths": ["$TEST_VAR/a", "plain"],
            }
            assert expand_env_vars(config) == {
                "logging": {"file": {"path": "/test/path/app.log"}},
                "paths": ["/test/path/a", "plain"],
            }

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"number": 42, "boolean": True, "none": None}
        assert expand_env_vars(config) == config

    def test_expand_config_env_vars(self):
        """Test the main configuration expansion function."""
        with patch.dict(os.environ, {"PATTERN_GALLERY_LOG_DIR": "/opt/gallery"}):
            config = {"logging": {"file": {"path": "${PATTERN_GALLERY_LOG_DIR:logs}/g.log"}}}
            result = expand_config_env_vars(config)
            assert result["logging"]["file"]["path"] == "/opt/gallery/g.log"

    def test_input_not_mutated(self):
        with patch.dict(os.environ, {"TEST_VAR": "x"}):
            config = {"key": "$TEST_VAR"}
            expand_config_env_vars(config)
            assert config == {"key": "$TEST_VAR"}
