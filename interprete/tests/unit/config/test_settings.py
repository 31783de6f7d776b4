"""
Unit tests for Settings and load_config.

Tests defaults, validation and YAML/environment precedence.

Usage:
    python interprete/tests/unit/config/test_settings.py
    laborant interprete --unit
"""

import os

from pydantic import ValidationError
from shared.tests import LaborantTest

from interprete.config.settings import (
    Settings,
    get_settings,
    load_config,
    override_settings,
    reset_settings,
)

ISOLATED_VARIABLES = (
    "ENV",
    "PORT",
    "HOST",
    "LOG_LEVEL",
    "HEARTBEAT_INTERVAL",
    "SHUTDOWN_GRACE_PERIOD",
    "OPENROUTER_API_KEY",
    "OPENAI_API_KEY",
)


class TestSettings(LaborantTest):
    """Unit tests for configuration loading."""

    component_name = "interprete"
    test_category = "unit"

    def setup_test(self):
        self._saved_env = {
            key: os.environ.pop(key)
            for key in ISOLATED_VARIABLES
            if key in os.environ
        }

    def teardown_test(self):
        for key in ISOLATED_VARIABLES:
            os.environ.pop(key, None)
        os.environ.update(self._saved_env)
        reset_settings()

    # ================================================================
    # Defaults & Validation tests
    # ================================================================

    def test_defaults(self):
        """Test pydantic defaults."""
        self.reporter.info("Testing default settings", context="Test")

        settings = Settings(_env_file=None)

        assert settings.port == 5000
        assert settings.cors_origins == ["http://localhost:3000"]
        assert settings.heartbeat_interval == 30
        assert settings.enforce_sender_identity is False
        assert settings.translation_temperature == 0.3
        assert settings.translation_max_tokens == 500
        assert settings.translation_provider is None

    def test_log_level_normalized(self):
        """Test log level is lower-cased."""
        assert Settings(_env_file=None, log_level="DEBUG").log_level == "debug"

    def test_invalid_log_level_rejected(self):
        """Test unknown log levels fail validation."""
        try:
            Settings(_env_file=None, log_level="verbose")
            assert False, "Should have raised ValidationError"
        except ValidationError as e:
            assert "Invalid log_level" in str(e)

    def test_invalid_port_rejected(self):
        """Test ports outside 1-65535 fail validation."""
        for port in [0, 70000]:
            try:
                Settings(_env_file=None, port=port)
                assert False, f"Should have rejected port {port}"
            except ValidationError:
                pass

    def test_environment_variables_read(self):
        """Test settings read environment variables case-insensitively."""
        os.environ["OPENAI_API_KEY"] = "sk-test"

        settings = Settings(_env_file=None)

        assert settings.openai_api_key == "sk-test"
        assert settings.translation_provider == "openai"

    # ================================================================
    # load_config tests
    # ================================================================

    def test_load_test_environment(self):
        """Test YAML for the test environment is layered over defaults."""
        self.reporter.info("Testing YAML layering", context="Test")

        settings = load_config(env="test")

        assert settings.ENV == "test"
        assert settings.port == 5099
        assert settings.heartbeat_interval == 5
        assert settings.shutdown_grace_period == 0
        assert settings.log_level == "warning"
        # From default.yaml
        assert settings.max_message_size == 1048576

    def test_environment_beats_yaml(self):
        """Test environment variables override YAML values."""
        self.reporter.info("Testing environment precedence", context="Test")

        os.environ["PORT"] = "6001"
        os.environ["LOG_LEVEL"] = "error"

        settings = load_config(env="test")

        assert settings.port == 6001
        assert settings.log_level == "error"

    def test_unknown_environment_uses_production(self):
        """Test unknown environment names fall back to production YAML."""
        settings = load_config(env="staging")

        assert settings.ENV == "staging"
        assert settings.DEBUG is False

    # ================================================================
    # Singleton tests
    # ================================================================

    def test_override_and_reset(self):
        """Test the global settings singleton can be replaced."""
        custom = Settings(_env_file=None, port=7001)
        override_settings(custom)

        assert get_settings() is custom

        reset_settings()
        os.environ["ENV"] = "test"
        assert get_settings().port == 5099


if __name__ == "__main__":
    TestSettings.run_as_main()
