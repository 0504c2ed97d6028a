"""Unit tests for configuration module."""

import os
import logging
import sys
from unittest.mock import patch

from wmbus_crc.core.config import Settings, setup_logging


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self):
        """Test settings have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.strict_hex is True

    def test_env_override_log_level(self):
        """Test log level override from environment."""
        with patch.dict(os.environ, {"WMBUS_CRC_LOG_LEVEL": "DEBUG"}):
            settings = Settings()

        assert settings.log_level == "DEBUG"

    def test_env_override_strict_hex(self):
        """Test strict hex override from environment."""
        with patch.dict(os.environ, {"WMBUS_CRC_STRICT_HEX": "false"}):
            settings = Settings()

        assert settings.strict_hex is False

    def test_env_prefix(self):
        """Test that non-prefixed env vars are ignored."""
        with patch.dict(os.environ, {"STRICT_HEX": "false"}, clear=True):
            settings = Settings()

        assert settings.strict_hex is True


class TestSetupLogging:
    """Tests for setup_logging function."""

    def configured_level(self, level: str) -> int:
        with patch("wmbus_crc.core.config.logging.basicConfig") as basic_config:
            setup_logging(level)
        basic_config.assert_called_once()
        return basic_config.call_args.kwargs["level"]

    def test_setup_logging_info(self):
        """Test setting up INFO logging."""
        assert self.configured_level("INFO") == logging.INFO

    def test_setup_logging_debug(self):
        """Test setting up DEBUG logging."""
        assert self.configured_level("DEBUG") == logging.DEBUG

    def test_setup_logging_case_insensitive(self):
        """Test log level is case insensitive."""
        assert self.configured_level("debug") == logging.DEBUG

    def test_setup_logging_invalid_defaults_to_info(self):
        """Test invalid level defaults to INFO."""
        assert self.configured_level("INVALID") == logging.INFO

    def test_setup_logging_writes_to_stderr(self):
        """Test log output goes to stderr with a timestamped format."""
        with patch("wmbus_crc.core.config.logging.basicConfig") as basic_config:
            setup_logging()

        kwargs = basic_config.call_args.kwargs
        assert kwargs["stream"] is sys.stderr
        assert "%(asctime)s" in kwargs["format"]
        assert "%(name)s" in kwargs["format"]
