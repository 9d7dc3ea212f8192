"""
Test suite for utility functions.
"""

import logging

from utils import get_config, setup_logging


class TestGetConfig:
    """Test cases for get_config function."""

    def test_get_config_returns_dict(self):
        """Test that get_config returns a dictionary."""
        config = get_config()
        assert isinstance(config, dict)

    def test_config_has_required_keys(self):
        """Test that config contains required keys."""
        config = get_config()
        for key in ['PORT', 'HOST', 'DEBUG', 'LOG_LEVEL']:
            assert key in config

    def test_defaults(self, monkeypatch):
        """Test defaults when nothing is set."""
        for name in ['PORT', 'HOST', 'DEBUG', 'LOG_LEVEL']:
            monkeypatch.delenv(name, raising=False)

        config = get_config()
        assert config['PORT'] == 3000
        assert config['HOST'] == '0.0.0.0'
        assert config['DEBUG'] is False
        assert config['LOG_LEVEL'] == 'INFO'

    def test_environment_overrides(self, monkeypatch):
        """Test values are read from the environment."""
        monkeypatch.setenv('PORT', '8000')
        monkeypatch.setenv('DEBUG', 'TRUE')

        config = get_config()
        assert config['PORT'] == 8000
        assert config['DEBUG'] is True

    def test_debug_only_true_for_true(self, monkeypatch):
        """Test DEBUG is false for anything but 'true'."""
        monkeypatch.setenv('DEBUG', 'yes')
        assert get_config()['DEBUG'] is False


class TestSetupLogging:
    """Test cases for setup_logging function."""

    def test_returns_logger(self):
        """Test that a logger is returned."""
        assert isinstance(setup_logging('debug'), logging.Logger)

    def test_unknown_level_falls_back(self):
        """Test an unknown level name does not raise."""
        assert isinstance(setup_logging('chatty'), logging.Logger)
