"""Tests for Settings loading."""

from pathlib import Path

import pytest

from orderentry.infrastructure.config import DEFAULT_DATA_DIR, ConfigurationError, Settings


class TestSettingsFromEnv:

    def test_defaults(self):
        settings = Settings.from_env({"ORDERENTRY_SALESPERSON": "dave"})
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.salesperson == "dave"
        assert settings.max_attempts is None
        assert settings.cancel_token is None
        assert settings.release_stock_on_abort is False
        assert settings.log_level == "WARNING"

    def test_all_values(self):
        settings = Settings.from_env({
            "ORDERENTRY_DATA_DIR": "/tmp/orders",
            "ORDERENTRY_SALESPERSON": "dave",
            "ORDERENTRY_MAX_ATTEMPTS": "3",
            "ORDERENTRY_CANCEL_TOKEN": "quit",
            "ORDERENTRY_RELEASE_STOCK_ON_ABORT": "yes",
            "ORDERENTRY_LOG_LEVEL": "debug",
        })
        assert settings.data_dir == Path("/tmp/orders")
        assert settings.max_attempts == 3
        assert settings.release_stock_on_abort is True
        assert settings.log_level == "DEBUG"
        assert settings.prompt_policy.cancel_token == "quit"
        assert settings.prompt_policy.max_attempts == 3

    def test_salesperson_falls_back_to_something(self):
        assert Settings.from_env({}).salesperson

    def test_bad_integer(self):
        with pytest.raises(ConfigurationError, match="Invalid integer"):
            Settings.from_env({"ORDERENTRY_MAX_ATTEMPTS": "three"})

    def test_non_positive_attempts(self):
        with pytest.raises(ConfigurationError, match="at least 1"):
            Settings.from_env({"ORDERENTRY_MAX_ATTEMPTS": "0"})

    def test_bad_boolean(self):
        with pytest.raises(ConfigurationError, match="Invalid boolean"):
            Settings.from_env({"ORDERENTRY_RELEASE_STOCK_ON_ABORT": "perhaps"})

    def test_bad_log_level(self):
        with pytest.raises(ConfigurationError, match="Unknown log level"):
            Settings.from_env({"ORDERENTRY_LOG_LEVEL": "LOUD"})
