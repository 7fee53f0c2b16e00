"""Unit tests for application configuration."""

from decimal import Decimal

import pytest

from loja_online.application.config import (
    Config,
    Environment,
    FactoryDefaults,
    get_config,
    get_factory_defaults,
    reset_config,
)


class TestConfig:
    """Test settings loading and validation."""

    def test_defaults(self):
        config = Config({})
        config.validate()

        assert config.ENVIRONMENT is Environment.DEVELOPMENT
        assert config.LOG_LEVEL == "INFO"
        assert config.json_logs
        assert config.BOLETO_DUE_DAYS == 30
        assert config.DEFAULT_PRODUCT_DESCRIPTION == "Description not provided"
        assert config.DEFAULT_PHYSICAL_WEIGHT == Decimal("0.1")

    def test_reads_source(self):
        config = Config(
            {
                "ENVIRONMENT": "Production",
                "LOG_LEVEL": "warning",
                "LOG_FORMAT": "console",
                "BOLETO_DUE_DAYS": "5",
            }
        )
        assert config.ENVIRONMENT is Environment.PRODUCTION
        assert config.LOG_LEVEL == "WARNING"
        assert not config.json_logs
        assert config.BOLETO_DUE_DAYS == 5

    def test_unknown_environment(self):
        with pytest.raises(ValueError):
            Config({"ENVIRONMENT": "qa"})

    def test_non_integer_due_days(self):
        with pytest.raises(ValueError, match="BOLETO_DUE_DAYS must be an integer"):
            Config({"BOLETO_DUE_DAYS": "thirty"})

    def test_non_numeric_weight(self):
        with pytest.raises(ValueError, match="DEFAULT_PHYSICAL_WEIGHT must be a number"):
            Config({"DEFAULT_PHYSICAL_WEIGHT": "light"})

    @pytest.mark.parametrize(
        "source, message",
        [
            ({"BOLETO_DUE_DAYS": "0"}, "BOLETO_DUE_DAYS must be positive"),
            ({"DEFAULT_PHYSICAL_WEIGHT": "0"}, "DEFAULT_PHYSICAL_WEIGHT must be positive"),
            ({"DEFAULT_PRODUCT_DESCRIPTION": "  "}, "cannot be blank"),
            ({"LOG_LEVEL": "LOUD"}, "not a valid level"),
            ({"LOG_FORMAT": "xml"}, "json or console"),
        ],
    )
    def test_validate_rejects(self, source, message):
        with pytest.raises(ValueError, match=message):
            Config(source).validate()

    def test_reload_picks_up_changes(self):
        source = {"BOLETO_DUE_DAYS": "10"}
        config = Config(source)
        source["BOLETO_DUE_DAYS"] = "20"
        config.reload()
        assert config.BOLETO_DUE_DAYS == 20


class TestGetConfig:
    def test_caches_instance(self):
        first = get_config({"BOLETO_DUE_DAYS": "7"})
        assert get_config() is first
        assert get_config().BOLETO_DUE_DAYS == 7

    def test_reset_drops_cache(self):
        first = get_config({})
        reset_config()
        assert get_config({}) is not first

    def test_invalid_config_is_not_cached(self):
        with pytest.raises(ValueError):
            get_config({"BOLETO_DUE_DAYS": "-1"})
        assert get_config({}).BOLETO_DUE_DAYS == 30


class TestFactoryDefaults:
    """Factory defaults load independently of the logging settings."""

    def test_ignores_other_settings(self):
        defaults = FactoryDefaults.from_source(
            {"ENVIRONMENT": "prod", "LOG_LEVEL": "TRACE", "BOLETO_DUE_DAYS": "10"}
        )
        defaults.validate()
        assert defaults == FactoryDefaults(boleto_due_days=10)

    def test_config_exposes_defaults(self):
        config = Config({"DEFAULT_PHYSICAL_WEIGHT": "2.5"})
        assert config.FACTORY_DEFAULTS.physical_weight == Decimal("2.5")
        assert config.DEFAULT_PHYSICAL_WEIGHT == Decimal("2.5")

    def test_global_defaults_skip_logging_settings(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "TRACE")
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("BOLETO_DUE_DAYS", "12")

        assert get_factory_defaults().boleto_due_days == 12

    def test_global_defaults_follow_loaded_config(self):
        config = get_config({"BOLETO_DUE_DAYS": "4"})
        assert get_factory_defaults() is config.FACTORY_DEFAULTS

    def test_invalid_factory_setting_still_fails(self, monkeypatch):
        monkeypatch.setenv("BOLETO_DUE_DAYS", "0")
        with pytest.raises(ValueError, match="BOLETO_DUE_DAYS must be positive"):
            get_factory_defaults()
