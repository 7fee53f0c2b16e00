"""Application configuration for LojaHub."""

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Mapping

from loja_online.shared.logging.factory import is_known_log_level


class Environment(Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


@dataclass(frozen=True)
class FactoryDefaults:
    """Values the record factories fill in before validation."""

    boleto_due_days: int = 30
    product_description: str = "Description not provided"
    physical_weight: Decimal = Decimal("0.1")

    @classmethod
    def from_source(cls, source: Mapping[str, str]) -> "FactoryDefaults":
        """Read only the factory keys; other settings in ``source`` are ignored."""
        try:
            due_days = int(source.get("BOLETO_DUE_DAYS", "30"))
        except ValueError:
            raise ValueError("BOLETO_DUE_DAYS must be an integer") from None

        try:
            weight = Decimal(source.get("DEFAULT_PHYSICAL_WEIGHT", "0.1"))
        except InvalidOperation:
            raise ValueError("DEFAULT_PHYSICAL_WEIGHT must be a number") from None

        return cls(
            boleto_due_days=due_days,
            product_description=source.get("DEFAULT_PRODUCT_DESCRIPTION", "Description not provided"),
            physical_weight=weight,
        )

    def validate(self) -> None:
        if self.boleto_due_days <= 0:
            raise ValueError("BOLETO_DUE_DAYS must be positive")

        if not self.physical_weight.is_finite() or self.physical_weight <= 0:
            raise ValueError("DEFAULT_PHYSICAL_WEIGHT must be positive")

        if not self.product_description.strip():
            raise ValueError("DEFAULT_PRODUCT_DESCRIPTION cannot be blank")


class Config:
    """Application configuration read from environment-style settings."""

    def __init__(self, source: Mapping[str, str] | None = None):
        """Initialize configuration; ``source`` defaults to ``os.environ``."""
        self.source = os.environ if source is None else source
        self._load_config()

    def _get(self, key: str, default: str) -> str:
        return self.source.get(key, default)

    def _load_config(self) -> None:
        """Load configuration from the settings source."""
        self.ENVIRONMENT = Environment(self._get("ENVIRONMENT", "development").lower())

        # Logging
        self.LOG_LEVEL = self._get("LOG_LEVEL", "INFO").upper()
        self.LOG_FORMAT = self._get("LOG_FORMAT", "json").lower()

        self.FACTORY_DEFAULTS = FactoryDefaults.from_source(self.source)

    @property
    def BOLETO_DUE_DAYS(self) -> int:
        return self.FACTORY_DEFAULTS.boleto_due_days

    @property
    def DEFAULT_PRODUCT_DESCRIPTION(self) -> str:
        return self.FACTORY_DEFAULTS.product_description

    @property
    def DEFAULT_PHYSICAL_WEIGHT(self) -> Decimal:
        return self.FACTORY_DEFAULTS.physical_weight

    @property
    def json_logs(self) -> bool:
        return self.LOG_FORMAT == "json"

    def validate(self) -> None:
        """Validate critical configuration values."""
        self.FACTORY_DEFAULTS.validate()

        if not is_known_log_level(self.LOG_LEVEL):
            raise ValueError(f"LOG_LEVEL {self.LOG_LEVEL} is not a valid level")

        if self.LOG_FORMAT not in ("json", "console"):
            raise ValueError("LOG_FORMAT must be json or console")

    def reload(self) -> None:
        """Reload configuration from the settings source."""
        self._load_config()
        self.validate()


# Global configuration instance
_config: Config | None = None
_factory_defaults: FactoryDefaults | None = None


def get_config(source: Mapping[str, str] | None = None) -> Config:
    """
    Get or create global configuration instance.

    Args:
        source: Settings mapping used on first creation (defaults to ``os.environ``)

    Returns:
        Configuration instance
    """
    global _config
    if _config is None:
        config = Config(source)
        config.validate()
        _config = config
    return _config


def get_factory_defaults() -> FactoryDefaults:
    """
    Get the factory defaults without loading the rest of the configuration.

    Uses the global configuration when it has been loaded; otherwise reads the
    factory keys from ``os.environ``, so logging or environment settings never
    affect record creation.
    """
    global _factory_defaults
    if _config is not None:
        return _config.FACTORY_DEFAULTS
    if _factory_defaults is None:
        defaults = FactoryDefaults.from_source(os.environ)
        defaults.validate()
        _factory_defaults = defaults
    return _factory_defaults


def reset_config() -> None:
    """Drop the cached configuration so the next ``get_config`` reloads it."""
    global _config, _factory_defaults
    _config = None
    _factory_defaults = None
