"""Test configuration and shared fixtures."""

from datetime import date

import pytest

from loja_online.application.config import Config, reset_config
from loja_online.application.observers import RecordingObserver


@pytest.fixture(autouse=True)
def _fresh_config():
    """Never leak the cached global configuration between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config() -> Config:
    """Configuration with explicit defaults, independent of the environment."""
    return Config({"ENVIRONMENT": "test", "LOG_LEVEL": "DEBUG", "LOG_FORMAT": "console"})


@pytest.fixture
def recorder() -> RecordingObserver:
    """Observer collecting creation events."""
    return RecordingObserver()


@pytest.fixture
def fixed_today() -> date:
    """Fixed clock for due date defaults."""
    return date(2025, 1, 15)


@pytest.fixture
def valid_cpf() -> str:
    """Valid CPF with punctuation."""
    return "529.982.247-25"


@pytest.fixture
def customer_fields(valid_cpf) -> dict:
    """Valid raw customer input."""
    return {
        "name": "maria da silva",
        "email": "Maria.Silva@Example.COM",
        "password": "s3nh@Forte",
        "cpf": valid_cpf,
        "address": "Rua das Flores,   123 - Centro",
    }
