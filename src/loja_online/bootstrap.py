"""
Application bootstrap.

Composition root: loads configuration and wires the logging system to it.
"""

from typing import Mapping

from loja_online.application.config import Config, Environment, get_config
from loja_online.shared.logging import configure_logging


def bootstrap(source: Mapping[str, str] | None = None) -> Config:
    """
    Load configuration and configure structured logging from it.

    Args:
        source: Settings mapping (defaults to ``os.environ``)

    Returns:
        Validated configuration instance
    """
    config = get_config(source)
    configure_logging(
        environment=config.ENVIRONMENT.value,
        log_level=config.LOG_LEVEL,
        json_logs=config.json_logs,
        include_caller_info=config.ENVIRONMENT is Environment.DEVELOPMENT,
    )
    return config
