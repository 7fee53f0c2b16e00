"""Base class for record factories."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from loja_online.application.config import Config, FactoryDefaults, get_factory_defaults
from loja_online.application.observers import log_creation
from loja_online.domain.pipeline import CreationObserver, CreationPipeline

R = TypeVar("R")


class RecordFactory(ABC, Generic[R]):
    """
    Factory Method contract shared by product and payment factories.

    Concrete factories are frozen dataclasses holding the construction
    parameters. ``create()`` builds the raw record and ``pipeline()`` returns
    the composed configure/validate/describe chain for that record type.
    """

    config: Config | None

    @abstractmethod
    def create(self) -> R:
        """Build an unconfigured, unvalidated record from the factory parameters."""

    @abstractmethod
    def pipeline(self) -> CreationPipeline[R]:
        """Return the creation pipeline for this factory's record type."""

    def settings(self) -> FactoryDefaults:
        """Defaults from the explicit ``config``, else from the global settings."""
        if self.config is not None:
            return self.config.FACTORY_DEFAULTS
        return get_factory_defaults()

    def create_full(self, observer: CreationObserver | None = None) -> R:
        """
        Create, configure, validate and announce a record.

        Args:
            observer: Receives the creation event; defaults to the structured log

        Returns:
            Validated record

        Raises:
            ValidationError: If any rule fails; no record is returned
            InvalidArgumentError: If a numeric parameter cannot be parsed
        """
        return self.pipeline().run(self.create(), observer or log_creation)
