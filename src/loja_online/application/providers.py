"""Factory providers (Abstract Factory lookup by type token).

Tokens are trimmed and upper-cased, then resolved through a fixed alias table
to a canonical type and its factory constructor.
"""

from decimal import Decimal
from typing import Any, Callable, Generic, TypeVar

from loja_online.application.factories.payments import BoletoFactory, PaymentFactory
from loja_online.application.factories.products import (
    DigitalProductFactory,
    PhysicalProductFactory,
    ProductFactory,
)
from loja_online.domain.errors import InvalidArgumentError

F = TypeVar("F")


class FactoryRegistry(Generic[F]):
    """Alias table mapping type tokens to factory constructors."""

    def __init__(self, family: str) -> None:
        self.family = family
        self._constructors: dict[str, Callable[..., F]] = {}
        self._aliases: dict[str, str] = {}

    def register(self, canonical: str, constructor: Callable[..., F], *aliases: str) -> None:
        self._constructors[canonical] = constructor
        for alias in (canonical, *aliases):
            self._aliases[alias] = canonical

    @property
    def canonical_types(self) -> tuple[str, ...]:
        return tuple(self._constructors)

    def resolve(self, token: str | None) -> str:
        """
        Resolve a type token to its canonical name.

        Raises:
            InvalidArgumentError: If the token is None or not a known alias
        """
        valid = f"Valid types: {', '.join(self.canonical_types)}"
        if token is None:
            raise InvalidArgumentError(f"{self.family} type cannot be null. {valid}", field="type")

        canonical = self._aliases.get(token.strip().upper())
        if canonical is None:
            raise InvalidArgumentError(f"Invalid {self.family} type: {token}. {valid}", field="type")
        return canonical

    def build(self, token: str | None, **params: Any) -> F:
        return self._constructors[self.resolve(token)](**params)


_products: FactoryRegistry[ProductFactory] = FactoryRegistry("product")
_products.register("DIGITAL", DigitalProductFactory, "PRODUTO_DIGITAL", "PD")
_products.register("FISICO", PhysicalProductFactory, "FÍSICO", "PRODUTO_FISICO", "PF")

_payments: FactoryRegistry[PaymentFactory] = FactoryRegistry("payment")
_payments.register("BOLETO", BoletoFactory, "BOLETO_BANCARIO")


class ProductFactoryProvider:
    """Returns the product factory matching a type token."""

    @staticmethod
    def get_factory(product_type: str | None, **params: Any) -> ProductFactory:
        """
        Look up a product factory.

        Args:
            product_type: DIGITAL or FISICO, or one of their aliases
            **params: Forwarded to the factory constructor; without them the
                factory holds empty placeholder values

        Returns:
            Matching product factory

        Raises:
            InvalidArgumentError: If the type is null or unknown
        """
        return _products.build(product_type, **params)

    @staticmethod
    def valid_types() -> tuple[str, ...]:
        return _products.canonical_types

    @staticmethod
    def create_digital_factory(
        name: str,
        price: Decimal | float | int | str,
        description: str | None,
        download_url: str,
        file_size: int | None = None,
    ) -> DigitalProductFactory:
        return DigitalProductFactory(name, price, description, download_url, file_size)

    @staticmethod
    def create_physical_factory(
        name: str,
        price: Decimal | float | int | str,
        description: str | None,
        weight: Decimal | float | int | str | None,
        stock: int | None,
    ) -> PhysicalProductFactory:
        return PhysicalProductFactory(name, price, description, weight, stock)


class PaymentFactoryProvider:
    """Returns the payment factory matching a type token."""

    @staticmethod
    def get_factory(payment_type: str | None, **params: Any) -> PaymentFactory:
        """
        Look up a payment factory.

        Raises:
            InvalidArgumentError: If the type is null or unknown
        """
        return _payments.build(payment_type, **params)

    @staticmethod
    def valid_types() -> tuple[str, ...]:
        return _payments.canonical_types

    @staticmethod
    def create_boleto_factory(
        code: str,
        due_date: str | None = None,
        amount: Decimal | float | int | str | None = None,
    ) -> BoletoFactory:
        return BoletoFactory(code, due_date, amount)
