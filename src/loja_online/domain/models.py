"""Catalog records for LojaHub.

Records are frozen dataclasses. Factories build a raw record, then derive
configured copies with ``dataclasses.replace`` before validating them, so a
record handed to a caller has already passed every applicable rule.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from loja_online.domain.cpf import format_cpf


class PaymentStatus(str, Enum):
    """Accepted payment statuses."""

    PENDING = "PENDING"
    PAID = "PAID"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


@dataclass(frozen=True)
class Product:
    """Base product record."""

    name: str | None
    price: Decimal | None
    description: str | None = None


@dataclass(frozen=True)
class DigitalProduct(Product):
    """Downloadable product."""

    download_url: str | None = None
    file_size: int | None = None


@dataclass(frozen=True)
class PhysicalProduct(Product):
    """Shippable product with weight (kg) and stock count."""

    weight: Decimal | None = None
    stock: int | None = None


@dataclass(frozen=True)
class Payment:
    """Base payment record."""

    amount: Decimal | None = None
    status: str | None = None


@dataclass(frozen=True)
class BoletoPayment(Payment):
    """Bank-slip payment identified by a code and a DD/MM/YYYY due date."""

    code: str | None = None
    due_date: str | None = None


@dataclass(frozen=True)
class Customer:
    """Registered customer.

    ``cpf`` holds the 11 cleaned digits; the password is kept verbatim and is
    left out of ``repr``.
    """

    name: str
    email: str
    password: str = field(repr=False)
    cpf: str
    address: str

    @property
    def formatted_cpf(self) -> str:
        """CPF in DDD.DDD.DDD-DD grouping."""
        return format_cpf(self.cpf)
