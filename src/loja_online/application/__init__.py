"""Application layer for LojaHub: factories, providers and configuration."""

from loja_online.application.factories import (
    BoletoFactory,
    CustomerFactory,
    DigitalProductFactory,
    PaymentFactory,
    PhysicalProductFactory,
    ProductFactory,
    create_customer,
)
from loja_online.application.providers import PaymentFactoryProvider, ProductFactoryProvider

__all__ = [
    "BoletoFactory",
    "CustomerFactory",
    "DigitalProductFactory",
    "PaymentFactory",
    "PaymentFactoryProvider",
    "PhysicalProductFactory",
    "ProductFactory",
    "ProductFactoryProvider",
    "create_customer",
]
