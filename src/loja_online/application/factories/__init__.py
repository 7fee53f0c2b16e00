"""Record factories."""

from .base import RecordFactory
from .customers import CustomerFactory, create_customer
from .payments import BoletoFactory, PaymentFactory
from .products import DigitalProductFactory, PhysicalProductFactory, ProductFactory

__all__ = [
    "BoletoFactory",
    "CustomerFactory",
    "DigitalProductFactory",
    "PaymentFactory",
    "PhysicalProductFactory",
    "ProductFactory",
    "RecordFactory",
    "create_customer",
]
