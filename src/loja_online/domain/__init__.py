"""Domain layer for LojaHub: records, field rules and the creation pipeline."""

from loja_online.domain.errors import DomainError, InvalidArgumentError, ValidationError
from loja_online.domain.models import (
    BoletoPayment,
    Customer,
    DigitalProduct,
    Payment,
    PaymentStatus,
    PhysicalProduct,
    Product,
)
from loja_online.domain.pipeline import CreationEvent, CreationObserver, CreationPipeline

__all__ = [
    "BoletoPayment",
    "CreationEvent",
    "CreationObserver",
    "CreationPipeline",
    "Customer",
    "DigitalProduct",
    "DomainError",
    "InvalidArgumentError",
    "Payment",
    "PaymentStatus",
    "PhysicalProduct",
    "Product",
    "ValidationError",
]
