"""Product factories.

Base steps (description default, name and price rules) come first; each
concrete factory appends its own configure, validate and describe hooks.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any

from loja_online.application.config import Config, FactoryDefaults
from loja_online.application.factories.base import RecordFactory
from loja_online.domain.models import DigitalProduct, PhysicalProduct, Product
from loja_online.domain.pipeline import CreationPipeline
from loja_online.domain.validators import (
    is_blank,
    require_positive,
    require_text,
    to_decimal,
    to_int,
    validate_download_url,
    validate_non_negative_if_set,
    validate_positive_if_set,
)


def format_brl(value: Decimal) -> str:
    """Render a currency amount as ``R$ 0.00``."""
    return f"R$ {value:.2f}"


def validate_product(product: Product) -> None:
    require_text("name", product.name, "product name is required")
    require_positive("price", product.price)


def describe_product(product: Product) -> dict[str, Any]:
    return {"name": product.name, "price": format_brl(product.price)}


def product_pipeline(defaults: FactoryDefaults) -> CreationPipeline[Product]:
    """Steps shared by every product type."""

    def configure_product(product: Product) -> Product:
        if is_blank(product.description):
            return replace(product, description=defaults.product_description)
        return product

    return CreationPipeline(
        event="product_created",
        configure=(configure_product,),
        validate=(validate_product,),
        describe=(describe_product,),
    )


class ProductFactory(RecordFactory[Product]):
    """Factory Method for products."""


@dataclass(frozen=True)
class DigitalProductFactory(ProductFactory):
    """Builds ``DigitalProduct`` records.

    ``allow_invalid_url()`` records that the caller confirmed a download URL
    without an http(s) scheme; only the scheme check is skipped.
    """

    name: str | None = ""
    price: Any = 0
    description: str | None = ""
    download_url: str | None = ""
    file_size: int | str | None = None
    skip_url_validation: bool = False
    config: Config | None = field(default=None, compare=False, repr=False)

    def with_file_size(self, file_size: int | str | None) -> "DigitalProductFactory":
        return replace(self, file_size=file_size)

    def with_description(self, description: str | None) -> "DigitalProductFactory":
        return replace(self, description=description)

    def allow_invalid_url(self) -> "DigitalProductFactory":
        return replace(self, skip_url_validation=True)

    def create(self) -> DigitalProduct:
        return DigitalProduct(
            name=self.name,
            price=to_decimal(self.price, "price"),
            description=self.description,
            download_url=self.download_url,
            file_size=to_int(self.file_size, "file_size"),
        )

    def _validate_digital(self, product: DigitalProduct) -> None:
        validate_download_url(product.download_url, allow_any_scheme=self.skip_url_validation)
        validate_non_negative_if_set("file_size", product.file_size)

    @staticmethod
    def _describe_digital(product: DigitalProduct) -> dict[str, Any]:
        return {"download_url": product.download_url, "file_size": product.file_size}

    def pipeline(self) -> CreationPipeline[DigitalProduct]:
        # file_size stays None when not supplied, so there is no extra configure step
        return product_pipeline(self.settings()).extend(
            validate=self._validate_digital,
            describe=self._describe_digital,
        )


@dataclass(frozen=True)
class PhysicalProductFactory(ProductFactory):
    """Builds ``PhysicalProduct`` records with weight and stock defaults."""

    name: str | None = ""
    price: Any = 0
    description: str | None = ""
    weight: Any = None
    stock: int | str | None = None
    config: Config | None = field(default=None, compare=False, repr=False)

    def with_weight(self, weight: Any) -> "PhysicalProductFactory":
        return replace(self, weight=weight)

    def with_stock(self, stock: int | str | None) -> "PhysicalProductFactory":
        return replace(self, stock=stock)

    def with_description(self, description: str | None) -> "PhysicalProductFactory":
        return replace(self, description=description)

    def create(self) -> PhysicalProduct:
        return PhysicalProduct(
            name=self.name,
            price=to_decimal(self.price, "price"),
            description=self.description,
            weight=to_decimal(self.weight, "weight"),
            stock=to_int(self.stock, "stock"),
        )

    def _configure_physical(self, product: PhysicalProduct) -> PhysicalProduct:
        defaults = {}
        if product.weight is None:
            defaults["weight"] = self.settings().physical_weight
        if product.stock is None:
            defaults["stock"] = 0
        return replace(product, **defaults) if defaults else product

    @staticmethod
    def _validate_physical(product: PhysicalProduct) -> None:
        validate_positive_if_set("weight", product.weight)
        validate_non_negative_if_set("stock", product.stock)

    @staticmethod
    def _describe_physical(product: PhysicalProduct) -> dict[str, Any]:
        return {"stock": product.stock, "weight": f"{product.weight} kg"}

    def pipeline(self) -> CreationPipeline[PhysicalProduct]:
        return product_pipeline(self.settings()).extend(
            configure=self._configure_physical,
            validate=self._validate_physical,
            describe=self._describe_physical,
        )
