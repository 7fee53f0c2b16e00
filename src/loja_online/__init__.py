"""LojaHub catalog: product, payment and customer factories with field validation."""

__version__ = "1.0.0"
