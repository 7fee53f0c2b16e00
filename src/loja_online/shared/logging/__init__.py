"""
LojaHub structured logging with LGPD compliance.

This module provides structured logging capabilities with:
- LGPD-compliant masking of CPF, e-mail and secrets
- JSON or key-value rendering per environment
"""

from .factory import configure_logging, get_logger
from .sanitizers import LGPDProcessor, mask_sensitive_data, sanitize_for_log

__all__ = [
    "LGPDProcessor",
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "sanitize_for_log",
]
