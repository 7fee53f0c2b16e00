"""
LGPD-compliant data sanitizers for logging.
"""

import re
from typing import Any

from structlog.types import EventDict, WrappedLogger

# Field names that are always redacted
SENSITIVE_PATTERNS = [
    r"password",
    r"senha",
    r"pwd",
    r"secret",
    r"token",
    r"api_key",
    r"credential",
    r"cpf",
    r"cnpj",
    r"credit_card",
    r"card_number",
    r"cvv",
]

_MASKED_DOCUMENT = re.compile(r"\*\*\*\.\d{3}\.\d{3}-\*\*")


def _mask_email(value: str) -> str:
    """Mask email keeping domain."""
    if "@" in value:
        local, domain = value.rsplit("@", 1)
        if local.endswith("***"):
            return value
        if len(local) > 2:
            return f"{local[0]}***@{domain}"
        return f"***@{domain}"
    return "***"


def _mask_document(value: str) -> str:
    """Mask a CPF keeping the middle groups: 529.982.247-25 -> ***.982.247-**."""
    if _MASKED_DOCUMENT.fullmatch(value):
        return value
    digits = re.sub(r"\D", "", value)
    if len(digits) != 11:
        return "***"
    return f"***.{digits[3:6]}.{digits[6:9]}-**"


def _mask_address(value: str) -> str:
    """Keep only the first word of an address (usually the street type)."""
    first = value.strip().split(" ", 1)[0] if value.strip() else ""
    return f"{first} ***" if first else "***"


# Fields that are partially masked
PARTIAL_MASK_FIELDS = {
    "email": _mask_email,
    "document": _mask_document,
    "address": _mask_address,
}


class LGPDProcessor:
    """
    Structlog processor for LGPD compliance.

    Automatically masks sensitive data in log events.
    """

    def __call__(
        self,
        logger: WrappedLogger,
        name: str,
        event_dict: EventDict,
    ) -> EventDict:
        """Process log event and mask sensitive data."""
        return sanitize_for_log(event_dict)


def sanitize_for_log(data: dict[str, Any]) -> dict[str, Any]:
    """
    Sanitize a dictionary for LGPD-compliant logging.

    Args:
        data: Dictionary to sanitize

    Returns:
        Sanitized dictionary with masked sensitive data
    """
    sanitized = {}

    for key, value in data.items():
        if _is_sensitive_field(key):
            sanitized[key] = "***REDACTED***"
        elif key in PARTIAL_MASK_FIELDS:
            if value is not None:
                sanitized[key] = PARTIAL_MASK_FIELDS[key](str(value))
            else:
                sanitized[key] = None
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_log(value)
        elif isinstance(value, list):
            sanitized[key] = [
                sanitize_for_log(item) if isinstance(item, dict) else item for item in value
            ]
        else:
            sanitized[key] = value

    return sanitized


def mask_sensitive_data(data_type: str, value: str) -> str:
    """
    Mask sensitive data according to its type.

    Args:
        data_type: Type of data to mask (email, document, address)
        value: Value to mask

    Returns:
        Masked value
    """
    if not value:
        return "***"

    masker = PARTIAL_MASK_FIELDS.get(data_type, lambda v: "***MASKED***")
    return masker(value)


def _is_sensitive_field(field_name: str) -> bool:
    """Check if a field name indicates sensitive data."""
    field_lower = field_name.lower()
    return any(re.search(pattern, field_lower) for pattern in SENSITIVE_PATTERNS)
