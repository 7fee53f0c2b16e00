"""Single-field validators.

Customer validators check raw caller input and raise
``InvalidArgumentError``. Record validators check a configured product or
payment and raise ``ValidationError``. Every validator stops at the first
violated rule.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any

from loja_online.domain.cpf import (
    CPF_LENGTH,
    clean_cpf,
    has_repeated_digits,
    has_valid_check_digits,
)
from loja_online.domain.errors import InvalidArgumentError, ValidationError

NAME_PATTERN = re.compile(r"[a-zA-ZÀ-ÿ\s]+")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
DUE_DATE_PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")
ALLOWED_URL_SCHEMES = ("http://", "https://")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 150
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 50
ADDRESS_MIN_LENGTH = 10
ADDRESS_MAX_LENGTH = 200
BOLETO_CODE_MIN_LENGTH = 10


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def to_decimal(value: Any, field: str) -> Decimal | None:
    """
    Coerce a numeric input to ``Decimal``.

    Floats go through ``str`` so 19.9 stays 19.9 rather than its binary
    expansion.

    Raises:
        InvalidArgumentError: If the value is not a finite number
    """
    if value is None or isinstance(value, Decimal) and value.is_finite():
        return value
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{field} must be a number", field=field)
    try:
        converted = Decimal(str(value).strip())
    except InvalidOperation:
        raise InvalidArgumentError(f"{field} must be a number", field=field) from None
    if not converted.is_finite():
        raise InvalidArgumentError(f"{field} must be a finite number", field=field)
    return converted


def to_int(value: Any, field: str) -> int | None:
    """
    Coerce a count (stock, file size) to ``int``.

    Integers and digit strings are accepted; fractional or non-numeric values
    are rejected rather than truncated.

    Raises:
        InvalidArgumentError: If the value is not a whole number
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{field} must be an integer", field=field)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise InvalidArgumentError(f"{field} must be an integer", field=field) from None
    raise InvalidArgumentError(f"{field} must be an integer", field=field)


# Customer fields


def validate_name(name: str | None) -> None:
    if is_blank(name):
        raise InvalidArgumentError("Name is required", field="name")

    trimmed = name.strip()
    if len(trimmed) < NAME_MIN_LENGTH:
        raise InvalidArgumentError(
            f"Name must have at least {NAME_MIN_LENGTH} characters", field="name"
        )
    if len(trimmed) > NAME_MAX_LENGTH:
        raise InvalidArgumentError(
            f"Name cannot exceed {NAME_MAX_LENGTH} characters", field="name"
        )
    if not NAME_PATTERN.fullmatch(trimmed):
        raise InvalidArgumentError("Name must contain only letters and spaces", field="name")


def validate_email(email: str | None) -> None:
    if is_blank(email):
        raise InvalidArgumentError("Email is required", field="email")

    trimmed = email.strip()
    if not EMAIL_PATTERN.fullmatch(trimmed):
        raise InvalidArgumentError("Invalid email format", field="email")
    if len(trimmed) > EMAIL_MAX_LENGTH:
        raise InvalidArgumentError(
            f"Email cannot exceed {EMAIL_MAX_LENGTH} characters", field="email"
        )


def validate_password(password: str | None) -> None:
    """Check password length on the raw value; passwords are never trimmed."""
    if is_blank(password):
        raise InvalidArgumentError("Password is required", field="password")
    if len(password) < PASSWORD_MIN_LENGTH:
        raise InvalidArgumentError(
            f"Password must have at least {PASSWORD_MIN_LENGTH} characters", field="password"
        )
    if len(password) > PASSWORD_MAX_LENGTH:
        raise InvalidArgumentError(
            f"Password cannot exceed {PASSWORD_MAX_LENGTH} characters", field="password"
        )


def validate_cpf(cpf: str | None) -> None:
    """
    Validate a CPF with or without punctuation.

    Raises:
        InvalidArgumentError: On missing value, wrong digit count, repeated
            digits or check-digit mismatch
    """
    if is_blank(cpf):
        raise InvalidArgumentError("CPF is required", field="cpf")

    digits = clean_cpf(cpf)
    if len(digits) != CPF_LENGTH:
        raise InvalidArgumentError(f"CPF must have {CPF_LENGTH} digits", field="cpf")
    if has_repeated_digits(digits):
        raise InvalidArgumentError("Invalid CPF - all digits are equal", field="cpf")
    if not has_valid_check_digits(digits):
        raise InvalidArgumentError("Invalid CPF - check digits do not match", field="cpf")


def validate_address(address: str | None) -> None:
    if is_blank(address):
        raise InvalidArgumentError("Address is required", field="address")

    trimmed = address.strip()
    if len(trimmed) < ADDRESS_MIN_LENGTH:
        raise InvalidArgumentError(
            f"Address must have at least {ADDRESS_MIN_LENGTH} characters", field="address"
        )
    if len(trimmed) > ADDRESS_MAX_LENGTH:
        raise InvalidArgumentError(
            f"Address cannot exceed {ADDRESS_MAX_LENGTH} characters", field="address"
        )


# Record fields


def require_text(field: str, value: str | None, message: str = "is required") -> None:
    if is_blank(value):
        raise ValidationError(field, message)


def require_positive(field: str, value: Decimal | int | None) -> None:
    """Reject a missing value or one that is not strictly positive."""
    if value is None or value <= 0:
        raise ValidationError(field, "must be greater than zero")


def validate_positive_if_set(field: str, value: Decimal | int | None) -> None:
    if value is not None and value <= 0:
        raise ValidationError(field, "must be greater than zero")


def validate_non_negative_if_set(field: str, value: Decimal | int | None) -> None:
    if value is not None and value < 0:
        raise ValidationError(field, "cannot be negative")


def validate_download_url(url: str | None, allow_any_scheme: bool = False) -> None:
    """
    Require a download URL and, unless explicitly allowed, an http(s) scheme.

    Raises:
        ValidationError: If the URL is blank or has an unsupported scheme
    """
    require_text("download_url", url, "is required for digital products")
    if not allow_any_scheme and not url.startswith(ALLOWED_URL_SCHEMES):
        raise ValidationError("download_url", "must start with http:// or https://")


def validate_status(status: str | None, allowed: tuple[str, ...]) -> None:
    if status is not None and status not in allowed:
        raise ValidationError("status", f"must be one of {', '.join(allowed)}")


def validate_boleto_code(code: str | None) -> None:
    require_text("code", code, "boleto code is required")
    if len(code) < BOLETO_CODE_MIN_LENGTH:
        raise ValidationError(
            "code", f"must have at least {BOLETO_CODE_MIN_LENGTH} characters"
        )


def validate_due_date_format(due_date: str | None) -> None:
    """Blank due dates pass; anything else must read DD/MM/YYYY."""
    if is_blank(due_date):
        return
    if not DUE_DATE_PATTERN.fullmatch(due_date.strip()):
        raise ValidationError("due_date", "must be in DD/MM/YYYY format")
