"""CPF (Brazilian individual taxpayer id) check-digit arithmetic."""

import re

_NON_DIGITS = re.compile(r"[^0-9]")
_FORMAT = re.compile(r"^([0-9]{3})([0-9]{3})([0-9]{3})([0-9]{2})$")

CPF_LENGTH = 11


def clean_cpf(value: str) -> str:
    """Strip everything but ASCII digits."""
    return _NON_DIGITS.sub("", value)


def _check_digit(digits: str) -> int:
    # Weights run from len+1 down to 2
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    rest = 11 - (total % 11)
    return 0 if rest in (10, 11) else rest


def compute_check_digits(base: str) -> str:
    """
    Compute both check digits for a 9-digit CPF base.

    Args:
        base: First nine digits

    Returns:
        Two-character string with the check digits

    Raises:
        ValueError: If base is not exactly nine digits
    """
    if len(base) != 9 or not base.isascii() or not base.isdigit():
        raise ValueError("CPF base must have 9 digits")
    first = _check_digit(base)
    second = _check_digit(base + str(first))
    return f"{first}{second}"


def has_repeated_digits(digits: str) -> bool:
    return len(set(digits)) == 1


def has_valid_check_digits(digits: str) -> bool:
    """Compare positions 10 and 11 of a cleaned CPF with the computed digits."""
    if len(digits) != CPF_LENGTH or not (digits.isascii() and digits.isdigit()):
        return False
    return compute_check_digits(digits[:9]) == digits[9:]


def is_valid_cpf(value: str | None) -> bool:
    """Full CPF check: length, repeated digits and checksum."""
    if not value:
        return False
    digits = clean_cpf(value)
    if len(digits) != CPF_LENGTH or has_repeated_digits(digits):
        return False
    return has_valid_check_digits(digits)


def format_cpf(value: str) -> str:
    """Format 11 digits as DDD.DDD.DDD-DD; other inputs are returned untouched."""
    return _FORMAT.sub(r"\1.\2.\3-\4", value)
