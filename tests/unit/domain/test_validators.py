"""Test single-field validators."""

from decimal import Decimal

import pytest

from loja_online.domain.errors import InvalidArgumentError, ValidationError
from loja_online.domain.validators import (
    require_positive,
    to_decimal,
    to_int,
    validate_address,
    validate_boleto_code,
    validate_cpf,
    validate_download_url,
    validate_due_date_format,
    validate_email,
    validate_name,
    validate_non_negative_if_set,
    validate_password,
    validate_positive_if_set,
    validate_status,
)


class TestValidateName:
    """Test customer name rules."""

    @pytest.mark.parametrize("name", ["Jo", "Maria da Silva", "  José Ávila  ", "a" * 100])
    def test_accepts_valid(self, name):
        validate_name(name)

    @pytest.mark.parametrize(
        "name, message",
        [
            (None, "Name is required"),
            ("   ", "Name is required"),
            (" J ", "at least 2 characters"),
            ("a" * 101, "cannot exceed 100 characters"),
            ("Maria 2", "only letters and spaces"),
            ("Ana-Paula", "only letters and spaces"),
        ],
    )
    def test_rejects_invalid(self, name, message):
        with pytest.raises(InvalidArgumentError, match=message) as exc_info:
            validate_name(name)
        assert exc_info.value.field == "name"


class TestValidateEmail:
    """Test customer e-mail rules."""

    @pytest.mark.parametrize("email", ["a@b.co", " Foo@Bar.COM ", "first.last+tag@mail.example.com.br"])
    def test_accepts_valid(self, email):
        validate_email(email)

    @pytest.mark.parametrize(
        "email, message",
        [
            (None, "Email is required"),
            ("", "Email is required"),
            ("no-at-sign.com", "Invalid email format"),
            ("a@b.c", "Invalid email format"),
            ("a b@c.com", "Invalid email format"),
            ("a" * 140 + "@example.com", "cannot exceed 150 characters"),
        ],
    )
    def test_rejects_invalid(self, email, message):
        with pytest.raises(InvalidArgumentError, match=message):
            validate_email(email)


class TestValidatePassword:
    """Test password rules."""

    def test_accepts_bounds(self):
        validate_password("123456")
        validate_password("x" * 50)

    def test_length_counts_surrounding_spaces(self):
        """Passwords are measured untrimmed."""
        validate_password("  abcd")

    @pytest.mark.parametrize(
        "password, message",
        [
            (None, "Password is required"),
            ("      ", "Password is required"),
            ("12345", "at least 6 characters"),
            ("x" * 51, "cannot exceed 50 characters"),
        ],
    )
    def test_rejects_invalid(self, password, message):
        with pytest.raises(InvalidArgumentError, match=message):
            validate_password(password)

    def test_error_never_echoes_password(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_password("abc12")
        assert "abc12" not in str(exc_info.value)


class TestValidateCpf:
    """Test CPF rules."""

    def test_accepts_valid(self, valid_cpf):
        validate_cpf(valid_cpf)
        validate_cpf("11144477735")

    @pytest.mark.parametrize(
        "cpf, message",
        [
            (None, "CPF is required"),
            ("  ", "CPF is required"),
            ("529.982.247", "CPF must have 11 digits"),
            ("111.111.111-11", "all digits are equal"),
            ("529.982.247-52", "check digits do not match"),
        ],
    )
    def test_rejects_invalid(self, cpf, message):
        with pytest.raises(InvalidArgumentError, match=message) as exc_info:
            validate_cpf(cpf)
        assert exc_info.value.field == "cpf"


class TestValidateAddress:
    """Test address rules."""

    def test_accepts_valid(self):
        validate_address("Rua A, 123")
        validate_address("x" * 200)

    @pytest.mark.parametrize(
        "address, message",
        [
            (None, "Address is required"),
            ("", "Address is required"),
            ("  Rua A 1  ", "at least 10 characters"),
            ("x" * 201, "cannot exceed 200 characters"),
        ],
    )
    def test_rejects_invalid(self, address, message):
        with pytest.raises(InvalidArgumentError, match=message):
            validate_address(address)


class TestNumericRules:
    """Test record-level numeric rules."""

    @pytest.mark.parametrize("value", [None, Decimal("0"), Decimal("-0.01")])
    def test_require_positive_rejects(self, value):
        with pytest.raises(ValidationError, match="price: must be greater than zero"):
            require_positive("price", value)

    def test_require_positive_accepts(self):
        require_positive("price", Decimal("0.01"))

    def test_positive_if_set_skips_none(self):
        validate_positive_if_set("weight", None)
        with pytest.raises(ValidationError, match="weight: must be greater than zero"):
            validate_positive_if_set("weight", Decimal("0"))

    def test_non_negative_if_set(self):
        validate_non_negative_if_set("stock", None)
        validate_non_negative_if_set("stock", 0)
        with pytest.raises(ValidationError, match="stock: cannot be negative"):
            validate_non_negative_if_set("stock", -1)


class TestToDecimal:
    """Test numeric coercion."""

    def test_converts_through_string(self):
        assert to_decimal(19.9, "price") == Decimal("19.9")
        assert to_decimal(10, "price") == Decimal("10")
        assert to_decimal(" 5.50 ", "price") == Decimal("5.50")

    def test_keeps_none_and_decimal(self):
        assert to_decimal(None, "price") is None
        value = Decimal("1.23")
        assert to_decimal(value, "price") is value

    @pytest.mark.parametrize("value", ["abc", "10,5", "NaN", "Infinity", True])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(InvalidArgumentError, match="price must be a") as exc_info:
            to_decimal(value, "price")
        assert exc_info.value.field == "price"

    def test_to_int_accepts_whole_numbers(self):
        assert to_int(5, "stock") == 5
        assert to_int(" 12 ", "stock") == 12
        assert to_int("-3", "stock") == -3
        assert to_int(None, "stock") is None

    @pytest.mark.parametrize("value", ["abc", "1.5", 1.5, True, Decimal("2")])
    def test_to_int_rejects_other_values(self, value):
        with pytest.raises(InvalidArgumentError, match="stock must be an integer") as exc_info:
            to_int(value, "stock")
        assert exc_info.value.field == "stock"


class TestTextRules:
    """Test URL, status, boleto code and due date rules."""

    def test_download_url_requires_http_scheme(self):
        validate_download_url("https://cdn.example.com/book.pdf")
        validate_download_url("http://cdn.example.com/book.pdf")
        with pytest.raises(ValidationError, match="must start with http:// or https://"):
            validate_download_url("ftp://x")

    def test_download_url_scheme_can_be_skipped(self):
        validate_download_url("ftp://x", allow_any_scheme=True)

    @pytest.mark.parametrize("url", [None, "", "   "])
    def test_download_url_required_even_when_scheme_skipped(self, url):
        with pytest.raises(ValidationError, match="download_url: is required"):
            validate_download_url(url, allow_any_scheme=True)

    def test_status_must_be_allowed(self):
        validate_status("PAID", ("PENDING", "PAID"))
        with pytest.raises(ValidationError, match="status: must be one of PENDING, PAID"):
            validate_status("paid", ("PENDING", "PAID"))

    def test_boleto_code(self):
        validate_boleto_code("1234567890")
        with pytest.raises(ValidationError, match="at least 10 characters"):
            validate_boleto_code("123456789")
        with pytest.raises(ValidationError, match="boleto code is required"):
            validate_boleto_code("  ")

    @pytest.mark.parametrize("due_date", [None, "", "  ", "01/02/2025", " 31/12/2030 "])
    def test_due_date_accepts(self, due_date):
        validate_due_date_format(due_date)

    @pytest.mark.parametrize("due_date", ["1/2/2025", "2025-02-01", "01/02/25", "01/02/2025x", "aa/bb/cccc"])
    def test_due_date_rejects(self, due_date):
        with pytest.raises(ValidationError, match="due_date: must be in DD/MM/YYYY format"):
            validate_due_date_format(due_date)
