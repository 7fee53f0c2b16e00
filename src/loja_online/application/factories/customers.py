"""Customer factory with fail-fast field validation and normalization."""

from loja_online.application.observers import log_creation
from loja_online.domain.cpf import clean_cpf
from loja_online.domain.models import Customer
from loja_online.domain.normalization import collapse_whitespace, normalize_email, normalize_name
from loja_online.domain.pipeline import CreationObserver, CreationPipeline
from loja_online.domain.validators import (
    validate_address,
    validate_cpf,
    validate_email,
    validate_name,
    validate_password,
)


def describe_customer(customer: Customer) -> dict[str, str]:
    return {
        "name": customer.name,
        "email": customer.email,
        "document": customer.formatted_cpf,
    }


# Fields are validated before the record exists, so only the describe step remains
CUSTOMER_PIPELINE: CreationPipeline[Customer] = CreationPipeline(
    event="customer_created",
    describe=(describe_customer,),
)


class CustomerFactory:
    """Factory for creating validated customers."""

    @staticmethod
    def create_customer(
        name: str | None,
        email: str | None,
        password: str | None,
        cpf: str | None,
        address: str | None,
        observer: CreationObserver | None = None,
    ) -> Customer:
        """
        Create a customer after validating every field.

        Fields are checked in order (name, email, password, CPF, address) and
        the first failure aborts. On success the name is title-cased, the
        e-mail lower-cased and the address whitespace collapsed. The password
        is stored as given.

        Args:
            name: Full name, letters and spaces only
            email: E-mail address
            password: Password, 6 to 50 characters
            cpf: CPF with or without punctuation
            address: Postal address, 10 to 200 characters
            observer: Receives the creation event; defaults to the structured log

        Returns:
            Validated and normalized customer

        Raises:
            InvalidArgumentError: For the first invalid field
        """
        validate_name(name)
        validate_email(email)
        validate_password(password)
        validate_cpf(cpf)
        validate_address(address)

        customer = Customer(
            name=normalize_name(name),
            email=normalize_email(email),
            password=password,
            cpf=clean_cpf(cpf),
            address=collapse_whitespace(address),
        )

        return CUSTOMER_PIPELINE.run(customer, observer or log_creation)


create_customer = CustomerFactory.create_customer
