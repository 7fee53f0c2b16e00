"""Domain errors for LojaHub."""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize domain error.

        Args:
            message: Error message (must be PII-safe)
        """
        super().__init__(message)
        self.message = message


class InvalidArgumentError(DomainError, ValueError):
    """Raised when a caller-supplied token or field is missing or malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """
        Initialize invalid argument error.

        Args:
            message: Error message naming the violated constraint
            field: Offending field name, when the error concerns a single field
        """
        super().__init__(message)
        self.field = field


class ValidationError(DomainError, ValueError):
    """Raised when a built record breaks a business rule."""

    def __init__(self, field: str, message: str) -> None:
        """
        Initialize validation error.

        Args:
            field: Field name that failed validation
            message: Error message (must be PII-safe)
        """
        super().__init__(f"{field}: {message}")
        self.field = field
        self.validation_message = message
