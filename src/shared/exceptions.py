"""Custom exceptions for the application."""
from enum import StrEnum


class ConstraintKind(StrEnum):
    """Which rule of a constrained value was violated."""
    EMPTY_INPUT = "EmptyInput"
    TOO_LONG = "TooLong"
    INVALID_CHARACTERS = "InvalidCharacters"
    INVALID_FORMAT = "InvalidFormat"


class ConstraintViolation(ValueError):
    """Raised when a raw value breaks one rule of a constrained type."""

    def __init__(self, kind: ConstraintKind, message: str):
        """
        Initialize the exception.

        Args:
            kind: The rule that was violated
            message: Human-readable description, shown to users as-is
        """
        super().__init__(message)
        self.kind = kind
        self.message = message


class ValidationErrorKind(StrEnum):
    """Error kinds surfaced by the annual review validation pipeline."""
    INVALID_NAME = "InvalidName"
    INVALID_EMAIL = "InvalidEmail"
    INVALID_ADDRESS = "InvalidAddress"
    INVALID_DATE = "InvalidDate"
    EMPTY_INPUT = "EmptyInput"
    INVALID_INPUT = "InvalidInput"


class AnnualReviewValidationError(Exception):
    """Base class for every failure raised while validating annual review input."""

    kind: ValidationErrorKind
    label: str

    def __init__(self, description: str):
        """
        Initialize the exception.

        Args:
            description: Human-readable description of the first violated rule
        """
        super().__init__(f"{self.label}: {description}")
        self.description = description

    @classmethod
    def wrap(cls, violation: ConstraintViolation) -> "AnnualReviewValidationError":
        """Widen a constraint violation into this error kind, keeping its message."""
        return cls(violation.message)


class InvalidName(AnnualReviewValidationError):
    """Raised when a person, trust or company name fails validation."""
    kind = ValidationErrorKind.INVALID_NAME
    label = "Invalid name"


class InvalidEmail(AnnualReviewValidationError):
    """Raised when an email address fails validation."""
    kind = ValidationErrorKind.INVALID_EMAIL
    label = "Invalid email"


class InvalidAddress(AnnualReviewValidationError):
    """Raised when a postcode or address fragment fails validation."""
    kind = ValidationErrorKind.INVALID_ADDRESS
    label = "Invalid address"


class InvalidDate(AnnualReviewValidationError):
    """Raised when a review date cannot be accepted."""
    kind = ValidationErrorKind.INVALID_DATE
    label = "Invalid date"


class EmptyInput(AnnualReviewValidationError):
    """Raised when a required field or a required number of parties is missing."""
    kind = ValidationErrorKind.EMPTY_INPUT
    label = "Empty Input"


class InvalidInput(AnnualReviewValidationError):
    """Raised when input cannot be assembled into a domain value for any other reason."""
    kind = ValidationErrorKind.INVALID_INPUT
    label = "Invalid input"
