"""
Constrained scalar types used by the annual review domain.

Each type wraps a single string and can only be obtained through its
``of`` smart constructor (or through pydantic validation, which runs the
same rules). Rules are checked in a fixed order and the first violation
wins: emptiness, length, forbidden characters, then full grammar.
"""
import re
from abc import abstractmethod
from typing import Any, ClassVar, Self

from pydantic import BaseModel, field_validator, model_serializer, model_validator

from src.shared.exceptions import ConstraintKind, ConstraintViolation

DIGITS = re.compile(r"\d")
PERSON_NAME_FORBIDDEN = re.compile(r"[!£$%^&*(){}\\/+]")
ADDRESS_FRAGMENT_FORBIDDEN = re.compile(r"[!£$%^*{}\\/_]")
TRUST_OR_COMPANY_NAME_FORBIDDEN = re.compile(r"[!£$%^*{}\\/_]")
EMAIL_ADDRESS = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9-]+\.[a-zA-Z]{2,}")
UK_POSTCODE = re.compile(r"[A-Z]{1,2}\d[A-Z\d]? ?\d[A-Z]{2}")
CANONICAL_UUID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def _check_length(raw: str, max_length: int, empty_message: str, too_long_message: str) -> None:
    if not raw:
        raise ConstraintViolation(ConstraintKind.EMPTY_INPUT, empty_message)
    if len(raw) > max_length:
        raise ConstraintViolation(ConstraintKind.TOO_LONG, too_long_message)


class ConstrainedString(BaseModel):
    """
    Base for single-string value objects.

    Subclasses implement ``check`` and raise ConstraintViolation for the
    first rule the raw string breaks. Instances are frozen, serialize to
    the bare string and can be parsed back from one.
    """
    value: str

    model_config = {"frozen": True}

    @classmethod
    @abstractmethod
    def check(cls, raw: str) -> None:
        """Raise ConstraintViolation for the first rule ``raw`` breaks."""

    @classmethod
    def of(cls, raw: str) -> Self:
        """
        Smart constructor.

        Args:
            raw: Unvalidated input string

        Returns:
            A validated, immutable instance wrapping ``raw`` unchanged.

        Raises:
            ConstraintViolation: If any rule of the type is violated.
        """
        cls.check(raw)
        return cls.model_construct(value=raw)

    @model_validator(mode="before")
    @classmethod
    def accept_bare_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"value": data}
        return data

    @field_validator("value")
    @classmethod
    def enforce_constraints(cls, v: str) -> str:
        cls.check(v)
        return v

    @model_serializer
    def serialize_value(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class PersonName(ConstrainedString):
    """A person's first name: 1-100 characters, no digits, no unusual punctuation."""

    max_length: ClassVar[int] = 100

    @classmethod
    def check(cls, raw: str) -> None:
        _check_length(
            raw,
            cls.max_length,
            "Constrained string 100 characters must have at least one character.",
            "Constrained string 100 must not have more than 100 characters.",
        )
        if DIGITS.search(raw):
            raise ConstraintViolation(
                ConstraintKind.INVALID_CHARACTERS,
                "Constrained name string 100 must not have any numbers in it.",
            )
        if PERSON_NAME_FORBIDDEN.search(raw):
            raise ConstraintViolation(
                ConstraintKind.INVALID_CHARACTERS,
                "Constrained name string 100 must not have any unusual special characters "
                "such as ! £ $ % ^ & * () {} \\ / _ + in it.",
            )


class AddressFragment(ConstrainedString):
    """
    One line, city, county or country of a postal address.

    Digits are allowed (flat numbers, "2nd Floor") and so are ``&`` and
    brackets; the underscore is not.
    """

    max_length: ClassVar[int] = 100

    @classmethod
    def check(cls, raw: str) -> None:
        _check_length(
            raw,
            cls.max_length,
            "Address fragment must have at least one character.",
            "Address fragment must not have more than 100 characters.",
        )
        if ADDRESS_FRAGMENT_FORBIDDEN.search(raw):
            raise ConstraintViolation(
                ConstraintKind.INVALID_CHARACTERS,
                "Address fragment must not have any unusual special characters "
                "such as ! £ $ % ^ * {} \\ / _ in it.",
            )


class TrustOrCompanyName(ConstrainedString):
    """Legal name of a trust or company: 1-200 characters, digits allowed."""

    max_length: ClassVar[int] = 200

    @classmethod
    def check(cls, raw: str) -> None:
        _check_length(
            raw,
            cls.max_length,
            "Trust or company name must have at least one character.",
            "Trust or company name must not have more than 200 characters.",
        )
        if TRUST_OR_COMPANY_NAME_FORBIDDEN.search(raw):
            raise ConstraintViolation(
                ConstraintKind.INVALID_CHARACTERS,
                "Trust or company name must not have any unusual special characters "
                "such as ! £ $ % ^ * {} \\ / _ in it.",
            )


class Postcode(ConstrainedString):
    """A UK postcode, e.g. "SW1A 1AA" or "SW1A1AA". Upper case only."""

    @classmethod
    def check(cls, raw: str) -> None:
        if not raw:
            raise ConstraintViolation(ConstraintKind.EMPTY_INPUT, "Postcode must not be empty.")
        if not UK_POSTCODE.fullmatch(raw):
            raise ConstraintViolation(ConstraintKind.INVALID_FORMAT, "Invalid UK postcode format.")


class EmailAddress(ConstrainedString):
    """An email address of the form local@domain.tld."""

    @classmethod
    def check(cls, raw: str) -> None:
        if not EMAIL_ADDRESS.fullmatch(raw):
            raise ConstraintViolation(ConstraintKind.INVALID_FORMAT, "Invalid email address format.")


class ClientId(ConstrainedString):
    """Client identifier in canonical UUID text form."""

    @classmethod
    def check(cls, raw: str) -> None:
        if not raw:
            raise ConstraintViolation(ConstraintKind.EMPTY_INPUT, "Client ID must not be empty.")
        if not CANONICAL_UUID.fullmatch(raw):
            raise ConstraintViolation(
                ConstraintKind.INVALID_FORMAT,
                "Client ID must be a UUID in canonical 8-4-4-4-12 form.",
            )
