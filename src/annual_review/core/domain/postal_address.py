"""UK postal address assembled from constrained fragments."""
import re

from pydantic import BaseModel, Field

from src.annual_review.core.domain.simple_types import AddressFragment, Postcode
from src.shared.exceptions import (
    ConstraintViolation,
    EmptyInput,
    InvalidAddress,
    InvalidInput,
)

SIGNED_INTEGER = re.compile(r"[+-]?\d+")
BOUNDED_SIGNED_INTEGER = re.compile(r"[+-]?\d{1,10}")

HOUSE_NUMBER_MIN = -(2**31)
HOUSE_NUMBER_MAX = 2**31 - 1

MANDATORY_FIELDS_MESSAGE = "Address line 1, city, and postcode must not be empty."


def _blank_to_none(raw: str | None) -> str | None:
    """Treat an empty optional field the same as a missing one."""
    return raw if raw else None


def _fragment(raw: str | None) -> AddressFragment | None:
    if raw is None:
        return None
    try:
        return AddressFragment.of(raw)
    except ConstraintViolation as e:
        raise InvalidAddress.wrap(e) from e


def _house_number(raw: str | None) -> int | None:
    if raw is None:
        return None
    if not SIGNED_INTEGER.fullmatch(raw):
        raise InvalidInput(f"House number must be a whole number, got '{raw}'.")
    out_of_range = f"House number must be between {HOUSE_NUMBER_MIN} and {HOUSE_NUMBER_MAX}."
    # At most ten digits reach int()
    if not BOUNDED_SIGNED_INTEGER.fullmatch(raw):
        raise InvalidInput(out_of_range)
    number = int(raw)
    if not HOUSE_NUMBER_MIN <= number <= HOUSE_NUMBER_MAX:
        raise InvalidInput(out_of_range)
    return number


class PostalAddress(BaseModel):
    """
    A fully validated UK postal address.

    Address line one, city and postcode are mandatory; every other line is
    optional. Instances only come out of ``of``, which validates every
    provided field, so there is no partially valid address.
    """
    house_name: AddressFragment | None = None
    house_number: int | None = Field(default=None, ge=HOUSE_NUMBER_MIN, le=HOUSE_NUMBER_MAX)
    address_line_one: AddressFragment
    address_line_two: AddressFragment | None = None
    address_line_three: AddressFragment | None = None
    address_line_four: AddressFragment | None = None
    city: AddressFragment
    county: AddressFragment | None = None
    country: AddressFragment | None = None
    postcode: Postcode = Field(..., description="UK postcode")

    model_config = {"frozen": True}

    @classmethod
    def of(
        cls,
        address_line_one: str,
        city: str,
        postcode: str,
        house_name: str | None = None,
        house_number: str | None = None,
        address_line_two: str | None = None,
        address_line_three: str | None = None,
        address_line_four: str | None = None,
        county: str | None = None,
        country: str | None = None,
    ) -> "PostalAddress":
        """
        Validate raw address fields and assemble a PostalAddress.

        Checks run in this order and stop at the first failure: mandatory
        fields present, postcode grammar, then each provided field in
        address order.

        Raises:
            EmptyInput: If address line one, city or postcode is empty.
            InvalidAddress: If the postcode or any address fragment is invalid.
            InvalidInput: If the house number is not a whole number in the
                signed 32-bit range.
        """
        if not address_line_one or not city or not postcode:
            raise EmptyInput(MANDATORY_FIELDS_MESSAGE)

        try:
            validated_postcode = Postcode.of(postcode)
        except ConstraintViolation as e:
            raise InvalidAddress.wrap(e) from e

        return cls(
            house_name=_fragment(_blank_to_none(house_name)),
            house_number=_house_number(_blank_to_none(house_number)),
            address_line_one=_fragment(address_line_one),
            address_line_two=_fragment(_blank_to_none(address_line_two)),
            address_line_three=_fragment(_blank_to_none(address_line_three)),
            address_line_four=_fragment(_blank_to_none(address_line_four)),
            city=_fragment(city),
            county=_fragment(_blank_to_none(county)),
            country=_fragment(_blank_to_none(country)),
            postcode=validated_postcode,
        )
