"""Validated annual review information: the output of the book review meeting input stage."""
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, model_serializer, model_validator

from src.annual_review.core.domain.contact_information import (
    ClientContactInformation,
    ContactChannel,
    validate_client_contact_information,
)
from src.annual_review.core.domain.simple_types import ClientId
from src.client.schemas import UnvalidatedAnnualReviewInformation
from src.shared.exceptions import ConstraintViolation, InvalidDate, InvalidInput

DUE_DATE_FORMAT = "%d/%m/%Y"


def describe_date_format(date_format: str) -> str:
    """Human-readable form of a strptime format, e.g. "%d/%m/%Y" -> "DD/MM/YYYY"."""
    return date_format.replace("%d", "DD").replace("%m", "MM").replace("%Y", "YYYY")


def parse_review_date(raw: str, field_name: str, date_format: str = DUE_DATE_FORMAT) -> date:
    """
    Parse a review date or raise InvalidDate.

    Args:
        raw: Date as received from the caller
        field_name: Used in the error message, e.g. "Annual review due date"
        date_format: strptime format the date must follow

    Returns:
        The calendar date.
    """
    try:
        return datetime.strptime(raw, date_format).date()
    except (TypeError, ValueError) as e:
        raise InvalidDate(
            f"{field_name} '{raw}' is not a valid date in {describe_date_format(date_format)} format."
        ) from e


class ReviewCalendar(ABC):
    """
    Business calendar rules that need the client's persisted review history.

    Implementations decide whether a due date is acceptable given the last
    review (not in the past, within a year of the last review, tax year
    boundaries). Nothing in this package implements these rules.
    """

    @abstractmethod
    def check(self, due_date: date, last_review_date: date) -> None:
        """
        Accept the due date or reject it.

        Raises:
            InvalidDate: If the due date breaks a calendar rule.
        """
        pass


class ValidatedAnnualReviewDueDate(BaseModel):
    """An annual review due date that parsed as a real calendar date."""
    value: date

    model_config = {"frozen": True}

    @classmethod
    def of(cls, raw: str, date_format: str = DUE_DATE_FORMAT) -> "ValidatedAnnualReviewDueDate":
        return cls(value=parse_review_date(raw, "Annual review due date", date_format))

    @model_validator(mode="before")
    @classmethod
    def accept_bare_date(cls, data: Any) -> Any:
        if isinstance(data, (date, str)):
            return {"value": data}
        return data

    @model_serializer
    def serialize_value(self) -> date:
        return self.value

    def formatted(self, date_format: str = DUE_DATE_FORMAT) -> str:
        return self.value.strftime(date_format)


def _client_id(raw: str | None) -> ClientId | None:
    if raw is None:
        return None
    try:
        return ClientId.of(raw)
    except ConstraintViolation as e:
        raise InvalidInput.wrap(e) from e


class ValidatedAnnualReviewInformation(BaseModel):
    """
    Fully validated input of the book review meeting workflow.

    Holds a due date that parsed and exactly one validated contact record.
    Instances are immutable and serialize to plain JSON for the collaborators
    that send invites and record workflow events.
    """
    annual_review_due_date: ValidatedAnnualReviewDueDate
    client_contact_information: ClientContactInformation
    client_id: ClientId | None = None

    model_config = {"frozen": True}

    @classmethod
    def of(
        cls,
        unvalidated: UnvalidatedAnnualReviewInformation,
        calendar: ReviewCalendar | None = None,
        date_format: str = DUE_DATE_FORMAT,
    ) -> "ValidatedAnnualReviewInformation":
        """
        Validate the workflow envelope. Stops at the first failure.

        Order: due date, contact information, client id, then the calendar
        check against the last review date when a calendar is supplied.
        Without a calendar the last review date is not inspected and the
        calendar rules remain the caller's responsibility.

        Args:
            unvalidated: Envelope as received from the trigger
            calendar: Optional business calendar backed by persisted history
            date_format: strptime format of both dates

        Returns:
            The validated, immutable review information.

        Raises:
            AnnualReviewValidationError: One of InvalidName, InvalidEmail,
                InvalidAddress, InvalidDate, EmptyInput or InvalidInput.
        """
        due_date = ValidatedAnnualReviewDueDate.of(unvalidated.annual_review_due_date, date_format)
        contact_information = validate_client_contact_information(
            unvalidated.client_contact_information
        )
        client_id = _client_id(unvalidated.client_id)

        if calendar is not None:
            last_review_date = parse_review_date(
                unvalidated.last_annual_review_date, "Last annual review date", date_format
            )
            calendar.check(due_date.value, last_review_date)

        return cls(
            annual_review_due_date=due_date,
            client_contact_information=contact_information,
            client_id=client_id,
        )

    @property
    def contact_type(self) -> str:
        return self.client_contact_information.contact_type

    @property
    def channel(self) -> ContactChannel:
        return self.client_contact_information.channel
