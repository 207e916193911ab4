"""Tests for ValidatedAnnualReviewInformation and the due date."""
from datetime import date

import pytest
from pydantic import ValidationError

from src.annual_review.core.domain.annual_review import (
    ReviewCalendar,
    ValidatedAnnualReviewDueDate,
    ValidatedAnnualReviewInformation,
    parse_review_date,
)
from src.annual_review.core.domain.contact_information import (
    ContactChannel,
    JointIndividualsPostContact,
    SingleIndividualElectronicContact,
)
from src.client.schemas import (
    UnvalidatedJointIndividualsElectronicContact,
    UnvalidatedJointIndividualsPostContact,
    UnvalidatedMultipleTrusteesElectronicContact,
    UnvalidatedSingleIndividualElectronicContact,
)
from src.shared.exceptions import (
    EmptyInput,
    InvalidDate,
    InvalidEmail,
    InvalidInput,
    InvalidName,
    ValidationErrorKind,
)
from tests.builders import CLIENT_ID, create_envelope, create_unvalidated_postal_address


class RecordingCalendar(ReviewCalendar):
    """Calendar stub that remembers what it was asked to check."""

    def __init__(self, error: Exception | None = None):
        self.calls = []
        self.error = error

    def check(self, due_date: date, last_review_date: date) -> None:
        self.calls.append((due_date, last_review_date))
        if self.error is not None:
            raise self.error


def create_single_electronic(first_name: str = "John", email: str = "john@example.com"):
    """Helper to create a raw single individual electronic payload."""
    return UnvalidatedSingleIndividualElectronicContact(first_name=first_name, email_address=email)


class TestValidatedAnnualReviewDueDate:
    """Tests for the due date."""

    def test_valid_due_date(self):
        """Test parsing a DD/MM/YYYY due date."""
        due_date = ValidatedAnnualReviewDueDate.of("01/06/2025")
        assert due_date.value == date(2025, 6, 1)
        assert due_date.formatted() == "01/06/2025"

    def test_impossible_calendar_date(self):
        """Test that 31 February is rejected as an invalid date."""
        with pytest.raises(InvalidDate) as exc_info:
            ValidatedAnnualReviewDueDate.of("31/02/2025")
        assert exc_info.value.kind == ValidationErrorKind.INVALID_DATE
        assert exc_info.value.description == (
            "Annual review due date '31/02/2025' is not a valid date in DD/MM/YYYY format."
        )

    def test_iso_date_is_rejected(self):
        """Test that ISO formatted dates are rejected by default."""
        with pytest.raises(InvalidDate):
            ValidatedAnnualReviewDueDate.of("2025-06-01")

    def test_empty_date_is_rejected(self):
        """Test that an empty due date is an invalid date."""
        with pytest.raises(InvalidDate):
            ValidatedAnnualReviewDueDate.of("")

    def test_alternative_format(self):
        """Test parsing with a configured date format."""
        due_date = ValidatedAnnualReviewDueDate.of("2025-06-01", date_format="%Y-%m-%d")
        assert due_date.value == date(2025, 6, 1)

    def test_parse_review_date_names_the_field(self):
        """Test that the error message names the offending field."""
        with pytest.raises(InvalidDate, match="Last annual review date"):
            parse_review_date("not a date", "Last annual review date")


class TestValidatedAnnualReviewInformation:
    """Tests for validating the whole workflow envelope."""

    def test_single_individual_electronic_succeeds(self):
        """Test validating a single individual contacted by email."""
        # Arrange
        envelope = create_envelope(create_single_electronic())

        # Act
        info = ValidatedAnnualReviewInformation.of(envelope)

        # Assert
        assert info.annual_review_due_date.value == date(2025, 6, 1)
        assert isinstance(info.client_contact_information, SingleIndividualElectronicContact)
        assert info.contact_type == "SingleIndividualElectronicContact"
        assert info.channel == ContactChannel.ELECTRONIC
        assert info.client_id is None

    def test_joint_individuals_with_invalid_email_fails(self):
        """Test that one bad email fails the whole envelope."""
        envelope = create_envelope(
            UnvalidatedJointIndividualsElectronicContact(
                primary_contact_first_name="John",
                individual_two_first_name="Jane",
                primary_contact_email_address="john@example.com",
                individual_two_email_address="invalid-email",
            )
        )
        with pytest.raises(InvalidEmail):
            ValidatedAnnualReviewInformation.of(envelope)

    def test_multiple_trustees_without_trustees_fails(self):
        """Test that an empty trustee list fails with EmptyInput."""
        envelope = create_envelope(
            UnvalidatedMultipleTrusteesElectronicContact(trust_name="Doe Family Trust", trustees=[])
        )
        with pytest.raises(EmptyInput) as exc_info:
            ValidatedAnnualReviewInformation.of(envelope)
        assert "at least two trustees" in exc_info.value.description

    def test_post_contact_with_empty_address_line_fails(self):
        """Test that a postal contact with no address line one fails."""
        envelope = create_envelope(
            UnvalidatedJointIndividualsPostContact(
                primary_contact_first_name="John",
                individual_two_first_name="Jane",
                postal_address=create_unvalidated_postal_address(address_line_one=""),
            )
        )
        with pytest.raises(EmptyInput):
            ValidatedAnnualReviewInformation.of(envelope)

    def test_post_contact_succeeds(self):
        """Test validating joint individuals contacted by post."""
        envelope = create_envelope(
            UnvalidatedJointIndividualsPostContact(
                primary_contact_first_name="John",
                individual_two_first_name="Jane",
                postal_address=create_unvalidated_postal_address(),
            )
        )

        info = ValidatedAnnualReviewInformation.of(envelope)

        assert isinstance(info.client_contact_information, JointIndividualsPostContact)
        assert info.channel == ContactChannel.POST

    def test_invalid_due_date_fails(self):
        """Test that an impossible due date fails the envelope."""
        envelope = create_envelope(create_single_electronic(), due_date="31/02/2025")
        with pytest.raises(InvalidDate):
            ValidatedAnnualReviewInformation.of(envelope)

    def test_due_date_is_checked_before_contact(self):
        """Test that the date error wins over a contact error."""
        envelope = create_envelope(create_single_electronic(first_name="J0hn"), due_date="2025-06-01")
        with pytest.raises(InvalidDate):
            ValidatedAnnualReviewInformation.of(envelope)

    def test_contact_errors_surface_unchanged(self):
        """Test that contact errors keep their kind."""
        envelope = create_envelope(create_single_electronic(first_name="J0hn"))
        with pytest.raises(InvalidName):
            ValidatedAnnualReviewInformation.of(envelope)

    def test_last_review_date_is_not_inspected_without_calendar(self):
        """Test that the last review date is ignored when no calendar is injected."""
        envelope = create_envelope(create_single_electronic(), last_review_date="garbage")
        info = ValidatedAnnualReviewInformation.of(envelope)
        assert info.annual_review_due_date.value == date(2025, 6, 1)

    def test_is_immutable(self):
        """Test that validated information cannot be changed."""
        info = ValidatedAnnualReviewInformation.of(create_envelope(create_single_electronic()))
        with pytest.raises(ValidationError):
            info.client_id = None


class TestClientId:
    """Tests for the optional client identifier on the envelope."""

    def test_valid_client_id(self):
        """Test that a canonical UUID client id is kept."""
        envelope = create_envelope(create_single_electronic(), client_id=CLIENT_ID)
        info = ValidatedAnnualReviewInformation.of(envelope)
        assert info.client_id.value == CLIENT_ID

    def test_invalid_client_id(self):
        """Test that a malformed client id is invalid input."""
        envelope = create_envelope(create_single_electronic(), client_id="client-42")
        with pytest.raises(InvalidInput) as exc_info:
            ValidatedAnnualReviewInformation.of(envelope)
        assert exc_info.value.kind == ValidationErrorKind.INVALID_INPUT

    def test_contact_is_checked_before_client_id(self):
        """Test that contact errors win over client id errors."""
        envelope = create_envelope(create_single_electronic(email="nope"), client_id="client-42")
        with pytest.raises(InvalidEmail):
            ValidatedAnnualReviewInformation.of(envelope)


class TestReviewCalendar:
    """Tests for the injected calendar check."""

    def test_calendar_receives_parsed_dates(self):
        """Test that the calendar is given both parsed dates."""
        # Arrange
        calendar = RecordingCalendar()
        envelope = create_envelope(create_single_electronic())

        # Act
        ValidatedAnnualReviewInformation.of(envelope, calendar=calendar)

        # Assert
        assert calendar.calls == [(date(2025, 6, 1), date(2024, 6, 1))]

    def test_calendar_rejection_propagates(self):
        """Test that a calendar rejection reaches the caller unchanged."""
        calendar = RecordingCalendar(error=InvalidDate("Due date is in the past."))
        envelope = create_envelope(create_single_electronic())

        with pytest.raises(InvalidDate) as exc_info:
            ValidatedAnnualReviewInformation.of(envelope, calendar=calendar)

        assert exc_info.value.description == "Due date is in the past."

    def test_invalid_last_review_date_with_calendar(self):
        """Test that an unparseable last review date fails before the calendar runs."""
        calendar = RecordingCalendar()
        envelope = create_envelope(create_single_electronic(), last_review_date="32/01/2024")

        with pytest.raises(InvalidDate) as exc_info:
            ValidatedAnnualReviewInformation.of(envelope, calendar=calendar)

        assert "Last annual review date" in exc_info.value.description
        assert calendar.calls == []

    def test_calendar_not_consulted_for_invalid_contact(self):
        """Test that the calendar is skipped once validation has failed."""
        calendar = RecordingCalendar()
        envelope = create_envelope(create_single_electronic(email="invalid-email"))

        with pytest.raises(InvalidEmail):
            ValidatedAnnualReviewInformation.of(envelope, calendar=calendar)

        assert calendar.calls == []


class TestSerialization:
    """Tests for handing validated information to other components."""

    def test_dumps_to_plain_json(self):
        """Test that validated information dumps to plain JSON values."""
        envelope = create_envelope(create_single_electronic(), client_id=CLIENT_ID)
        info = ValidatedAnnualReviewInformation.of(envelope)

        dumped = info.model_dump(mode="json")

        assert dumped == {
            "annual_review_due_date": "2025-06-01",
            "client_contact_information": {
                "contact_type": "SingleIndividualElectronicContact",
                "first_name": "John",
                "email_address": "john@example.com",
            },
            "client_id": CLIENT_ID,
        }

    def test_json_round_trip(self):
        """Test that dumped information validates back to an equal value."""
        envelope = create_envelope(
            UnvalidatedJointIndividualsPostContact(
                primary_contact_first_name="John",
                individual_two_first_name="Jane",
                postal_address=create_unvalidated_postal_address(),
            )
        )
        info = ValidatedAnnualReviewInformation.of(envelope)

        restored = ValidatedAnnualReviewInformation.model_validate_json(info.model_dump_json())

        assert restored == info
