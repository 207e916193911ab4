"""
Book review meeting workflow step.

Triggered ahead of a client's annual review due date. Validates the
review information and, if it is valid, returns the events the rest of the
system acts on: the workflow was triggered, and an invite should go out by
email or by post depending on how the client is contacted. Sending the
invites and storing the events happen elsewhere.
"""
from src.annual_review.core.domain.annual_review import (
    DUE_DATE_FORMAT,
    ReviewCalendar,
    ValidatedAnnualReviewInformation,
)
from src.annual_review.core.domain.contact_information import ContactChannel
from src.annual_review.core.domain.events import (
    AnnualReviewEvent,
    AnnualReviewInvite,
    AnnualReviewWorkflowTriggered,
    SendElectronicAnnualReviewInvite,
    SendPostAnnualReviewInvite,
)
from src.annual_review.logging import get_logger
from src.client.schemas import UnvalidatedAnnualReviewInformation
from src.shared.exceptions import AnnualReviewValidationError

logger = get_logger(__name__)


class BookReviewMeetingWorkflow:
    """Service for the input stage of the book review meeting workflow."""

    def __init__(self, calendar: ReviewCalendar | None = None, date_format: str = DUE_DATE_FORMAT):
        """
        Args:
            calendar: Business calendar backed by persisted review history.
                When None, calendar rules are left to the caller.
            date_format: strptime format of the incoming dates.
        """
        self.calendar = calendar
        self.date_format = date_format

    def validate(self, unvalidated: UnvalidatedAnnualReviewInformation) -> ValidatedAnnualReviewInformation:
        """Validate the envelope, logging the outcome. Validation errors are re-raised unchanged."""
        contact_type = unvalidated.client_contact_information.contact_type
        try:
            validated = ValidatedAnnualReviewInformation.of(
                unvalidated, calendar=self.calendar, date_format=self.date_format
            )
        except AnnualReviewValidationError as e:
            logger.warning(
                "Annual review information rejected (%s, %s): %s",
                contact_type, e.kind, e.description,
            )
            raise

        logger.info(
            "Annual review information validated for %s due %s",
            contact_type, validated.annual_review_due_date.formatted(self.date_format),
        )
        return validated

    def run(self, unvalidated: UnvalidatedAnnualReviewInformation) -> list[AnnualReviewEvent]:
        """
        Validate the envelope and produce the workflow's events.

        Returns:
            ``[AnnualReviewWorkflowTriggered, <invite>]`` where the invite is
            electronic or postal according to the client's contact record.

        Raises:
            AnnualReviewValidationError: If the input is invalid. No events
                are produced in that case.
        """
        validated = self.validate(unvalidated)
        triggered = AnnualReviewWorkflowTriggered(
            client_id=validated.client_id,
            annual_review_due_date=validated.annual_review_due_date,
            contact_type=validated.contact_type,
        )
        return [triggered, self.invite_for(validated)]

    @staticmethod
    def invite_for(validated: ValidatedAnnualReviewInformation) -> AnnualReviewInvite:
        """Build the invite event for the channel of the active contact record."""
        recipients = tuple(validated.client_contact_information.recipients())
        match validated.channel:
            case ContactChannel.ELECTRONIC:
                return SendElectronicAnnualReviewInvite(
                    client_id=validated.client_id,
                    annual_review_due_date=validated.annual_review_due_date,
                    recipients=recipients,
                )
            case ContactChannel.POST:
                return SendPostAnnualReviewInvite(
                    client_id=validated.client_id,
                    annual_review_due_date=validated.annual_review_due_date,
                    recipients=recipients,
                )
