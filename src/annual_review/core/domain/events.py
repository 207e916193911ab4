"""Events produced by the book review meeting workflow once its input is valid."""
import uuid
from datetime import UTC, datetime
from typing import Annotated, Literal, Union
from uuid import UUID

from pydantic import BaseModel, Field

from src.annual_review.core.domain.annual_review import ValidatedAnnualReviewDueDate
from src.annual_review.core.domain.contact_information import Recipient
from src.annual_review.core.domain.simple_types import ClientId


class WorkflowEvent(BaseModel):
    """Fields shared by every workflow event."""
    event_id: UUID = Field(default_factory=uuid.uuid4, description="Unique event ID")
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Creation timestamp")
    client_id: ClientId | None = None
    annual_review_due_date: ValidatedAnnualReviewDueDate

    model_config = {"frozen": True}


class AnnualReviewWorkflowTriggered(WorkflowEvent):
    """The annual review workflow accepted a client's review information."""
    event_type: Literal["AnnualReviewWorkflowTriggered"] = "AnnualReviewWorkflowTriggered"
    contact_type: str = Field(..., description="Tag of the contact record the review will use")


class SendElectronicAnnualReviewInvite(WorkflowEvent):
    """Invite every recipient to book their review meeting by email."""
    event_type: Literal["SendElectronicAnnualReviewInvite"] = "SendElectronicAnnualReviewInvite"
    recipients: tuple[Recipient, ...] = Field(..., min_length=1)


class SendPostAnnualReviewInvite(WorkflowEvent):
    """Invite every recipient to book their review meeting by letter."""
    event_type: Literal["SendPostAnnualReviewInvite"] = "SendPostAnnualReviewInvite"
    recipients: tuple[Recipient, ...] = Field(..., min_length=1)


AnnualReviewInvite = Union[SendElectronicAnnualReviewInvite, SendPostAnnualReviewInvite]

AnnualReviewEvent = Annotated[
    Union[AnnualReviewWorkflowTriggered, SendElectronicAnnualReviewInvite, SendPostAnnualReviewInvite],
    Field(discriminator="event_type"),
]
