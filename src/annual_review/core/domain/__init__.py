"""
Annual review domain model.

Every value here is built by a validating ``of`` constructor and is
immutable afterwards:

```python
from src.annual_review.core.domain import ValidatedAnnualReviewInformation
from src.client.schemas import UnvalidatedAnnualReviewInformation

info = ValidatedAnnualReviewInformation.of(
    UnvalidatedAnnualReviewInformation.model_validate(payload)
)
```
"""

from src.annual_review.core.domain.simple_types import (
    AddressFragment,
    ClientId,
    ConstrainedString,
    EmailAddress,
    PersonName,
    Postcode,
    TrustOrCompanyName,
)
from src.annual_review.core.domain.postal_address import PostalAddress
from src.annual_review.core.domain.contact_information import (
    ClientContactInformation,
    ContactChannel,
    ContactRecord,
    DirectorElectronicContact,
    DirectorPostContact,
    JointIndividualsElectronicContact,
    JointIndividualsPostContact,
    MultipleDirectorsElectronicContact,
    MultipleDirectorsPostContact,
    MultipleTrusteesElectronicContact,
    MultipleTrusteesPostContact,
    PrimaryDirectorElectronicContact,
    PrimaryDirectorPostContact,
    PrimaryTrusteeElectronicContact,
    PrimaryTrusteePostContact,
    Recipient,
    SingleIndividualElectronicContact,
    SingleIndividualPostContact,
    TrusteeElectronicContact,
    TrusteePostContact,
    validate_client_contact_information,
)
from src.annual_review.core.domain.annual_review import (
    DUE_DATE_FORMAT,
    ReviewCalendar,
    ValidatedAnnualReviewDueDate,
    ValidatedAnnualReviewInformation,
)
from src.annual_review.core.domain.events import (
    AnnualReviewEvent,
    AnnualReviewWorkflowTriggered,
    SendElectronicAnnualReviewInvite,
    SendPostAnnualReviewInvite,
)

__all__ = [
    # Scalars
    "AddressFragment",
    "ClientId",
    "ConstrainedString",
    "EmailAddress",
    "PersonName",
    "Postcode",
    "TrustOrCompanyName",
    "PostalAddress",
    # Contact information
    "ClientContactInformation",
    "ContactChannel",
    "ContactRecord",
    "DirectorElectronicContact",
    "DirectorPostContact",
    "JointIndividualsElectronicContact",
    "JointIndividualsPostContact",
    "MultipleDirectorsElectronicContact",
    "MultipleDirectorsPostContact",
    "MultipleTrusteesElectronicContact",
    "MultipleTrusteesPostContact",
    "PrimaryDirectorElectronicContact",
    "PrimaryDirectorPostContact",
    "PrimaryTrusteeElectronicContact",
    "PrimaryTrusteePostContact",
    "Recipient",
    "SingleIndividualElectronicContact",
    "SingleIndividualPostContact",
    "TrusteeElectronicContact",
    "TrusteePostContact",
    "validate_client_contact_information",
    # Annual review
    "DUE_DATE_FORMAT",
    "ReviewCalendar",
    "ValidatedAnnualReviewDueDate",
    "ValidatedAnnualReviewInformation",
    # Events
    "AnnualReviewEvent",
    "AnnualReviewWorkflowTriggered",
    "SendElectronicAnnualReviewInvite",
    "SendPostAnnualReviewInvite",
]
