"""
Client contact information for the annual review.

A client is reached in exactly one of a closed set of ways, one per
combination of role (individual, joint individuals, trustee(s), director(s))
and channel (electronic or post). Each way is its own frozen record with a
validating ``of`` constructor; ``ClientContactInformation`` is the tagged
union over all of them, discriminated by ``contact_type``.
"""
from abc import abstractmethod
from collections.abc import Sequence
from enum import StrEnum
from typing import Annotated, ClassVar, Literal, Union, assert_never

from pydantic import BaseModel, Field

from src.annual_review.core.domain.postal_address import PostalAddress
from src.annual_review.core.domain.simple_types import EmailAddress, PersonName, TrustOrCompanyName
from src.client.schemas import (
    UnvalidatedClientContactInformation,
    UnvalidatedDirectorElectronicContact,
    UnvalidatedDirectorPostContact,
    UnvalidatedJointIndividualsElectronicContact,
    UnvalidatedJointIndividualsPostContact,
    UnvalidatedMultipleDirectorsElectronicContact,
    UnvalidatedMultipleDirectorsPostContact,
    UnvalidatedMultipleTrusteesElectronicContact,
    UnvalidatedMultipleTrusteesPostContact,
    UnvalidatedPostalAddress,
    UnvalidatedPrimaryDirectorElectronicContact,
    UnvalidatedPrimaryDirectorPostContact,
    UnvalidatedPrimaryTrusteeElectronicContact,
    UnvalidatedPrimaryTrusteePostContact,
    UnvalidatedSingleIndividualElectronicContact,
    UnvalidatedSingleIndividualPostContact,
    UnvalidatedTrusteeElectronicContact,
    UnvalidatedTrusteePostContact,
)
from src.shared.exceptions import ConstraintViolation, EmptyInput, InvalidEmail, InvalidName

MINIMUM_MULTIPLE_PARTIES = 2


class ContactChannel(StrEnum):
    """How the client receives correspondence."""
    ELECTRONIC = "ELECTRONIC"
    POST = "POST"


class Recipient(BaseModel):
    """A single addressee of an invite: who to greet and where to send it."""
    first_name: PersonName
    email_address: EmailAddress | None = None
    postal_address: PostalAddress | None = None

    model_config = {"frozen": True}


def _person_name(raw: str) -> PersonName:
    try:
        return PersonName.of(raw)
    except ConstraintViolation as e:
        raise InvalidName.wrap(e) from e


def _entity_name(raw: str) -> TrustOrCompanyName:
    try:
        return TrustOrCompanyName.of(raw)
    except ConstraintViolation as e:
        raise InvalidName.wrap(e) from e


def _email_address(raw: str) -> EmailAddress:
    try:
        return EmailAddress.of(raw)
    except ConstraintViolation as e:
        raise InvalidEmail.wrap(e) from e


def _postal_address(address: PostalAddress | UnvalidatedPostalAddress) -> PostalAddress:
    if isinstance(address, PostalAddress):
        return address
    return PostalAddress.of(**address.model_dump())


def _require_multiple(parties: Sequence, message: str) -> None:
    if len(parties) < MINIMUM_MULTIPLE_PARTIES:
        raise EmptyInput(message)


class ContactRecord(BaseModel):
    """Common behaviour of every client contact shape."""

    channel: ClassVar[ContactChannel]

    model_config = {"frozen": True}

    @abstractmethod
    def recipients(self) -> list[Recipient]:
        """Everyone who should receive correspondence for this client."""


# =============================================================================
# Individuals
# =============================================================================

class SingleIndividualElectronicContact(ContactRecord):
    contact_type: Literal["SingleIndividualElectronicContact"] = "SingleIndividualElectronicContact"
    channel: ClassVar[ContactChannel] = ContactChannel.ELECTRONIC

    first_name: PersonName
    email_address: EmailAddress

    @classmethod
    def of(cls, first_name: str, email_address: str) -> "SingleIndividualElectronicContact":
        return cls(
            first_name=_person_name(first_name),
            email_address=_email_address(email_address),
        )

    def recipients(self) -> list[Recipient]:
        return [Recipient(first_name=self.first_name, email_address=self.email_address)]


class JointIndividualsElectronicContact(ContactRecord):
    """Two individuals holding a joint account, each with their own email."""
    contact_type: Literal["JointIndividualsElectronicContact"] = "JointIndividualsElectronicContact"
    channel: ClassVar[ContactChannel] = ContactChannel.ELECTRONIC

    primary_contact_first_name: PersonName
    individual_two_first_name: PersonName
    primary_contact_email_address: EmailAddress
    individual_two_email_address: EmailAddress

    @classmethod
    def of(
        cls,
        primary_contact_first_name: str,
        individual_two_first_name: str,
        primary_contact_email_address: str,
        individual_two_email_address: str,
    ) -> "JointIndividualsElectronicContact":
        return cls(
            primary_contact_first_name=_person_name(primary_contact_first_name),
            individual_two_first_name=_person_name(individual_two_first_name),
            primary_contact_email_address=_email_address(primary_contact_email_address),
            individual_two_email_address=_email_address(individual_two_email_address),
        )

    def recipients(self) -> list[Recipient]:
        return [
            Recipient(
                first_name=self.primary_contact_first_name,
                email_address=self.primary_contact_email_address,
            ),
            Recipient(
                first_name=self.individual_two_first_name,
                email_address=self.individual_two_email_address,
            ),
        ]


class SingleIndividualPostContact(ContactRecord):
    contact_type: Literal["SingleIndividualPostContact"] = "SingleIndividualPostContact"
    channel: ClassVar[ContactChannel] = ContactChannel.POST

    contact_first_name: PersonName
    postal_address: PostalAddress

    @classmethod
    def of(
        cls,
        contact_first_name: str,
        postal_address: PostalAddress | UnvalidatedPostalAddress,
    ) -> "SingleIndividualPostContact":
        return cls(
            contact_first_name=_person_name(contact_first_name),
            postal_address=_postal_address(postal_address),
        )

    def recipients(self) -> list[Recipient]:
        return [Recipient(first_name=self.contact_first_name, postal_address=self.postal_address)]


class JointIndividualsPostContact(ContactRecord):
    """Two individuals sharing one postal address."""
    contact_type: Literal["JointIndividualsPostContact"] = "JointIndividualsPostContact"
    channel: ClassVar[ContactChannel] = ContactChannel.POST

    primary_contact_first_name: PersonName
    individual_two_first_name: PersonName
    postal_address: PostalAddress

    @classmethod
    def of(
        cls,
        primary_contact_first_name: str,
        individual_two_first_name: str,
        postal_address: PostalAddress | UnvalidatedPostalAddress,
    ) -> "JointIndividualsPostContact":
        return cls(
            primary_contact_first_name=_person_name(primary_contact_first_name),
            individual_two_first_name=_person_name(individual_two_first_name),
            postal_address=_postal_address(postal_address),
        )

    def recipients(self) -> list[Recipient]:
        return [
            Recipient(first_name=self.primary_contact_first_name, postal_address=self.postal_address),
            Recipient(first_name=self.individual_two_first_name, postal_address=self.postal_address),
        ]


# =============================================================================
# Trustees
# =============================================================================

class TrusteeElectronicContact(BaseModel):
    """One trustee reached by email. Only appears inside MultipleTrusteesElectronicContact."""
    first_name: PersonName
    email_address: EmailAddress

    model_config = {"frozen": True}

    @classmethod
    def of(cls, first_name: str, email_address: str) -> "TrusteeElectronicContact":
        return cls(first_name=_person_name(first_name), email_address=_email_address(email_address))


class TrusteePostContact(BaseModel):
    """One trustee reached by post. Only appears inside MultipleTrusteesPostContact."""
    first_name: PersonName
    postal_address: PostalAddress

    model_config = {"frozen": True}

    @classmethod
    def of(
        cls,
        first_name: str,
        postal_address: PostalAddress | UnvalidatedPostalAddress,
    ) -> "TrusteePostContact":
        return cls(first_name=_person_name(first_name), postal_address=_postal_address(postal_address))


class PrimaryTrusteeElectronicContact(ContactRecord):
    """A trust where correspondence goes to a single nominated trustee."""
    contact_type: Literal["PrimaryTrusteeElectronicContact"] = "PrimaryTrusteeElectronicContact"
    channel: ClassVar[ContactChannel] = ContactChannel.ELECTRONIC

    trust_name: TrustOrCompanyName
    primary_trustee_first_name: PersonName
    primary_trustee_email_address: EmailAddress

    @classmethod
    def of(
        cls,
        trust_name: str,
        primary_trustee_first_name: str,
        primary_trustee_email_address: str,
    ) -> "PrimaryTrusteeElectronicContact":
        first_name = _person_name(primary_trustee_first_name)
        email_address = _email_address(primary_trustee_email_address)
        return cls(
            trust_name=_entity_name(trust_name),
            primary_trustee_first_name=first_name,
            primary_trustee_email_address=email_address,
        )

    def recipients(self) -> list[Recipient]:
        return [
            Recipient(
                first_name=self.primary_trustee_first_name,
                email_address=self.primary_trustee_email_address,
            )
        ]


class MultipleTrusteesElectronicContact(ContactRecord):
    """A trust where every trustee (at least two) is contacted by email."""
    contact_type: Literal["MultipleTrusteesElectronicContact"] = "MultipleTrusteesElectronicContact"
    channel: ClassVar[ContactChannel] = ContactChannel.ELECTRONIC

    trust_name: TrustOrCompanyName
    trustees: tuple[TrusteeElectronicContact, ...] = Field(..., min_length=MINIMUM_MULTIPLE_PARTIES)

    @classmethod
    def of(
        cls,
        trust_name: str,
        trustees: Sequence[TrusteeElectronicContact | UnvalidatedTrusteeElectronicContact],
    ) -> "MultipleTrusteesElectronicContact":
        """
        Validate every trustee, then require at least two of them.

        The party count is checked only once each trustee is valid, so a
        list with a single perfectly valid trustee still fails with EmptyInput.
        """
        validated = tuple(
            trustee if isinstance(trustee, TrusteeElectronicContact)
            else TrusteeElectronicContact.of(trustee.first_name, trustee.email_address)
            for trustee in trustees
        )
        _require_multiple(validated, "There must be at least two trustees.")
        return cls(trust_name=_entity_name(trust_name), trustees=validated)

    def recipients(self) -> list[Recipient]:
        return [
            Recipient(first_name=trustee.first_name, email_address=trustee.email_address)
            for trustee in self.trustees
        ]


class PrimaryTrusteePostContact(ContactRecord):
    contact_type: Literal["PrimaryTrusteePostContact"] = "PrimaryTrusteePostContact"
    channel: ClassVar[ContactChannel] = ContactChannel.POST

    trust_name: TrustOrCompanyName
    primary_trustee_first_name: PersonName
    primary_trustee_postal_address: PostalAddress

    @classmethod
    def of(
        cls,
        trust_name: str,
        primary_trustee_first_name: str,
        primary_trustee_postal_address: PostalAddress | UnvalidatedPostalAddress,
    ) -> "PrimaryTrusteePostContact":
        first_name = _person_name(primary_trustee_first_name)
        postal_address = _postal_address(primary_trustee_postal_address)
        return cls(
            trust_name=_entity_name(trust_name),
            primary_trustee_first_name=first_name,
            primary_trustee_postal_address=postal_address,
        )

    def recipients(self) -> list[Recipient]:
        return [
            Recipient(
                first_name=self.primary_trustee_first_name,
                postal_address=self.primary_trustee_postal_address,
            )
        ]


class MultipleTrusteesPostContact(ContactRecord):
    contact_type: Literal["MultipleTrusteesPostContact"] = "MultipleTrusteesPostContact"
    channel: ClassVar[ContactChannel] = ContactChannel.POST

    trust_name: TrustOrCompanyName
    trustees: tuple[TrusteePostContact, ...] = Field(..., min_length=MINIMUM_MULTIPLE_PARTIES)

    @classmethod
    def of(
        cls,
        trust_name: str,
        trustees: Sequence[TrusteePostContact | UnvalidatedTrusteePostContact],
    ) -> "MultipleTrusteesPostContact":
        validated = tuple(
            trustee if isinstance(trustee, TrusteePostContact)
            else TrusteePostContact.of(trustee.first_name, trustee.postal_address)
            for trustee in trustees
        )
        _require_multiple(validated, "There must be at least two trustees.")
        return cls(trust_name=_entity_name(trust_name), trustees=validated)

    def recipients(self) -> list[Recipient]:
        return [
            Recipient(first_name=trustee.first_name, postal_address=trustee.postal_address)
            for trustee in self.trustees
        ]


# =============================================================================
# Directors
# =============================================================================

class DirectorElectronicContact(BaseModel):
    """One director reached by email. Only appears inside MultipleDirectorsElectronicContact."""
    first_name: PersonName
    email_address: EmailAddress

    model_config = {"frozen": True}

    @classmethod
    def of(cls, first_name: str, email_address: str) -> "DirectorElectronicContact":
        return cls(first_name=_person_name(first_name), email_address=_email_address(email_address))


class DirectorPostContact(BaseModel):
    """One director reached by post. Only appears inside MultipleDirectorsPostContact."""
    first_name: PersonName
    postal_address: PostalAddress

    model_config = {"frozen": True}

    @classmethod
    def of(
        cls,
        first_name: str,
        postal_address: PostalAddress | UnvalidatedPostalAddress,
    ) -> "DirectorPostContact":
        return cls(first_name=_person_name(first_name), postal_address=_postal_address(postal_address))


class PrimaryDirectorElectronicContact(ContactRecord):
    """A company where correspondence goes to a single nominated director."""
    contact_type: Literal["PrimaryDirectorElectronicContact"] = "PrimaryDirectorElectronicContact"
    channel: ClassVar[ContactChannel] = ContactChannel.ELECTRONIC

    company_name: TrustOrCompanyName
    primary_director_first_name: PersonName
    primary_director_email_address: EmailAddress

    @classmethod
    def of(
        cls,
        company_name: str,
        primary_director_first_name: str,
        primary_director_email_address: str,
    ) -> "PrimaryDirectorElectronicContact":
        first_name = _person_name(primary_director_first_name)
        email_address = _email_address(primary_director_email_address)
        return cls(
            company_name=_entity_name(company_name),
            primary_director_first_name=first_name,
            primary_director_email_address=email_address,
        )

    def recipients(self) -> list[Recipient]:
        return [
            Recipient(
                first_name=self.primary_director_first_name,
                email_address=self.primary_director_email_address,
            )
        ]


class MultipleDirectorsElectronicContact(ContactRecord):
    contact_type: Literal["MultipleDirectorsElectronicContact"] = "MultipleDirectorsElectronicContact"
    channel: ClassVar[ContactChannel] = ContactChannel.ELECTRONIC

    company_name: TrustOrCompanyName
    directors: tuple[DirectorElectronicContact, ...] = Field(..., min_length=MINIMUM_MULTIPLE_PARTIES)

    @classmethod
    def of(
        cls,
        company_name: str,
        directors: Sequence[DirectorElectronicContact | UnvalidatedDirectorElectronicContact],
    ) -> "MultipleDirectorsElectronicContact":
        validated = tuple(
            director if isinstance(director, DirectorElectronicContact)
            else DirectorElectronicContact.of(director.first_name, director.email_address)
            for director in directors
        )
        _require_multiple(validated, "There must be at least two directors.")
        return cls(company_name=_entity_name(company_name), directors=validated)

    def recipients(self) -> list[Recipient]:
        return [
            Recipient(first_name=director.first_name, email_address=director.email_address)
            for director in self.directors
        ]


class PrimaryDirectorPostContact(ContactRecord):
    contact_type: Literal["PrimaryDirectorPostContact"] = "PrimaryDirectorPostContact"
    channel: ClassVar[ContactChannel] = ContactChannel.POST

    company_name: TrustOrCompanyName
    primary_director_first_name: PersonName
    primary_director_postal_address: PostalAddress

    @classmethod
    def of(
        cls,
        company_name: str,
        primary_director_first_name: str,
        primary_director_postal_address: PostalAddress | UnvalidatedPostalAddress,
    ) -> "PrimaryDirectorPostContact":
        first_name = _person_name(primary_director_first_name)
        postal_address = _postal_address(primary_director_postal_address)
        return cls(
            company_name=_entity_name(company_name),
            primary_director_first_name=first_name,
            primary_director_postal_address=postal_address,
        )

    def recipients(self) -> list[Recipient]:
        return [
            Recipient(
                first_name=self.primary_director_first_name,
                postal_address=self.primary_director_postal_address,
            )
        ]


class MultipleDirectorsPostContact(ContactRecord):
    contact_type: Literal["MultipleDirectorsPostContact"] = "MultipleDirectorsPostContact"
    channel: ClassVar[ContactChannel] = ContactChannel.POST

    company_name: TrustOrCompanyName
    directors: tuple[DirectorPostContact, ...] = Field(..., min_length=MINIMUM_MULTIPLE_PARTIES)

    @classmethod
    def of(
        cls,
        company_name: str,
        directors: Sequence[DirectorPostContact | UnvalidatedDirectorPostContact],
    ) -> "MultipleDirectorsPostContact":
        validated = tuple(
            director if isinstance(director, DirectorPostContact)
            else DirectorPostContact.of(director.first_name, director.postal_address)
            for director in directors
        )
        _require_multiple(validated, "There must be at least two directors.")
        return cls(company_name=_entity_name(company_name), directors=validated)

    def recipients(self) -> list[Recipient]:
        return [
            Recipient(first_name=director.first_name, postal_address=director.postal_address)
            for director in self.directors
        ]


ClientContactInformation = Annotated[
    Union[
        SingleIndividualElectronicContact,
        JointIndividualsElectronicContact,
        SingleIndividualPostContact,
        JointIndividualsPostContact,
        PrimaryTrusteeElectronicContact,
        MultipleTrusteesElectronicContact,
        PrimaryTrusteePostContact,
        MultipleTrusteesPostContact,
        PrimaryDirectorElectronicContact,
        MultipleDirectorsElectronicContact,
        PrimaryDirectorPostContact,
        MultipleDirectorsPostContact,
    ],
    Field(discriminator="contact_type"),
]


def validate_client_contact_information(
    raw: UnvalidatedClientContactInformation,
) -> ClientContactInformation:
    """
    Validate a raw contact payload into the matching contact record.

    Every tag of the closed union is handled here; adding a new contact
    shape means adding one case below.

    Raises:
        AnnualReviewValidationError: The first field-level failure of the
            selected record, already widened to the top-level error kinds.
    """
    match raw:
        case UnvalidatedSingleIndividualElectronicContact():
            return SingleIndividualElectronicContact.of(raw.first_name, raw.email_address)
        case UnvalidatedJointIndividualsElectronicContact():
            return JointIndividualsElectronicContact.of(
                raw.primary_contact_first_name,
                raw.individual_two_first_name,
                raw.primary_contact_email_address,
                raw.individual_two_email_address,
            )
        case UnvalidatedSingleIndividualPostContact():
            return SingleIndividualPostContact.of(raw.contact_first_name, raw.postal_address)
        case UnvalidatedJointIndividualsPostContact():
            return JointIndividualsPostContact.of(
                raw.primary_contact_first_name,
                raw.individual_two_first_name,
                raw.postal_address,
            )
        case UnvalidatedPrimaryTrusteeElectronicContact():
            return PrimaryTrusteeElectronicContact.of(
                raw.trust_name,
                raw.primary_trustee_first_name,
                raw.primary_trustee_email_address,
            )
        case UnvalidatedMultipleTrusteesElectronicContact():
            return MultipleTrusteesElectronicContact.of(raw.trust_name, raw.trustees)
        case UnvalidatedPrimaryTrusteePostContact():
            return PrimaryTrusteePostContact.of(
                raw.trust_name,
                raw.primary_trustee_first_name,
                raw.primary_trustee_postal_address,
            )
        case UnvalidatedMultipleTrusteesPostContact():
            return MultipleTrusteesPostContact.of(raw.trust_name, raw.trustees)
        case UnvalidatedPrimaryDirectorElectronicContact():
            return PrimaryDirectorElectronicContact.of(
                raw.company_name,
                raw.primary_director_first_name,
                raw.primary_director_email_address,
            )
        case UnvalidatedMultipleDirectorsElectronicContact():
            return MultipleDirectorsElectronicContact.of(raw.company_name, raw.directors)
        case UnvalidatedPrimaryDirectorPostContact():
            return PrimaryDirectorPostContact.of(
                raw.company_name,
                raw.primary_director_first_name,
                raw.primary_director_postal_address,
            )
        case UnvalidatedMultipleDirectorsPostContact():
            return MultipleDirectorsPostContact.of(raw.company_name, raw.directors)
        case _:
            assert_never(raw)
