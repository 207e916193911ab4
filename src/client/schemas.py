"""
Inbound schemas for the book review meeting workflow.

These models only describe the *shape* of the data handed over by the
scheduler or an inbound request: every value is a plain string and no
business rule is enforced here. Turning them into domain values is the job
of the smart constructors in ``src.annual_review.core.domain``.
"""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class UnvalidatedPostalAddress(BaseModel):
    """Raw postal address fields. Empty optional fields count as missing."""
    address_line_one: str
    city: str
    postcode: str
    house_name: str | None = None
    house_number: str | None = Field(default=None, description="Parsed as a whole number")
    address_line_two: str | None = None
    address_line_three: str | None = None
    address_line_four: str | None = None
    county: str | None = None
    country: str | None = None


# =============================================================================
# Individuals
# =============================================================================

class UnvalidatedSingleIndividualElectronicContact(BaseModel):
    contact_type: Literal["SingleIndividualElectronicContact"] = "SingleIndividualElectronicContact"
    first_name: str
    email_address: str


class UnvalidatedJointIndividualsElectronicContact(BaseModel):
    contact_type: Literal["JointIndividualsElectronicContact"] = "JointIndividualsElectronicContact"
    primary_contact_first_name: str
    individual_two_first_name: str
    primary_contact_email_address: str
    individual_two_email_address: str


class UnvalidatedSingleIndividualPostContact(BaseModel):
    contact_type: Literal["SingleIndividualPostContact"] = "SingleIndividualPostContact"
    contact_first_name: str
    postal_address: UnvalidatedPostalAddress


class UnvalidatedJointIndividualsPostContact(BaseModel):
    contact_type: Literal["JointIndividualsPostContact"] = "JointIndividualsPostContact"
    primary_contact_first_name: str
    individual_two_first_name: str
    postal_address: UnvalidatedPostalAddress


# =============================================================================
# Trustees
# =============================================================================

class UnvalidatedTrusteeElectronicContact(BaseModel):
    """One trustee of a trust with several trustees, contacted by email."""
    first_name: str
    email_address: str


class UnvalidatedTrusteePostContact(BaseModel):
    """One trustee of a trust with several trustees, contacted by post."""
    first_name: str
    postal_address: UnvalidatedPostalAddress


class UnvalidatedPrimaryTrusteeElectronicContact(BaseModel):
    contact_type: Literal["PrimaryTrusteeElectronicContact"] = "PrimaryTrusteeElectronicContact"
    trust_name: str
    primary_trustee_first_name: str
    primary_trustee_email_address: str


class UnvalidatedMultipleTrusteesElectronicContact(BaseModel):
    contact_type: Literal["MultipleTrusteesElectronicContact"] = "MultipleTrusteesElectronicContact"
    trust_name: str
    trustees: list[UnvalidatedTrusteeElectronicContact] = Field(default_factory=list)


class UnvalidatedPrimaryTrusteePostContact(BaseModel):
    contact_type: Literal["PrimaryTrusteePostContact"] = "PrimaryTrusteePostContact"
    trust_name: str
    primary_trustee_first_name: str
    primary_trustee_postal_address: UnvalidatedPostalAddress


class UnvalidatedMultipleTrusteesPostContact(BaseModel):
    contact_type: Literal["MultipleTrusteesPostContact"] = "MultipleTrusteesPostContact"
    trust_name: str
    trustees: list[UnvalidatedTrusteePostContact] = Field(default_factory=list)


# =============================================================================
# Directors
# =============================================================================

class UnvalidatedDirectorElectronicContact(BaseModel):
    """One director of a company with several directors, contacted by email."""
    first_name: str
    email_address: str


class UnvalidatedDirectorPostContact(BaseModel):
    """One director of a company with several directors, contacted by post."""
    first_name: str
    postal_address: UnvalidatedPostalAddress


class UnvalidatedPrimaryDirectorElectronicContact(BaseModel):
    contact_type: Literal["PrimaryDirectorElectronicContact"] = "PrimaryDirectorElectronicContact"
    company_name: str
    primary_director_first_name: str
    primary_director_email_address: str


class UnvalidatedMultipleDirectorsElectronicContact(BaseModel):
    contact_type: Literal["MultipleDirectorsElectronicContact"] = "MultipleDirectorsElectronicContact"
    company_name: str
    directors: list[UnvalidatedDirectorElectronicContact] = Field(default_factory=list)


class UnvalidatedPrimaryDirectorPostContact(BaseModel):
    contact_type: Literal["PrimaryDirectorPostContact"] = "PrimaryDirectorPostContact"
    company_name: str
    primary_director_first_name: str
    primary_director_postal_address: UnvalidatedPostalAddress


class UnvalidatedMultipleDirectorsPostContact(BaseModel):
    contact_type: Literal["MultipleDirectorsPostContact"] = "MultipleDirectorsPostContact"
    company_name: str
    directors: list[UnvalidatedDirectorPostContact] = Field(default_factory=list)


UnvalidatedClientContactInformation = Annotated[
    Union[
        UnvalidatedSingleIndividualElectronicContact,
        UnvalidatedJointIndividualsElectronicContact,
        UnvalidatedSingleIndividualPostContact,
        UnvalidatedJointIndividualsPostContact,
        UnvalidatedPrimaryTrusteeElectronicContact,
        UnvalidatedMultipleTrusteesElectronicContact,
        UnvalidatedPrimaryTrusteePostContact,
        UnvalidatedMultipleTrusteesPostContact,
        UnvalidatedPrimaryDirectorElectronicContact,
        UnvalidatedMultipleDirectorsElectronicContact,
        UnvalidatedPrimaryDirectorPostContact,
        UnvalidatedMultipleDirectorsPostContact,
    ],
    Field(discriminator="contact_type"),
]


class UnvalidatedAnnualReviewInformation(BaseModel):
    """Envelope received when the annual review workflow is triggered for a client."""
    annual_review_due_date: str = Field(..., description="Expected as DD/MM/YYYY")
    last_annual_review_date: str = Field(..., description="Expected as DD/MM/YYYY")
    client_contact_information: UnvalidatedClientContactInformation
    client_id: str | None = None
