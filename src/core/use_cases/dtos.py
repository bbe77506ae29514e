"""
Transfer objects returned by the use cases, plus entity -> DTO mappers.
"""

from dataclasses import dataclass
from datetime import date

from src.core.entities.beneficiary import Beneficiary
from src.core.entities.identity_document import IdentityDocument


@dataclass(frozen=True)
class BeneficiaryDTO:
    id: int
    first_names: str
    last_names: str
    identity_document_id: int
    document_number: str
    birth_date: date
    gender: str


@dataclass(frozen=True)
class IdentityDocumentDTO:
    id: int
    name: str
    abbreviation: str
    country: str
    length: int
    numeric_only: bool
    is_active: bool


def to_beneficiary_dto(beneficiary: Beneficiary) -> BeneficiaryDTO:
    return BeneficiaryDTO(
        id=beneficiary.id,
        first_names=beneficiary.first_names,
        last_names=beneficiary.last_names,
        identity_document_id=beneficiary.identity_document_id,
        document_number=beneficiary.document_number,
        birth_date=beneficiary.birth_date,
        gender=beneficiary.gender,
    )


def to_identity_document_dto(document: IdentityDocument) -> IdentityDocumentDTO:
    return IdentityDocumentDTO(
        id=document.id,
        name=document.name,
        abbreviation=document.abbreviation,
        country=document.country,
        length=document.length,
        numeric_only=document.numeric_only,
        is_active=document.is_active,
    )
