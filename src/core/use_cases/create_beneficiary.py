"""
Use Case: Create Beneficiary

Checks the referenced identity document, builds the beneficiary,
persists it and applies the generated id.
"""

import logging
from dataclasses import dataclass
from datetime import date

from src.core.entities.beneficiary import Beneficiary
from src.core.entities.validation import ValidationError
from src.core.interfaces.beneficiary_repository import IBeneficiaryRepository
from src.core.interfaces.identity_document_repository import IIdentityDocumentRepository
from src.core.use_cases.dtos import BeneficiaryDTO, to_beneficiary_dto

logger = logging.getLogger(__name__)

DOCUMENT_NOT_FOUND = "Identity document not found or inactive."


@dataclass
class CreateBeneficiaryInput:
    """Input for a new beneficiary."""
    first_names: str
    last_names: str
    identity_document_id: int
    document_number: str
    birth_date: date
    gender: str                   # "M" / "F", any case


class CreateBeneficiaryUseCase:
    """
    Use Case: registers a new beneficiary (id stays 0 until the insert).

    Dependency Injection: both repositories come in through the constructor.
    """

    def __init__(
        self,
        beneficiary_repository: IBeneficiaryRepository,
        document_repository: IIdentityDocumentRepository,
    ):
        self._beneficiaries = beneficiary_repository
        self._documents = document_repository

    async def execute(self, data: CreateBeneficiaryInput) -> BeneficiaryDTO:
        """
        1. Look up the document (absent → ValidationError)
        2. Build the entity (names, gender, document number)
        3. Persist and apply the generated id
        """
        document = await self._documents.get_by_id(data.identity_document_id)
        if document is None:
            raise ValidationError(DOCUMENT_NOT_FOUND)

        beneficiary = Beneficiary.create(
            id=0,
            first_names=data.first_names,
            last_names=data.last_names,
            document=document,
            document_number=data.document_number,
            birth_date=data.birth_date,
            gender=data.gender,
        ).unwrap()

        new_id = await self._beneficiaries.add(beneficiary)
        beneficiary = beneficiary.with_id(new_id).unwrap()
        logger.info(f"Created beneficiary {beneficiary.id} (document type {beneficiary.identity_document_id})")

        return to_beneficiary_dto(beneficiary)
