"""
Use Case: Update Beneficiary

Replaces basic data and document of an existing beneficiary. Both
updates must validate before anything is written.
"""

import logging
from dataclasses import dataclass
from datetime import date

from src.core.entities.validation import ValidationError
from src.core.interfaces.beneficiary_repository import IBeneficiaryRepository
from src.core.interfaces.identity_document_repository import IIdentityDocumentRepository
from src.core.use_cases.dtos import BeneficiaryDTO, to_beneficiary_dto

logger = logging.getLogger(__name__)

INVALID_ID = "Beneficiary ID is required and must be greater than zero."
BENEFICIARY_NOT_FOUND = "Beneficiary not found."
DOCUMENT_NOT_FOUND = "Identity document not found or inactive."


@dataclass
class UpdateBeneficiaryInput:
    """Input for an update. `id` always comes from the route."""
    id: int
    first_names: str
    last_names: str
    identity_document_id: int
    document_number: str
    birth_date: date
    gender: str


class UpdateBeneficiaryUseCase:
    """Use Case: validates references, derives the updated value, persists it."""

    def __init__(
        self,
        beneficiary_repository: IBeneficiaryRepository,
        document_repository: IIdentityDocumentRepository,
    ):
        self._beneficiaries = beneficiary_repository
        self._documents = document_repository

    async def execute(self, data: UpdateBeneficiaryInput) -> BeneficiaryDTO:
        if data.id is None or data.id <= 0:
            raise ValidationError(INVALID_ID)

        existing = await self._beneficiaries.get_by_id(data.id)
        if existing is None:
            raise ValidationError(BENEFICIARY_NOT_FOUND)

        document = await self._documents.get_by_id(data.identity_document_id)
        if document is None:
            raise ValidationError(DOCUMENT_NOT_FOUND)

        updated = (
            existing.with_basic_data(
                first_names=data.first_names,
                last_names=data.last_names,
                birth_date=data.birth_date,
                gender=data.gender,
            )
            .then(lambda b: b.with_document(document, data.document_number))
            .unwrap()
        )

        await self._beneficiaries.update(updated)
        logger.info(f"Updated beneficiary {updated.id}")

        return to_beneficiary_dto(updated)
