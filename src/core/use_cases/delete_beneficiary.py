"""
Use Case: Delete Beneficiary

Idempotent delete: no existence check, a missing id is a no-op in the store.
"""

import logging

from src.core.entities.validation import ValidationError
from src.core.interfaces.beneficiary_repository import IBeneficiaryRepository

logger = logging.getLogger(__name__)

INVALID_ID = "Beneficiary ID is required and must be greater than zero."


class DeleteBeneficiaryUseCase:

    def __init__(self, beneficiary_repository: IBeneficiaryRepository):
        self._beneficiaries = beneficiary_repository

    async def execute(self, beneficiary_id: int) -> None:
        """Reject ids <= 0 before touching the repository."""
        if beneficiary_id is None or beneficiary_id <= 0:
            raise ValidationError(INVALID_ID)

        await self._beneficiaries.delete(beneficiary_id)
        logger.info(f"Deleted beneficiary {beneficiary_id}")
