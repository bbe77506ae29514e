"""
Use Case: Get Beneficiary By Id

Absence is a normal outcome (None), not an error.
"""

from src.core.interfaces.beneficiary_repository import IBeneficiaryRepository
from src.core.use_cases.dtos import BeneficiaryDTO, to_beneficiary_dto


class GetBeneficiaryUseCase:

    def __init__(self, beneficiary_repository: IBeneficiaryRepository):
        self._beneficiaries = beneficiary_repository

    async def execute(self, beneficiary_id: int) -> BeneficiaryDTO | None:
        beneficiary = await self._beneficiaries.get_by_id(beneficiary_id)
        if beneficiary is None:
            return None
        return to_beneficiary_dto(beneficiary)
