"""
Use Case: List Beneficiaries

Filtered, paginated listing. The filter goes to the repository as-is;
paging normalization happens at the repository boundary.
"""

from src.core.entities.pagination import BeneficiaryListFilter, PagedResult
from src.core.interfaces.beneficiary_repository import IBeneficiaryRepository
from src.core.use_cases.dtos import BeneficiaryDTO, to_beneficiary_dto


class ListBeneficiariesUseCase:

    def __init__(self, beneficiary_repository: IBeneficiaryRepository):
        self._beneficiaries = beneficiary_repository

    async def execute(self, filter: BeneficiaryListFilter | None = None) -> PagedResult[BeneficiaryDTO]:
        page = await self._beneficiaries.list_paged(filter or BeneficiaryListFilter())
        return page.map(to_beneficiary_dto)
