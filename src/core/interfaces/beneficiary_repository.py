"""
Contract: Beneficiary Repository

Persistence of beneficiaries. Implementations perform no domain
validation: entities reach the repository already validated and are
stored verbatim.
"""

from abc import ABC, abstractmethod

from src.core.entities.beneficiary import Beneficiary
from src.core.entities.pagination import BeneficiaryListFilter, PagedResult


class IBeneficiaryRepository(ABC):
    """
    Port: Beneficiary Repository

    All operations are coroutines; cancelling the awaiting task cancels
    the call. No operation applies its own timeout.
    """

    @abstractmethod
    async def add(self, beneficiary: Beneficiary) -> int:
        """
        Insert a new beneficiary.

        Args:
            beneficiary: Validated entity with id == 0.

        Returns:
            Generated identifier (> 0).
        """
        ...

    @abstractmethod
    async def update(self, beneficiary: Beneficiary) -> None:
        """Overwrite the stored row with the entity's id."""
        ...

    @abstractmethod
    async def delete(self, beneficiary_id: int) -> None:
        """Remove by id. Deleting a missing id is a no-op."""
        ...

    @abstractmethod
    async def get_by_id(self, beneficiary_id: int) -> Beneficiary | None:
        """
        Fetch one beneficiary.

        Returns:
            The entity, or None when absent.
        """
        ...

    @abstractmethod
    async def list_paged(self, filter: BeneficiaryListFilter) -> PagedResult[Beneficiary]:
        """
        Filtered, paginated listing.

        Paging is normalized here (page <= 0 -> 1, page_size outside
        (0, 200] -> 20) and the returned PagedResult carries the
        normalized values.
        """
        ...
