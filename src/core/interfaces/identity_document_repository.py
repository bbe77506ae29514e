"""
Contract: Identity Document Repository

Read access to identity document types (reference data).
"""

from abc import ABC, abstractmethod

from src.core.entities.identity_document import IdentityDocument


class IIdentityDocumentRepository(ABC):
    """Port: Identity Document Repository"""

    @abstractmethod
    async def get_by_id(self, document_id: int) -> IdentityDocument | None:
        """Fetch a document type by id, active or not. None when absent."""
        ...

    @abstractmethod
    async def list_active(self) -> list[IdentityDocument]:
        """Active document types, in the order the store returns them."""
        ...
