"""
Use Case: List Active Identity Documents

Feeds the document-type picker. Repository order is preserved.
"""

from src.core.interfaces.identity_document_repository import IIdentityDocumentRepository
from src.core.use_cases.dtos import IdentityDocumentDTO, to_identity_document_dto


class ListActiveDocumentsUseCase:

    def __init__(self, document_repository: IIdentityDocumentRepository):
        self._documents = document_repository

    async def execute(self) -> list[IdentityDocumentDTO]:
        documents = await self._documents.list_active()
        return [to_identity_document_dto(d) for d in documents]
