"""
Routes: /api/documents — identity document types.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_active_documents_use_case
from src.api.schemas.responses import IdentityDocumentResponse
from src.core.use_cases.list_active_documents import ListActiveDocumentsUseCase

router = APIRouter()


@router.get("/active", response_model=list[IdentityDocumentResponse])
async def list_active_documents(
    use_case: ListActiveDocumentsUseCase = Depends(get_active_documents_use_case),
):
    """Active identity document types, in repository order."""
    documents = await use_case.execute()
    return [IdentityDocumentResponse.model_validate(d) for d in documents]
