"""
Routes: /api/beneficiaries — CRUD over beneficiary records.
"""

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse

from src.api.dependencies import (
    get_create_use_case,
    get_delete_use_case,
    get_get_use_case,
    get_list_use_case,
    get_update_use_case,
)
from src.api.schemas.requests import BeneficiaryRequest
from src.api.schemas.responses import BeneficiaryPageResponse, BeneficiaryResponse, ErrorResponse
from src.core.entities.pagination import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, BeneficiaryListFilter
from src.core.use_cases.create_beneficiary import CreateBeneficiaryUseCase
from src.core.use_cases.delete_beneficiary import DeleteBeneficiaryUseCase
from src.core.use_cases.get_beneficiary import GetBeneficiaryUseCase
from src.core.use_cases.list_beneficiaries import ListBeneficiariesUseCase
from src.core.use_cases.update_beneficiary import UpdateBeneficiaryUseCase

router = APIRouter()

ERROR_RESPONSES = {400: {"model": ErrorResponse}}


@router.get("", response_model=BeneficiaryPageResponse)
async def list_beneficiaries(
    name: str | None = Query(None, alias="Name"),
    document_number: str | None = Query(None, alias="DocumentNumber"),
    identity_document_id: int | None = Query(None, alias="IdentityDocumentId"),
    page: int = Query(DEFAULT_PAGE, alias="Page"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="PageSize"),
    use_case: ListBeneficiariesUseCase = Depends(get_list_use_case),
):
    """
    Paginated beneficiary list.

    Out-of-range paging is normalized (Page <= 0 -> 1, PageSize outside
    1..200 -> 20); the response echoes the values actually used.
    """
    result = await use_case.execute(
        BeneficiaryListFilter(
            name=name,
            document_number=document_number,
            identity_document_id=identity_document_id,
            page=page,
            page_size=page_size,
        )
    )
    return BeneficiaryPageResponse(
        items=[BeneficiaryResponse.model_validate(dto) for dto in result.items],
        total_count=result.total_count,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )


@router.get("/{beneficiary_id}", response_model=BeneficiaryResponse, responses={404: {"model": ErrorResponse}})
async def get_beneficiary(
    beneficiary_id: int,
    use_case: GetBeneficiaryUseCase = Depends(get_get_use_case),
):
    """Get a beneficiary by id."""
    dto = await use_case.execute(beneficiary_id)
    if dto is None:
        return JSONResponse(status_code=404, content={"error": "Beneficiary not found."})
    return BeneficiaryResponse.model_validate(dto)


@router.post("", response_model=BeneficiaryResponse, status_code=201, responses=ERROR_RESPONSES)
async def create_beneficiary(
    body: BeneficiaryRequest,
    request: Request,
    response: Response,
    use_case: CreateBeneficiaryUseCase = Depends(get_create_use_case),
):
    """Create a beneficiary. Location points at GET /api/beneficiaries/{id}."""
    dto = await use_case.execute(body.to_create_input())
    response.headers["Location"] = request.url_for("get_beneficiary", beneficiary_id=dto.id).path
    return BeneficiaryResponse.model_validate(dto)


@router.put("/{beneficiary_id}", response_model=BeneficiaryResponse, responses=ERROR_RESPONSES)
async def update_beneficiary(
    beneficiary_id: int,
    body: BeneficiaryRequest,
    use_case: UpdateBeneficiaryUseCase = Depends(get_update_use_case),
):
    """Update a beneficiary. The route id overrides any id in the body."""
    dto = await use_case.execute(body.to_update_input(beneficiary_id))
    return BeneficiaryResponse.model_validate(dto)


@router.delete("/{beneficiary_id}", status_code=204, responses=ERROR_RESPONSES)
async def delete_beneficiary(
    beneficiary_id: int,
    use_case: DeleteBeneficiaryUseCase = Depends(get_delete_use_case),
):
    """Delete a beneficiary. Unknown ids are accepted silently."""
    await use_case.execute(beneficiary_id)
    return Response(status_code=204)
