"""
Composition root — FastAPI dependency providers.

Concrete adapters are chosen here and nowhere else. Tests swap them via
`app.dependency_overrides[get_beneficiary_repository]` and friends.
"""

from fastapi import Depends

from src.core.interfaces.beneficiary_repository import IBeneficiaryRepository
from src.core.interfaces.identity_document_repository import IIdentityDocumentRepository
from src.core.use_cases.create_beneficiary import CreateBeneficiaryUseCase
from src.core.use_cases.delete_beneficiary import DeleteBeneficiaryUseCase
from src.core.use_cases.get_beneficiary import GetBeneficiaryUseCase
from src.core.use_cases.list_active_documents import ListActiveDocumentsUseCase
from src.core.use_cases.list_beneficiaries import ListBeneficiariesUseCase
from src.core.use_cases.update_beneficiary import UpdateBeneficiaryUseCase
from src.infrastructure.db.repository import SqlBeneficiaryRepository, SqlIdentityDocumentRepository


# ── Repositories ──

def get_beneficiary_repository() -> IBeneficiaryRepository:
    """Beneficiary port backed by the global SQLAlchemy session factory."""
    return SqlBeneficiaryRepository()


def get_identity_document_repository() -> IIdentityDocumentRepository:
    """Identity document port backed by the global SQLAlchemy session factory."""
    return SqlIdentityDocumentRepository()


# ── Use cases ──

def get_create_use_case(
    beneficiaries: IBeneficiaryRepository = Depends(get_beneficiary_repository),
    documents: IIdentityDocumentRepository = Depends(get_identity_document_repository),
) -> CreateBeneficiaryUseCase:
    return CreateBeneficiaryUseCase(beneficiaries, documents)


def get_update_use_case(
    beneficiaries: IBeneficiaryRepository = Depends(get_beneficiary_repository),
    documents: IIdentityDocumentRepository = Depends(get_identity_document_repository),
) -> UpdateBeneficiaryUseCase:
    return UpdateBeneficiaryUseCase(beneficiaries, documents)


def get_delete_use_case(
    beneficiaries: IBeneficiaryRepository = Depends(get_beneficiary_repository),
) -> DeleteBeneficiaryUseCase:
    return DeleteBeneficiaryUseCase(beneficiaries)


def get_get_use_case(
    beneficiaries: IBeneficiaryRepository = Depends(get_beneficiary_repository),
) -> GetBeneficiaryUseCase:
    return GetBeneficiaryUseCase(beneficiaries)


def get_list_use_case(
    beneficiaries: IBeneficiaryRepository = Depends(get_beneficiary_repository),
) -> ListBeneficiariesUseCase:
    return ListBeneficiariesUseCase(beneficiaries)


def get_active_documents_use_case(
    documents: IIdentityDocumentRepository = Depends(get_identity_document_repository),
) -> ListActiveDocumentsUseCase:
    return ListActiveDocumentsUseCase(documents)
