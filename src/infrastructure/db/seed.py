"""
Default identity document types.

Loaded on startup when the table is empty (SEED_DOCUMENTS=true) and by
`scripts/manage_documents.py seed`.
"""

import logging

from src.core.entities.identity_document import IdentityDocument
from src.infrastructure.db.repository import SqlIdentityDocumentRepository

logger = logging.getLogger(__name__)

DEFAULT_IDENTITY_DOCUMENTS: list[IdentityDocument] = [
    IdentityDocument(
        id=1, name="Documento Nacional de Identidad", abbreviation="DNI",
        country="Peru", length=8, numeric_only=True,
    ),
    IdentityDocument(
        id=2, name="Carnet de Extranjeria", abbreviation="CE",
        country="Peru", length=9, numeric_only=False,
    ),
    IdentityDocument(
        id=3, name="Pasaporte", abbreviation="PAS",
        country="Peru", length=9, numeric_only=False,
    ),
    IdentityDocument(
        id=4, name="Registro Unico de Contribuyentes", abbreviation="RUC",
        country="Peru", length=11, numeric_only=True,
    ),
]


async def load_default_documents(repository: SqlIdentityDocumentRepository, force: bool = False) -> int:
    """
    Store the default document types.

    Args:
        repository: Target repository.
        force: Overwrite even when the table already has rows.

    Returns:
        Number of document types written.
    """
    existing = await repository.count()
    if existing and not force:
        logger.info(f"DB already has {existing} identity documents, skipping defaults")
        return 0

    for document in DEFAULT_IDENTITY_DOCUMENTS:
        await repository.save(document)

    logger.info(f"Loaded {len(DEFAULT_IDENTITY_DOCUMENTS)} default identity documents into DB")
    return len(DEFAULT_IDENTITY_DOCUMENTS)
