"""
Beneficiary & Identity Document Repositories — SQLAlchemy adapters.

Implement the core ports. Session work is blocking, so every public
coroutine hands it to a worker thread (asyncio.to_thread) and each call
runs in its own session/transaction.
"""

import asyncio
import logging

from sqlalchemy import or_, select, func, delete
from sqlalchemy.orm import sessionmaker

from src.core.entities.beneficiary import Beneficiary
from src.core.entities.identity_document import IdentityDocument
from src.core.entities.pagination import BeneficiaryListFilter, PagedResult
from src.core.interfaces.beneficiary_repository import IBeneficiaryRepository
from src.core.interfaces.identity_document_repository import IIdentityDocumentRepository
from src.infrastructure.db.database import session_scope
from src.infrastructure.db.models import BeneficiaryRecord, IdentityDocumentRecord

logger = logging.getLogger(__name__)

# Integer primary/foreign keys are 32-bit on PostgreSQL; OFFSET is a 64-bit bind
MAX_ROW_ID = 2**31 - 1
MAX_OFFSET = 2**63 - 1


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _storable_id(value: int) -> bool:
    """Ids outside the column range cannot match any row."""
    return 0 < value <= MAX_ROW_ID


class SqlBeneficiaryRepository(IBeneficiaryRepository):
    """Beneficiary persistence on a relational database."""

    def __init__(self, session_factory: sessionmaker | None = None):
        self._session_factory = session_factory

    # ── Port ───────────────────────────────────────────────

    async def add(self, beneficiary: Beneficiary) -> int:
        return await asyncio.to_thread(self._add, beneficiary)

    async def update(self, beneficiary: Beneficiary) -> None:
        await asyncio.to_thread(self._update, beneficiary)

    async def delete(self, beneficiary_id: int) -> None:
        await asyncio.to_thread(self._delete, beneficiary_id)

    async def get_by_id(self, beneficiary_id: int) -> Beneficiary | None:
        return await asyncio.to_thread(self._get_by_id, beneficiary_id)

    async def list_paged(self, filter: BeneficiaryListFilter) -> PagedResult[Beneficiary]:
        return await asyncio.to_thread(self._list_paged, filter)

    # ── Blocking implementations ───────────────────────────

    def _add(self, beneficiary: Beneficiary) -> int:
        with session_scope(self._session_factory) as db:
            record = BeneficiaryRecord.from_entity(beneficiary)
            db.add(record)
            db.flush()
            logger.info(f"Saved beneficiary {record.id} [{record.identity_document_id}:{record.document_number}]")
            return record.id

    def _update(self, beneficiary: Beneficiary) -> None:
        with session_scope(self._session_factory) as db:
            record = db.get(BeneficiaryRecord, beneficiary.id) if _storable_id(beneficiary.id) else None
            if record is None:
                # Row vanished between read and write; last writer wins, nothing to overwrite
                logger.warning(f"Beneficiary {beneficiary.id} not found on update, skipping")
                return
            record.apply(beneficiary)
            logger.info(f"Updated beneficiary {beneficiary.id}")

    def _delete(self, beneficiary_id: int) -> None:
        if not _storable_id(beneficiary_id):
            logger.debug(f"Beneficiary {beneficiary_id} out of id range on delete, nothing to do")
            return
        with session_scope(self._session_factory) as db:
            result = db.execute(delete(BeneficiaryRecord).where(BeneficiaryRecord.id == beneficiary_id))
            if result.rowcount:
                logger.info(f"Deleted beneficiary {beneficiary_id}")
            else:
                logger.debug(f"Beneficiary {beneficiary_id} not found on delete, nothing to do")

    def _get_by_id(self, beneficiary_id: int) -> Beneficiary | None:
        if not _storable_id(beneficiary_id):
            return None
        with session_scope(self._session_factory) as db:
            record = db.get(BeneficiaryRecord, beneficiary_id)
            if record:
                return record.to_entity()
            return None

    def _list_paged(self, filter: BeneficiaryListFilter) -> PagedResult[Beneficiary]:
        criteria = (filter or BeneficiaryListFilter()).normalized()

        if criteria.identity_document_id is not None and not _storable_id(criteria.identity_document_id):
            return PagedResult.of([], total_count=0, page=criteria.page, page_size=criteria.page_size)

        with session_scope(self._session_factory) as db:
            query = select(BeneficiaryRecord)
            query = self._apply_filters(query, criteria)

            total = db.scalar(select(func.count()).select_from(query.subquery())) or 0
            rows = []
            if criteria.offset <= MAX_OFFSET:
                rows = db.scalars(
                    query.order_by(
                        BeneficiaryRecord.last_names,
                        BeneficiaryRecord.first_names,
                        BeneficiaryRecord.id,
                    )
                    .offset(criteria.offset)
                    .limit(criteria.page_size)
                ).all()

            logger.debug(f"Listed {len(rows)}/{total} beneficiaries (page={criteria.page}, size={criteria.page_size})")
            return PagedResult.of(
                [r.to_entity() for r in rows],
                total_count=total,
                page=criteria.page,
                page_size=criteria.page_size,
            )

    @staticmethod
    def _apply_filters(query, criteria: BeneficiaryListFilter):
        if criteria.name:
            pattern = f"%{_escape_like(criteria.name)}%"
            query = query.where(
                or_(
                    BeneficiaryRecord.first_names.ilike(pattern, escape="\\"),
                    BeneficiaryRecord.last_names.ilike(pattern, escape="\\"),
                )
            )
        if criteria.document_number:
            query = query.where(
                BeneficiaryRecord.document_number.startswith(criteria.document_number, autoescape=True)
            )
        if criteria.identity_document_id is not None:
            query = query.where(BeneficiaryRecord.identity_document_id == criteria.identity_document_id)
        return query


class SqlIdentityDocumentRepository(IIdentityDocumentRepository):
    """Identity document types on a relational database."""

    def __init__(self, session_factory: sessionmaker | None = None):
        self._session_factory = session_factory

    # ── Port ───────────────────────────────────────────────

    async def get_by_id(self, document_id: int) -> IdentityDocument | None:
        return await asyncio.to_thread(self._get_by_id, document_id)

    async def list_active(self) -> list[IdentityDocument]:
        return await asyncio.to_thread(self._list, True)

    # ── Administration (reference data upkeep, not part of the port) ──

    async def list_all(self) -> list[IdentityDocument]:
        return await asyncio.to_thread(self._list, False)

    async def save(self, document: IdentityDocument) -> None:
        """Insert or overwrite a document type by id."""
        await asyncio.to_thread(self._save, document)

    async def count(self) -> int:
        return await asyncio.to_thread(self._count)

    # ── Blocking implementations ───────────────────────────

    def _get_by_id(self, document_id: int) -> IdentityDocument | None:
        if not _storable_id(document_id):
            return None
        with session_scope(self._session_factory) as db:
            record = db.get(IdentityDocumentRecord, document_id)
            if record:
                return record.to_entity()
            return None

    def _list(self, active_only: bool) -> list[IdentityDocument]:
        with session_scope(self._session_factory) as db:
            query = select(IdentityDocumentRecord)
            if active_only:
                query = query.where(IdentityDocumentRecord.is_active.is_(True))
            rows = db.scalars(query.order_by(IdentityDocumentRecord.name, IdentityDocumentRecord.id)).all()
            return [r.to_entity() for r in rows]

    def _save(self, document: IdentityDocument) -> None:
        with session_scope(self._session_factory) as db:
            record = db.get(IdentityDocumentRecord, document.id)
            if record is None:
                db.add(IdentityDocumentRecord.from_entity(document))
                logger.info(f"Saved identity document {document.id} [{document.abbreviation}]")
            else:
                record.apply(document)
                logger.info(f"Updated identity document {document.id} [{document.abbreviation}] active={document.is_active}")

    def _count(self) -> int:
        with session_scope(self._session_factory) as db:
            return db.scalar(select(func.count()).select_from(IdentityDocumentRecord)) or 0
