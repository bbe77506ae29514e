"""
Shared fixtures: in-memory fakes for the ports and a temp SQLite database.
"""

from datetime import date

import pytest

from src.core.entities.beneficiary import Beneficiary
from src.core.entities.identity_document import IdentityDocument
from src.core.entities.pagination import BeneficiaryListFilter, PagedResult
from src.core.interfaces.beneficiary_repository import IBeneficiaryRepository
from src.core.interfaces.identity_document_repository import IIdentityDocumentRepository
from src.infrastructure.db.database import create_db_engine, create_session_factory, init_db


# ── Fakes ──

class FakeBeneficiaryRepository(IBeneficiaryRepository):
    """Dict-backed repository that records every call."""

    def __init__(self):
        self.rows: dict[int, Beneficiary] = {}
        self.calls: list[tuple] = []
        self.last_filter: BeneficiaryListFilter | None = None
        self._next_id = 1

    async def add(self, beneficiary):
        self.calls.append(("add", beneficiary))
        new_id = self._next_id
        self._next_id += 1
        self.rows[new_id] = beneficiary.with_id(new_id).unwrap()
        return new_id

    async def update(self, beneficiary):
        self.calls.append(("update", beneficiary))
        if beneficiary.id in self.rows:
            self.rows[beneficiary.id] = beneficiary

    async def delete(self, beneficiary_id):
        self.calls.append(("delete", beneficiary_id))
        self.rows.pop(beneficiary_id, None)

    async def get_by_id(self, beneficiary_id):
        self.calls.append(("get_by_id", beneficiary_id))
        return self.rows.get(beneficiary_id)

    async def list_paged(self, filter):
        self.calls.append(("list_paged", filter))
        criteria = filter.normalized()
        self.last_filter = criteria
        items = sorted(self.rows.values(), key=lambda b: (b.last_names, b.first_names, b.id))
        page_items = items[criteria.offset:criteria.offset + criteria.page_size]
        return PagedResult.of(page_items, len(items), criteria.page, criteria.page_size)

    def called(self, name: str) -> bool:
        return any(call[0] == name for call in self.calls)


class FakeIdentityDocumentRepository(IIdentityDocumentRepository):

    def __init__(self, documents=()):
        self.documents = {d.id: d for d in documents}

    async def get_by_id(self, document_id):
        return self.documents.get(document_id)

    async def list_active(self):
        return [d for d in self.documents.values() if d.is_active]


# ── Domain fixtures ──

@pytest.fixture
def dni():
    """Active, 8 characters, digits only."""
    return IdentityDocument(id=1, name="DNI", abbreviation="DNI", country="Peru", length=8, numeric_only=True)


@pytest.fixture
def passport():
    """Active, 9 characters, alphanumeric."""
    return IdentityDocument(id=3, name="Pasaporte", abbreviation="PAS", country="Peru", length=9)


@pytest.fixture
def inactive_document():
    return IdentityDocument(
        id=9, name="Libreta Militar", abbreviation="LM", country="Peru", length=8,
        numeric_only=True, is_active=False,
    )


@pytest.fixture
def ana(dni):
    return Beneficiary.create(
        first_names="Ana",
        last_names="Diaz",
        document=dni,
        document_number="12345678",
        birth_date=date(1990, 5, 1),
        gender="f",
    ).unwrap()


@pytest.fixture
def beneficiary_repo():
    return FakeBeneficiaryRepository()


@pytest.fixture
def document_repo(dni, passport, inactive_document):
    return FakeIdentityDocumentRepository([dni, passport, inactive_document])


# ── Database ──

@pytest.fixture
def session_factory(tmp_path):
    """Fresh SQLite file per test, tables created."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'test.db'}", echo=False)
    init_db(engine)
    yield create_session_factory(engine)
    engine.dispose()
