"""
Database Models — SQLAlchemy.

Tables:
  - identity_documents: Document types (reference data)
  - beneficiaries: Beneficiary records, one document type each
"""

from datetime import datetime

from sqlalchemy import (
    Column, String, Integer, Boolean, Date, DateTime, ForeignKey, Index,
)
from sqlalchemy.orm import DeclarativeBase, relationship

from src.core.entities.beneficiary import Beneficiary
from src.core.entities.identity_document import IdentityDocument


class Base(DeclarativeBase):
    pass


class IdentityDocumentRecord(Base):
    """Identity document type."""
    __tablename__ = "identity_documents"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False)
    abbreviation = Column(String(20), nullable=False)
    country = Column(String(80), nullable=False)
    length = Column(Integer, nullable=False)
    numeric_only = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)

    beneficiaries = relationship("BeneficiaryRecord", back_populates="identity_document")

    def __repr__(self):
        return f"<IdentityDocument {self.id} {self.abbreviation} active={self.is_active}>"

    @classmethod
    def from_entity(cls, document: IdentityDocument) -> "IdentityDocumentRecord":
        return cls(
            id=document.id,
            name=document.name,
            abbreviation=document.abbreviation,
            country=document.country,
            length=document.length,
            numeric_only=document.numeric_only,
            is_active=document.is_active,
        )

    def apply(self, document: IdentityDocument) -> None:
        """Copy entity state onto an existing row."""
        self.name = document.name
        self.abbreviation = document.abbreviation
        self.country = document.country
        self.length = document.length
        self.numeric_only = document.numeric_only
        self.is_active = document.is_active

    def to_entity(self) -> IdentityDocument:
        return IdentityDocument(
            id=self.id,
            name=self.name,
            abbreviation=self.abbreviation,
            country=self.country,
            length=self.length,
            numeric_only=bool(self.numeric_only),
            is_active=bool(self.is_active),
        )


class BeneficiaryRecord(Base):
    """Beneficiary row. Document number is stored already trimmed and validated."""
    __tablename__ = "beneficiaries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_names = Column(String(100), nullable=False)
    last_names = Column(String(100), nullable=False)
    identity_document_id = Column(
        Integer, ForeignKey("identity_documents.id"), nullable=False, index=True
    )
    document_number = Column(String(50), nullable=False)
    birth_date = Column(Date, nullable=False)
    gender = Column(String(1), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    identity_document = relationship("IdentityDocumentRecord", back_populates="beneficiaries")

    __table_args__ = (
        Index("ix_beneficiaries_document_number", "document_number"),
        Index("ix_beneficiaries_names", "last_names", "first_names"),
    )

    def __repr__(self):
        return f"<Beneficiary {self.id} {self.last_names}, {self.first_names}>"

    @classmethod
    def from_entity(cls, beneficiary: Beneficiary) -> "BeneficiaryRecord":
        """New row from an unsaved entity (id assigned by the database)."""
        return cls(
            first_names=beneficiary.first_names,
            last_names=beneficiary.last_names,
            identity_document_id=beneficiary.identity_document_id,
            document_number=beneficiary.document_number,
            birth_date=beneficiary.birth_date,
            gender=beneficiary.gender,
        )

    def apply(self, beneficiary: Beneficiary) -> None:
        self.first_names = beneficiary.first_names
        self.last_names = beneficiary.last_names
        self.identity_document_id = beneficiary.identity_document_id
        self.document_number = beneficiary.document_number
        self.birth_date = beneficiary.birth_date
        self.gender = beneficiary.gender

    def to_entity(self) -> Beneficiary:
        return Beneficiary.rehydrate(
            id=self.id,
            first_names=self.first_names,
            last_names=self.last_names,
            identity_document_id=self.identity_document_id,
            document_number=self.document_number,
            birth_date=self.birth_date,
            gender=self.gender,
        )
