"""
Entity: Beneficiary

Person record linked to one identity document. Owned, immutable value:
every change goes through a `with_*` function that returns a new validated
Beneficiary (or the first rule it broke) and never mutates the original.
"""

from dataclasses import dataclass, replace
from datetime import date

from src.core.entities.identity_document import IdentityDocument
from src.core.entities.validation import ValidationError, ValidationResult, require_text

GENDER_MALE = "M"
GENDER_FEMALE = "F"


def normalize_gender(gender: str | None) -> str:
    """Trim + uppercase; only 'M' or 'F' survive."""
    if gender is None or not str(gender).strip():
        raise ValidationError("Gender is required.")
    normalized = str(gender).strip().upper()
    if normalized not in (GENDER_MALE, GENDER_FEMALE):
        raise ValidationError(f"Gender must be '{GENDER_MALE}' or '{GENDER_FEMALE}'.")
    return normalized


def check_document_number(document: IdentityDocument | None, document_number: str | None) -> str:
    """
    Validate a number against its document type.

    Order matters, the first failing rule is reported:
    document present, document active, number present, length, digits.

    Returns:
        The trimmed document number.
    """
    if document is None:
        raise ValidationError("Identity document is required.")
    if not document.is_active:
        raise ValidationError("Identity document must be active.")
    if document_number is None or not str(document_number).strip():
        raise ValidationError("Document number is required.")

    clean = str(document_number).strip()
    if len(clean) != document.length:
        raise ValidationError(f"Document number must have {document.length} characters.")
    if document.numeric_only and not all(c.isdecimal() for c in clean):
        raise ValidationError("Document number only accepts digits.")
    return clean


@dataclass(frozen=True)
class Beneficiary:
    """
    Domain entity: Beneficiary.

    `id == 0` means not persisted yet. `identity_document_id` and
    `document_number` are a copy taken from the assigned document.
    """
    id: int
    first_names: str
    last_names: str
    identity_document_id: int
    document_number: str
    birth_date: date
    gender: str

    def __post_init__(self):
        object.__setattr__(self, "first_names", require_text(self.first_names, "FirstNames is required."))
        object.__setattr__(self, "last_names", require_text(self.last_names, "LastNames is required."))
        object.__setattr__(self, "gender", normalize_gender(self.gender))
        if self.identity_document_id is None or self.identity_document_id <= 0:
            raise ValidationError("Identity document is required.")
        object.__setattr__(
            self, "document_number", require_text(self.document_number, "Document number is required.")
        )

    # ── Construction ───────────────────────────────────────

    @classmethod
    def rehydrate(
        cls,
        id: int,
        first_names: str,
        last_names: str,
        identity_document_id: int,
        document_number: str,
        birth_date: date,
        gender: str,
    ) -> "Beneficiary":
        """
        Rebuild a stored beneficiary.

        Stored rows are trusted: the document number was checked against its
        document type when written, and the type may have been deactivated
        since, so no document lookup happens here.
        """
        return cls(
            id=id,
            first_names=first_names,
            last_names=last_names,
            identity_document_id=identity_document_id,
            document_number=document_number,
            birth_date=birth_date,
            gender=gender,
        )

    @classmethod
    def create(
        cls,
        first_names: str,
        last_names: str,
        document: IdentityDocument | None,
        document_number: str,
        birth_date: date,
        gender: str,
        id: int = 0,
    ) -> ValidationResult["Beneficiary"]:
        """Names and gender are checked before the document."""

        def build() -> "Beneficiary":
            first = require_text(first_names, "FirstNames is required.")
            last = require_text(last_names, "LastNames is required.")
            normalized_gender = normalize_gender(gender)
            number = check_document_number(document, document_number)
            return cls(
                id=id,
                first_names=first,
                last_names=last,
                identity_document_id=document.id,
                document_number=number,
                birth_date=birth_date,
                gender=normalized_gender,
            )

        return ValidationResult.capture(build)

    # ── Updates ────────────────────────────────────────────

    def with_basic_data(
        self,
        first_names: str,
        last_names: str,
        birth_date: date,
        gender: str,
    ) -> ValidationResult["Beneficiary"]:
        """Replace names, birth date and gender. Document fields are untouched."""
        return ValidationResult.capture(
            lambda: replace(
                self,
                first_names=require_text(first_names, "FirstNames is required."),
                last_names=require_text(last_names, "LastNames is required."),
                birth_date=birth_date,
                gender=normalize_gender(gender),
            )
        )

    def with_document(
        self, document: IdentityDocument | None, document_number: str
    ) -> ValidationResult["Beneficiary"]:
        """Assign a document type and number, validated together."""

        def build() -> "Beneficiary":
            number = check_document_number(document, document_number)
            return replace(self, identity_document_id=document.id, document_number=number)

        return ValidationResult.capture(build)

    def with_id(self, id: int) -> ValidationResult["Beneficiary"]:
        """Apply the id generated by persistence."""
        if id is None or id <= 0:
            return ValidationResult.failure("Identifier must be greater than zero.")
        return ValidationResult.success(replace(self, id=id))

    @property
    def is_persisted(self) -> bool:
        return self.id > 0

    @property
    def full_name(self) -> str:
        return f"{self.first_names} {self.last_names}"
