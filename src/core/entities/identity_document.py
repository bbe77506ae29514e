"""
Entity: IdentityDocument

Reference data describing a type of identity document (DNI, passport, ...)
and the format its numbers must follow. Pure model, no framework or database.
"""

from dataclasses import dataclass, replace

from src.core.entities.validation import ValidationError, ValidationResult, require_text


@dataclass(frozen=True)
class IdentityDocument:
    """Identity document type. Immutable except for its activation flag."""
    id: int
    name: str
    abbreviation: str
    country: str
    length: int                  # exact length of any document number
    numeric_only: bool = False   # digits only when True
    is_active: bool = True

    def __post_init__(self):
        object.__setattr__(self, "name", require_text(self.name, "Document name is required."))
        object.__setattr__(
            self, "abbreviation", require_text(self.abbreviation, "Document abbreviation is required.")
        )
        object.__setattr__(self, "country", require_text(self.country, "Document country is required."))
        if self.length is None or self.length <= 0:
            raise ValidationError("Document length must be greater than zero.")

    @classmethod
    def create(
        cls,
        id: int,
        name: str,
        abbreviation: str,
        country: str,
        length: int,
        numeric_only: bool = False,
        is_active: bool = True,
    ) -> ValidationResult["IdentityDocument"]:
        """Validated construction that reports failures instead of raising."""
        return ValidationResult.capture(
            lambda: cls(
                id=id,
                name=name,
                abbreviation=abbreviation,
                country=country,
                length=length,
                numeric_only=numeric_only,
                is_active=is_active,
            )
        )

    def activate(self) -> "IdentityDocument":
        return replace(self, is_active=True)

    def deactivate(self) -> "IdentityDocument":
        return replace(self, is_active=False)
