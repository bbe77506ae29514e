"""
Pydantic schemas — Request bodies.

Shape checks only. Business rules (names, gender, document number) are
enforced by the domain so their messages reach the client unchanged.
"""

from datetime import date

from pydantic import ConfigDict, Field

from src.api.schemas.responses import ApiModel
from src.core.use_cases.create_beneficiary import CreateBeneficiaryInput
from src.core.use_cases.update_beneficiary import UpdateBeneficiaryInput


class BeneficiaryRequest(ApiModel):
    """Body of POST /api/beneficiaries and PUT /api/beneficiaries/{id}."""
    id: int | None = Field(None, description="Ignored; the route id wins on update")
    # null is let through so the domain reports the missing value
    first_names: str | None = ""
    last_names: str | None = ""
    identity_document_id: int = 0
    document_number: str | None = ""
    birth_date: date = Field(description="yyyy-MM-dd")
    gender: str | None = ""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "firstNames": "Ana",
                "lastNames": "Diaz",
                "identityDocumentId": 1,
                "documentNumber": "12345678",
                "birthDate": "1990-05-01",
                "gender": "F",
            }
        }
    )

    def to_create_input(self) -> CreateBeneficiaryInput:
        return CreateBeneficiaryInput(
            first_names=self.first_names,
            last_names=self.last_names,
            identity_document_id=self.identity_document_id,
            document_number=self.document_number,
            birth_date=self.birth_date,
            gender=self.gender,
        )

    def to_update_input(self, beneficiary_id: int) -> UpdateBeneficiaryInput:
        return UpdateBeneficiaryInput(
            id=beneficiary_id,
            first_names=self.first_names,
            last_names=self.last_names,
            identity_document_id=self.identity_document_id,
            document_number=self.document_number,
            birth_date=self.birth_date,
            gender=self.gender,
        )
