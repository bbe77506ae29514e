"""
Pydantic schemas — Response models for the API (camelCase on the wire).
"""

from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class BeneficiaryResponse(ApiModel):
    id: int
    first_names: str
    last_names: str
    identity_document_id: int
    document_number: str
    birth_date: date              # serialized as yyyy-MM-dd
    gender: str


class BeneficiaryPageResponse(ApiModel):
    items: list[BeneficiaryResponse]
    total_count: int
    page: int
    page_size: int
    total_pages: int


class IdentityDocumentResponse(ApiModel):
    id: int
    name: str
    abbreviation: str
    country: str
    length: int
    numeric_only: bool
    is_active: bool


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    version: str
    database: str
    environment: str
