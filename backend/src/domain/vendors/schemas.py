"""Pydantic schema for vendor creation requests.

The request travels from the submission step to the Celery task as JSON,
so it must round-trip through model_dump(mode="json").
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from .contract_type import ContractType


class CreateVendorRequest(BaseModel):
    """Data needed to onboard a vendor.

    The document is kept as typed (punctuation allowed); the pipeline
    normalizes it to digits. Email is lowercased so uniqueness is
    case-insensitive.
    """
    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Vendor's full name or company name",
        examples=["Joao Silva"]
    )
    document: str = Field(
        ...,
        min_length=1,
        max_length=32,
        description="CPF or CNPJ, digits with optional punctuation",
        examples=["111.444.777-35"]
    )
    email: EmailStr = Field(
        ...,
        description="Vendor's email (unique across the roster)",
        examples=["joao.silva@acme.com.br"]
    )
    contract_type: ContractType = Field(
        ...,
        description="Contract type; decides CPF vs CNPJ and the code suffix"
    )
    branch_id: str = Field(
        ...,
        min_length=1,
        description="Branch the vendor is attached to (must be active)",
        examples=["1"]
    )
    birth_date: Optional[date] = Field(
        default=None,
        description="Birth date (individuals only, optional)"
    )

    @field_validator('name')
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('name must not be blank')
        return v

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()
