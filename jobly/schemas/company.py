"""
Pydantic schemas for companies.

Attributes are snake_case in Python and camelCase on the outside
(`numEmployees`, `logoUrl`), which is also how listed rows are labelled.
"""

from pydantic import BaseModel, Field, AliasChoices, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional

from jobly.schemas.job import JobRecord


class CompanyCreate(BaseModel):
    """Schema for creating a new company"""
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"


class CompanyUpdate(BaseModel):
    """
    Schema for a partial company update.
    Only fields that were explicitly supplied are written.
    """
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"

    @field_validator("name", "description")
    @classmethod
    def not_null(cls, v: Optional[str]) -> str:
        """name and description are required columns; they can change but not be cleared."""
        if v is None:
            raise ValueError("cannot be null")
        return v


class CompanyFilter(BaseModel):
    """
    Recognized filters for listing companies.

    `name` is also accepted as `nameLike`, the query-string spelling.
    """
    min_employees: Optional[int] = Field(None, ge=0)
    max_employees: Optional[int] = Field(None, ge=0)
    name: Optional[str] = Field(None, validation_alias=AliasChoices("name", "nameLike"))

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"

    @model_validator(mode="after")
    def check_employee_range(self) -> "CompanyFilter":
        """Reject a lower bound above the upper bound."""
        if (
            self.min_employees is not None
            and self.max_employees is not None
            and self.min_employees > self.max_employees
        ):
            raise ValueError("minEmployees cannot be greater than maxEmployees")
        return self


class CompanyRecord(BaseModel):
    """Schema for a company row"""
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CompanyDetail(CompanyRecord):
    """Schema for a single company together with its jobs"""
    jobs: List[JobRecord] = []
