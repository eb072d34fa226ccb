from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, Optional
from decimal import Decimal

# Decimal fraction in [0, 1], e.g. "0", "0.05", "1.0"
EQUITY_PATTERN = r"^(0(\.\d+)?|\.\d+|1(\.0+)?)$"


class JobCreate(BaseModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[str] = Field(None, pattern=EQUITY_PATTERN)
    company_handle: str = Field(..., min_length=1, max_length=25)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"


class JobUpdate(BaseModel):
    """Schema for a partial job update. The owning company cannot change."""
    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[str] = Field(None, pattern=EQUITY_PATTERN)

    class Config:
        extra = "forbid"

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("title cannot be null")
        return v


class JobFilter(BaseModel):
    """
    Recognized filters for listing jobs.

    has_equity only narrows the listing when it is True; False behaves
    like leaving it out.
    """
    min_salary: Optional[int] = Field(None, ge=0)
    title: Optional[str] = None
    has_equity: Optional[bool] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"


class JobRecord(BaseModel):
    """Schema for a job row"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company_handle: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("equity", mode="before")
    @classmethod
    def equity_as_string(cls, v: Any) -> Optional[str]:
        """Drivers hand back NUMERIC as Decimal or float; keep it a decimal string."""
        if v is None or isinstance(v, str):
            return v
        return str(Decimal(str(v)))
