"""
Pydantic schemas for filters, updates and records.
"""

from jobly.schemas.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyFilter,
    CompanyRecord,
    CompanyDetail,
)
from jobly.schemas.job import JobCreate, JobUpdate, JobFilter, JobRecord

__all__ = [
    "CompanyCreate",
    "CompanyUpdate",
    "CompanyFilter",
    "CompanyRecord",
    "CompanyDetail",
    "JobCreate",
    "JobUpdate",
    "JobFilter",
    "JobRecord",
]
