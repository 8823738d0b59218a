"""
Job Pydantic Schemas

Request/response models for job-related API endpoints.
"""

from typing import Optional
from decimal import Decimal

from pydantic import Field

from jobly.schemas.base import CamelModel, RequestModel
from jobly.schemas.company import Company


class JobCreate(RequestModel):
    """Schema for creating a new job."""

    title: str = Field(..., min_length=1, description="Job title")
    salary: Optional[int] = Field(None, ge=0, description="Annual salary")
    equity: Optional[Decimal] = Field(None, ge=0, le=1, description="Equity fraction, 0 to 1")
    company_handle: str = Field(..., min_length=1, max_length=25, description="Owning company handle")


class JobUpdate(RequestModel):
    """Schema for updating an existing job. Only supplied fields change."""

    title: Optional[str] = Field(None, min_length=1, description="Job title")
    salary: Optional[int] = Field(None, ge=0, description="Annual salary")
    equity: Optional[Decimal] = Field(None, ge=0, le=1, description="Equity fraction, 0 to 1")
    company_handle: Optional[str] = Field(None, min_length=1, max_length=25, description="Owning company handle")


class JobSearchParams(CamelModel):
    """Job listing filters."""

    title: Optional[str] = Field(None, description="Case-insensitive substring of the title")
    min_salary: Optional[int] = Field(None, ge=0, description="Inclusive lower bound on salary")
    has_equity: bool = Field(False, description="Only jobs with non-zero equity")


class Job(CamelModel):
    """Schema for job response."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str


class JobDetail(Job):
    """Job with its owning company."""

    company: Company


class JobEnvelope(CamelModel):
    job: JobDetail


class NewJobEnvelope(CamelModel):
    new_job: Job


class JobEditEnvelope(CamelModel):
    job_edit: Job


class JobDeleted(CamelModel):
    msg: str
