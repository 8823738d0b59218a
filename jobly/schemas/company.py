"""
Company Pydantic Schemas

Request/response models for company-related API endpoints.
"""

from typing import Optional, List
from decimal import Decimal

from pydantic import Field

from jobly.schemas.base import CamelModel, RequestModel, UrlStr


class CompanyCreate(RequestModel):
    """Schema for creating a new company."""

    handle: str = Field(..., min_length=1, max_length=25, description="Unique company handle")
    name: str = Field(..., min_length=1, description="Company name")
    description: str = Field(..., description="Company description")
    num_employees: Optional[int] = Field(None, ge=0, description="Employee count")
    logo_url: Optional[UrlStr] = Field(None, max_length=1000, description="Company logo URL")


class CompanyUpdate(RequestModel):
    """Schema for updating an existing company. Only supplied fields change."""

    name: Optional[str] = Field(None, min_length=1, description="Company name")
    description: Optional[str] = Field(None, description="Company description")
    num_employees: Optional[int] = Field(None, ge=0, description="Employee count")
    logo_url: Optional[UrlStr] = Field(None, max_length=1000, description="Company logo URL")


class CompanySearchParams(CamelModel):
    """Company listing filters."""

    min_employees: Optional[int] = Field(None, ge=0, description="Inclusive lower bound on employees")
    max_employees: Optional[int] = Field(None, ge=0, description="Inclusive upper bound on employees")
    name: Optional[str] = Field(None, description="Case-insensitive substring of the name")


class Company(CamelModel):
    """Schema for company response."""

    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyJob(CamelModel):
    """A job as listed under its company."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None


class CompanyDetail(Company):
    """Company with its jobs."""

    jobs: List[CompanyJob] = Field(default_factory=list)


class CompanyEnvelope(CamelModel):
    company: Company


class CompanyDetailEnvelope(CamelModel):
    company: CompanyDetail


class CompanyListResponse(CamelModel):
    companies: List[Company]


class CompanyDeleted(CamelModel):
    deleted: str
