"""
API Dependencies

Dependencies that hand endpoints the per-application repositories and
turn query strings into search parameter objects.
"""

from typing import Optional

from fastapi import Query, Request

from jobly.repositories import CompanyRepository, JobRepository
from jobly.schemas.company import CompanySearchParams
from jobly.schemas.job import JobSearchParams


def get_company_repository(request: Request) -> CompanyRepository:
    return request.app.state.company_repository


def get_job_repository(request: Request) -> JobRepository:
    return request.app.state.job_repository


def get_company_search_params(
    min_employees: Optional[int] = Query(None, alias="minEmployees", ge=0, description="Minimum employees"),
    max_employees: Optional[int] = Query(None, alias="maxEmployees", ge=0, description="Maximum employees"),
    name: Optional[str] = Query(None, description="Name contains (case-insensitive)"),
) -> CompanySearchParams:
    """Company listing filters from the query string."""
    return CompanySearchParams(
        min_employees=min_employees,
        max_employees=max_employees,
        name=name,
    )


def get_job_search_params(
    title: Optional[str] = Query(None, description="Title contains (case-insensitive)"),
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=0, description="Minimum salary"),
    has_equity: bool = Query(False, alias="hasEquity", description="Only jobs offering equity"),
) -> JobSearchParams:
    """Job listing filters from the query string."""
    return JobSearchParams(
        title=title,
        min_salary=min_salary,
        has_equity=has_equity,
    )
