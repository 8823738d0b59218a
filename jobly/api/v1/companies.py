"""
Company API v1 Endpoints

RESTful endpoints for company management. Creating, updating and deleting
companies requires an admin token; reads are public.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Path, status

from jobly.api.deps import get_company_repository, get_company_search_params
from jobly.core.security import require_admin
from jobly.repositories import CompanyRepository
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDeleted,
    CompanyDetailEnvelope,
    CompanyEnvelope,
    CompanyListResponse,
    CompanySearchParams,
    CompanyUpdate,
)
from jobly.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("", response_model=CompanyEnvelope, status_code=status.HTTP_201_CREATED)
async def create_company(
    company_data: CompanyCreate,
    admin: Dict[str, Any] = Depends(require_admin),
    repository: CompanyRepository = Depends(get_company_repository),
):
    """Create a new company."""
    company = await repository.create(company_data)
    logger.info("Company created", handle=company.handle, by=admin["username"])
    return CompanyEnvelope(company=company)


@router.get("", response_model=CompanyListResponse)
async def list_companies(
    search_params: CompanySearchParams = Depends(get_company_search_params),
    repository: CompanyRepository = Depends(get_company_repository),
):
    """List companies, optionally filtered by size range and name."""
    companies = await repository.find_all(search_params)
    return CompanyListResponse(companies=companies)


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
async def get_company(
    handle: str = Path(...),
    repository: CompanyRepository = Depends(get_company_repository),
):
    """Get a company and its jobs."""
    company = await repository.get(handle)
    return CompanyDetailEnvelope(company=company)


@router.patch("/{handle}", response_model=CompanyEnvelope)
async def update_company(
    company_data: CompanyUpdate,
    handle: str = Path(...),
    admin: Dict[str, Any] = Depends(require_admin),
    repository: CompanyRepository = Depends(get_company_repository),
):
    """Update the supplied fields of a company."""
    company = await repository.update(handle, company_data)
    return CompanyEnvelope(company=company)


@router.delete("/{handle}", response_model=CompanyDeleted)
async def delete_company(
    handle: str = Path(...),
    admin: Dict[str, Any] = Depends(require_admin),
    repository: CompanyRepository = Depends(get_company_repository),
):
    """Delete a company (and, through the foreign key, its jobs)."""
    await repository.remove(handle)
    logger.info("Company deleted", handle=handle, by=admin["username"])
    return CompanyDeleted(deleted=handle)
