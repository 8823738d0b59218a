"""
Job API v1 Endpoints

RESTful endpoints for job management.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from jobly.api.deps import get_job_repository, get_job_search_params
from jobly.core.security import require_admin
from jobly.repositories import JobRepository
from jobly.schemas.job import (
    Job,
    JobCreate,
    JobDeleted,
    JobEditEnvelope,
    JobEnvelope,
    JobSearchParams,
    JobUpdate,
    NewJobEnvelope,
)
from jobly.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=NewJobEnvelope, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_data: JobCreate,
    admin: Dict[str, Any] = Depends(require_admin),
    repository: JobRepository = Depends(get_job_repository),
):
    """Create a new job."""
    job = await repository.create(job_data)
    logger.info("Job created", job_id=job.id, by=admin["username"])
    return NewJobEnvelope(new_job=job)


@router.get("", response_model=List[Job])
async def list_jobs(
    search_params: JobSearchParams = Depends(get_job_search_params),
    repository: JobRepository = Depends(get_job_repository),
):
    """List jobs, optionally filtered by title, minimum salary and equity."""
    return await repository.find_all(search_params)


@router.get("/{job_id}", response_model=JobEnvelope)
async def get_job(
    job_id: int,
    repository: JobRepository = Depends(get_job_repository),
):
    """Get a job and its company."""
    job = await repository.get(job_id)
    return JobEnvelope(job=job)


@router.patch("/{job_id}", response_model=JobEditEnvelope)
async def update_job(
    job_id: int,
    job_data: JobUpdate,
    admin: Dict[str, Any] = Depends(require_admin),
    repository: JobRepository = Depends(get_job_repository),
):
    """Update the supplied fields of a job."""
    job = await repository.update(job_id, job_data)
    return JobEditEnvelope(job_edit=job)


@router.delete("/{job_id}", response_model=JobDeleted)
async def delete_job(
    job_id: int,
    admin: Dict[str, Any] = Depends(require_admin),
    repository: JobRepository = Depends(get_job_repository),
):
    """Delete a job."""
    await repository.remove(job_id)
    logger.info("Job deleted", job_id=job_id, by=admin["username"])
    return JobDeleted(msg="Job Deleted")
