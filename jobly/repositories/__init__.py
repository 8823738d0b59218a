"""
Repository Layer

Data access layer using the repository pattern for clean separation
of database operations from the HTTP layer.
"""

from .base_repository import BaseRepository
from .company_repository import CompanyRepository
from .job_repository import JobRepository

__all__ = [
    "BaseRepository",
    "CompanyRepository",
    "JobRepository",
]
