"""
Database Models Package

Contains SQLAlchemy ORM models for the Jobly API.
"""

from jobly.core.database import Base
from jobly.models.company import Company
from jobly.models.job import Job

__all__ = [
    "Base",
    "Company",
    "Job",
]
