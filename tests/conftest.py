"""
Test Configuration for Jobly

Every test gets its own in-memory SQLite database.
"""

from decimal import Decimal
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from jobly.core.config import Settings
from jobly.core.database import DatabaseManager
from jobly.main import create_app
from jobly.repositories import CompanyRepository, JobRepository
from jobly.schemas.company import CompanyCreate
from jobly.schemas.job import JobCreate

COMPANIES: List[Dict[str, Any]] = [
    {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "numEmployees": 1,
        "logoUrl": "http://c1.img",
    },
    {
        "handle": "c2",
        "name": "C2",
        "description": "Desc2",
        "numEmployees": 2,
        "logoUrl": "http://c2.img",
    },
    {
        "handle": "c3",
        "name": "C3",
        "description": "Desc3",
        "numEmployees": 3,
        "logoUrl": None,
    },
]

JOBS: List[Dict[str, Any]] = [
    {"title": "Software Architect", "salary": 92000, "equity": "0.003", "companyHandle": "c1"},
    {"title": "Data Analyst", "salary": 60000, "equity": "0", "companyHandle": "c1"},
    {"title": "CTO", "salary": 150000, "equity": None, "companyHandle": "c3"},
]


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at a private in-memory database."""
    return Settings(
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        SECRET_KEY="test-secret",
        ENVIRONMENT="testing",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
async def db_manager(test_settings: Settings):
    """Initialized database with empty tables."""
    manager = DatabaseManager(test_settings)
    await manager.init_database()
    await manager.create_tables()
    yield manager
    await manager.close_connections()


@pytest.fixture
def company_repository(db_manager: DatabaseManager) -> CompanyRepository:
    return CompanyRepository(db_manager)


@pytest.fixture
def job_repository(db_manager: DatabaseManager) -> JobRepository:
    return JobRepository(db_manager)


@pytest.fixture
async def seeded_jobs(company_repository: CompanyRepository, job_repository: JobRepository):
    """Seed the sample companies and jobs; returns the created jobs by title."""
    for company in COMPANIES:
        await company_repository.create(CompanyCreate(**company))

    created = {}
    for job in JOBS:
        data = dict(job)
        if data["equity"] is not None:
            data["equity"] = Decimal(data["equity"])
        new_job = await job_repository.create(JobCreate(**data))
        created[new_job.title] = new_job
    return created


@pytest.fixture
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture
def client(app):
    """Test client for API endpoints; runs the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(app) -> Dict[str, str]:
    token = app.state.security.create_access_token("admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(app) -> Dict[str, str]:
    token = app.state.security.create_access_token("u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def seeded_client(client: TestClient, admin_headers: Dict[str, str]):
    """Client whose database holds the sample companies and jobs.

    The created job IDs are available as ``seeded_client.job_ids`` keyed by title.
    """
    for company in COMPANIES:
        response = client.post("/companies", json=company, headers=admin_headers)
        assert response.status_code == 201, response.text

    job_ids = {}
    for job in JOBS:
        response = client.post("/jobs", json=job, headers=admin_headers)
        assert response.status_code == 201, response.text
        job_ids[job["title"]] = response.json()["newJob"]["id"]

    client.job_ids = job_ids
    return client
