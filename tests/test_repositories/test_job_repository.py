"""
Tests for JobRepository.
"""

from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from jobly.core.config import Settings
from jobly.core.database import DatabaseManager
from jobly.core.exceptions import BadRequestException, DuplicateEntityException, JobNotFoundException
from jobly.repositories import JobRepository
from jobly.schemas.job import JobCreate, JobSearchParams, JobUpdate
from jobly.sql.builder import ParamStyle


@pytest.mark.unit
class TestJobSearchQuery:
    """Test listing query construction without a database."""

    @pytest.fixture
    def repository(self, test_settings: Settings) -> JobRepository:
        return JobRepository(DatabaseManager(test_settings))

    def test_unfiltered(self, repository):
        rendered = repository.build_search_query(JobSearchParams()).render()

        assert "WHERE" not in rendered.sql
        assert rendered.params == []

    def test_has_equity_alone_filters(self, repository):
        """Test that hasEquity on its own still produces a WHERE clause."""
        rendered = repository.build_search_query(JobSearchParams(has_equity=True)).render()

        assert rendered.sql.endswith("FROM jobs WHERE equity > $1 ORDER BY title")
        assert rendered.params == [Decimal("0")]

    def test_has_equity_false_is_ignored(self, repository):
        rendered = repository.build_search_query(
            JobSearchParams(title="eng", has_equity=False)
        ).render()

        assert "equity >" not in rendered.sql
        assert rendered.params == ["%eng%"]

    def test_all_filters(self, repository):
        params = JobSearchParams(title="eng", min_salary=1000, has_equity=True)

        rendered = repository.build_search_query(params).render(ParamStyle.NUMERIC_DOLLAR)

        assert rendered.sql.endswith(
            "WHERE lower(title) LIKE lower($1) AND salary >= $2 AND equity > $3 ORDER BY title"
        )
        assert rendered.params == ["%eng%", 1000, Decimal("0")]


@pytest.mark.integration
class TestJobRepository:
    """Test JobRepository against the database."""

    async def test_create(self, job_repository, seeded_jobs):
        """Test that a created job gets an id and keeps its fields."""
        job = await job_repository.create(
            JobCreate(title="New", salary=100, equity=Decimal("0.1"), company_handle="c2")
        )

        assert isinstance(job.id, int)
        assert job.title == "New"
        assert job.salary == 100
        assert float(job.equity) == pytest.approx(0.1)
        assert job.company_handle == "c2"

    async def test_create_without_optional_fields(self, job_repository, seeded_jobs):
        job = await job_repository.create(JobCreate(title="Intern", company_handle="c2"))

        assert job.salary is None
        assert job.equity is None

    async def test_create_duplicate(self, job_repository, seeded_jobs):
        """Test that a company cannot list the same title twice."""
        with pytest.raises(DuplicateEntityException) as exc_info:
            await job_repository.create(JobCreate(title="CTO", salary=1, company_handle="c3"))

        assert exc_info.value.message == "Duplicate job: CTO at c3"

    async def test_same_title_other_company(self, job_repository, seeded_jobs):
        job = await job_repository.create(JobCreate(title="CTO", company_handle="c1"))

        assert job.company_handle == "c1"

    async def test_create_unknown_company(self, job_repository, seeded_jobs):
        """Test that the foreign key rejects an unknown company."""
        with pytest.raises(IntegrityError):
            await job_repository.create(JobCreate(title="Ghost", company_handle="nope"))

    async def test_find_all_unfiltered(self, job_repository, seeded_jobs):
        jobs = await job_repository.find_all()

        assert sorted(job.title for job in jobs) == ["CTO", "Data Analyst", "Software Architect"]

    async def test_find_all_title(self, job_repository, seeded_jobs):
        jobs = await job_repository.find_all(JobSearchParams(title="ANALYST"))

        assert [job.title for job in jobs] == ["Data Analyst"]

    async def test_find_all_min_salary(self, job_repository, seeded_jobs):
        jobs = await job_repository.find_all(JobSearchParams(min_salary=92000))

        assert [job.title for job in jobs] == ["CTO", "Software Architect"]
        assert all(job.salary >= 92000 for job in jobs)

    async def test_find_all_has_equity(self, job_repository, seeded_jobs):
        """Test that zero and missing equity are both excluded."""
        jobs = await job_repository.find_all(JobSearchParams(has_equity=True))

        assert [job.title for job in jobs] == ["Software Architect"]
        assert all(job.equity > 0 for job in jobs)

    async def test_find_all_combined(self, job_repository, seeded_jobs):
        params = JobSearchParams(title="a", min_salary=70000, has_equity=True)

        jobs = await job_repository.find_all(params)

        assert [job.title for job in jobs] == ["Software Architect"]

    async def test_get_embeds_company(self, job_repository, seeded_jobs):
        job_id = seeded_jobs["CTO"].id

        detail = await job_repository.get(job_id)

        assert detail.id == job_id
        assert detail.company_handle == "c3"
        assert detail.company.public_dict() == {
            "handle": "c3",
            "name": "C3",
            "description": "Desc3",
            "numEmployees": 3,
            "logoUrl": None,
        }

    async def test_get_not_found(self, job_repository, seeded_jobs):
        with pytest.raises(JobNotFoundException) as exc_info:
            await job_repository.get(0)

        assert exc_info.value.message == "No job: 0"

    async def test_update_partial(self, job_repository, seeded_jobs):
        """Test that only the supplied fields change."""
        original = seeded_jobs["Data Analyst"]

        job = await job_repository.update(original.id, JobUpdate(salary=65000))

        assert job.salary == 65000
        assert job.title == original.title
        assert job.company_handle == original.company_handle

    async def test_update_company_handle(self, job_repository, seeded_jobs):
        job_id = seeded_jobs["CTO"].id

        job = await job_repository.update(job_id, JobUpdate(company_handle="c2"))

        assert job.company_handle == "c2"
        assert (await job_repository.get(job_id)).company.name == "C2"

    async def test_update_equity(self, job_repository, seeded_jobs):
        job_id = seeded_jobs["Data Analyst"].id

        job = await job_repository.update(job_id, JobUpdate(equity=Decimal("0.5")))

        assert float(job.equity) == pytest.approx(0.5)

    async def test_update_no_data(self, job_repository, seeded_jobs):
        with pytest.raises(BadRequestException):
            await job_repository.update(seeded_jobs["CTO"].id, JobUpdate())

    async def test_update_not_found(self, job_repository, seeded_jobs):
        with pytest.raises(JobNotFoundException):
            await job_repository.update(0, JobUpdate(title="x"))

    async def test_remove(self, job_repository, seeded_jobs):
        job_id = seeded_jobs["CTO"].id

        await job_repository.remove(job_id)

        with pytest.raises(JobNotFoundException):
            await job_repository.get(job_id)

    async def test_remove_not_found(self, job_repository, seeded_jobs):
        with pytest.raises(JobNotFoundException):
            await job_repository.remove(0)
