"""
Job Repository Implementation

Repository for job-related database operations: creation with a
duplicate (title, company) check, filtered listing and retrieval with the
owning company.
"""

from decimal import Decimal
from typing import List, Optional, Type

from sqlalchemy.types import Integer, Numeric, Text

from jobly.core.exceptions import DuplicateEntityException, JobNotFoundException
from jobly.repositories.base_repository import BaseRepository
from jobly.schemas.job import Job, JobCreate, JobDetail, JobSearchParams, JobUpdate
from jobly.sql.builder import FilterQuery, Operator, ParamStyle, bind
from jobly.sql.fields import COMPANY_FIELDS, JOB_FIELDS, FieldRegistry
from jobly.utils.logger import get_logger, log_database_operation

logger = get_logger(__name__)


class JobRepository(BaseRepository[Job, JobCreate, JobUpdate]):
    """Repository for job database operations."""

    @property
    def fields(self) -> FieldRegistry:
        return JOB_FIELDS

    @property
    def schema(self) -> Type[Job]:
        return Job

    def not_found(self, key: int) -> JobNotFoundException:
        return JobNotFoundException(key)

    async def create(self, obj_in: JobCreate) -> Job:
        """
        Create a job.

        The duplicate check is a separate query ahead of the insert, and there
        is no unique constraint behind it, so concurrent creates of the same
        (title, companyHandle) can both succeed.

        Raises:
            DuplicateEntityException: If the company already lists this title
        """
        duplicate = await self._fetch_one(
            bind(
                "SELECT id FROM jobs WHERE title = :p1 AND company_handle = :p2",
                [obj_in.title, obj_in.company_handle],
            )
        )
        if duplicate is not None:
            raise DuplicateEntityException(
                f"Duplicate job: {obj_in.title} at {obj_in.company_handle}"
            )

        data = obj_in.public_dict()
        names = list(data)
        placeholders = ", ".join(
            ParamStyle.NAMED.placeholder(index) for index in range(1, len(names) + 1)
        )
        sql = (
            f"INSERT INTO jobs ({', '.join(self.fields.column_for(n) for n in names)}) "
            f"VALUES ({placeholders}) "
            f"RETURNING {self.fields.select_list()}"
        )
        values, types = self.fields.typed_values(data)
        row = await self._fetch_one(bind(sql, values, types))

        job = self._shape(row)
        log_database_operation("create", "jobs", record_id=str(job.id), company=job.company_handle)
        return job

    def build_search_query(self, search_params: Optional[JobSearchParams] = None) -> FilterQuery:
        """Build the listing query for the given filters."""
        params = search_params or JobSearchParams()

        query = FilterQuery(
            f"SELECT {self.fields.select_list()} FROM jobs",
            order_by="title",
        )
        if params.title:
            query.where("title", Operator.ICONTAINS, params.title, Text())
        if params.min_salary is not None:
            query.where("salary", Operator.GTE, params.min_salary, Integer())
        if params.has_equity:
            query.where("equity", Operator.GT, Decimal("0"), Numeric())
        return query

    async def find_all(self, search_params: Optional[JobSearchParams] = None) -> List[Job]:
        """Find all jobs matching every supplied filter."""
        query = self.build_search_query(search_params)
        rows = await self._fetch_all(query.render(ParamStyle.NAMED))
        return self._shape_all(rows)

    async def get(self, job_id: int) -> JobDetail:
        """
        Get a job with its owning company.

        Raises:
            JobNotFoundException: If no job has this id
        """
        row = await self._fetch_one(
            bind(f"SELECT {self.fields.select_list()} FROM jobs WHERE id = :p1", [job_id], [Integer()])
        )
        if row is None:
            raise self.not_found(job_id)

        company = await self._fetch_one(
            bind(
                f"SELECT {COMPANY_FIELDS.select_list()} FROM companies WHERE handle = :p1",
                [row["companyHandle"]],
            )
        )
        return JobDetail.model_validate({**row, "company": company})
