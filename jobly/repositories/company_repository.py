"""
Company Repository Implementation

Repository for company-related database operations: creation with a
duplicate-handle check, filtered listing and retrieval with jobs.
"""

from typing import List, Optional, Type

from sqlalchemy.types import Integer, Text

from jobly.core.exceptions import (
    CompanyNotFoundException,
    DuplicateEntityException,
    InvalidFilterException,
)
from jobly.repositories.base_repository import BaseRepository
from jobly.schemas.company import (
    Company,
    CompanyCreate,
    CompanyDetail,
    CompanySearchParams,
    CompanyUpdate,
)
from jobly.sql.builder import FilterQuery, Operator, ParamStyle, bind
from jobly.sql.fields import COMPANY_FIELDS, COMPANY_JOB_FIELDS, JOB_FIELDS, FieldRegistry
from jobly.utils.logger import get_logger, log_database_operation

logger = get_logger(__name__)


class CompanyRepository(BaseRepository[Company, CompanyCreate, CompanyUpdate]):
    """Repository for company database operations."""

    @property
    def fields(self) -> FieldRegistry:
        return COMPANY_FIELDS

    @property
    def schema(self) -> Type[Company]:
        return Company

    def not_found(self, key: str) -> CompanyNotFoundException:
        return CompanyNotFoundException(key)

    async def create(self, obj_in: CompanyCreate) -> Company:
        """
        Create a company.

        Raises:
            DuplicateEntityException: If the handle is already taken
        """
        duplicate = await self._fetch_one(
            bind("SELECT handle FROM companies WHERE handle = :p1", [obj_in.handle])
        )
        if duplicate is not None:
            raise DuplicateEntityException(f"Duplicate company: {obj_in.handle}")

        data = obj_in.public_dict()
        names = list(data)
        placeholders = ", ".join(
            ParamStyle.NAMED.placeholder(index) for index in range(1, len(names) + 1)
        )
        sql = (
            f"INSERT INTO companies ({', '.join(self.fields.column_for(n) for n in names)}) "
            f"VALUES ({placeholders}) "
            f"RETURNING {self.fields.select_list()}"
        )
        values, types = self.fields.typed_values(data)
        row = await self._fetch_one(bind(sql, values, types))

        log_database_operation("create", "companies", record_id=obj_in.handle)
        return self._shape(row)

    def build_search_query(self, search_params: Optional[CompanySearchParams] = None) -> FilterQuery:
        """
        Build the listing query for the given filters.

        Raises:
            InvalidFilterException: If minEmployees is greater than maxEmployees
        """
        params = search_params or CompanySearchParams()
        if (
            params.min_employees is not None
            and params.max_employees is not None
            and params.min_employees > params.max_employees
        ):
            raise InvalidFilterException("Min employees cannot be greater than max employees")

        query = FilterQuery(
            f"SELECT {self.fields.select_list()} FROM companies",
            order_by="name",
        )
        if params.min_employees is not None:
            query.where("num_employees", Operator.GTE, params.min_employees, Integer())
        if params.max_employees is not None:
            query.where("num_employees", Operator.LTE, params.max_employees, Integer())
        if params.name:
            query.where("name", Operator.ICONTAINS, params.name, Text())
        return query

    async def find_all(self, search_params: Optional[CompanySearchParams] = None) -> List[Company]:
        """Find all companies matching every supplied filter."""
        query = self.build_search_query(search_params)
        rows = await self._fetch_all(query.render(ParamStyle.NAMED))
        return self._shape_all(rows)

    async def get(self, handle: str) -> CompanyDetail:
        """
        Get a company with its jobs.

        Raises:
            CompanyNotFoundException: If no company has this handle
        """
        row = await self._fetch_one(
            bind(f"SELECT {self.fields.select_list()} FROM companies WHERE handle = :p1", [handle])
        )
        if row is None:
            raise self.not_found(handle)

        jobs = await self._fetch_all(
            bind(
                f"SELECT {JOB_FIELDS.select_list(COMPANY_JOB_FIELDS)} "
                f"FROM jobs WHERE company_handle = :p1 ORDER BY id",
                [handle],
            )
        )
        return CompanyDetail.model_validate({**row, "jobs": jobs})
