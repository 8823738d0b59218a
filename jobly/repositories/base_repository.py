"""
Base Repository Pattern Implementation

Provides an abstract base repository with the operations both entities
share: keyed partial update and keyed delete, driven by the entity's
field registry.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from jobly.core.database import DatabaseManager
from jobly.core.exceptions import NotFoundException
from jobly.sql.builder import BoundQuery, ParamStyle, bind, sql_for_partial_update
from jobly.sql.fields import FieldRegistry
from jobly.utils.logger import get_logger, log_database_operation

ReadSchemaType = TypeVar("ReadSchemaType", bound=BaseModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

logger = get_logger(__name__)


class BaseRepository(Generic[ReadSchemaType, CreateSchemaType, UpdateSchemaType], ABC):
    """Abstract base repository providing common keyed operations."""

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    @property
    @abstractmethod
    def fields(self) -> FieldRegistry:
        """Return the field registry for this entity."""

    @property
    @abstractmethod
    def schema(self) -> Type[ReadSchemaType]:
        """Return the public read schema."""

    @abstractmethod
    def not_found(self, key: Any) -> NotFoundException:
        """Build the exception raised when ``key`` matches no row."""

    @property
    def table(self) -> str:
        return self.fields.table

    def _shape(self, row: Dict[str, Any]) -> ReadSchemaType:
        return self.schema.model_validate(row)

    def _shape_all(self, rows: List[Dict[str, Any]]) -> List[ReadSchemaType]:
        return [self._shape(row) for row in rows]

    async def _fetch_one(self, query: BoundQuery) -> Optional[Dict[str, Any]]:
        return await self.db_manager.fetch_one(query)

    async def _fetch_all(self, query: BoundQuery) -> List[Dict[str, Any]]:
        return await self.db_manager.fetch_all(query)

    async def update(self, key: Any, obj_in: UpdateSchemaType) -> ReadSchemaType:
        """
        Partial update: only the fields present in ``obj_in`` change.

        Raises:
            BadRequestException: If ``obj_in`` carries no fields
            NotFoundException: If no row has this key
        """
        data = obj_in.model_dump(by_alias=True, exclude_unset=True)
        update = sql_for_partial_update(data, self.fields.translations(), style=ParamStyle.NAMED)
        key_placeholder = ParamStyle.NAMED.placeholder(update.next_index)

        sql = (
            f"UPDATE {self.table} "
            f"SET {update.set_cols} "
            f"WHERE {self.fields.key_column} = {key_placeholder} "
            f"RETURNING {self.fields.select_list()}"
        )
        values, types = self.fields.typed_values(data)
        key_type = self.fields.type_for(self.fields.key)

        row = await self._fetch_one(bind(sql, [*values, key], [*types, key_type]))
        if row is None:
            raise self.not_found(key)

        log_database_operation("update", self.table, record_id=str(key), fields=list(data))
        return self._shape(row)

    async def remove(self, key: Any) -> None:
        """
        Delete the row with this key.

        Raises:
            NotFoundException: If no row was deleted
        """
        key_column = self.fields.key_column
        row = await self._fetch_one(
            bind(
                f"DELETE FROM {self.table} WHERE {key_column} = :p1 RETURNING {key_column}",
                [key],
                [self.fields.type_for(self.fields.key)],
            )
        )
        if row is None:
            raise self.not_found(key)

        log_database_operation("delete", self.table, record_id=str(key))
