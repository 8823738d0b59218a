"""
Field Registries

Per-entity mapping from public (camelCase) API field names to storage
columns and SQLAlchemy column types. The partial-update builder, the
row-shaping SELECT lists and bind-parameter typing all read from here.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from sqlalchemy.types import Integer, Numeric, String, Text, TypeEngine


@dataclass(frozen=True)
class FieldSpec:
    """A public field and the column that stores it."""

    name: str
    column: str
    type_: TypeEngine

    @property
    def translated(self) -> bool:
        return self.name != self.column


class FieldRegistry:
    """Fixed, ordered set of public fields for one table."""

    def __init__(self, table: str, key: str, fields: Iterable[FieldSpec]):
        self.table = table
        self.key = key
        self._fields: Dict[str, FieldSpec] = {}
        for spec in fields:
            if spec.name in self._fields:
                raise ValueError(f"Duplicate field {spec.name!r} in {table} registry")
            self._fields[spec.name] = spec
        if key not in self._fields:
            raise ValueError(f"Key field {key!r} is not registered for {table}")

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._fields.values())

    def __getitem__(self, name: str) -> FieldSpec:
        return self._fields[name]

    @property
    def names(self) -> List[str]:
        return list(self._fields)

    @property
    def key_column(self) -> str:
        return self._fields[self.key].column

    def column_for(self, name: str) -> str:
        """Storage column for a public field; unknown names pass through."""
        spec = self._fields.get(name)
        return spec.column if spec else name

    def type_for(self, name: str) -> Optional[TypeEngine]:
        spec = self._fields.get(name)
        return spec.type_ if spec else None

    def translations(self) -> Dict[str, str]:
        """Public name -> column, for the fields whose names differ."""
        return {spec.name: spec.column for spec in self if spec.translated}

    def select_list(
        self,
        names: Optional[Iterable[str]] = None,
        table_alias: Optional[str] = None,
    ) -> str:
        """
        Render a SELECT column list that shapes rows into public field names.

        Args:
            names: Subset of public fields to select (defaults to all, in
                registry order)
            table_alias: Optional alias to qualify each column with

        Returns:
            str: e.g. 'handle, num_employees AS "numEmployees"'
        """
        prefix = f"{table_alias}." if table_alias else ""
        columns = []
        for name in names if names is not None else self.names:
            spec = self._fields[name]
            if spec.translated or table_alias:
                columns.append(f'{prefix}{spec.column} AS "{spec.name}"')
            else:
                columns.append(spec.column)
        return ", ".join(columns)

    def typed_values(
        self, data: Dict[str, object]
    ) -> Tuple[List[object], List[Optional[TypeEngine]]]:
        """Split ``data`` into its values and the matching bind types, in key order."""
        return list(data.values()), [self.type_for(name) for name in data]


COMPANY_FIELDS = FieldRegistry(
    table="companies",
    key="handle",
    fields=[
        FieldSpec("handle", "handle", String(25)),
        FieldSpec("name", "name", Text()),
        FieldSpec("description", "description", Text()),
        FieldSpec("numEmployees", "num_employees", Integer()),
        FieldSpec("logoUrl", "logo_url", Text()),
    ],
)

JOB_FIELDS = FieldRegistry(
    table="jobs",
    key="id",
    fields=[
        FieldSpec("id", "id", Integer()),
        FieldSpec("title", "title", Text()),
        FieldSpec("salary", "salary", Integer()),
        FieldSpec("equity", "equity", Numeric(asdecimal=True)),
        FieldSpec("companyHandle", "company_handle", String(25)),
    ],
)

# Jobs embedded under a company omit the implied companyHandle.
COMPANY_JOB_FIELDS = ["id", "title", "salary", "equity"]
