"""
SQL Builders

Helpers that assemble parameterized SQL fragments:

- sql_for_partial_update(): SET clause for an UPDATE touching only the
  supplied fields
- FilterQuery: a base SELECT plus AND-joined predicates, rendered with
  placeholders numbered from each predicate's position

Placeholders are rendered in one of two styles. NUMERIC_DOLLAR gives the
PostgreSQL form ($1, $2, ...); NAMED gives SQLAlchemy bind names (:p1, :p2,
...) which BoundQuery.statement() turns into a text() construct that runs on
any dialect.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence

from sqlalchemy import bindparam, text
from sqlalchemy.sql.elements import TextClause
from sqlalchemy.types import TypeEngine

from jobly.core.exceptions import BadRequestException


class ParamStyle(Enum):
    """Placeholder rendering styles."""

    NUMERIC_DOLLAR = "numeric_dollar"
    NAMED = "named"

    def placeholder(self, index: int) -> str:
        if index < 1:
            raise ValueError("Placeholder indices start at 1")
        if self is ParamStyle.NUMERIC_DOLLAR:
            return f"${index}"
        return f":{bind_name(index)}"


def bind_name(index: int) -> str:
    return f"p{index}"


@dataclass
class BoundQuery:
    """Rendered SQL with its ordered parameters and optional bind types."""

    sql: str
    params: List[Any] = field(default_factory=list)
    types: List[Optional[TypeEngine]] = field(default_factory=list)
    style: ParamStyle = ParamStyle.NAMED

    def statement(self) -> TextClause:
        """Build an executable text() construct with typed bind parameters."""
        if self.style is not ParamStyle.NAMED:
            raise ValueError("Only NAMED queries can be executed through SQLAlchemy")

        types = self.types or [None] * len(self.params)
        binds = [
            bindparam(bind_name(index), value=value, type_=type_)
            for index, (value, type_) in enumerate(zip(self.params, types), start=1)
        ]
        clause = text(self.sql)
        return clause.bindparams(*binds) if binds else clause


@dataclass
class PartialUpdate:
    """SET clause fragment and the values it binds, in the same order."""

    set_cols: str
    values: List[Any]

    @property
    def next_index(self) -> int:
        """Placeholder index for the first parameter after the SET values."""
        return len(self.values) + 1


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
    style: ParamStyle = ParamStyle.NUMERIC_DOLLAR,
) -> PartialUpdate:
    """
    Build the SET clause of a partial UPDATE.

    Keys of ``data_to_update`` are public field names; ``js_to_sql`` maps the
    ones that are stored under a different column name. Clause order follows
    the mapping's iteration order.

        {"firstName": "Aliya", "age": 32}, {"firstName": "first_name"}
        => '"first_name"=$1, "age"=$2', ["Aliya", 32]

    Raises:
        BadRequestException: If there is nothing to update
    """
    keys = list(data_to_update)
    if not keys:
        raise BadRequestException("No data")

    cols = [
        f'"{js_to_sql.get(name, name)}"={style.placeholder(index)}'
        for index, name in enumerate(keys, start=1)
    ]
    return PartialUpdate(
        set_cols=", ".join(cols),
        values=[data_to_update[name] for name in keys],
    )


class Operator(Enum):
    """Comparison operators a Predicate can render."""

    EQ = "="
    GT = ">"
    GTE = ">="
    LTE = "<="
    ICONTAINS = "icontains"


@dataclass(frozen=True)
class Predicate:
    """A single ``column <op> value`` condition."""

    column: str
    operator: Operator
    value: Any
    type_: Optional[TypeEngine] = None

    @property
    def bound_value(self) -> Any:
        if self.operator is Operator.ICONTAINS:
            return f"%{self.value}%"
        return self.value

    def render(self, placeholder: str) -> str:
        if self.operator is Operator.ICONTAINS:
            return f"lower({self.column}) LIKE lower({placeholder})"
        return f"{self.column} {self.operator.value} {placeholder}"


class FilterQuery:
    """
    A base SELECT narrowed by AND-joined predicates.

    Placeholders are assigned when rendering, from each predicate's position,
    so the clause list and the parameter list cannot drift apart.
    """

    def __init__(self, base_sql: str, order_by: Optional[str] = None):
        self.base_sql = base_sql.strip()
        self.order_by = order_by
        self.predicates: List[Predicate] = []

    def where(
        self,
        column: str,
        operator: Operator,
        value: Any,
        type_: Optional[TypeEngine] = None,
    ) -> "FilterQuery":
        self.predicates.append(Predicate(column, operator, value, type_))
        return self

    def render(self, style: ParamStyle = ParamStyle.NUMERIC_DOLLAR) -> BoundQuery:
        """
        Render the query.

        With no predicates the base SELECT is returned untouched. Otherwise a
        WHERE clause is appended, followed by ORDER BY when a sort column was
        given.
        """
        if not self.predicates:
            return BoundQuery(sql=self.base_sql, style=style)

        clauses = [
            predicate.render(style.placeholder(index))
            for index, predicate in enumerate(self.predicates, start=1)
        ]
        sql = f"{self.base_sql} WHERE {' AND '.join(clauses)}"
        if self.order_by:
            sql += f" ORDER BY {self.order_by}"

        return BoundQuery(
            sql=sql,
            params=[predicate.bound_value for predicate in self.predicates],
            types=[predicate.type_ for predicate in self.predicates],
            style=style,
        )


def bind(sql: str, values: Sequence[Any], types: Optional[Sequence[Optional[TypeEngine]]] = None) -> BoundQuery:
    """Wrap hand-written NAMED-style SQL (``:p1``, ``:p2``...) with its values."""
    return BoundQuery(
        sql=sql,
        params=list(values),
        types=list(types) if types is not None else [],
        style=ParamStyle.NAMED,
    )
