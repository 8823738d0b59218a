"""
SQL helpers for the Jobly data-access layer.
"""

from jobly.sql.builder import (
    BoundQuery,
    FilterQuery,
    Operator,
    ParamStyle,
    PartialUpdate,
    Predicate,
    bind,
    sql_for_partial_update,
)
from jobly.sql.fields import (
    COMPANY_FIELDS,
    COMPANY_JOB_FIELDS,
    JOB_FIELDS,
    FieldRegistry,
    FieldSpec,
)

__all__ = [
    "BoundQuery",
    "FilterQuery",
    "Operator",
    "ParamStyle",
    "PartialUpdate",
    "Predicate",
    "bind",
    "sql_for_partial_update",
    "COMPANY_FIELDS",
    "COMPANY_JOB_FIELDS",
    "JOB_FIELDS",
    "FieldRegistry",
    "FieldSpec",
]
