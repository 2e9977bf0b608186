"""Statement accumulation and rendering."""

from sqlqb.builder.clauses import Delimiter, RawClause, StructuredClause
from sqlqb.builder.query import InvalidTableNameError, QueryBuilder, validate_table_name

__all__ = [
    "Delimiter",
    "InvalidTableNameError",
    "QueryBuilder",
    "RawClause",
    "StructuredClause",
    "validate_table_name",
]
