"""sqlqb — a fluent builder for SQL SELECT statements."""

from sqlqb.builder.query import QueryBuilder

__version__ = "0.1.0"

__all__ = ["QueryBuilder", "__version__"]
