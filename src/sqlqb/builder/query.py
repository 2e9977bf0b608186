"""Fluent builder for SQL SELECT statements."""

import re
from typing import Any, Optional, Sequence

from sqlqb.builder.clauses import Clause, Delimiter, RawClause, StructuredClause

# Optional sign, ASCII digits with optional fraction, optional exponent.
# Surrounding ASCII whitespace is allowed.
NUMERIC_PATTERN = re.compile(
    r"^[ \t\n\r\v\f]*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?[ \t\n\r\v\f]*\Z", re.ASCII
)

NO_LIMIT = -1


class InvalidTableNameError(ValueError):
    """Raised by ``validate_table_name`` for blank table names."""
    pass


def validate_table_name(name: str) -> str:
    """Reject empty or whitespace-only table names. Returns the name unchanged."""
    if not name or not name.strip():
        raise InvalidTableNameError("Table name must not be empty.")
    return name


def is_numeric(value: str) -> bool:
    return NUMERIC_PATTERN.match(value) is not None


class QueryBuilder:
    """Accumulates the parts of one SELECT statement and renders them.

    Every configuration method returns the builder itself so calls chain:

        >>> QueryBuilder("users").where("age", ">", "18").limit(10).to_sql()
        'SELECT * FROM users WHERE age > 18 LIMIT 10;'

    Nothing is validated or escaped. Malformed input produces malformed SQL.
    """

    def __init__(self, table_name: str):
        self._table_name = table_name
        self._select_columns: list[str] = ["*"]
        self._where_clauses: list[Clause] = []
        self._max_results = NO_LIMIT
        self._order_by: Optional[str] = None

    @property
    def table_name(self) -> str:
        return self._table_name

    @property
    def select_columns(self) -> tuple[str, ...]:
        return tuple(self._select_columns)

    @property
    def where_clauses(self) -> tuple[Clause, ...]:
        return tuple(self._where_clauses)

    @property
    def max_results(self) -> int:
        return self._max_results

    @property
    def ordering(self) -> Optional[str]:
        return self._order_by

    def where(self, column: str, value_or_operator: Any, value: Any = None) -> "QueryBuilder":
        """Add an AND-joined condition.

        Args:
            column: Column name, emitted as given.
            value_or_operator: The value when ``value`` is omitted (implicit ``=``),
                otherwise the comparison operator.
            value: Optional value for the three-argument form.
        """
        if _omitted(value):
            return self._append_where(column, "=", value_or_operator)
        return self._append_where(column, value_or_operator, value)

    def or_where(self, column: str, value_or_operator: Any, value: Any = None) -> "QueryBuilder":
        """Add a condition joined with OR.

        Only the two-argument form joins with OR. The three-argument form
        joins with AND, same as ``where``. Use ``or_where_compare`` for an
        OR-joined comparison.
        """
        if _omitted(value):
            return self._append_where(column, "=", value_or_operator, Delimiter.OR)
        return self._append_where(column, value_or_operator, value)

    def or_where_compare(self, column: str, operator: Any, value: Any) -> "QueryBuilder":
        """Add an OR-joined ``column operator value`` condition."""
        return self._append_where(column, operator, value, Delimiter.OR)

    def _append_where(
        self,
        column: str,
        operator: Any,
        value: Any,
        delimiter: Delimiter = Delimiter.AND,
    ) -> "QueryBuilder":
        self._where_clauses.append(
            StructuredClause(column, str(operator), str(value), delimiter)
        )
        return self

    def where_raw(self, raw_sql: str) -> "QueryBuilder":
        self._where_clauses.append(RawClause(str(raw_sql), Delimiter.AND))
        return self

    def or_where_raw(self, raw_sql: str) -> "QueryBuilder":
        self._where_clauses.append(RawClause(str(raw_sql), Delimiter.OR))
        return self

    def select(self, columns: Sequence[str]) -> "QueryBuilder":
        """Replace the select list. Each column is wrapped in backticks as-is."""
        self._select_columns = [f"`{column}`" for column in columns]
        return self

    def limit(self, amount: int) -> "QueryBuilder":
        """Set the row limit. Negative amounts mean no limit."""
        self._max_results = int(amount)
        return self

    def order_by(self, column: str, direction: str) -> "QueryBuilder":
        self._order_by = f"{column} {direction}"
        return self

    def build_default_query(self) -> str:
        return f"SELECT {', '.join(self._select_columns)} FROM {self._table_name} "

    def parse_clause_value(self, value: str) -> str:
        """Leave numeric literals bare, wrap anything else in single quotes.

        Embedded quotes are not escaped.
        """
        return value if is_numeric(value) else f"'{value}'"

    def append_where_clauses_to_query(self, query: str) -> str:
        query += "WHERE "
        for index, clause in enumerate(self._where_clauses):
            if index >= 1:
                query += f" {clause.delimiter.value} "
            query += clause.render(self.parse_clause_value)
        return query

    def append_order_by_to_query(self, query: str) -> str:
        return f"{query} ORDER BY {self._order_by}"

    def append_limit_sql_to_query(self, query: str) -> str:
        return f"{query} LIMIT {self._max_results};"

    def to_sql(self) -> str:
        """Render the statement. Does not modify the builder.

        Returns:
            ``SELECT <cols> FROM <table> [WHERE ...][ ORDER BY ...][ LIMIT n;]``.
            The trailing ``;`` is only present when a limit is set.
        """
        query = self.build_default_query()

        if self._where_clauses:
            query = self.append_where_clauses_to_query(query)

        if self._order_by:
            query = self.append_order_by_to_query(query)

        if self._max_results >= 0:
            query = self.append_limit_sql_to_query(query)

        return query

    def to_dict(self) -> dict:
        return {
            "table": self._table_name,
            "select": list(self._select_columns),
            "where": [
                {**clause.to_dict(), "sql": clause.render(self.parse_clause_value)}
                for clause in self._where_clauses
            ],
            "order_by": self._order_by,
            "limit": self._max_results if self._max_results >= 0 else None,
            "sql": self.to_sql(),
        }

    def __str__(self) -> str:
        return self.to_sql()

    def __repr__(self) -> str:
        return f"QueryBuilder({self._table_name!r})"


def _omitted(value: Any) -> bool:
    # An empty string counts as a missing third argument.
    return value is None or (isinstance(value, str) and value == "")
