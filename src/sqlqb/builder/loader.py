"""Build a QueryBuilder from a JSON-like query description.

Example document:

    {
        "table": "users",
        "select": ["id", "name"],
        "where": ["age > 18", "OR name Bob", {"where_raw": ["deleted_at IS NULL"]}],
        "order_by": ["name", "ASC"],
        "limit": 10
    }
"""

from typing import Any

from sqlqb.builder.conditions import ConditionSyntaxError, parse_condition
from sqlqb.builder.query import QueryBuilder

KNOWN_KEYS = {"table", "select", "where", "order_by", "limit"}

WHERE_METHODS = ("where", "or_where", "or_where_compare", "where_raw", "or_where_raw")


class QuerySpecError(ValueError):
    """Raised when a query description is malformed."""
    pass


def build_from_mapping(data: Any) -> QueryBuilder:
    """Replay a query description onto a fresh builder, in document order."""
    if not isinstance(data, dict):
        raise QuerySpecError("Query must be a JSON object")

    unknown = set(data) - KNOWN_KEYS
    if unknown:
        raise QuerySpecError(f"Unknown query keys: {', '.join(sorted(unknown))}")

    table = data.get("table")
    if not isinstance(table, str):
        raise QuerySpecError("'table' is required and must be a string")

    builder = QueryBuilder(table)

    if "select" in data:
        columns = data["select"]
        if not isinstance(columns, list) or not all(isinstance(c, str) for c in columns):
            raise QuerySpecError("'select' must be a list of column names")
        builder.select(columns)

    where = data.get("where", [])
    if not isinstance(where, list):
        raise QuerySpecError("'where' must be a list")
    for entry in where:
        _apply_where_entry(builder, entry)

    if data.get("order_by") is not None:
        column, direction = _parse_order_by(data["order_by"])
        builder.order_by(column, direction)

    if data.get("limit") is not None:
        limit = data["limit"]
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise QuerySpecError("'limit' must be an integer")
        builder.limit(limit)

    return builder


def _apply_where_entry(builder: QueryBuilder, entry: Any) -> None:
    if isinstance(entry, str):
        try:
            parse_condition(entry).apply(builder)
        except ConditionSyntaxError as e:
            raise QuerySpecError(str(e)) from e
        return

    if not isinstance(entry, dict) or len(entry) != 1:
        raise QuerySpecError(
            f"Where entry must be a condition string or a one-key object: {entry!r}"
        )

    method, args = next(iter(entry.items()))
    if method not in WHERE_METHODS:
        raise QuerySpecError(
            f"Unknown where method {method!r} (expected one of: {', '.join(WHERE_METHODS)})"
        )
    if isinstance(args, str):
        args = [args]
    if not isinstance(args, list):
        raise QuerySpecError(f"Arguments for {method!r} must be a list")

    try:
        getattr(builder, method)(*args)
    except TypeError as e:
        raise QuerySpecError(f"Bad arguments for {method!r}: {args!r}") from e


def _parse_order_by(value: Any) -> tuple[str, str]:
    if isinstance(value, str):
        parts = value.split()
        if len(parts) == 1:
            return parts[0], "ASC"
        if len(parts) == 2:
            return parts[0], parts[1]
    elif isinstance(value, list) and len(value) == 2 and all(isinstance(v, str) for v in value):
        return value[0], value[1]
    raise QuerySpecError("'order_by' must be \"column direction\" or [column, direction]")
