"""Build a single statement from command-line options."""

from typing import Annotated, Optional

import typer

from sqlqb.builder.conditions import parse_condition
from sqlqb.builder.query import QueryBuilder, validate_table_name
from sqlqb.models.errors import ExitCode, handle_error
from sqlqb.output import format_query, OutputFormat


def _output():
    from sqlqb.cli import get_output_format
    return get_output_format()


def _strict():
    from sqlqb.cli import is_strict
    return is_strict()


def _debug(message: str) -> None:
    from sqlqb.cli import debug
    debug(message)


def build(
    table: Annotated[str, typer.Argument(help="Table to select from")],
    select: Annotated[
        Optional[list[str]],
        typer.Option("-s", "--select", help="Column to select (repeatable, default *)"),
    ] = None,
    where: Annotated[
        Optional[list[str]],
        typer.Option(
            "-w",
            "--where",
            help="Condition, e.g. 'age > 18', 'OR name Bob', 'RAW a = 1' (repeatable, kept in order)",
        ),
    ] = None,
    order_by: Annotated[Optional[str], typer.Option("--order-by", help="Column to order by")] = None,
    direction: Annotated[
        Optional[str], typer.Option("--direction", help="ASC or DESC (default ASC, needs --order-by)")
    ] = None,
    limit: Annotated[Optional[int], typer.Option("-l", "--limit", help="Maximum rows")] = None,
    output: Annotated[Optional[OutputFormat], typer.Option("-o")] = None,
):
    """Build a SELECT statement and print it.

    Conditions are joined in the order given. A leading OR joins a condition
    with OR instead of AND; RAW passes the rest of the text through verbatim.
    """
    fmt = output or _output()

    if direction and not order_by:
        handle_error(
            ExitCode.INPUT_ERROR,
            "--direction given without --order-by",
            hint="sqlqb build TABLE --order-by COLUMN --direction DESC",
        )

    if _strict():
        validate_table_name(table)

    query = QueryBuilder(table)
    if select:
        query.select(select)
    for text in where or []:
        condition = parse_condition(text)
        _debug(f"condition {text!r} -> {condition}")
        condition.apply(query)
    if order_by:
        query.order_by(order_by, direction or "ASC")
    if limit is not None:
        query.limit(limit)

    _debug(f"{len(query.where_clauses)} where clause(s) on {table}")
    format_query(query.to_dict(), fmt)
