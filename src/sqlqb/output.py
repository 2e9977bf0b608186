"""Output formatting for CLI results."""

import json
from enum import Enum
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table


class OutputFormat(str, Enum):
    sql = "sql"
    json = "json"
    table = "table"


def format_query(query: dict, fmt: OutputFormat = OutputFormat.sql) -> None:
    """Print one rendered query (as produced by ``QueryBuilder.to_dict``)."""
    if fmt == OutputFormat.sql:
        typer.echo(query["sql"])
    elif fmt == OutputFormat.json:
        typer.echo(json.dumps(query, indent=2, default=str))
    elif fmt == OutputFormat.table:
        _print_query_table(query)


def format_output(
    data: Any,
    fmt: OutputFormat = OutputFormat.json,
    columns: Optional[list[str]] = None,
) -> None:
    """Format and print data in the requested format."""
    if data is None:
        typer.echo("{}")
        return

    if fmt == OutputFormat.json:
        typer.echo(json.dumps(data, indent=2, default=str))
    elif fmt == OutputFormat.table:
        _print_table(data, columns)
    elif fmt == OutputFormat.sql:
        _print_sql(data)


def _print_sql(data: Any) -> None:
    """Print bare statements, one per line. Rows without SQL become comments."""
    rows = data if isinstance(data, list) else [data]
    for row in rows:
        if isinstance(row, dict) and "sql" in row:
            typer.echo(row["sql"])
        elif isinstance(row, dict) and "error" in row:
            typer.echo(f"-- error: {row['error']}")
        elif isinstance(row, dict):
            for k, v in row.items():
                typer.echo(f"-- {k}: {v}")
        else:
            typer.echo(str(row))


def _print_table(data: Any, columns: Optional[list[str]] = None) -> None:
    """Print data as a rich table."""
    console = Console()
    if isinstance(data, list):
        if not data:
            typer.echo("(no results)")
            return
        cols = columns or list(data[0].keys())[:8]
        table = Table()
        for col in cols:
            table.add_column(col)
        for row in data:
            table.add_row(*[str(row.get(c, "")) for c in cols])
        console.print(table)
    elif isinstance(data, dict):
        table = Table(show_header=False)
        table.add_column("Field")
        table.add_column("Value")
        for k, v in data.items():
            if isinstance(v, (dict, list)):
                table.add_row(str(k), json.dumps(v, default=str))
            else:
                table.add_row(str(k), str(v))
        console.print(table)


def _print_query_table(query: dict) -> None:
    """Print the clause breakdown of a query followed by its SQL."""
    console = Console()
    console.print(f"\n[bold]{escape(query['table'])}[/bold]")
    console.print(f"[dim]select: {escape(', '.join(query['select']))}[/dim]")

    clauses = query.get("where", [])
    if clauses:
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Join")
        table.add_column("Condition")
        for i, clause in enumerate(clauses):
            # The first clause's delimiter is never rendered
            join = "" if i == 0 else clause["delimiter"]
            style = "dim" if clause["type"] == "raw" else ""
            table.add_row(str(i + 1), join, escape(clause["sql"]), style=style)
        console.print(table)

    if query.get("order_by"):
        console.print(f"[dim]order by: {escape(query['order_by'])}[/dim]")
    if query.get("limit") is not None:
        console.print(f"[dim]limit: {query['limit']}[/dim]")

    # Plain print so the statement is not wrapped or marked up
    console.print(query["sql"], markup=False, highlight=False, soft_wrap=True)
