"""Batch rendering of queries described in a JSON file."""

import json
from typing import Annotated, Optional

import typer

from sqlqb.builder.loader import QuerySpecError, build_from_mapping
from sqlqb.builder.query import InvalidTableNameError, validate_table_name
from sqlqb.models.errors import ExitCode, handle_error
from sqlqb.output import format_output, OutputFormat

app = typer.Typer(help="Render many queries from a JSON file.")


def _output():
    from sqlqb.cli import get_output_format
    return get_output_format()


def _strict():
    from sqlqb.cli import is_strict
    return is_strict()


@app.command()
def run(
    file: Annotated[str, typer.Option("--file", help="JSON file with a query object or an array of them")],
    fail_fast: Annotated[bool, typer.Option("--fail-fast", help="Stop at the first invalid query")] = False,
    output: Annotated[Optional[OutputFormat], typer.Option("-o")] = None,
):
    """Render every query in a JSON file.

    Each query object has:
    - "table": table name (required)
    - "select": list of column names
    - "where": list of condition strings ("age > 18", "OR name Bob", "RAW a = 1")
      or one-key objects such as {"or_where": ["name", "Bob"]}
    - "order_by": "column direction" or [column, direction]
    - "limit": integer

    Invalid queries are reported per item unless --fail-fast is given.
    """
    fmt = output or _output()

    try:
        with open(file) as f:
            queries = json.load(f)
    except FileNotFoundError:
        handle_error(ExitCode.INPUT_ERROR, f"File not found: {file}")
    except json.JSONDecodeError as e:
        handle_error(ExitCode.INPUT_ERROR, "File is not valid JSON", detail=str(e))

    if isinstance(queries, dict):
        queries = [queries]
    if not isinstance(queries, list):
        raise QuerySpecError("File must contain a JSON object or array")

    results = []
    for index, item in enumerate(queries):
        try:
            if _strict() and isinstance(item, dict) and isinstance(item.get("table"), str):
                validate_table_name(item["table"])
            query = build_from_mapping(item)
        except (QuerySpecError, InvalidTableNameError) as e:
            if fail_fast:
                raise
            results.append({"index": index, "error": str(e)})
            continue
        results.append({"index": index, "table": query.table_name, "sql": query.to_sql()})

    format_output(results, fmt, columns=["index", "table", "sql"])
