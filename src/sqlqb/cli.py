"""Root CLI application with Typer."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from sqlqb import __version__
from sqlqb.builder.conditions import ConditionSyntaxError
from sqlqb.builder.loader import QuerySpecError
from sqlqb.builder.query import InvalidTableNameError
from sqlqb.config import load_config
from sqlqb.models.errors import handle_error, ExitCode
from sqlqb.output import OutputFormat

app = typer.Typer(
    name="sqlqb",
    help="Build SQL SELECT statements from the terminal.",
    no_args_is_help=True,
    invoke_without_command=True,
    pretty_exceptions_enable=False,
)

# Global state set by the main callback
_config_dir: Optional[Path] = None
_output_format: OutputFormat = OutputFormat.sql
_strict: bool = False
_verbose: bool = False


def get_output_format() -> OutputFormat:
    """Get the globally-configured output format."""
    return _output_format


def is_strict() -> bool:
    """Whether table names are validated before building."""
    return _strict


def debug(message: str) -> None:
    """Echo a diagnostic line to stderr when --verbose is on."""
    if _verbose:
        typer.echo(f"[SQL] {message}", err=True)


# Register sub-apps (imported here to avoid circular imports)
from sqlqb.commands import batch
from sqlqb.commands import build as build_cmd
from sqlqb.commands import config_cmd

app.command(name="build")(build_cmd.build)
app.add_typer(batch.app, name="batch")
app.add_typer(config_cmd.app, name="config")


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Annotated[
        Optional[Path],
        typer.Option("--config-dir", help="Config directory override"),
    ] = None,
    output: Annotated[
        Optional[OutputFormat],
        typer.Option("-o", "--output", help="Output format"),
    ] = None,
    strict: Annotated[
        Optional[bool],
        typer.Option("--strict/--no-strict", help="Reject blank table names"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Print builder diagnostics to stderr"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", help="Show version and exit", is_eager=True),
    ] = False,
):
    """Build SQL SELECT statements from the terminal."""
    global _config_dir, _output_format, _strict, _verbose

    if version:
        typer.echo(f"sqlqb v{__version__}")
        raise typer.Exit()

    _config_dir = config_dir
    _verbose = verbose

    # Store in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["config_dir"] = config_dir
    ctx.obj["verbose"] = verbose

    # Config commands must work even when the stored config is broken
    if ctx.invoked_subcommand == "config":
        return

    try:
        config = load_config(config_dir)
    except json.JSONDecodeError as e:
        handle_error(
            ExitCode.CONFIG_ERROR,
            "Config file is not valid JSON",
            detail=str(e),
            hint="sqlqb config set output sql",
        )

    try:
        _output_format = output or OutputFormat(config["output"])
    except ValueError:
        handle_error(
            ExitCode.CONFIG_ERROR,
            f"Unknown output format in config: {config['output']!r}",
            hint="sqlqb config set output sql",
        )
    _strict = config["strict"] if strict is None else strict

    ctx.obj["output"] = _output_format
    ctx.obj["strict"] = _strict
    debug(f"output={_output_format.value} strict={_strict}")


def main_entrypoint():
    """Entry point for the CLI (used by pyproject.toml scripts)."""
    try:
        app()
    except InvalidTableNameError as e:
        handle_error(ExitCode.VALIDATION_ERROR, str(e), hint="pass a non-empty table name")
    except ConditionSyntaxError as e:
        handle_error(
            ExitCode.INPUT_ERROR,
            str(e),
            hint="conditions look like 'age 18', 'age > 18', 'OR name Bob' or 'RAW a = 1'",
        )
    except QuerySpecError as e:
        handle_error(ExitCode.INPUT_ERROR, str(e))
