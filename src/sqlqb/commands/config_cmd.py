"""Config commands: show, set."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from sqlqb.config import DEFAULTS, get_config_dir, load_config, parse_bool, save_config
from sqlqb.models.errors import ExitCode, handle_error
from sqlqb.output import format_output, OutputFormat

app = typer.Typer(help="Configuration management.")


def _config_dir(ctx: typer.Context) -> Optional[Path]:
    return (ctx.obj or {}).get("config_dir")


@app.command()
def show(
    ctx: typer.Context,
    output: Annotated[OutputFormat, typer.Option("-o")] = OutputFormat.json,
):
    """Display the effective configuration."""
    cfg_dir = _config_dir(ctx)
    config = load_config(cfg_dir)
    config["config_dir"] = str(get_config_dir(cfg_dir))
    format_output(config, output)


@app.command("set")
def set_value(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Config key (output, strict)")],
    value: Annotated[str, typer.Argument(help="New value")],
    output: Annotated[OutputFormat, typer.Option("-o")] = OutputFormat.json,
):
    """Set a configuration value in config.json."""
    if key not in DEFAULTS:
        handle_error(
            ExitCode.CONFIG_ERROR,
            f"Unknown config key: {key}",
            hint=f"valid keys: {', '.join(DEFAULTS)}",
        )

    if key == "output":
        try:
            stored = OutputFormat(value).value
        except ValueError:
            handle_error(
                ExitCode.CONFIG_ERROR,
                f"Unknown output format: {value}",
                hint=f"one of: {', '.join(f.value for f in OutputFormat)}",
            )
    else:
        stored = parse_bool(value)

    cfg_dir = _config_dir(ctx)
    config_path = get_config_dir(cfg_dir) / "config.json"
    # Only the file's own values are rewritten, not env overrides
    current = {}
    if config_path.exists():
        try:
            current = json.loads(config_path.read_text())
        except json.JSONDecodeError:
            # Unreadable file is replaced
            current = {}
    current[key] = stored

    path = save_config(current, cfg_dir)
    format_output({"status": "saved", "config_file": str(path), key: stored}, output)
