"""Configuration file management."""

import json
import os
from pathlib import Path
from typing import Optional

DEFAULT_CONFIG_DIR = Path.home() / ".sqlqb"

DEFAULTS = {
    "output": "sql",
    "strict": False,
}

_TRUE_VALUES = ("1", "true", "yes", "on")


def get_config_dir(override: Optional[Path] = None) -> Path:
    """Resolve config directory: CLI flag > env var > default."""
    if override:
        return override
    env_dir = os.environ.get("SQLQB_CONFIG_DIR")
    if env_dir:
        return Path(env_dir)
    return DEFAULT_CONFIG_DIR


def parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def load_config(config_dir: Optional[Path] = None) -> dict:
    """Load config from config.json and environment variables.

    Precedence: environment variables > config.json > defaults.
    """
    d = get_config_dir(config_dir)
    config_path = d / "config.json"

    config = {}
    if config_path.exists():
        config = json.loads(config_path.read_text())

    # Env vars override config file values
    strict_env = os.environ.get("SQLQB_STRICT")
    return {
        "output": os.environ.get("SQLQB_OUTPUT") or config.get("output", DEFAULTS["output"]),
        "strict": parse_bool(strict_env) if strict_env else parse_bool(config.get("strict", DEFAULTS["strict"])),
    }


def save_config(config: dict, config_dir: Optional[Path] = None) -> Path:
    """Save config to config.json. Returns path to saved file."""
    d = get_config_dir(config_dir)
    d.mkdir(parents=True, exist_ok=True)
    config_path = d / "config.json"
    config_path.write_text(json.dumps(config, indent=2))
    return config_path
