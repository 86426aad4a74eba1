"""Configuration file management for nnumber.

Reads/writes ~/.nnumber/config.yaml with the CLI's log level and
input case handling.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".nnumber"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


def _parse_value(val: str):
    """Parse a YAML-like value string into a Python type."""
    if val == "null" or val == "~" or val == "":
        return None
    if val.lower() == "true":
        return True
    if val.lower() == "false":
        return False
    try:
        return int(val)
    except ValueError:
        pass
    # Strip quotes
    if (val.startswith('"') and val.endswith('"')) or \
       (val.startswith("'") and val.endswith("'")):
        return val[1:-1]
    return val


def _default_config() -> dict:
    return {
        "logging": {
            "level": "WARNING",
        },
        "cli": {
            "normalize_case": True,
        },
    }


def load_config() -> dict:
    """Load config from ~/.nnumber/config.yaml.

    Returns default config if the file doesn't exist or can't be read.
    Uses simple key: value parsing to avoid a PyYAML dependency.
    """
    config = _default_config()
    if not CONFIG_FILE.exists():
        return config

    try:
        text = CONFIG_FILE.read_text()
    except OSError as e:
        logger.warning("Could not read %s, using defaults: %s", CONFIG_FILE, e)
        return config

    current_section = None
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or ":" not in stripped:
            continue

        key, _, val = stripped.partition(":")
        key = key.strip()
        val = val.strip()
        is_indented = line.startswith("  ") or line.startswith("\t")

        if not is_indented:
            if not val:
                # Section header (e.g., "logging:")
                current_section = key
                config.setdefault(current_section, {})
            elif isinstance(config.get(key), dict):
                # A scalar cannot replace a section
                current_section = None
                logger.warning("Ignoring %s: %s in %s, expected a section", key, val, CONFIG_FILE)
            else:
                current_section = None
                config[key] = _parse_value(val)
            continue

        if current_section and isinstance(config.get(current_section), dict):
            config[current_section][key] = _parse_value(val)
        else:
            config[key] = _parse_value(val)

    return config


def save_config(config: dict) -> Path:
    """Save config to ~/.nnumber/config.yaml.

    Returns the path to the config file.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    lines = ["# nnumber configuration", ""]

    for section, values in config.items():
        if isinstance(values, dict):
            lines.append(f"{section}:")
            for key, val in values.items():
                lines.append(f"  {key}: {_format_value(val)}")
            lines.append("")
        else:
            lines.append(f"{section}: {_format_value(values)}")

    CONFIG_FILE.write_text("\n".join(lines) + "\n")
    return CONFIG_FILE


def _format_value(val) -> str:
    if val is None:
        return "null"
    if isinstance(val, bool):
        return "true" if val else "false"
    if isinstance(val, str):
        return f"\"{val}\""
    return str(val)
