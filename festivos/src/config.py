"""Load config.yaml, falling back to built-in defaults."""

from pathlib import Path

import yaml

DEFAULTS = {
    "timezone_offset": "-05:00",
    "output": {
        "format": "table",
        "csv_path": None,
    },
}


def load_config(path: Path | None = None) -> dict:
    """Load config.yaml and return as dict with defaults merged."""
    if path is None:
        path = python_root() / "config.yaml"
    with open(path) as f:
        cfg = yaml.safe_load(f) or {}

    merged = {k: dict(v) if isinstance(v, dict) else v for k, v in DEFAULTS.items()}
    for key, value in cfg.items():
        # Sections are merged one level deep, scalars replaced
        if isinstance(value, dict) and isinstance(DEFAULTS.get(key), dict):
            merged[key] = {**DEFAULTS[key], **value}
        else:
            merged[key] = value
    return merged


def python_root() -> Path:
    """Return the festivos package directory."""
    return Path(__file__).parent.parent
