"""Low-level YAML helpers for the document store."""
from __future__ import annotations

from pathlib import Path

import yaml

from .errors import DataLoadError


def load_yaml(path: Path) -> object:
    """Load YAML from disk and raise DataLoadError on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataLoadError(f"Unable to read data file: {path}") from exc

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DataLoadError(f"Invalid YAML in {path}: {exc}") from exc


def dump_yaml(payload: object) -> str:
    """Render a payload as block-style YAML, keeping mapping order."""
    return yaml.safe_dump(
        payload,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        indent=2,
    )
