"""Helpers for resolving per-user file locations."""
from __future__ import annotations

import os
from pathlib import Path

APP_DIR_NAME = "initiative"
DATA_FILE_NAME = "data.yaml"
LOG_FILE_NAME = "initiative.log"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / APP_DIR_NAME
        return Path.home() / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_default_data_path(base_dir: Path | str | None = None) -> Path:
    """Return the YAML document path, under ``base_dir`` when given."""
    if base_dir is not None:
        return Path(base_dir) / DATA_FILE_NAME
    return get_user_data_dir() / DATA_FILE_NAME


def get_log_path(base_dir: Path | str | None = None) -> Path:
    """Return the log file path, under ``base_dir`` when given."""
    if base_dir is not None:
        return Path(base_dir) / LOG_FILE_NAME
    return get_user_data_dir() / LOG_FILE_NAME
