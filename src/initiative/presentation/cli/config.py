"""CLI configuration helpers: options persistence and logging setup."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict

from initiative.data.paths import get_user_data_dir

_DEFAULT_LOG_LEVEL = "INFO"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def debug_enabled() -> bool:
    """Return True only when INITIATIVE_DEBUG is explicitly set to '1'."""
    return os.getenv("INITIATIVE_DEBUG") == "1"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _defaults() -> Dict[str, str]:
    return {"log_level": _DEFAULT_LOG_LEVEL}


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return _defaults()
    except (OSError, ValueError):
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    config = {"log_level": _normalize_log_level(raw.get("log_level"))}
    data_file = raw.get("data_file")
    if isinstance(data_file, str) and data_file.strip():
        config["data_file"] = data_file.strip()
    return config


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"log_level": _normalize_log_level(config.get("log_level"))}
    if config.get("data_file"):
        payload["data_file"] = config["data_file"]
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def configure_logging(log_path: Path, level: str = _DEFAULT_LOG_LEVEL) -> None:
    """Send log records to ``log_path``. The terminal belongs to the UI."""
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_path),
        encoding="utf-8",
        level=getattr(logging, _normalize_log_level(level)),
        format=_LOG_FORMAT,
        force=True,
    )
