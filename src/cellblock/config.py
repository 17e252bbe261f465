"""
Configuration and environment loading for cellblock.

- Loads settings.yml (YAML) from repo root if present; falls back to environment variables.
- .env is read via python-dotenv before the environment is consulted.
- Exposes SETTINGS with board size, case policy, quit word and log level.
"""
from dataclasses import dataclass
import logging
import os
from typing import Any, Callable

import yaml
from dotenv import load_dotenv

load_dotenv()

log = logging.getLogger("cellblock.config")


def _repo_root() -> str:
    # this file: src/cellblock/config.py → repo root is two levels up
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))


def _load_yaml(path: str) -> dict:
    if not os.path.isfile(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        log.exception("Failed to read %s; using environment only", path)
        return {}
    return data if isinstance(data, dict) else {}


def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


_cfg = _load_yaml(os.path.join(_repo_root(), "settings.yml"))


def _get(name: str, default: Any, cast: Callable[[Any], Any] | None = None) -> Any:
    if name in _cfg:
        val = _cfg[name]
    else:
        val = os.environ.get(name)
        if val is None:
            return default
    if not cast:
        return val
    try:
        return cast(val)
    except (TypeError, ValueError):
        log.error("Invalid value %r for %s; using default %r", val, name, default)
        return default


def _optional_str(val: Any) -> str | None:
    if val is None:
        return None
    text = str(val).strip()
    return text or None


@dataclass(frozen=True)
class Settings:
    board_size: int
    ignore_case: bool
    quit_word: str | None
    log_level: str


SETTINGS = Settings(
    board_size=int(_get("CELLBLOCK_BOARD_SIZE", 8, cast=int)),
    ignore_case=bool(_get("CELLBLOCK_IGNORE_CASE", False, cast=_as_bool)),
    quit_word=_get("CELLBLOCK_QUIT_WORD", "quit", cast=_optional_str),
    log_level=str(_get("CELLBLOCK_LOG_LEVEL", "INFO")).upper(),
)
