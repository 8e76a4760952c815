"""Centralized configuration.

All environment variables are read here; no other module calls
os.getenv() directly. Values may also come from a ``.env`` file in the
working directory.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Default data directory: <repo root>/data when installed in editable mode.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    """Directory holding the JSON tables; read at call time."""
    return Path(os.getenv("BACKOFFICE_DATA_DIR") or DEFAULT_DATA_DIR)


def log_level() -> str:
    return os.getenv("BACKOFFICE_LOG_LEVEL", "WARNING").upper()


def _int_setting(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def page_size() -> int:
    return _int_setting("BACKOFFICE_PAGE_SIZE", 10)


def top_products_limit() -> int:
    return _int_setting("BACKOFFICE_TOP_PRODUCTS_LIMIT", 5)


LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
