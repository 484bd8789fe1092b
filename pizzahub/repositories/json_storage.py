"""
Flat-file JSON persistence adapter.

The whole state (four collections) is read and written at once. Reads and
writes are fail-soft: a broken or missing file loads as the empty state and a
failed write is logged and reported through the return value only.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator
import json
import logging
import threading

from pizzahub.core.config import get_settings

logger = logging.getLogger(__name__)

COLLECTIONS = ("pizzahub", "pizzas", "beverages", "orders")

# Serializes load -> mutate -> save sequences inside this process.
_write_lock = threading.RLock()


def data_file() -> Path:
    return get_settings().data_file


def empty_state() -> dict:
    return {name: [] for name in COLLECTIONS}


def db_defaults(db: dict) -> dict:
    for name in COLLECTIONS:
        if not isinstance(db.get(name), list):
            db[name] = []
    return db


def load(path: Path | None = None) -> dict:
    target = Path(path) if path else data_file()
    if not target.exists():
        logger.warning("Data file %s not found; starting from an empty state", target)
        return empty_state()
    try:
        with target.open("r", encoding="utf-8") as f:
            db = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Could not read %s (%s); using an empty state", target, exc)
        return empty_state()
    if not isinstance(db, dict):
        logger.warning("Data file %s does not hold a JSON object; using an empty state", target)
        return empty_state()
    return db_defaults(db)


def save(db: dict, path: Path | None = None) -> bool:
    target = Path(path) if path else data_file()
    try:
        payload = json.dumps(db, ensure_ascii=False, indent=2)
        target.write_text(payload, encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.error("Failed to write %s: %s", target, exc)
        return False
    return True


@contextmanager
def transaction() -> Iterator[dict]:
    """
    Hold the writer lock for a full read-modify-write cycle.

    The loaded state is yielded to the caller and saved when the block exits
    normally. An exception raised inside the block skips the write.
    """
    with _write_lock:
        db = load()
        yield db
        save(db)
