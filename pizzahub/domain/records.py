"""Generic operations over a collection of flat records (list of dicts)."""
from __future__ import annotations

import threading
import time
from typing import Any, Iterable, Mapping, Optional

PIZZA_PREFIX = "p"
BEVERAGE_PREFIX = "b"
ORDER_PREFIX = "o"
SHOP_PREFIX = "s"

_id_lock = threading.Lock()
_last_stamp = 0


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def new_record_id(prefix: str, existing: Iterable[Mapping[str, Any]] = ()) -> str:
    """
    Build ``<prefix><milliseconds>`` ids that never repeat within this process
    and never collide with an id already present in ``existing``.
    """
    global _last_stamp
    taken = {str(r.get("id")) for r in existing if isinstance(r, Mapping)}
    with _id_lock:
        stamp = max(_now_ms(), _last_stamp + 1)
        while f"{prefix}{stamp}" in taken:
            stamp += 1
        _last_stamp = stamp
    return f"{prefix}{stamp}"


def is_present(value: Any) -> bool:
    """Presence check used for required fields: None, "", 0 and False are absent."""
    return bool(value)


def find_by_id(records: Iterable[dict], record_id: str) -> Optional[dict]:
    for record in records:
        if isinstance(record, dict) and record.get("id") == record_id:
            return record
    return None


def filter_by(records: Iterable[dict], field: str, value: Any) -> list[dict]:
    return [r for r in records if isinstance(r, dict) and r.get(field) == value]


def merge_fields(record: dict, updates: Mapping[str, Any]) -> dict:
    """Shallow-merge ``updates`` onto ``record`` in place. The id is immutable."""
    for key, value in updates.items():
        if key == "id":
            continue
        record[key] = value
    return record


def remove_by_id(records: list[dict], record_id: str) -> tuple[list[dict], int]:
    """Return (remaining records, number removed)."""
    remaining = [r for r in records if not (isinstance(r, dict) and r.get("id") == record_id)]
    return remaining, len(records) - len(remaining)
