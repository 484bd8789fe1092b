"""Order-specific rules: default status and quantity parsing."""
from __future__ import annotations

import math
from typing import Any

STATUS_PLACED = "placed"
STATUS_PREPARING = "preparing"
STATUS_OUT_FOR_DELIVERY = "out_for_delivery"
STATUS_DELIVERED = "delivered"
STATUS_CANCELLED = "cancelled"

# Known values only; any non-empty status string is accepted on update.
KNOWN_STATUSES = (
    STATUS_PLACED,
    STATUS_PREPARING,
    STATUS_OUT_FOR_DELIVERY,
    STATUS_DELIVERED,
    STATUS_CANCELLED,
)


def parse_quantity(value: Any) -> float | None:
    """Return the numeric value of ``value`` or None when it is not a number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def is_valid_status(value: Any) -> bool:
    """Presence check only: any non-empty string, whitespace included."""
    return isinstance(value, str) and value != ""
