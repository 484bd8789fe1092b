"""
Persistence adapters.

Each adapter module exposes the same functions (``load``, ``save``,
``transaction``) over the full four-collection state. Services receive one of
them from :func:`get_store` instead of touching the JSON file directly.
"""

from __future__ import annotations

from types import ModuleType

from pizzahub.core.config import get_settings


def get_store() -> ModuleType:
    """Return the storage adapter selected by ``STORAGE_BACKEND``."""
    settings = get_settings()
    if settings.storage_backend == "sql":
        from pizzahub.repositories import sql_storage

        return sql_storage
    from pizzahub.repositories import json_storage

    return json_storage
