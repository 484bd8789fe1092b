"""
SQL persistence adapter with the same contract as ``json_storage``.

Each record is stored as a JSON blob keyed by (collection, position) so that
storage order and arbitrary merged fields survive. ``save`` replaces every row
inside a single database transaction.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator
import logging
import threading

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from pizzahub.db.models import Record
from pizzahub.db.session import get_session
from pizzahub.repositories.json_storage import COLLECTIONS, db_defaults, empty_state

logger = logging.getLogger(__name__)

_write_lock = threading.RLock()


def load() -> dict:
    db = empty_state()
    try:
        with get_session() as session:
            stmt = select(Record).order_by(Record.collection, Record.position)
            for row in session.execute(stmt).scalars():
                if row.collection in db and isinstance(row.data, dict):
                    db[row.collection].append(dict(row.data))
    except SQLAlchemyError as exc:
        logger.warning("Could not read records table (%s); using an empty state", exc)
        return empty_state()
    return db


def save(db: dict) -> bool:
    db = db_defaults(db)
    try:
        with get_session() as session:
            session.execute(delete(Record))
            for name in COLLECTIONS:
                for position, item in enumerate(db[name]):
                    record_id = item.get("id") if isinstance(item, dict) else None
                    session.add(
                        Record(
                            collection=name,
                            position=position,
                            record_id=str(record_id) if record_id is not None else None,
                            data=item,
                        )
                    )
            session.commit()
    except SQLAlchemyError as exc:
        logger.error("Failed to write records table: %s", exc)
        return False
    return True


@contextmanager
def transaction() -> Iterator[dict]:
    """Same semantics as :func:`json_storage.transaction`, backed by the database."""
    with _write_lock:
        db = load()
        yield db
        save(db)
