"""
Create (or recreate with ``--reset``) the ``records`` table on DATABASE_URL.

Usage:
  python -m pizzahub.db.create_tables [--reset]
"""
from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from .models import Record
from .session import get_engine


def create_all(reset: bool = False) -> None:
    engine = get_engine()
    table = Record.__table__
    if reset:
        table.drop(bind=engine, checkfirst=True)
    table.create(bind=engine, checkfirst=True)


def main() -> None:
    ap = argparse.ArgumentParser(description="Create the PizzaHub records table")
    ap.add_argument("--reset", action="store_true", help="Drop existing records first")
    args = ap.parse_args()
    try:
        create_all(reset=args.reset)
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create the records table: {exc}") from exc
    print("records table ready.")


if __name__ == "__main__":
    main()
