"""One-off migration script: JSON data file -> SQL backend (DATABASE_URL)."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Garantir que o pacote pizzahub seja importavel quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pizzahub.core.config import get_settings
from pizzahub.core.log import configure_logging
from pizzahub.db.create_tables import create_all
from pizzahub.repositories import json_storage, sql_storage


def migrate(source: Path) -> dict:
    if not source.exists():
        raise SystemExit(f"File not found: {source}")
    create_all()
    db = json_storage.load(source)
    if not sql_storage.save(db):
        raise SystemExit("Failed to write records to the database")
    return {name: len(db[name]) for name in json_storage.COLLECTIONS}


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy the JSON store into the SQL backend")
    ap.add_argument("--source", default=str(settings.data_file), help="JSON data file")
    args = ap.parse_args()

    configure_logging(settings.log_level)
    counts = migrate(Path(args.source))
    print("JSON data migrated to SQL successfully.")
    for name, count in counts.items():
        print(f"  {name}: {count}")


if __name__ == "__main__":
    main()
