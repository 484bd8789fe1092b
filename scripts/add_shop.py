#!/usr/bin/env python3
"""
Add a pizza shop straight into the store (the API has no write route for shops).

Usage:
  python scripts/add_shop.py --name "Napoli" [--id s1] [--field city=Lisbon --field phone=123]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Garantir que o pacote pizzahub seja importavel quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pizzahub.core.config import get_settings
from pizzahub.core.errors import ValidationError
from pizzahub.core.log import configure_logging
from pizzahub.services.shop_service import ShopService


def parse_fields(pairs: list[str]) -> dict:
    fields: dict = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise SystemExit(f"Invalid field (use key=value): {pair}")
        fields[key] = value.strip()
    return fields


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a pizza shop to the store")
    ap.add_argument("--name", required=True, help="Shop name")
    ap.add_argument("--id", help="Shop id (default: generated, e.g. s1718000000000)")
    ap.add_argument("--field", action="append", default=[], help="Extra field as key=value (repeatable)")
    args = ap.parse_args()

    configure_logging(get_settings().log_level)
    fields = parse_fields(args.field)
    fields["name"] = (args.name or "").strip()
    shop_id = (args.id or "").strip()
    if shop_id:
        fields["id"] = shop_id

    try:
        shop = ShopService().add_shop(fields)
    except ValidationError as exc:
        raise SystemExit(exc.message) from exc
    print("OK: shop added")
    for key, value in shop.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
