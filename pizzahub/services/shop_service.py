"""Shop lookups (shops are read-only over HTTP) plus the operator helper to add one."""

from __future__ import annotations

import logging
from types import ModuleType
from typing import Optional

from pizzahub.core.errors import RecordNotFoundError, ValidationError
from pizzahub.domain.records import SHOP_PREFIX, find_by_id, is_present, new_record_id
from pizzahub.repositories import get_store

logger = logging.getLogger(__name__)


class ShopService:
    def __init__(self, store: Optional[ModuleType] = None) -> None:
        self.store = store or get_store()

    def list_shops(self) -> list[dict]:
        return self.store.load()["pizzahub"]

    def get_shop(self, shop_id: str) -> dict:
        shop = find_by_id(self.store.load()["pizzahub"], shop_id)
        if not shop:
            raise RecordNotFoundError("PizzaHub not found")
        return shop

    def add_shop(self, fields: dict) -> dict:
        if not is_present(fields.get("name")):
            raise ValidationError("Shop name required")
        with self.store.transaction() as db:
            shop_id = fields.get("id") or new_record_id(SHOP_PREFIX, db["pizzahub"])
            if find_by_id(db["pizzahub"], shop_id):
                raise ValidationError(f"Shop {shop_id} already exists")
            shop = {**fields, "id": shop_id}
            db["pizzahub"].append(shop)
        logger.info("Shop %s added", shop_id)
        return shop
