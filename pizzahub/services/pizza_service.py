"""Pizza use cases: listing, creation under a shop, partial update and delete."""

from __future__ import annotations

import logging
from types import ModuleType
from typing import Optional

from pizzahub.core.errors import RecordNotFoundError, ValidationError
from pizzahub.domain.records import (
    PIZZA_PREFIX,
    filter_by,
    find_by_id,
    is_present,
    merge_fields,
    new_record_id,
    remove_by_id,
)
from pizzahub.repositories import get_store

logger = logging.getLogger(__name__)


class PizzaService:
    def __init__(self, store: Optional[ModuleType] = None) -> None:
        self.store = store or get_store()

    def list_pizzas(self) -> list[dict]:
        return self.store.load()["pizzas"]

    def list_for_shop(self, shop_id: str) -> list[dict]:
        return filter_by(self.store.load()["pizzas"], "shopId", shop_id)

    def get_pizza(self, pizza_id: str) -> dict:
        pizza = find_by_id(self.store.load()["pizzas"], pizza_id)
        if not pizza:
            raise RecordNotFoundError("Pizza not found")
        return pizza

    def create_pizza(self, shop_id: str, payload: dict) -> dict:
        pizza_type = payload.get("type")
        name = payload.get("name")
        if not is_present(pizza_type) or not is_present(name):
            raise ValidationError("type and name are required")
        # Shop existence is not checked; shopId is a soft reference.
        with self.store.transaction() as db:
            pizza = {
                "id": new_record_id(PIZZA_PREFIX, db["pizzas"]),
                "shopId": shop_id,
                "type": pizza_type,
                "name": name,
            }
            db["pizzas"].append(pizza)
        logger.info("Pizza %s created for shop %s", pizza["id"], shop_id)
        return pizza

    def update_pizza(self, pizza_id: str, updates: dict) -> dict:
        with self.store.transaction() as db:
            pizza = find_by_id(db["pizzas"], pizza_id)
            if not pizza:
                raise RecordNotFoundError("Pizza not found")
            merge_fields(pizza, updates)
        logger.info("Pizza %s updated (%s)", pizza_id, ", ".join(sorted(updates)) or "no fields")
        return pizza

    def delete_pizza(self, pizza_id: str) -> None:
        # Beverages and orders that point to the pizza are left untouched.
        with self.store.transaction() as db:
            remaining, removed = remove_by_id(db["pizzas"], pizza_id)
            if not removed:
                raise RecordNotFoundError("Pizza not found")
            db["pizzas"] = remaining
        logger.info("Pizza %s deleted", pizza_id)
