"""Beverages attached to a pizza."""

from __future__ import annotations

import logging
from types import ModuleType
from typing import Optional

from pizzahub.core.errors import ValidationError
from pizzahub.domain.records import BEVERAGE_PREFIX, filter_by, is_present, new_record_id
from pizzahub.repositories import get_store

logger = logging.getLogger(__name__)


class BeverageService:
    def __init__(self, store: Optional[ModuleType] = None) -> None:
        self.store = store or get_store()

    def list_for_pizza(self, pizza_id: str) -> list[dict]:
        return filter_by(self.store.load()["beverages"], "pizzaId", pizza_id)

    def create_beverage(self, pizza_id: str, payload: dict) -> dict:
        name = payload.get("name")
        if not is_present(name):
            raise ValidationError("Beverage name required")
        with self.store.transaction() as db:
            beverage = {
                "id": new_record_id(BEVERAGE_PREFIX, db["beverages"]),
                "pizzaId": pizza_id,
                "name": name,
            }
            db["beverages"].append(beverage)
        logger.info("Beverage %s created for pizza %s", beverage["id"], pizza_id)
        return beverage
