"""
Order use cases.

An order starts as ``placed``; its status is then overwritten with whatever
non-empty string the caller sends. No progression between statuses is enforced.
"""

from __future__ import annotations

import logging
from types import ModuleType
from typing import Optional

from pizzahub.core.errors import RecordNotFoundError, ValidationError
from pizzahub.domain.orders import STATUS_PLACED, is_valid_status, parse_quantity
from pizzahub.domain.records import ORDER_PREFIX, find_by_id, is_present, new_record_id
from pizzahub.repositories import get_store

logger = logging.getLogger(__name__)


class OrderService:
    def __init__(self, store: Optional[ModuleType] = None) -> None:
        self.store = store or get_store()

    def list_orders(self) -> list[dict]:
        return self.store.load()["orders"]

    def get_order(self, order_id: str) -> dict:
        order = find_by_id(self.store.load()["orders"], order_id)
        if not order:
            raise RecordNotFoundError("Order not found")
        return order

    def place_order(self, payload: dict) -> dict:
        pizza_id = payload.get("pizzaId")
        quantity = payload.get("quantity")
        if not is_present(pizza_id) or parse_quantity(quantity) is None:
            raise ValidationError("pizzaId and numeric quantity are required")
        with self.store.transaction() as db:
            order = {
                "id": new_record_id(ORDER_PREFIX, db["orders"]),
                "pizzaId": pizza_id,
                "quantity": quantity,
                "status": STATUS_PLACED,
            }
            db["orders"].append(order)
        logger.info("Order %s placed for pizza %s", order["id"], pizza_id)
        return order

    def update_status(self, order_id: str, payload: dict) -> dict:
        status = payload.get("status")
        if not is_valid_status(status):
            raise ValidationError("Status is required")
        with self.store.transaction() as db:
            order = find_by_id(db["orders"], order_id)
            if not order:
                raise RecordNotFoundError("Order not found")
            order["status"] = status
        logger.info("Order %s moved to %s", order_id, status)
        return order
