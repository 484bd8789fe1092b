from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request

from pizzahub.routers.deps import get_service
from pizzahub.services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


def _orders(request: Request) -> OrderService:
    return get_service(request, "order_service")


@router.get("")
def list_orders(request: Request):
    return _orders(request).list_orders()


@router.get("/{order_id}")
def get_order(order_id: str, request: Request):
    return _orders(request).get_order(order_id)


@router.post("", status_code=201)
def place_order(request: Request, payload: Optional[dict] = Body(None)):
    return _orders(request).place_order(payload or {})


@router.patch("/{order_id}/status")
def update_order_status(order_id: str, request: Request, payload: Optional[dict] = Body(None)):
    order = _orders(request).update_status(order_id, payload or {})
    return {"message": "Order status updated", "order": order}
