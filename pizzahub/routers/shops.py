from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request

from pizzahub.routers.deps import get_service
from pizzahub.services.pizza_service import PizzaService
from pizzahub.services.shop_service import ShopService

router = APIRouter(prefix="/api/pizzahub", tags=["shops"])


def _shops(request: Request) -> ShopService:
    return get_service(request, "shop_service")


def _pizzas(request: Request) -> PizzaService:
    return get_service(request, "pizza_service")


@router.get("")
def list_shops(request: Request):
    return _shops(request).list_shops()


@router.get("/{shop_id}")
def get_shop(shop_id: str, request: Request):
    return _shops(request).get_shop(shop_id)


@router.get("/{shop_id}/pizzas")
def list_shop_pizzas(shop_id: str, request: Request):
    return _pizzas(request).list_for_shop(shop_id)


@router.post("/{shop_id}/pizzas", status_code=201)
def create_pizza(shop_id: str, request: Request, payload: Optional[dict] = Body(None)):
    return _pizzas(request).create_pizza(shop_id, payload or {})
