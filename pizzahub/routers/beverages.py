from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request

from pizzahub.routers.deps import get_service
from pizzahub.services.beverage_service import BeverageService

router = APIRouter(prefix="/api/pizzas/{pizza_id}/beverages", tags=["beverages"])


def _beverages(request: Request) -> BeverageService:
    return get_service(request, "beverage_service")


@router.get("")
def list_beverages(pizza_id: str, request: Request):
    return _beverages(request).list_for_pizza(pizza_id)


@router.post("", status_code=201)
def create_beverage(pizza_id: str, request: Request, payload: Optional[dict] = Body(None)):
    return _beverages(request).create_beverage(pizza_id, payload or {})
