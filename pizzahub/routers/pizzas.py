from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request

from pizzahub.routers.deps import get_service
from pizzahub.services.pizza_service import PizzaService

router = APIRouter(prefix="/api/pizzas", tags=["pizzas"])


def _pizzas(request: Request) -> PizzaService:
    return get_service(request, "pizza_service")


@router.get("")
def list_pizzas(request: Request):
    return _pizzas(request).list_pizzas()


@router.get("/{pizza_id}")
def get_pizza(pizza_id: str, request: Request):
    return _pizzas(request).get_pizza(pizza_id)


@router.patch("/{pizza_id}")
def update_pizza(pizza_id: str, request: Request, payload: Optional[dict] = Body(None)):
    pizza = _pizzas(request).update_pizza(pizza_id, payload or {})
    return {"message": "Pizza updated successfully", "pizza": pizza}


@router.delete("/{pizza_id}")
def delete_pizza(pizza_id: str, request: Request):
    _pizzas(request).delete_pizza(pizza_id)
    return {"message": f"Pizza {pizza_id} deleted"}
