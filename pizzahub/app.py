from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pizzahub.core.config import get_settings
from pizzahub.core.errors import PizzaHubError
from pizzahub.core.log import configure_logging
from pizzahub.repositories import get_store
from pizzahub.routers import beverages as beverages_router
from pizzahub.routers import health as health_router
from pizzahub.routers import orders as orders_router
from pizzahub.routers import pizzas as pizzas_router
from pizzahub.routers import shops as shops_router
from pizzahub.services.beverage_service import BeverageService
from pizzahub.services.order_service import OrderService
from pizzahub.services.pizza_service import PizzaService
from pizzahub.services.shop_service import ShopService

logger = logging.getLogger(__name__)


async def _pizzahub_error(request: Request, exc: PizzaHubError) -> JSONResponse:
    return JSONResponse({"message": exc.message}, status_code=exc.status_code)


async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"message": "Invalid request body"}, status_code=400)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse({"message": str(exc.detail)}, status_code=exc.status_code, headers=getattr(exc, "headers", None))


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    settings = get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("It's alive on %s", settings.port)
        yield

    app = FastAPI(title="PizzaHub API", lifespan=lifespan)

    origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PizzaHubError, _pizzahub_error)
    app.add_exception_handler(RequestValidationError, _invalid_body)
    app.add_exception_handler(StarletteHTTPException, _http_error)

    store = get_store()
    app.state.shop_service = ShopService(store)
    app.state.pizza_service = PizzaService(store)
    app.state.beverage_service = BeverageService(store)
    app.state.order_service = OrderService(store)

    app.include_router(health_router.router)
    app.include_router(shops_router.router)
    app.include_router(beverages_router.router)
    app.include_router(pizzas_router.router)
    app.include_router(orders_router.router)
    logger.info("Using %s storage backend", settings.storage_backend)
    return app
