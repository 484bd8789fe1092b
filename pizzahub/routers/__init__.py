"""
FastAPI routers grouped by collection (shops, pizzas, beverages, orders).

Each module exposes an APIRouter included by the app factory. Services are
looked up on ``app.state`` so tests and scripts can swap the storage adapter.
"""
