"""
Use cases for the PizzaHub API.

Each service orchestrates a storage adapter and the pure collection helpers
from ``pizzahub.domain``. Routers call these services instead of touching the
store directly, and translate their exceptions into HTTP responses.
"""
