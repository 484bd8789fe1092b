"""
Core utilities shared across the PizzaHub API.

This package hosts configuration (env vars, paths), logging setup and the
error types that routers translate into HTTP responses. Routers and services
should depend on these primitives instead of reading os.environ directly.
"""
