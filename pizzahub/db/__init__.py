"""SQL backend for the record store: the ``records`` table and its session helpers."""

from .models import Record
from .session import Base, get_engine, get_session

__all__ = ["Base", "Record", "get_engine", "get_session"]
