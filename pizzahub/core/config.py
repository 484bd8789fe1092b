"""
Configuration helpers for the PizzaHub backend.

Settings are read once from environment variables (port, storage location,
backend selection, CORS) so that routers/services do not fetch os.environ
directly. Call ``get_settings.cache_clear()`` after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT_DIR = Path(__file__).resolve().parents[2]
DEFAULT_DATA_FILE = ROOT_DIR / "db.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    data_file: Path
    storage_backend: str
    database_url: str
    cors_origins: tuple[str, ...]
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _csv(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        items = tuple(x.strip() for x in (value or "").split(",") if x.strip())
        return items or default

    backend = (os.getenv("STORAGE_BACKEND") or "json").strip().lower()
    if backend not in {"json", "sql"}:
        backend = "json"

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        data_file=Path(os.getenv("PIZZAHUB_DATA_FILE") or DEFAULT_DATA_FILE),
        storage_backend=backend,
        database_url=os.getenv("DATABASE_URL", ""),
        cors_origins=_csv(os.getenv("CORS_ORIGINS"), ("*",)),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
