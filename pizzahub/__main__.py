"""Run the API with uvicorn: ``python -m pizzahub``."""
from __future__ import annotations

import uvicorn

from pizzahub.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "pizzahub.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
