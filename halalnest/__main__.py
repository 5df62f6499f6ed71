"""Run the gateway with uvicorn: ``python -m halalnest``."""

from __future__ import annotations

import uvicorn

from halalnest.core.config import settings


def main() -> None:
    uvicorn.run(
        "halalnest.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_config=None,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
