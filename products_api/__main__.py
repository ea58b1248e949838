from __future__ import annotations

import argparse

import structlog
import uvicorn

from products_api.config import get_settings
from products_api.observability.logging import configure_logging


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Products API server")
    parser.add_argument("--host", default=settings.host, help="Bind address (env HOST)")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on (env PORT)")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level name (env LOG_LEVEL)")
    args = parser.parse_args()

    settings.log_level = args.log_level
    configure_logging(settings.log_level_value)
    structlog.get_logger("products_api").info("server.start", url=f"http://localhost:{args.port}")

    uvicorn.run(
        "products_api.main:app",
        host=args.host,
        port=args.port,
        log_config=None,
        log_level=settings.log_level_value,
    )


if __name__ == "__main__":
    main()
