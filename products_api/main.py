from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from products_api.api.products import router as products_router
from products_api.config import get_settings
from products_api.observability.logging import configure_logging
from products_api.observability.middleware import RequestContextMiddleware
from products_api.services.product_store import ProductStore


app = FastAPI(title=get_settings().app_name, version="0.1.0", redirect_slashes=False)
app.state.product_store = ProductStore()
app.add_middleware(RequestContextMiddleware)
app.include_router(products_router)


@app.on_event("startup")
def _startup() -> None:
    settings = get_settings()
    configure_logging(settings.log_level_value)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    # No endpoint in scope: the router matched nothing.
    routed = "endpoint" in request.scope
    if exc.status_code == 405 or (exc.status_code == 404 and not routed):
        return PlainTextResponse("Invalid route", status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    structlog.get_logger("products_api").info("request.invalid_body", errors=len(exc.errors()))
    return PlainTextResponse("Invalid request body", status_code=400)
