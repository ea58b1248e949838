from __future__ import annotations

import logging
from collections.abc import AsyncIterator

import pytest
import structlog
from httpx import ASGITransport, AsyncClient

from products_api.config import get_settings
from products_api.main import app
from products_api.observability import logging as products_logging
from products_api.services.product_store import ProductStore

_LOGGER_NAMES = ("", "uvicorn", "uvicorn.error", "uvicorn.access")


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()

    app.state.product_store = ProductStore()

    yield

    app.state.product_store = ProductStore()
    get_settings.cache_clear()


@pytest.fixture
def fresh_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Let configure_logging run again, then restore the previous handlers."""

    saved = {name: (logging.getLogger(name).handlers[:], logging.getLogger(name).level) for name in _LOGGER_NAMES}
    monkeypatch.setattr(products_logging, "_CONFIGURED", False)

    yield

    for name, (handlers, level) in saved.items():
        logging.getLogger(name).handlers = handlers
        logging.getLogger(name).setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
async def api_client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
