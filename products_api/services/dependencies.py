from __future__ import annotations

from fastapi import Request

from products_api.services.product_store import ProductStore


def get_product_store(request: Request) -> ProductStore:
    return request.app.state.product_store
