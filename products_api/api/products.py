from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from products_api.models.schemas import Product, ProductCreate, ProductUpdate
from products_api.services.dependencies import get_product_store
from products_api.services.product_store import ProductNotFoundError, ProductStore

router = APIRouter(prefix="/products", tags=["products"])

_READ_METHODS = ["GET", "HEAD"]


@router.api_route("/", methods=_READ_METHODS, response_model=list[Product])
@router.api_route("", methods=_READ_METHODS, response_model=list[Product], include_in_schema=False)
async def list_products(store: ProductStore = Depends(get_product_store)) -> list[Product]:
    return store.list_products()


@router.post("/", response_model=Product, status_code=201)
@router.post("", response_model=Product, status_code=201, include_in_schema=False)
async def create_product(
    payload: ProductCreate | None = None,
    store: ProductStore = Depends(get_product_store),
) -> Product:
    return store.create_product(payload or ProductCreate())


@router.api_route("/{product_id}", methods=_READ_METHODS, response_model=Product)
@router.api_route("/{product_id}/", methods=_READ_METHODS, response_model=Product, include_in_schema=False)
async def get_product(product_id: str, store: ProductStore = Depends(get_product_store)) -> Product:
    product = store.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.put("/{product_id}", response_model=Product, status_code=201)
@router.put("/{product_id}/", response_model=Product, status_code=201, include_in_schema=False)
async def update_product(
    product_id: str,
    payload: ProductUpdate | None = None,
    store: ProductStore = Depends(get_product_store),
) -> Product:
    try:
        return store.update_product(product_id, payload or ProductUpdate())
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.message) from exc


@router.delete("/{product_id}", response_class=PlainTextResponse)
@router.delete("/{product_id}/", response_class=PlainTextResponse, include_in_schema=False)
async def delete_product(product_id: str, store: ProductStore = Depends(get_product_store)) -> str:
    try:
        store.delete_product(product_id)
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.message) from exc
    return "Product deleted."
