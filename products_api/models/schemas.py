from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, JsonValue, model_validator


class ProductCreate(BaseModel):
    """Fields accepted when creating a product.

    Values are stored as received; a missing field is ``None``. Unknown keys,
    including a client-supplied ``id``, are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    product_name: JsonValue = None
    product_description: JsonValue = None
    product_price: JsonValue = None

    @model_validator(mode="before")
    @classmethod
    def _array_has_no_fields(cls, data: Any) -> Any:
        # A JSON array carries none of the named fields.
        return {} if isinstance(data, list) else data


class ProductUpdate(ProductCreate):
    """Partial update; ``None`` means keep the current value."""


class Product(BaseModel):
    id: str
    product_name: JsonValue = None
    product_description: JsonValue = None
    product_price: JsonValue = None
