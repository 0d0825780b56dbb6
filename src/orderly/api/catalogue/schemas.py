"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Wireless Headphones",
                    "description": "Over-ear headphones with noise cancellation",
                    "price": 199.99,
                    "tags": ["audio", "wireless"],
                }
            ]
        }
    }

    name: str = Field(..., min_length=4, max_length=255)
    description: str = Field(..., min_length=4)
    price: float = Field(..., gt=0)
    tags: list[str] = Field(default_factory=list)


class UpdateProductRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 179.99, "tags": ["audio", "sale"]}]}}

    name: str | None = Field(None, min_length=4, max_length=255)
    description: str | None = Field(None, min_length=4)
    price: float | None = Field(None, gt=0)
    tags: list[str] | None = None


# --- Response Schemas ---


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str
    price: float
    tags: list[str]
    created_at: str | None = None
    updated_at: str | None = None


class ProductListResponse(BaseModel):
    count: int
    products: list[ProductResponse]


class StatusResponse(BaseModel):
    status: str = "ok"
