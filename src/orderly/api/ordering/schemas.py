"""Pydantic request/response schemas for the cart and order APIs."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class AddToCartRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"product_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890", "quantity": 2}]}
    }

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)


class ChangeQuantityRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"quantity": 3}]}}

    quantity: int = Field(..., ge=1)


class ChangeStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ACCEPTED"}]}}

    status: str = Field(..., min_length=1, max_length=50)


# --- Response Schemas ---


class CartLineResponse(BaseModel):
    """A cart line. ``available`` is false once the product has been deleted;
    such a line has no name or price and blocks checkout until removed."""

    product_id: str
    name: str | None = None
    price: float | None = None
    quantity: int
    line_total: float = 0.0
    available: bool = True


class CartResponse(BaseModel):
    items: list[CartLineResponse]
    total: float


class CartIdResponse(BaseModel):
    cart_id: str


class OrderProductResponse(BaseModel):
    product_id: str
    quantity: int
    unit_price: float


class OrderEventResponse(BaseModel):
    status: str
    created_at: str


class OrderResponse(BaseModel):
    id: str
    user_id: str
    net_amount: float
    address: str
    status: str
    products: list[OrderProductResponse]
    events: list[OrderEventResponse]
    created_at: str | None = None
    updated_at: str | None = None


class MessageResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"message": "No items in cart"}]}}

    message: str


class StatusResponse(BaseModel):
    status: str = "ok"
