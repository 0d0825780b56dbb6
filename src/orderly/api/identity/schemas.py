"""Pydantic request/response schemas for the auth and user APIs."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

# --- Request Schemas ---


class SignupRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "johndoe",
                    "email": "johndoe@example.com",
                    "phone": "+1234567890",
                    "password": "securepassword",
                }
            ]
        }
    }

    username: str = Field(..., min_length=4, max_length=100)
    email: str = Field(..., max_length=254, pattern=_EMAIL_PATTERN)
    password: str = Field(..., min_length=6, max_length=128)
    phone: str | None = Field(None, max_length=20)


class LoginRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "johndoe@example.com", "password": "securepassword"}]}}

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class AddressRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "street": "123 Elm Street",
                    "city": "Springfield",
                    "state": "IL",
                    "zip_code": "62701",
                    "country": "US",
                }
            ]
        }
    }

    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str | None = Field(None, max_length=100)
    zip_code: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=1, max_length=100)


class UpdateUserRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "johndoe",
                    "shipping_address_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "billing_address_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                }
            ]
        }
    }

    username: str | None = Field(None, min_length=4, max_length=100)
    phone: str | None = Field(None, max_length=20)
    shipping_address_id: str | None = None
    billing_address_id: str | None = None


class ChangeRoleRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"role": "ADMIN"}]}}

    role: Literal["USER", "ADMIN"]


# --- Response Schemas ---


class UserResponse(BaseModel):
    id: str
    username: str
    email: str
    phone: str | None = None
    role: str
    shipping_address_id: str | None = None
    billing_address_id: str | None = None
    created_at: str | None = None


class LoginResponse(BaseModel):
    user: UserResponse
    token: str


class AddressResponse(BaseModel):
    id: str
    user_id: str
    street: str
    city: str
    state: str | None = None
    zip_code: str
    country: str
    formatted_address: str


class AddressListResponse(BaseModel):
    addresses: list[AddressResponse]


class UserDetailResponse(UserResponse):
    addresses: list[AddressResponse] = []


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
