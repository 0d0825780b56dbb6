"""Ordering API package."""

from orderly.api.ordering.routes import cart_router, order_router

__all__ = ["cart_router", "order_router"]
