"""Catalogue API package."""

from orderly.api.catalogue.routes import product_router

__all__ = ["product_router"]
