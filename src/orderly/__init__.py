"""Orderly: users, catalogue, carts and orders for a small storefront."""
