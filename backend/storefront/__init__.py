"""Storefront backend: catalog, auth and carts over FastAPI."""
