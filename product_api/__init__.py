"""
Top‑level package for the Product API.

This file makes ``product_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``product_api.app.main``.  The HTTP client for the service lives in
``product_api.client``.
"""

__all__ = []
