"""
Shared FastAPI dependencies.

The product repository is created by ``create_app`` and stored on
``app.state`` so tests can hand in their own instance.
"""

from fastapi import Request

from product_api.app.services.product_repository import ProductRepository


def get_product_repository(request: Request) -> ProductRepository:
    """Return the repository bound to the running application."""
    return request.app.state.product_repository
