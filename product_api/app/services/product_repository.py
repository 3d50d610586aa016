"""
In‑memory product repository.

The repository owns the authoritative, ordered list of products for the
lifetime of the process.  One instance is created by the application
factory and shared with every request through ``app.state``; there is
no module‑level list.

Identifiers come from a counter that starts one past the highest
identifier the repository was created with (1 when empty) and only
moves forward, so identifiers are never reused after a delete.

Every operation holds a single ``threading.Lock`` for its whole
duration.  Request handlers may run concurrently (uvicorn runs sync
work in a thread pool), and the lock keeps identifier assignment and
list mutation atomic.
"""

import logging
import threading
from typing import Iterable, List, Optional

from product_api.app.core.exceptions import ProductNotFoundError
from product_api.app.schemas.product import Product

logger = logging.getLogger(__name__)


def seed_products() -> List[Product]:
    """Return the two demo products the service starts with."""
    products = [
        Product(
            id=1,
            name="Latte",
            description="Frothy milky coffee",
            price=2.45,
            sku="latte-milk-coffee",
        ),
        Product(
            id=2,
            name="Espresso",
            description="Short and strong coffee without milk",
            price=1.99,
            sku="espresso-short-coffee",
        ),
    ]
    for product in products:
        product.stamp()
    return products


class ProductRepository:
    """Thread‑safe store for products."""

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._lock = threading.Lock()
        self._products: List[Product] = list(products or [])
        self._next_id = max((p.id for p in self._products), default=0) + 1

    def list_products(self) -> List[Product]:
        """Return a snapshot of all products in insertion order."""
        with self._lock:
            return list(self._products)

    def get_product(self, product_id: int) -> Product:
        with self._lock:
            return self._products[self._find_position(product_id)]

    def add_product(self, product: Product) -> Product:
        """Assign the next identifier to ``product`` and append it.

        The identifier is set on the given object; any ``id`` the client
        sent is overwritten.
        """
        with self._lock:
            product.id = self._next_id
            self._next_id += 1
            product.stamp()
            self._products.append(product)
        logger.info("Added product %s", product.id)
        return product

    def update_product(self, product_id: int, product: Product) -> Product:
        """Replace the product with ``product_id`` wholesale.

        The stored identifier is kept regardless of the ``id`` carried by
        ``product``.  Raises ``ProductNotFoundError`` and leaves the store
        untouched when no product has that identifier.
        """
        with self._lock:
            pos = self._find_position(product_id)
            product.id = product_id
            product.stamp(created_on=self._products[pos].created_on)
            self._products[pos] = product
        logger.info("Updated product %s", product_id)
        return product

    def delete_product(self, product_id: int) -> None:
        """Remove exactly the product with ``product_id``.

        The remaining products keep their relative order.
        """
        with self._lock:
            pos = self._find_position(product_id)
            del self._products[pos]
        logger.info("Deleted product %s", product_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def _find_position(self, product_id: int) -> int:
        # Callers hold the lock.  First match wins; identifiers are unique.
        for pos, product in enumerate(self._products):
            if product.id == product_id:
                return pos
        raise ProductNotFoundError(product_id)
