"""
Validation rules for product candidates.

A candidate may enter the repository only when it has a non‑blank name,
a price strictly greater than zero, and a SKU made of exactly three
lowercase letter groups joined by dashes (``abc-def-ghi``).  All rules
are checked and every failure is reported, one ``FieldError`` per
field.
"""

import logging
import re
from typing import List, Optional

from product_api.app.core.exceptions import FieldError, ProductValidationError
from product_api.app.schemas.product import Product

logger = logging.getLogger(__name__)

SKU_PATTERN = re.compile(r"[a-z]+-[a-z]+-[a-z]+")


def is_valid_sku(sku: Optional[str]) -> bool:
    """Return True when the pattern matches the SKU exactly once and spans all of it."""
    if not sku:
        return False
    matches = list(SKU_PATTERN.finditer(sku))
    if len(matches) != 1:
        return False
    return matches[0].span() == (0, len(sku))


def validate_product(product: Product) -> Product:
    """Check a candidate product and return it unchanged when valid.

    Raises ``ProductValidationError`` listing every failing field.
    """
    errors: List[FieldError] = []

    if product.name is None or not product.name.strip():
        errors.append(FieldError("name", "is required"))

    if product.price is None:
        errors.append(FieldError("price", "is required"))
    elif not product.price > 0:
        errors.append(FieldError("price", "must be greater than zero"))

    if not product.sku:
        errors.append(FieldError("sku", "is required"))
    elif not is_valid_sku(product.sku):
        errors.append(FieldError("sku", "must match the format abc-def-ghi"))

    if errors:
        exc = ProductValidationError(errors)
        logger.debug("Rejected product candidate: %s", exc)
        raise exc
    return product
