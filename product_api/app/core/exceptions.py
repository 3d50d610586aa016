"""
Errors raised by the product store, the validator and the JSON codec.

All of them derive from ``ProductAPIError`` so callers can catch them
uniformly.  The HTTP layer maps them to status codes; nothing in the
service layer logs and swallows them.
"""

from dataclasses import dataclass
from typing import Any, Dict, List


class ProductAPIError(Exception):
    """Base class for all product errors."""


class ProductNotFoundError(ProductAPIError):
    """No product exists for the requested identifier."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class DecodeError(ProductAPIError):
    """The request payload is not a decodable product object."""


@dataclass(frozen=True)
class FieldError:
    """A single failed rule on a single field."""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


class ProductValidationError(ProductAPIError):
    """One or more product fields violate a validation rule."""

    def __init__(self, errors: List[FieldError]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in self.errors))

    @property
    def fields(self) -> List[str]:
        return [e.field for e in self.errors]

    def to_detail(self) -> Dict[str, Any]:
        """Body used for the 400 response."""
        return {
            "message": "Error validating product",
            "errors": [e.to_dict() for e in self.errors],
        }
