"""
Pydantic schema for products.

``Product`` is both the decoded request payload (a *candidate*) and the
record held by the repository.  The JSON wire names are ``id``,
``name``, ``descripton``, ``price`` and ``sku``; ``descripton`` is the
historical spelling existing clients send and expect, so it is kept on
output while ``description`` is also accepted on input.

Every field defaults to ``None`` so that a payload with a missing field
still decodes and the validator can report which field is absent.  The
created/updated/deleted timestamps are private attributes: they are
informational only and never read from or written to JSON.
"""

from datetime import datetime, timezone
from typing import Iterable, List, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from product_api.app.core.exceptions import DecodeError


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


class Product(BaseModel):
    """A product in the catalogue."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(0, description="Identifier assigned by the server", examples=[1])
    name: Optional[str] = Field(None, description="Product name", examples=["Latte"])
    description: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("descripton", "description"),
        serialization_alias="descripton",
        description="Free‑text description",
        examples=["Frothy milky coffee"],
    )
    # Strict: JSON numbers only, booleans and numeric strings are rejected.
    price: Optional[float] = Field(None, strict=True, description="Unit price, greater than zero", examples=[2.45])
    sku: Optional[str] = Field(None, description="Stock keeping unit, e.g. abc-def-ghi", examples=["abc-def-ghi"])

    @field_validator("id", mode="before")
    @classmethod
    def null_id_as_zero(cls, v):
        # The id is assigned by the server, so an explicit null is harmless.
        return 0 if v is None else v

    _created_on: str = PrivateAttr(default="")
    _updated_on: str = PrivateAttr(default="")
    _deleted_on: str = PrivateAttr(default="")

    @property
    def created_on(self) -> str:
        return self._created_on

    @property
    def updated_on(self) -> str:
        return self._updated_on

    @property
    def deleted_on(self) -> str:
        # Deletes are hard deletes, so this stays empty.
        return self._deleted_on

    def stamp(self, created_on: Optional[str] = None) -> None:
        """Set ``updated_on`` to now and ``created_on`` to the given value or now."""
        now = _utcnow()
        self._created_on = created_on or now
        self._updated_on = now

    @classmethod
    def from_json(cls, raw: Union[bytes, str]) -> "Product":
        """Decode a single JSON object into a candidate product.

        Raises ``DecodeError`` for malformed JSON, a document that is not
        an object, or fields of the wrong type.
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise DecodeError(f"Unable to unmarshal json: {exc.error_count()} error(s)") from exc

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


_PRODUCT_LIST = TypeAdapter(List[Product])


def products_to_json(products: Iterable[Product]) -> str:
    """Encode products as a JSON array of product objects."""
    return _PRODUCT_LIST.dump_json(list(products), by_alias=True).decode("utf-8")
