"""
Product endpoints for API v1.

These routes expose list, read, create, replace and delete operations
over the in‑memory product repository.  Request bodies are read raw,
decoded and validated by the ``validated_product`` dependency before a
handler runs, so handlers only ever see a valid candidate.  Updates
replace the stored product wholesale; there is no partial update.

The collection routes answer both with and without a trailing slash so
clients calling ``/products`` are served without a redirect.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, status

from product_api.app.api.deps import get_product_repository
from product_api.app.core.exceptions import (
    DecodeError,
    ProductNotFoundError,
    ProductValidationError,
)
from product_api.app.schemas.product import Product
from product_api.app.services.product_repository import ProductRepository
from product_api.app.services.product_validation import validate_product

logger = logging.getLogger(__name__)

router = APIRouter()


async def validated_product(request: Request) -> Product:
    """Decode the request body into a product and validate it.

    Responds with HTTP 400 when the body is not a product object or
    when any field rule fails.
    """
    body = await request.body()
    try:
        product = Product.from_json(body)
    except DecodeError as exc:
        logger.warning("[Error] deserializing product: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unable to unmarshal json")
    try:
        return validate_product(product)
    except ProductValidationError as exc:
        logger.warning("[Error] validating product: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.to_detail())


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")


@router.get("", response_model=List[Product], include_in_schema=False)
@router.get("/", response_model=List[Product])
async def list_products(
    repo: ProductRepository = Depends(get_product_repository),
) -> List[Product]:
    """Return every product in insertion order."""
    logger.info("Handle GET Products")
    return repo.list_products()


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: int = Path(..., ge=1),
    repo: ProductRepository = Depends(get_product_repository),
) -> Product:
    """Retrieve a single product by ID, or 404."""
    logger.info("Handle GET Product %s", product_id)
    try:
        return repo.get_product(product_id)
    except ProductNotFoundError:
        raise _not_found()


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post("/", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    product: Product = Depends(validated_product),
    repo: ProductRepository = Depends(get_product_repository),
) -> Product:
    """Add a product.  Any ``id`` in the body is ignored."""
    logger.info("Handle POST Products")
    return repo.add_product(product)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: int = Path(..., ge=1),
    product: Product = Depends(validated_product),
    repo: ProductRepository = Depends(get_product_repository),
) -> Product:
    """Replace the product with the given ID."""
    logger.info("Handle PUT Products %s", product_id)
    try:
        return repo.update_product(product_id, product)
    except ProductNotFoundError:
        raise _not_found()


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int = Path(..., ge=1),
    repo: ProductRepository = Depends(get_product_repository),
) -> None:
    """Delete the product with the given ID."""
    logger.info("Handle DELETE Products %s", product_id)
    try:
        repo.delete_product(product_id)
    except ProductNotFoundError:
        raise _not_found()
    return None
