"""Unit tests for the product validator."""

import math

import pytest

from product_api.app.core.exceptions import ProductValidationError
from product_api.app.schemas.product import Product
from product_api.app.services.product_repository import seed_products
from product_api.app.services.product_validation import is_valid_sku, validate_product
from tests.helpers import make_product


class TestValidateProduct:

    def test_valid_product_is_returned_unchanged(self):
        product = make_product()
        assert validate_product(product) is product

    def test_description_is_optional(self):
        validate_product(make_product(description=None))

    def test_missing_name_rejected(self):
        with pytest.raises(ProductValidationError) as exc_info:
            validate_product(make_product(name=None))
        assert exc_info.value.fields == ["name"]

    def test_empty_name_rejected(self):
        with pytest.raises(ProductValidationError, match="name"):
            validate_product(make_product(name=""))

    def test_blank_name_rejected(self):
        with pytest.raises(ProductValidationError, match="name"):
            validate_product(make_product(name="   "))

    @pytest.mark.parametrize("price", [0, 0.0, -0.01, -10])
    def test_non_positive_price_rejected(self, price):
        with pytest.raises(ProductValidationError) as exc_info:
            validate_product(make_product(price=price))
        assert exc_info.value.fields == ["price"]
        assert "greater than zero" in str(exc_info.value)

    def test_missing_price_rejected(self):
        with pytest.raises(ProductValidationError, match="price: is required"):
            validate_product(make_product(price=None))

    def test_nan_price_rejected(self):
        with pytest.raises(ProductValidationError, match="price"):
            validate_product(make_product(price=math.nan))

    def test_missing_sku_rejected(self):
        with pytest.raises(ProductValidationError, match="sku: is required"):
            validate_product(make_product(sku=None))

    @pytest.mark.parametrize("sku", ["abc123", "ABC-DEF-GHI", "abc-def", "abc-def-ghi-jkl", "xabc-def-ghi1", " abc-def-ghi"])
    def test_malformed_sku_rejected(self, sku):
        with pytest.raises(ProductValidationError) as exc_info:
            validate_product(make_product(sku=sku))
        assert exc_info.value.fields == ["sku"]

    @pytest.mark.parametrize("sku", ["abc-def-ghi", "abcde-abcf-abd", "a-b-c"])
    def test_well_formed_sku_accepted(self, sku):
        validate_product(make_product(sku=sku))

    def test_all_failures_reported(self):
        with pytest.raises(ProductValidationError) as exc_info:
            validate_product(Product())
        assert exc_info.value.fields == ["name", "price", "sku"]

    def test_error_detail_lists_each_field(self):
        with pytest.raises(ProductValidationError) as exc_info:
            validate_product(make_product(name="", price=-1))
        detail = exc_info.value.to_detail()
        assert detail["message"] == "Error validating product"
        assert [e["field"] for e in detail["errors"]] == ["name", "price"]

    def test_seed_products_are_valid(self):
        for product in seed_products():
            validate_product(product)


class TestIsValidSku:

    def test_empty_string(self):
        assert not is_valid_sku("")

    def test_none(self):
        assert not is_valid_sku(None)

    def test_exact_match(self):
        assert is_valid_sku("abc-def-ghi")

    def test_two_matches_rejected(self):
        assert not is_valid_sku("abc-def-ghi abc-def-ghi")
