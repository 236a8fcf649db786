"""OrderLine - tests for constructor validation and immutability."""

import dataclasses

import pytest

from storefront.core.domain_types import ErrorCode
from storefront.core.errors import ValidationError
from storefront.core.order_line import OrderLine


def test_valid_line_keeps_values():
    line = OrderLine("LAPTOP", 1, 20000)
    assert line.sku == "LAPTOP"
    assert line.quantity == 1
    assert line.unit_price_cents == 20000
    assert line.line_total == 20000


def test_sku_is_trimmed():
    assert OrderLine("  MOUSE ", 3, 2500).sku == "MOUSE"


def test_zero_price_allowed():
    assert OrderLine("FREEBIE", 1, 0).line_total == 0


@pytest.mark.parametrize("sku", [None, "", "   "])
def test_blank_sku_rejected(sku):
    with pytest.raises(ValidationError, match="SKU") as exc_info:
        OrderLine(sku, 1, 100)
    assert exc_info.value.code == ErrorCode.INVALID_SKU
    assert exc_info.value.field == "sku"


@pytest.mark.parametrize("quantity", [0, -1, 1.5, True])
def test_non_positive_or_non_int_quantity_rejected(quantity):
    with pytest.raises(ValidationError, match="Quantity must be positive") as exc_info:
        OrderLine("SKU", quantity, 100)
    assert exc_info.value.code == ErrorCode.INVALID_QUANTITY


@pytest.mark.parametrize("price", [-1, 9.99])
def test_negative_or_float_price_rejected(price):
    with pytest.raises(ValidationError, match="Unit price cannot be negative") as exc_info:
        OrderLine("SKU", 1, price)
    assert exc_info.value.code == ErrorCode.NEGATIVE_UNIT_PRICE


def test_line_is_frozen():
    line = OrderLine("LAPTOP", 1, 20000)
    with pytest.raises(dataclasses.FrozenInstanceError):
        line.quantity = 999
    assert line.quantity == 1


def test_equal_lines_compare_and_hash_equal():
    assert OrderLine("A", 1, 1) == OrderLine(" A", 1, 1)
    assert hash(OrderLine("A", 1, 1)) == hash(OrderLine("A", 1, 1))
