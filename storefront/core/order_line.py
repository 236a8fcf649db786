"""OrderLine - one immutable line item of an Order.

Invariants:
    - sku is a non-empty str, stored trimmed
    - quantity is an int > 0, unit_price_cents an int >= 0 (bool rejected for both)
    - Validated once, in __post_init__; frozen afterwards
"""

from dataclasses import dataclass

from storefront.core.domain_types import ErrorCode
from storefront.core.errors import ErrorContext, ValidationError
from storefront.core.pricing_rules import is_strict_int
from storefront.core.pricing_rules import line_total as compute_line_total


@dataclass(frozen=True)
class OrderLine:
    """A SKU, how many of it, and its price per unit in cents."""

    sku: str
    quantity: int
    unit_price_cents: int

    def __post_init__(self):
        if not isinstance(self.sku, str) or not self.sku.strip():
            raise ValidationError(
                "SKU cannot be None or empty", ErrorCode.INVALID_SKU, "sku",
                context=ErrorContext(entity_type="OrderLine"),
            )
        if not is_strict_int(self.quantity) or self.quantity <= 0:
            raise ValidationError(
                "Quantity must be positive", ErrorCode.INVALID_QUANTITY, "quantity",
                context=ErrorContext(entity_type="OrderLine", entity_id=self.sku.strip()),
            )
        if not is_strict_int(self.unit_price_cents) or self.unit_price_cents < 0:
            raise ValidationError(
                "Unit price cannot be negative",
                ErrorCode.NEGATIVE_UNIT_PRICE, "unit_price_cents",
                context=ErrorContext(entity_type="OrderLine", entity_id=self.sku.strip()),
            )
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "sku", self.sku.strip())

    @property
    def line_total(self) -> int:
        return compute_line_total(self.quantity, self.unit_price_cents)
