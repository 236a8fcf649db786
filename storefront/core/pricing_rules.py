"""Pricing Rules - stateless predicates and integer money arithmetic.

Invariants:
    - All functions are PURE: no IO, no state, no exceptions for bad input (predicates return False)
    - Money math stays in int cents end to end; no float ever enters a total
    - apply_discount floors toward zero: base - (base * percent) // 100

Design Decisions:
    - Predicates return bool, builders decide which error to raise
      (same rule is reused at builder construction and again at build())
"""

import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.core.order_line import OrderLine


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_DISCOUNT_PERCENT: int = 0
MAX_DISCOUNT_PERCENT: int = 100


def is_strict_int(value: object) -> bool:
    """int, but not bool (bool subclasses int)."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_email(email: object) -> bool:
    """True iff email is a str shaped like local@domain.tld."""
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_discount(discount_percent: object) -> bool:
    """True iff there is no discount, or it is an int within 0-100 inclusive."""
    if discount_percent is None:
        return True
    return (
        is_strict_int(discount_percent)
        and MIN_DISCOUNT_PERCENT <= discount_percent <= MAX_DISCOUNT_PERCENT
    )


def line_total(quantity: int, unit_price_cents: int) -> int:
    return quantity * unit_price_cents


def total_cents(lines: Iterable["OrderLine"]) -> int:
    """Sum of quantity * unit price over all lines."""
    return sum(line_total(line.quantity, line.unit_price_cents) for line in lines)


def apply_discount(base_cents: int, discount_percent: int | None) -> int:
    """Subtract a whole-percent discount, truncating the discount amount."""
    if discount_percent is None:
        return base_cents
    return base_cents - (base_cents * discount_percent) // 100
