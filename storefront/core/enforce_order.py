"""Order Rule Enforcement - validates a builder's accumulated state before an Order exists.

Invariants:
    - All functions are PURE: no IO, no side effects, nothing raised
    - Return a ValidationError on violation, None on success
    - validate_order_draft chains all checks in fixed order - first error wins:
      lines present -> discount range -> email -> total positive -> SKU uniqueness

Design Decisions:
    - Return errors (not raise): the builder owns the raise, checks stay testable as plain values
    - Fixed chain order keeps error messages deterministic for the same input
"""

from collections.abc import Sequence

from storefront.core.domain_types import ErrorCode
from storefront.core.errors import ErrorCategory, ErrorContext, ValidationError
from storefront.core.order_line import OrderLine
from storefront.core.pricing_rules import is_valid_discount, is_valid_email, total_cents


def _context(order_id: str | None) -> ErrorContext:
    return ErrorContext(entity_type="Order", entity_id=order_id)


def check_order_id(order_id: object) -> ValidationError | None:
    """Rule 1: Order id must be a non-blank string."""
    if not isinstance(order_id, str) or not order_id.strip():
        return ValidationError(
            "Order ID cannot be None or empty",
            ErrorCode.INVALID_ORDER_ID, "id", context=_context(None),
        )
    return None


def check_email_format(email: object, order_id: str | None = None) -> ValidationError | None:
    """Rule 2: Email must look like local@domain.tld (checked when the builder is created)."""
    if not is_valid_email(email):
        return ValidationError(
            "Invalid email format",
            ErrorCode.INVALID_EMAIL, "customer_email", context=_context(order_id),
        )
    return None


def check_line_not_none(line: OrderLine | None, order_id: str) -> ValidationError | None:
    """Rule 3: A None line item is rejected as soon as it is added."""
    if line is None:
        return ValidationError(
            "OrderLine cannot be None",
            ErrorCode.NULL_LINE, "lines", context=_context(order_id),
        )
    return None


def check_expedited_flag(expedited: object, order_id: str) -> ValidationError | None:
    """expedited must be a bool; truthy stand-ins like "no" are rejected."""
    if not isinstance(expedited, bool):
        return ValidationError(
            f"Expedited must be a bool, got: {expedited!r}",
            ErrorCode.INVALID_FLAG, "expedited", context=_context(order_id),
        )
    return None


def check_has_lines(lines: Sequence[OrderLine], order_id: str) -> ValidationError | None:
    """Rule 4: An order carries at least one line item."""
    if not lines:
        return ValidationError(
            "Order must have at least one line item",
            ErrorCode.MISSING_LINES, "lines", context=_context(order_id),
        )
    return None


def check_discount_range(discount_percent: object, order_id: str) -> ValidationError | None:
    """Rule 5: Discount is absent or within 0-100."""
    if not is_valid_discount(discount_percent):
        return ValidationError(
            f"Discount percent must be between 0 and 100, got: {discount_percent}",
            ErrorCode.DISCOUNT_OUT_OF_RANGE, "discount_percent",
            context=_context(order_id),
        )
    return None


def check_customer_email(email: object, order_id: str) -> ValidationError | None:
    """Rule 2 again, at build time, with the offending value in the message."""
    if not is_valid_email(email):
        return ValidationError(
            f"Invalid customer email format: {email}",
            ErrorCode.INVALID_EMAIL, "customer_email", context=_context(order_id),
        )
    return None


def check_positive_total(lines: Sequence[OrderLine], order_id: str) -> ValidationError | None:
    """Rule 6: Sum of quantity * unit price is strictly positive."""
    if total_cents(lines) <= 0:
        return ValidationError(
            "Order total must be positive",
            ErrorCode.NON_POSITIVE_TOTAL, "lines",
            category=ErrorCategory.BUSINESS_RULE, context=_context(order_id),
        )
    return None


def check_unique_skus(lines: Sequence[OrderLine], order_id: str) -> ValidationError | None:
    """Rule 7: No SKU appears twice. Reports the first repeat in insertion order."""
    seen: set[str] = set()
    for line in lines:
        if line.sku in seen:
            return ValidationError(
                f"Duplicate SKU found: {line.sku}",
                ErrorCode.DUPLICATE_SKU, "lines",
                category=ErrorCategory.BUSINESS_RULE, context=_context(order_id),
            )
        seen.add(line.sku)
    return None


def validate_order_draft(
    order_id: str,
    customer_email: str,
    lines: Sequence[OrderLine],
    discount_percent: int | None,
) -> ValidationError | None:
    """Chain all build-time checks. Returns first error or None."""
    return (
        check_has_lines(lines, order_id)
        or check_discount_range(discount_percent, order_id)
        or check_customer_email(customer_email, order_id)
        or check_positive_total(lines, order_id)
        or check_unique_skus(lines, order_id)
    )
