"""Order - immutable, validated order built through OrderBuilder.

Invariants:
    - Orders are created only by OrderBuilder.build(); fields never change afterwards
    - lines is an OrderLines view: non-empty, unique SKUs, insertion order kept,
      copied out of the builder so later changes to the caller's list are invisible
    - total_before_discount() > 0 for every Order
    - total_after_discount() <= total_before_discount(), equal iff no discount or 0

Design Decisions:
    - Frozen dataclass + separate mutable builder: composition, no inheritance
    - Builder is single-use: a successful build() consumes it (BuilderConsumedError afterwards)
    - Cheap checks run at call time (id, email, None line, expedited flag), the rest in build()
"""

from collections.abc import Iterable
from dataclasses import dataclass

from storefront.core.enforce_order import (
    check_email_format,
    check_expedited_flag,
    check_line_not_none,
    check_order_id,
    validate_order_draft,
)
from storefront.core.errors import BuilderConsumedError
from storefront.core.order_line import OrderLine
from storefront.core.order_lines import OrderLines
from storefront.core.pricing_rules import apply_discount, total_cents


@dataclass(frozen=True)
class Order:
    """Customer order: who ordered, what, and on which terms."""

    id: str
    customer_email: str
    lines: OrderLines
    discount_percent: int | None = None
    expedited: bool = False
    notes: str | None = None

    @staticmethod
    def builder(order_id: str, customer_email: str) -> "OrderBuilder":
        return OrderBuilder(order_id, customer_email)

    def to_builder(self) -> "OrderBuilder":
        """Fresh builder seeded with every field of this order."""
        return (
            OrderBuilder(self.id, self.customer_email)
            .add_lines(self.lines)
            .discount_percent(self.discount_percent)
            .expedited(self.expedited)
            .notes(self.notes)
        )

    def total_before_discount(self) -> int:
        """Sum of quantity * unit price, in cents."""
        return total_cents(self.lines)

    def total_after_discount(self) -> int:
        """Total in cents after the whole-percent discount (truncated)."""
        return apply_discount(self.total_before_discount(), self.discount_percent)


class OrderBuilder:
    """Mutable, single-use accumulator for an Order. Not thread-safe."""

    def __init__(self, order_id: str, customer_email: str):
        error = check_order_id(order_id) or check_email_format(customer_email, order_id)
        if error:
            raise error

        self._id = order_id.strip()
        self._customer_email = customer_email.strip()
        self._lines: list[OrderLine] = []
        self._discount_percent: int | None = None
        self._expedited = False
        self._notes: str | None = None
        self._built = False

    def _ensure_open(self) -> None:
        if self._built:
            raise BuilderConsumedError(type(self).__name__)

    def add_line(self, line: OrderLine) -> "OrderBuilder":
        self._ensure_open()
        error = check_line_not_none(line, self._id)
        if error:
            raise error
        self._lines.append(line)
        return self

    def add_lines(self, lines: Iterable[OrderLine] | None) -> "OrderBuilder":
        """Append each line in order. None is a no-op."""
        self._ensure_open()
        if lines is not None:
            for line in lines:
                self.add_line(line)
        return self

    def discount_percent(self, discount_percent: int | None) -> "OrderBuilder":
        self._ensure_open()
        self._discount_percent = discount_percent
        return self

    def expedited(self, expedited: bool) -> "OrderBuilder":
        self._ensure_open()
        error = check_expedited_flag(expedited, self._id)
        if error:
            raise error
        self._expedited = expedited
        return self

    def notes(self, notes: str | None) -> "OrderBuilder":
        self._ensure_open()
        self._notes = notes
        return self

    def build(self) -> Order:
        """Validate all rules (first violation raises) and freeze into an Order."""
        self._ensure_open()
        error = validate_order_draft(
            self._id, self._customer_email, self._lines, self._discount_percent,
        )
        if error:
            raise error

        order = Order(
            id=self._id,
            customer_email=self._customer_email,
            lines=OrderLines(self._lines),
            discount_percent=self._discount_percent,
            expedited=self._expedited,
            notes=self._notes,
        )
        self._built = True
        return order
