"""Order Service - one-call constructors for common Order shapes.

Invariants:
    - Every method builds through Order.builder(); no Order is created any other way
    - ValidationError propagates to the caller unchanged (logged at WARNING first)
    - Successful builds are logged at INFO with order_id, line_count, total_cents

Design Decisions:
    - Stateless class over module functions: callers inject/replace it like any service
"""

import logging
from collections.abc import Callable, Iterable

from storefront.core.errors import ValidationError
from storefront.core.order import Order, OrderBuilder
from storefront.core.order_line import OrderLine

logger = logging.getLogger(__name__)


class OrderService:
    """Convenience constructors built on OrderBuilder."""

    def create_order(
        self,
        order_id: str,
        email: str,
        lines: Iterable[OrderLine] | None,
        discount: int | None,
        expedited: bool,
        notes: str | None,
    ) -> Order:
        """Create an order with every optional field spelled out."""
        return self._build(
            order_id,
            lambda: (
                Order.builder(order_id, email)
                .add_lines(lines)
                .discount_percent(discount)
                .expedited(expedited)
                .notes(notes)
            ),
        )

    def create_minimal_order(self, order_id: str, email: str, *lines: OrderLine) -> Order:
        return self._build(
            order_id, lambda: Order.builder(order_id, email).add_lines(lines),
        )

    def create_discounted_order(
        self, order_id: str, email: str, discount_percent: int, *lines: OrderLine,
    ) -> Order:
        return self._build(
            order_id,
            lambda: (
                Order.builder(order_id, email)
                .add_lines(lines)
                .discount_percent(discount_percent)
            ),
        )

    def create_expedited_order(
        self, order_id: str, email: str, notes: str | None, *lines: OrderLine,
    ) -> Order:
        return self._build(
            order_id,
            lambda: (
                Order.builder(order_id, email)
                .add_lines(lines)
                .expedited(True)
                .notes(notes)
            ),
        )

    def _build(self, order_id: str, prepare: Callable[[], OrderBuilder]) -> Order:
        """Run prepare() then build(), logging the outcome either way."""
        try:
            order = prepare().build()
        except ValidationError as e:
            logger.warning(
                "Order rejected: %s", e.message,
                extra={"order_id": order_id, "error_code": e.code.value, "field": e.field},
            )
            raise
        logger.info(
            "Order created",
            extra={
                "order_id": order.id,
                "line_count": len(order.lines),
                "total_cents": order.total_after_discount(),
            },
        )
        return order

