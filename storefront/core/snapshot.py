"""Snapshot - serialization / deserialization for Order and UserProfile.

Invariants:
    - *_to_snapshot produces a JSON-safe dict (lines as list of dicts, no custom objects)
    - *_from_snapshot goes through the builder: every rule is re-checked, a bad
      snapshot raises ValidationError exactly as hand-built input would
    - Missing optional keys fall back to builder defaults (forward-compatible)

Design Decisions:
    - Bulk field mappings keep the optional-field restore in one loop per type
"""

from storefront.core.domain_types import ErrorCode
from storefront.core.errors import ErrorContext, ValidationError
from storefront.core.order import Order
from storefront.core.order_line import OrderLine
from storefront.core.user_profile import UserProfile

_LINE_KEYS: tuple[str, ...] = ("sku", "quantity", "unit_price_cents")

# Optional builder setters and their defaults, restored in bulk
_ORDER_OPTIONAL_FIELDS: dict[str, object] = {
    "discount_percent": None, "expedited": False, "notes": None,
}
_PROFILE_OPTIONAL_FIELDS: dict[str, object] = {
    "display_name": None, "phone": None, "marketing_opt_in": False,
    "twitter": None, "github": None, "address": None,
}


def _line_to_snapshot(line: OrderLine) -> dict:
    return {
        "sku": line.sku,
        "quantity": line.quantity,
        "unit_price_cents": line.unit_price_cents,
    }


def _line_from_snapshot(raw: object, order_id: object) -> OrderLine:
    """Rebuild one line; a non-dict or missing key is a ValidationError, not KeyError."""
    if not isinstance(raw, dict) or any(key not in raw for key in _LINE_KEYS):
        raise ValidationError(
            f"Malformed order line in snapshot: {raw!r}",
            ErrorCode.MALFORMED_SNAPSHOT, "lines",
            context=ErrorContext(entity_type="Order", entity_id=order_id),
        )
    return OrderLine(raw["sku"], raw["quantity"], raw["unit_price_cents"])


def order_to_snapshot(order: Order) -> dict:
    """Serialize Order to JSON-safe dict. Pure, no IO."""
    return {
        "id": order.id,
        "customer_email": order.customer_email,
        "lines": [_line_to_snapshot(line) for line in order.lines],
        "discount_percent": order.discount_percent,
        "expedited": order.expedited,
        "notes": order.notes,
    }


def order_from_snapshot(data: dict) -> Order:
    """Rebuild an Order from a snapshot dict through OrderBuilder. Pure, no IO."""
    order_id = data.get("id")
    builder = Order.builder(order_id, data.get("customer_email"))
    builder.add_lines(
        _line_from_snapshot(raw, order_id) for raw in data.get("lines") or []
    )
    for key, default in _ORDER_OPTIONAL_FIELDS.items():
        getattr(builder, key)(data.get(key, default))
    return builder.build()


def profile_to_snapshot(profile: UserProfile) -> dict:
    """Serialize UserProfile to JSON-safe dict. Pure, no IO."""
    return {
        "id": profile.id,
        "email": profile.email,
        **{key: getattr(profile, key) for key in _PROFILE_OPTIONAL_FIELDS},
    }


def profile_from_snapshot(data: dict) -> UserProfile:
    """Rebuild a UserProfile from a snapshot dict through UserProfileBuilder."""
    builder = UserProfile.builder(data.get("id"), data.get("email"))
    for key, default in _PROFILE_OPTIONAL_FIELDS.items():
        getattr(builder, key)(data.get(key, default))
    return builder.build()
