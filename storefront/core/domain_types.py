"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - Money is always Cents (int minor units), never float
    - Percent is bounded 0-100 when present
    - Every rule violation is identified by an ErrorCode member, no raw strings

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

OrderId = NewType("OrderId", str)
ProfileId = NewType("ProfileId", str)
Sku = NewType("Sku", str)


# ─── Value Types ─────────────────────────────────────────────────

Cents = NewType("Cents", int)        # >= 0, minor currency units
Percent = NewType("Percent", int)    # 0-100


# ─── Enums ───────────────────────────────────────────────────────

class ErrorCode(str, Enum):
    """Stable identifiers for every rule the builders enforce."""
    # Order
    INVALID_ORDER_ID = "INVALID_ORDER_ID"
    INVALID_EMAIL = "INVALID_EMAIL"
    NULL_LINE = "NULL_LINE"
    MISSING_LINES = "MISSING_LINES"
    DISCOUNT_OUT_OF_RANGE = "DISCOUNT_OUT_OF_RANGE"
    NON_POSITIVE_TOTAL = "NON_POSITIVE_TOTAL"
    DUPLICATE_SKU = "DUPLICATE_SKU"

    # OrderLine
    INVALID_SKU = "INVALID_SKU"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    NEGATIVE_UNIT_PRICE = "NEGATIVE_UNIT_PRICE"

    # UserProfile
    INVALID_PROFILE_ID = "INVALID_PROFILE_ID"
    DISPLAY_NAME_TOO_LONG = "DISPLAY_NAME_TOO_LONG"
    INVALID_TWITTER_HANDLE = "INVALID_TWITTER_HANDLE"

    # Flags (Order.expedited, UserProfile.marketing_opt_in)
    INVALID_FLAG = "INVALID_FLAG"

    # Snapshot
    MALFORMED_SNAPSHOT = "MALFORMED_SNAPSHOT"

    # Usage
    UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"
    BUILDER_CONSUMED = "BUILDER_CONSUMED"
