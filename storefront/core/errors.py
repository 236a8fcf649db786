"""Error Hierarchy - typed, categorized exceptions for every storefront failure mode.

Invariants:
    - Every error has a code (ErrorCode value), category (ErrorCategory), severity (ErrorSeverity)
    - ValidationError is the single kind raised for rejected input, at any stage of construction
    - UnsupportedOperationError is raised only by read-only views, never for bad input
    - to_dict() produces the envelope that observability and callers consume

Design Decisions:
    - Single hierarchy with StorefrontError base: one except clause catches all (ADR: uniform error shape)
    - Builtin mixins (ValueError, TypeError, RuntimeError): callers that only know the stdlib
      contract still catch the right thing
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from storefront.core.domain_types import ErrorCode


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_type: str | None = None
    entity_id: str | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a JSON-safe error envelope."""
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity_type": self.context.entity_type,
                    "entity_id": self.context.entity_id,
                    "field": self.context.field,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class ValidationError(StorefrontError, ValueError):
    """A field or business rule rejected the supplied values."""
    def __init__(
        self,
        message: str,
        code: ErrorCode,
        field: str | None = None,
        category: ErrorCategory = ErrorCategory.VALIDATION,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(message, code, category, ErrorSeverity.ERROR, ctx)
        self.field = field


class UnsupportedOperationError(StorefrontError, TypeError):
    """Mutation attempted through a read-only view."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"'{operation}' is not supported on a read-only view",
            ErrorCode.UNSUPPORTED_OPERATION, ErrorCategory.UNSUPPORTED_OPERATION,
            ErrorSeverity.ERROR, context,
        )
        self.operation = operation


class BuilderConsumedError(StorefrontError, RuntimeError):
    """Builder used again after its build() already produced a value."""
    def __init__(self, builder_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"{builder_name} has already been built and cannot be reused",
            ErrorCode.BUILDER_CONSUMED, ErrorCategory.INTERNAL,
            ErrorSeverity.ERROR, context,
        )
        self.builder_name = builder_name
