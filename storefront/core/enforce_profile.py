"""Profile Rule Enforcement - validates a UserProfile draft.

Invariants:
    - All functions are PURE: return a ValidationError on violation, None on success
    - validate_profile_draft chains checks - first error wins:
      email -> display name length -> twitter handle
    - MAX_DISPLAY_NAME_LENGTH (100) is single source of truth for the cutoff
"""

from storefront.core.domain_types import ErrorCode
from storefront.core.errors import ErrorContext, ValidationError
from storefront.core.pricing_rules import is_valid_email


MAX_DISPLAY_NAME_LENGTH: int = 100
TWITTER_PREFIX: str = "@"


def _context(profile_id: str | None) -> ErrorContext:
    return ErrorContext(entity_type="UserProfile", entity_id=profile_id)


def check_profile_id(profile_id: object) -> ValidationError | None:
    if not isinstance(profile_id, str) or not profile_id.strip():
        return ValidationError(
            "Profile ID cannot be None or empty",
            ErrorCode.INVALID_PROFILE_ID, "id", context=_context(None),
        )
    return None


def check_email(email: object, profile_id: str | None = None) -> ValidationError | None:
    if not is_valid_email(email):
        return ValidationError(
            "Invalid email format", ErrorCode.INVALID_EMAIL, "email",
            context=_context(profile_id),
        )
    return None


def check_display_name(display_name: str | None, profile_id: str) -> ValidationError | None:
    """Optional; at most MAX_DISPLAY_NAME_LENGTH characters when present."""
    if display_name is not None and len(display_name) > MAX_DISPLAY_NAME_LENGTH:
        return ValidationError(
            f"Display name cannot exceed {MAX_DISPLAY_NAME_LENGTH} characters",
            ErrorCode.DISPLAY_NAME_TOO_LONG, "display_name",
            context=_context(profile_id),
        )
    return None


def check_marketing_opt_in(marketing_opt_in: object, profile_id: str) -> ValidationError | None:
    if not isinstance(marketing_opt_in, bool):
        return ValidationError(
            f"Marketing opt-in must be a bool, got: {marketing_opt_in!r}",
            ErrorCode.INVALID_FLAG, "marketing_opt_in",
            context=_context(profile_id),
        )
    return None


def check_twitter_handle(handle: str | None, profile_id: str) -> ValidationError | None:
    """Optional; must start with '@' when present."""
    if handle is not None and not (
        isinstance(handle, str) and handle.startswith(TWITTER_PREFIX)
    ):
        return ValidationError(
            "Twitter handle must start with @",
            ErrorCode.INVALID_TWITTER_HANDLE, "twitter",
            context=_context(profile_id),
        )
    return None


def validate_profile_draft(
    profile_id: str,
    email: str,
    display_name: str | None,
    twitter: str | None,
) -> ValidationError | None:
    """Chain all build-time checks. Returns first error or None."""
    return (
        check_email(email, profile_id)
        or check_display_name(display_name, profile_id)
        or check_twitter_handle(twitter, profile_id)
    )
