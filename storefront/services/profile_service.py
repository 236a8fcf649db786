"""Profile Service - constructors and copy-with-change "updaters" for UserProfile.

Invariants:
    - Updaters never touch the original: to_builder() -> one setter -> build()
    - ValidationError propagates to the caller unchanged (logged at WARNING first)
"""

import logging
from collections.abc import Callable

from storefront.core.errors import ValidationError
from storefront.core.user_profile import UserProfile, UserProfileBuilder

logger = logging.getLogger(__name__)


class ProfileService:
    """Convenience constructors built on UserProfileBuilder."""

    def create_minimal(self, profile_id: str, email: str) -> UserProfile:
        return self._build(profile_id, lambda: UserProfile.builder(profile_id, email))

    def create_profile(
        self,
        profile_id: str,
        email: str,
        display_name: str | None,
        phone: str | None,
        marketing_opt_in: bool,
    ) -> UserProfile:
        return self._build(
            profile_id,
            lambda: (
                UserProfile.builder(profile_id, email)
                .display_name(display_name)
                .phone(phone)
                .marketing_opt_in(marketing_opt_in)
            ),
        )

    def with_updated_display_name(
        self, original: UserProfile, display_name: str | None,
    ) -> UserProfile:
        """New profile equal to original except for display_name."""
        return self._build(
            original.id, lambda: original.to_builder().display_name(display_name),
        )

    def with_updated_marketing_opt_in(
        self, original: UserProfile, marketing_opt_in: bool,
    ) -> UserProfile:
        """New profile equal to original except for marketing_opt_in."""
        return self._build(
            original.id,
            lambda: original.to_builder().marketing_opt_in(marketing_opt_in),
        )

    def _build(
        self, profile_id: str, prepare: Callable[[], UserProfileBuilder],
    ) -> UserProfile:
        try:
            profile = prepare().build()
        except ValidationError as e:
            logger.warning(
                "Profile rejected: %s", e.message,
                extra={"profile_id": profile_id, "error_code": e.code.value, "field": e.field},
            )
            raise
        logger.info("Profile built", extra={"profile_id": profile.id})
        return profile
