"""UserProfile - immutable user profile built through UserProfileBuilder.

Invariants:
    - Profiles are created only by UserProfileBuilder.build(); frozen afterwards
    - id is non-blank (stored trimmed), email valid, display_name <= 100 chars,
      twitter starts with '@' when present
    - "Updating" a profile means to_builder() + one setter + build(): a new object every time

Design Decisions:
    - twitter() and marketing_opt_in() reject bad values at call time; build() re-checks the draft
    - Builder is single-use, same contract as OrderBuilder
"""

from dataclasses import dataclass

from storefront.core.enforce_profile import (
    check_email,
    check_marketing_opt_in,
    check_profile_id,
    check_twitter_handle,
    validate_profile_draft,
)
from storefront.core.errors import BuilderConsumedError


@dataclass(frozen=True)
class UserProfile:
    id: str
    email: str
    display_name: str | None = None
    phone: str | None = None
    marketing_opt_in: bool = False
    twitter: str | None = None
    github: str | None = None
    address: str | None = None

    @staticmethod
    def builder(profile_id: str, email: str) -> "UserProfileBuilder":
        return UserProfileBuilder(profile_id, email)

    def to_builder(self) -> "UserProfileBuilder":
        """Fresh builder seeded with every field of this profile."""
        return (
            UserProfileBuilder(self.id, self.email)
            .display_name(self.display_name)
            .phone(self.phone)
            .marketing_opt_in(self.marketing_opt_in)
            .twitter(self.twitter)
            .github(self.github)
            .address(self.address)
        )


class UserProfileBuilder:
    """Mutable, single-use accumulator for a UserProfile. Not thread-safe."""

    def __init__(self, profile_id: str, email: str):
        error = check_profile_id(profile_id) or check_email(email, profile_id)
        if error:
            raise error

        self._id = profile_id.strip()
        self._email = email.strip()
        self._display_name: str | None = None
        self._phone: str | None = None
        self._marketing_opt_in = False
        self._twitter: str | None = None
        self._github: str | None = None
        self._address: str | None = None
        self._built = False

    def _ensure_open(self) -> None:
        if self._built:
            raise BuilderConsumedError(type(self).__name__)

    def display_name(self, display_name: str | None) -> "UserProfileBuilder":
        self._ensure_open()
        self._display_name = display_name
        return self

    def phone(self, phone: str | None) -> "UserProfileBuilder":
        self._ensure_open()
        self._phone = phone
        return self

    def marketing_opt_in(self, marketing_opt_in: bool) -> "UserProfileBuilder":
        self._ensure_open()
        error = check_marketing_opt_in(marketing_opt_in, self._id)
        if error:
            raise error
        self._marketing_opt_in = marketing_opt_in
        return self

    def twitter(self, handle: str | None) -> "UserProfileBuilder":
        self._ensure_open()
        error = check_twitter_handle(handle, self._id)
        if error:
            raise error
        self._twitter = handle
        return self

    def github(self, github: str | None) -> "UserProfileBuilder":
        self._ensure_open()
        self._github = github
        return self

    def address(self, address: str | None) -> "UserProfileBuilder":
        self._ensure_open()
        self._address = address
        return self

    def build(self) -> UserProfile:
        self._ensure_open()
        error = validate_profile_draft(
            self._id, self._email, self._display_name, self._twitter,
        )
        if error:
            raise error

        profile = UserProfile(
            id=self._id,
            email=self._email,
            display_name=self._display_name,
            phone=self._phone,
            marketing_opt_in=self._marketing_opt_in,
            twitter=self._twitter,
            github=self._github,
            address=self._address,
        )
        self._built = True
        return profile
