"""Permission store port - persisted overrides on user profile records."""

from typing import Protocol

from pagegate.domain.entities import PermissionOverride, UserProfile, UserSummary


class PermissionStore(Protocol):
    """Port for reading and writing a user's permission override.

    Implementations raise StoreUnavailable when the backing store cannot be
    reached and UnknownPrincipal when the user has no profile.
    """

    async def read_override(self, user_id: int) -> str | None:
        """Raw stored override document, or None when the profile has none."""
        ...

    async def write_override(self, user_id: int, override: PermissionOverride) -> None:
        """Replace the stored override document."""
        ...

    async def get_profile(self, user_id: int) -> UserProfile | None: ...

    async def list_users(self, active_only: bool = False) -> list[UserSummary]: ...
