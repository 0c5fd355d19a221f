"""User profile repository port."""

from typing import Protocol

from pagegate.domain.entities import UserProfile


class ProfileRepository(Protocol):
    """Port for user profile persistence."""

    async def get_by_id(self, profile_id: int) -> UserProfile | None: ...

    async def list(self, *, active_only: bool = False) -> list[UserProfile]: ...

    async def update_permissions(self, profile_id: int, document: str) -> bool:
        """Overwrite detailed_permissions; False when no such profile exists."""
        ...
