"""Permission store backed by user profile records."""

from pagegate.domain.entities import PermissionOverride, UserProfile, UserSummary
from pagegate.domain.exceptions import UnknownPrincipal
from pagegate.domain.override_codec import serialize_override


class ProfilePermissionStore:
    """Reads and writes the override document kept on each user profile."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def read_override(self, user_id: int) -> str | None:
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_id(user_id)
        if profile is None:
            raise UnknownPrincipal(user_id)
        return profile.detailed_permissions

    async def write_override(self, user_id: int, override: PermissionOverride) -> None:
        """Full replace of the stored document; no versioning, last write wins."""
        document = serialize_override(override)
        async with self._uow_factory() as uow:
            updated = await uow.profiles.update_permissions(user_id, document)
        if not updated:
            raise UnknownPrincipal(user_id)

    async def get_profile(self, user_id: int) -> UserProfile | None:
        async with self._uow_factory() as uow:
            return await uow.profiles.get_by_id(user_id)

    async def list_users(self, active_only: bool = False) -> list[UserSummary]:
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.list(active_only=active_only)
        return [p.to_summary() for p in profiles]
