"""List users for the permission editor's user picker."""

import asyncio
from dataclasses import dataclass

from pagegate.application.ports import PermissionStore
from pagegate.application.use_cases.permission.resolve_permissions import PermissionResolver
from pagegate.domain.entities import Principal, UserSummary


@dataclass
class UserPickerEntry:
    """Picker row: the user plus how many pages they can view."""

    user: UserSummary
    viewable_pages: int
    total_pages: int

    @property
    def summary(self) -> str:
        return f"{self.viewable_pages}/{self.total_pages}"


class ListUsersUseCase:
    """List profiles filtered by activity, free-text search and role."""

    def __init__(self, permission_store: PermissionStore, resolver: PermissionResolver) -> None:
        self._store = permission_store
        self._resolver = resolver

    async def execute(
        self,
        *,
        active_only: bool = False,
        search: str | None = None,
        role: str | None = None,
    ) -> list[UserPickerEntry]:
        users = await self._store.list_users(active_only=active_only)
        term = (search or "").strip().lower()
        if term:
            users = [
                u
                for u in users
                if term in u.employee_id.lower()
                or term in u.role.lower()
                or term in u.station.lower()
            ]
        if role:
            users = [u for u in users if u.role == role]

        matrices = await asyncio.gather(
            *(
                self._resolver.effective(
                    Principal(id=u.id, role=u.role, station=u.station, active=u.active)
                )
                for u in users
            )
        )
        entries = []
        for user, matrix in zip(users, matrices):
            viewable, total = matrix.view_summary()
            entries.append(UserPickerEntry(user=user, viewable_pages=viewable, total_pages=total))
        return entries
