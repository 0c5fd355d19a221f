"""PostgreSQL user profile repository implementation."""

from psycopg import AsyncConnection

from pagegate.domain.entities import UserProfile

_COLUMNS = "id, role, station, employee_id, phone, is_active, detailed_permissions"


def _row_to_profile(r: tuple) -> UserProfile:
    return UserProfile(
        id=r[0],
        role=r[1],
        station=r[2] or "",
        employee_id=r[3] or "",
        phone=r[4] or "",
        is_active=r[5],
        detailed_permissions=r[6],
    )


class PostgresProfileRepository:
    """User profile repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, profile_id: int) -> UserProfile | None:
        """Get profile by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM user_profile WHERE id = %s",
            (profile_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_profile(r)

    async def list(self, *, active_only: bool = False) -> list[UserProfile]:
        """List profiles, newest first."""
        if active_only:
            cur = await self._conn.execute(
                f"SELECT {_COLUMNS} FROM user_profile WHERE is_active ORDER BY id DESC"
            )
        else:
            cur = await self._conn.execute(
                f"SELECT {_COLUMNS} FROM user_profile ORDER BY id DESC"
            )
        rows = await cur.fetchall()
        return [_row_to_profile(r) for r in rows]

    async def update_permissions(self, profile_id: int, document: str) -> bool:
        """Overwrite the stored override document."""
        cur = await self._conn.execute(
            "UPDATE user_profile SET detailed_permissions = %s WHERE id = %s",
            (document, profile_id),
        )
        return cur.rowcount > 0
