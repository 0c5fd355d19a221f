"""Principal roles and their hierarchy."""

from enum import StrEnum

ALL_STATIONS = "ALL_STATIONS"


class Role(StrEnum):
    """Known roles, ordered by level: Employee < Management = Manager < Administrator."""

    ADMINISTRATOR = "Administrator"
    MANAGEMENT = "Management"
    MANAGER = "Manager"
    EMPLOYEE = "Employee"

    @property
    def level(self) -> int:
        return _LEVELS[self]

    @classmethod
    def parse(cls, value: "str | Role | None") -> "Role | None":
        """Return the matching role, or None for custom/unknown role names."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


_LEVELS: dict[Role, int] = {
    Role.EMPLOYEE: 1,
    Role.MANAGEMENT: 2,
    Role.MANAGER: 2,
    Role.ADMINISTRATOR: 3,
}


def role_level(role: "str | Role | None") -> int:
    """Hierarchy level of a role name; unknown roles rank below Employee."""
    known = Role.parse(role)
    return known.level if known else 0
