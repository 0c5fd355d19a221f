"""User profile entity - the record that owns a permission override."""

from dataclasses import dataclass

from pagegate.domain.entities.principal import Principal


@dataclass
class UserSummary:
    """Profile fields shown in the editor's user picker."""

    id: int
    role: str
    station: str
    employee_id: str
    active: bool


@dataclass
class UserProfile:
    """Stored user profile; detailed_permissions is the raw override document."""

    id: int
    role: str
    station: str
    employee_id: str
    phone: str = ""
    is_active: bool = True
    detailed_permissions: str | None = None

    def to_principal(self) -> Principal:
        return Principal(
            id=self.id,
            role=self.role,
            station=self.station,
            active=self.is_active,
        )

    def to_summary(self) -> UserSummary:
        return UserSummary(
            id=self.id,
            role=self.role,
            station=self.station,
            employee_id=self.employee_id,
            active=self.is_active,
        )
