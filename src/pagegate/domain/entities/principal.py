"""Principal entity - authenticated identity that authorization is decided for."""

from dataclasses import dataclass

from pagegate.domain.value_objects import ALL_STATIONS, Role, role_level


@dataclass(frozen=True)
class Principal:
    """Identity with role and station; role may be a custom name outside Role."""

    id: int
    role: str
    station: str = ""
    active: bool = True

    @property
    def known_role(self) -> Role | None:
        return Role.parse(self.role)

    @property
    def level(self) -> int:
        return role_level(self.role)

    @property
    def has_all_stations(self) -> bool:
        return self.station == ALL_STATIONS
