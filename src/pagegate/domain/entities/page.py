"""Page entity - an addressable screen guarded by permissions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    """Application page or feature with a stable key."""

    key: str
    group: str
    label: str
    description: str = ""
