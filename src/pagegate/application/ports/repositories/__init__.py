"""Repository ports."""

from pagegate.application.ports.repositories.profile_repository import ProfileRepository

__all__ = [
    "ProfileRepository",
]
