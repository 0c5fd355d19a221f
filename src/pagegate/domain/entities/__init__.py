"""Domain entities."""

from pagegate.domain.entities.page import Page
from pagegate.domain.entities.permission import (
    PermissionCell,
    PermissionMatrix,
    PermissionOverride,
)
from pagegate.domain.entities.principal import Principal
from pagegate.domain.entities.user_profile import UserProfile, UserSummary

__all__ = [
    "Page",
    "PermissionCell",
    "PermissionMatrix",
    "PermissionOverride",
    "Principal",
    "UserProfile",
    "UserSummary",
]
