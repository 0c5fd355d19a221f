"""Domain value objects."""

from pagegate.domain.value_objects.action import Action
from pagegate.domain.value_objects.bulk_mode import BulkMode
from pagegate.domain.value_objects.decision import Decision, Denial, DenialKind, Outcome
from pagegate.domain.value_objects.role import ALL_STATIONS, Role, role_level

__all__ = [
    "ALL_STATIONS",
    "Action",
    "BulkMode",
    "Decision",
    "Denial",
    "DenialKind",
    "Outcome",
    "Role",
    "role_level",
]
