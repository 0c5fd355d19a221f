"""Bulk edit modes applied to a page or a page group."""

from enum import StrEnum

from pagegate.domain.value_objects.action import Action


class BulkMode(StrEnum):
    """Preset permission cells an administrator can stamp onto pages."""

    GRANT_ALL = "grant_all"
    REVOKE_ALL = "revoke_all"
    VIEW_ONLY = "view_only"
    OPERATIONAL = "operational"

    @property
    def actions(self) -> frozenset[Action]:
        """Actions set to true by this mode; every other action is false."""
        return _MODE_ACTIONS[self]


_MODE_ACTIONS: dict[BulkMode, frozenset[Action]] = {
    BulkMode.GRANT_ALL: frozenset(Action),
    BulkMode.REVOKE_ALL: frozenset(),
    BulkMode.VIEW_ONLY: frozenset({Action.VIEW, Action.EXPORT}),
    BulkMode.OPERATIONAL: frozenset(
        {Action.VIEW, Action.CREATE, Action.EDIT, Action.EXPORT, Action.PRINT}
    ),
}
