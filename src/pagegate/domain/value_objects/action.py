"""Permission actions - the fixed vocabulary checked on every page."""

from enum import StrEnum


class Action(StrEnum):
    """Operations that can be allowed on a page."""

    VIEW = "view"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    EXPORT = "export"
    PRINT = "print"
    APPROVE = "approve"
    BULK_OPERATIONS = "bulk_operations"
    ADVANCED_FEATURES = "advanced_features"

    @property
    def label(self) -> str:
        return _DESCRIPTIONS[self][0]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self][1]


_DESCRIPTIONS: dict[Action, tuple[str, str]] = {
    Action.VIEW: ("View", "Can view and access the page/content"),
    Action.CREATE: ("Add/Create", "Can use Add buttons and create new records"),
    Action.EDIT: ("Edit/Modify", "Can use Edit buttons and modify existing records"),
    Action.DELETE: ("Delete", "Can delete records and use delete buttons"),
    Action.EXPORT: ("Export", "Can export data to files (CSV, Excel, etc.)"),
    Action.PRINT: ("Print", "Can print reports and use enhanced print dialogs"),
    Action.APPROVE: ("Approve", "Can approve transactions and records"),
    Action.BULK_OPERATIONS: ("Bulk Ops", "Can perform bulk operations on multiple records"),
    Action.ADVANCED_FEATURES: ("Advanced", "Can access advanced features and configurations"),
}
