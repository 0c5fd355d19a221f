"""Role templates - default permission matrix derived from a role alone."""

from pagegate.domain.catalog import PageCatalog
from pagegate.domain.entities import PermissionCell, PermissionMatrix
from pagegate.domain.value_objects import Action, Role

# Management/Manager get everything except these, where they only view/export.
MANAGEMENT_RESTRICTED_PAGES = frozenset({"user_management", "system_logs", "security_settings"})

# Employee day-to-day pages.
EMPLOYEE_OPERATIONAL_PAGES = frozenset(
    {"dashboard", "sales_reports", "sales_report_form", "delivery", "delivery_form"}
)
EMPLOYEE_VIEW_PAGES = frozenset({"products", "inventory_alerts", "gas_delivery_inventory"})

_FULL = PermissionCell.full()
_NONE = PermissionCell()
_VIEW_EXPORT = PermissionCell.granting([Action.VIEW, Action.EXPORT])
_EMPLOYEE_OPERATIONAL = PermissionCell.granting(
    [Action.VIEW, Action.CREATE, Action.EDIT, Action.PRINT]
)
_VIEW = PermissionCell.granting([Action.VIEW])


def _administrator_cell(page_key: str) -> PermissionCell:
    return _FULL


def _management_cell(page_key: str) -> PermissionCell:
    return _VIEW_EXPORT if page_key in MANAGEMENT_RESTRICTED_PAGES else _FULL


def _employee_cell(page_key: str) -> PermissionCell:
    if page_key in EMPLOYEE_OPERATIONAL_PAGES:
        return _EMPLOYEE_OPERATIONAL
    if page_key in EMPLOYEE_VIEW_PAGES:
        return _VIEW
    return _NONE


_TEMPLATES = {
    Role.ADMINISTRATOR: _administrator_cell,
    Role.MANAGEMENT: _management_cell,
    Role.MANAGER: _management_cell,
    Role.EMPLOYEE: _employee_cell,
}


class RoleTemplateEngine:
    """Builds the default matrix for a role over a page catalog."""

    def __init__(self, catalog: PageCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> PageCatalog:
        return self._catalog

    def default_matrix(self, role: Role | str | None) -> PermissionMatrix:
        """Matrix with exactly one cell per catalog page.

        Unknown or custom roles get an all-false matrix.
        """
        known = Role.parse(role)
        if known is None:
            return PermissionMatrix.denied(self._catalog.keys())
        cell_for = _TEMPLATES[known]
        return PermissionMatrix(cells={key: cell_for(key) for key in self._catalog.keys()})

    def denied_matrix(self) -> PermissionMatrix:
        return PermissionMatrix.denied(self._catalog.keys())
