"""Page catalog - static registry of every guarded page, by functional group."""

from collections.abc import Iterable, Mapping, Sequence

from pagegate.domain.entities import Page
from pagegate.domain.exceptions import NotFound, ValidationError
from pagegate.domain.value_objects import Action

# group -> (key, label, description); insertion order is display order
PAGE_GROUPS: dict[str, list[tuple[str, str, str]]] = {
    "Core Operations": [
        ("dashboard", "Dashboard", "Main overview, analytics, quick access toolbar"),
        ("products", "Products Management", "Product inventory, pricing, barcode scanning"),
        ("product_form", "Product Form", "Add and edit individual product records"),
    ],
    "Sales & Reporting": [
        ("sales_reports", "Sales Reports List", "Daily sales reporting, enhanced print dialogs"),
        ("sales_report_form", "Sales Report Form", "Create and edit daily sales reports"),
    ],
    "Human Resources": [
        ("employees", "Employee List", "Employee records and information management"),
        ("employee_form", "Employee Form", "Add and edit employee records with file uploads"),
        ("salary", "Salary List", "Payroll processing and salary records"),
        ("salary_form", "Salary Form", "Create and edit salary records"),
    ],
    "Business Operations": [
        ("vendors", "Vendor List", "Supplier relationships and vendor contacts"),
        ("vendor_form", "Vendor Form", "Add and edit vendor information"),
        ("orders", "Order List", "Purchase orders and inventory ordering"),
        ("order_form", "Order Form", "Create and edit purchase orders"),
    ],
    "Delivery & Inventory": [
        ("delivery", "Delivery List", "Fuel delivery tracking with enhanced print dialogs"),
        ("delivery_form", "Delivery Form", "Create and edit delivery records"),
        ("inventory_alerts", "Inventory Alerts", "Stock level alerts and notifications"),
        ("alert_settings", "Alert Settings", "Configure inventory alert thresholds"),
        ("gas_delivery_inventory", "Gas Delivery Inventory", "Gas tank monitoring and delivery tracking"),
    ],
    "Compliance & Licensing": [
        ("licenses", "License List", "Business licenses and regulatory compliance"),
        ("license_form", "License Form", "Add and edit license records with file uploads"),
    ],
    "System Administration": [
        ("settings", "App Settings", "Application configuration and system preferences"),
        ("user_management", "User Management", "User accounts and permission management"),
        ("site_management", "Site Management", "Multi-station configuration and management"),
        ("system_logs", "System Logs", "System activity and audit trails"),
        ("security_settings", "Security Settings", "Security policies and authentication settings"),
    ],
}


class PageCatalog:
    """Ordered group -> pages registry with unique page keys."""

    def __init__(self, groups: Mapping[str, Sequence[Page]]) -> None:
        self._groups: dict[str, tuple[Page, ...]] = {}
        self._by_key: dict[str, Page] = {}
        for group, pages in groups.items():
            for page in pages:
                if page.key in self._by_key:
                    raise ValidationError(f"Duplicate page key: {page.key}")
                if page.group != group:
                    raise ValidationError(
                        f"Page {page.key} declares group {page.group!r}, listed under {group!r}"
                    )
                self._by_key[page.key] = page
            self._groups[group] = tuple(pages)

    @classmethod
    def from_table(cls, table: Mapping[str, Iterable[tuple[str, str, str]]]) -> "PageCatalog":
        return cls(
            {
                group: [Page(key=key, group=group, label=label, description=desc)
                        for key, label, desc in rows]
                for group, rows in table.items()
            }
        )

    @classmethod
    def default(cls) -> "PageCatalog":
        return cls.from_table(PAGE_GROUPS)

    def pages(self) -> list[Page]:
        return [page for pages in self._groups.values() for page in pages]

    def keys(self) -> list[str]:
        return [page.key for page in self.pages()]

    def groups(self) -> list[str]:
        return list(self._groups)

    def pages_in_group(self, group: str) -> tuple[Page, ...]:
        try:
            return self._groups[group]
        except KeyError:
            raise NotFound(f"Page group {group!r}") from None

    def get(self, page_key: str) -> Page | None:
        return self._by_key.get(page_key)

    def require(self, page_key: str) -> Page:
        page = self.get(page_key)
        if page is None:
            raise NotFound(f"Page {page_key!r}")
        return page

    def actions_for(self, page: Page) -> tuple[Action, ...]:
        """Actions evaluated for a page; currently the full set for every page."""
        return tuple(Action)

    def __contains__(self, page_key: object) -> bool:
        return page_key in self._by_key

    def __len__(self) -> int:
        return len(self._by_key)
