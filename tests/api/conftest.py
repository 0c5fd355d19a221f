"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from pagegate.application.use_cases.permission.access_guard import AccessGuard
from pagegate.application.use_cases.permission.edit_permissions import PermissionEditor
from pagegate.application.use_cases.permission.list_users import ListUsersUseCase
from pagegate.application.use_cases.permission.resolve_permissions import PermissionResolver
from pagegate.domain.exceptions import StoreUnavailable
from pagegate.infrastructure.permission.profile_permission_store import ProfilePermissionStore
from pagegate.interfaces.api.app import create_app
from pagegate.interfaces.api.middleware.auth import PrincipalMiddleware
from pagegate.interfaces.api.resources.access import AccessCheckResource
from pagegate.interfaces.api.resources.catalog import CatalogResource
from pagegate.interfaces.api.resources.health import HealthResource
from pagegate.interfaces.api.resources.permissions import UserPermissionsResource
from pagegate.interfaces.api.resources.users import UsersResource


class FlakyPermissionStore(ProfilePermissionStore):
    """Profile lookups work; override reads or writes can be made to fail."""

    def __init__(self, uow_factory, fail_reads: bool = False, fail_writes: bool = False) -> None:
        super().__init__(uow_factory)
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes

    async def read_override(self, user_id: int) -> str | None:
        if self.fail_reads:
            raise StoreUnavailable("override read timed out")
        return await super().read_override(user_id)

    async def write_override(self, user_id, override) -> None:
        if self.fail_writes:
            raise StoreUnavailable("override write timed out")
        await super().write_override(user_id, override)


def build_app(permission_store, templates, catalog):
    """Falcon ASGI app with every resource wired to permission_store."""
    resolver = PermissionResolver(permission_store, templates)

    def editor_factory() -> PermissionEditor:
        return PermissionEditor(resolver, permission_store)

    return create_app(
        health_resource=HealthResource(),
        catalog_resource=CatalogResource(catalog),
        users_resource=UsersResource(ListUsersUseCase(permission_store, resolver)),
        user_permissions_resource=UserPermissionsResource(
            permission_store, editor_factory, catalog
        ),
        access_check_resource=AccessCheckResource(AccessGuard(resolver)),
        middleware=[PrincipalMiddleware(permission_store)],
    )


@pytest.fixture
def app(permission_store, templates, catalog, admin, employee, manager):
    """App over the in-memory store, with three known profiles."""
    return build_app(permission_store, templates, catalog)


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def as_admin(admin) -> dict[str, str]:
    return {"X-User-Id": str(admin.id)}


@pytest.fixture
def as_employee(employee) -> dict[str, str]:
    return {"X-User-Id": str(employee.id)}
