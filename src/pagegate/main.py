"""Application entry point and composition root."""

import falcon.asgi

from pagegate import __version__
from pagegate.application.use_cases.permission.access_guard import AccessGuard
from pagegate.application.use_cases.permission.edit_permissions import PermissionEditor
from pagegate.application.use_cases.permission.list_users import ListUsersUseCase
from pagegate.application.use_cases.permission.resolve_permissions import PermissionResolver
from pagegate.config import get_settings
from pagegate.domain.catalog import PageCatalog
from pagegate.domain.templates import RoleTemplateEngine
from pagegate.infrastructure.permission.profile_permission_store import ProfilePermissionStore
from pagegate.infrastructure.persistence.postgres.connection import create_pool
from pagegate.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from pagegate.interfaces.api.app import create_app
from pagegate.interfaces.api.middleware.auth import PrincipalMiddleware
from pagegate.interfaces.api.middleware.cors import CORSMiddleware
from pagegate.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from pagegate.interfaces.api.resources.access import AccessCheckResource
from pagegate.interfaces.api.resources.catalog import CatalogResource
from pagegate.interfaces.api.resources.health import HealthResource
from pagegate.interfaces.api.resources.permissions import UserPermissionsResource
from pagegate.interfaces.api.resources.users import UsersResource
from pagegate.logging_config import setup_logging


def main() -> None:
    """CLI entry point."""
    print(f"pagegate v{__version__}")


def create_pagegate_app() -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    logger = setup_logging(settings.log_level)

    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    catalog = PageCatalog.default()
    templates = RoleTemplateEngine(catalog)
    permission_store = ProfilePermissionStore(uow_factory)
    resolver = PermissionResolver(permission_store, templates)
    access_guard = AccessGuard(resolver)
    list_users = ListUsersUseCase(permission_store, resolver)

    def editor_factory() -> PermissionEditor:
        return PermissionEditor(resolver, permission_store)

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app = create_app(
        health_resource=HealthResource(pool),
        catalog_resource=CatalogResource(catalog),
        users_resource=UsersResource(list_users),
        user_permissions_resource=UserPermissionsResource(
            permission_store, editor_factory, catalog
        ),
        access_check_resource=AccessCheckResource(access_guard),
        middleware=[
            CORSMiddleware(cors_origins, user_header=settings.user_header),
            PoolLifespanMiddleware(pool),
            PrincipalMiddleware(permission_store, header_name=settings.user_header),
        ],
    )
    logger.info(
        "pagegate v%s ready (%s, %d pages)", __version__, settings.environment, len(catalog)
    )
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_pagegate_app(), host="0.0.0.0", port=8000)
