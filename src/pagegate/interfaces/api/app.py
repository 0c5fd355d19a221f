"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from pagegate.interfaces.api.resources.access import AccessCheckResource
from pagegate.interfaces.api.resources.catalog import CatalogResource
from pagegate.interfaces.api.resources.health import HealthResource
from pagegate.interfaces.api.resources.permissions import UserPermissionsResource
from pagegate.interfaces.api.resources.users import UsersResource

logger = logging.getLogger(__name__)


async def log_exception(req, resp, ex, params):
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    health_resource: HealthResource,
    catalog_resource: CatalogResource,
    users_resource: UsersResource,
    user_permissions_resource: UserPermissionsResource,
    access_check_resource: AccessCheckResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/catalog", catalog_resource)
    app.add_route("/v1/users", users_resource)
    app.add_route("/v1/users/{user_id:int}/permissions", user_permissions_resource)
    app.add_route("/v1/access/check", access_check_resource)
    return app
