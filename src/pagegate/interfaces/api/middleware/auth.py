"""Principal middleware - resolves the gateway-authenticated caller to a profile."""

import logging

import falcon
import falcon.asgi

from pagegate.application.ports import PermissionStore
from pagegate.application.use_cases.permission.access_guard import meets_role
from pagegate.domain.entities import Principal
from pagegate.domain.exceptions import StoreUnavailable
from pagegate.domain.value_objects import Role

logger = logging.getLogger(__name__)


class PrincipalMiddleware:
    """Sets req.context.principal from the caller id header, or None.

    Authentication happens upstream; this only maps the trusted id to a profile.
    """

    def __init__(self, permission_store: PermissionStore, header_name: str = "X-User-Id") -> None:
        self._store = permission_store
        self._header = header_name

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Look up the caller's profile."""
        req.context.principal = None
        raw_id = req.get_header(self._header)
        if not raw_id:
            return
        try:
            user_id = int(raw_id)
        except ValueError:
            logger.info("Ignoring non-numeric %s header", self._header)
            return
        try:
            profile = await self._store.get_profile(user_id)
        except StoreUnavailable as e:
            logger.warning("Cannot resolve caller %s: %s", user_id, e)
            raise falcon.HTTPServiceUnavailable(description="Profile store unavailable") from e
        if profile:
            req.context.principal = profile.to_principal()


def current_principal(req: falcon.asgi.Request, resp: falcon.asgi.Response) -> Principal | None:
    """Caller principal, or None after setting a 401 response."""
    principal = getattr(req.context, "principal", None)
    if not principal:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
        return None
    return principal


def require_administrator(
    req: falcon.asgi.Request, resp: falcon.asgi.Response
) -> Principal | None:
    """Caller principal if Administrator, else None after setting 401/403."""
    principal = current_principal(req, resp)
    if principal is None:
        return None
    if not meets_role(principal, Role.ADMINISTRATOR):
        resp.status = falcon.HTTP_403
        resp.media = {
            "error": "Permission denied",
            "kind": "insufficient_role",
            "reason": "Permission management requires Administrator role.",
        }
        return None
    return principal
