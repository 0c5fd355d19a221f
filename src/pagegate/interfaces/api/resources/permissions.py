"""Permission editing API resources."""

import logging
from collections.abc import Callable

import falcon.asgi

from pagegate.application.ports import PermissionStore
from pagegate.application.use_cases.permission.edit_permissions import PermissionEditor
from pagegate.domain.catalog import PageCatalog
from pagegate.domain.entities import Principal
from pagegate.domain.exceptions import NotFound, StoreUnavailable, ValidationError
from pagegate.domain.value_objects import Action, BulkMode
from pagegate.interfaces.api.middleware.auth import require_administrator
from pagegate.interfaces.api.resources.serializers import matrix_media

logger = logging.getLogger(__name__)


async def apply_operation(
    editor: PermissionEditor, op: dict, permission_store: PermissionStore
) -> None:
    """Apply one editor operation from a request body."""
    try:
        kind = op["op"]
        if kind == "toggle":
            editor.toggle_cell(op["page"], Action(op["action"]), bool(op["value"]))
        elif kind == "apply_template":
            editor.apply_role_template(op["role"])
        elif kind == "bulk_group":
            editor.bulk_apply_to_group(op["group"], BulkMode(op["mode"]))
        elif kind == "bulk_page":
            editor.bulk_apply_to_page(op["page"], BulkMode(op["mode"]))
        elif kind == "copy_from":
            source = await permission_store.get_profile(int(op["user_id"]))
            if source is None:
                raise NotFound(f"User {op['user_id']} not found")
            await editor.copy_from_user(source.to_principal())
        else:
            raise ValidationError(f"Unknown operation: {kind}")
    except KeyError as e:
        raise ValidationError(f"Missing required field: {e}") from e
    except (TypeError, ValueError) as e:
        raise ValidationError(str(e)) from e


class UserPermissionsResource:
    """GET/POST/DELETE /v1/users/{user_id}/permissions (Administrator only)."""

    def __init__(
        self,
        permission_store: PermissionStore,
        editor_factory: Callable[[], PermissionEditor],
        catalog: PageCatalog,
    ) -> None:
        self._store = permission_store
        self._editor_factory = editor_factory
        self._catalog = catalog

    async def _target(self, user_id: int, resp: falcon.asgi.Response) -> Principal | None:
        profile = await self._store.get_profile(user_id)
        if profile is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": f"User {user_id} not found"}
            return None
        return profile.to_principal()

    def _session_media(self, target: Principal, editor: PermissionEditor) -> dict:
        return {
            "user_id": target.id,
            "role": target.role,
            "station": target.station,
            "active_template": editor.active_template,
            "warnings": editor.warnings,
            "permissions": matrix_media(editor.draft, self._catalog),
        }

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: int
    ) -> None:
        """Effective permissions of a user."""
        if require_administrator(req, resp) is None:
            return
        try:
            target = await self._target(user_id, resp)
        except StoreUnavailable:
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Profile store unavailable"}
            return
        if target is None:
            return

        editor = self._editor_factory()
        resolution = await editor.load(target)
        media = self._session_media(target, editor)
        media["source"] = resolution.source.value
        resp.media = media
        resp.status = falcon.HTTP_200

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: int
    ) -> None:
        """Apply a batch of editor operations and save the result."""
        actor = require_administrator(req, resp)
        if actor is None:
            return

        body = await req.get_media()
        operations = body.get("operations") if isinstance(body, dict) else None
        if not isinstance(operations, list) or not operations:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Body must contain a non-empty 'operations' list"}
            return

        try:
            target = await self._target(user_id, resp)
            if target is None:
                return
            editor = self._editor_factory()
            resolution = await editor.load(target)
            if resolution is None or resolution.store_unavailable:
                # draft is the role-template fallback, not the stored override
                raise StoreUnavailable(f"Stored permissions of user {user_id} could not be read")
            for op in operations:
                if not isinstance(op, dict):
                    raise ValidationError("Each operation must be an object")
                await apply_operation(editor, op, self._store)
            await editor.save(target, actor=actor)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        except StoreUnavailable:
            logger.error("Saving permissions for user %s failed: store unavailable", user_id)
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Permissions were not saved: profile store unavailable"}
            return

        resp.media = self._session_media(target, editor)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: int
    ) -> None:
        """Clear the override so the user falls back to the role template."""
        actor = require_administrator(req, resp)
        if actor is None:
            return
        try:
            target = await self._target(user_id, resp)
            if target is None:
                return
            editor = self._editor_factory()
            await editor.revert_to_role_default(target, actor=actor)
        except StoreUnavailable:
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Permissions were not reset: profile store unavailable"}
            return
        resp.status = falcon.HTTP_204
