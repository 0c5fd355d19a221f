"""Access check API resource."""

import falcon.asgi

from pagegate.application.use_cases.permission.access_guard import AccessGuard
from pagegate.domain.value_objects import Action, Role
from pagegate.interfaces.api.middleware.auth import current_principal
from pagegate.interfaces.api.resources.serializers import decision_media


class AccessCheckResource:
    """POST /v1/access/check - may the caller do action on page in station?"""

    def __init__(self, access_guard: AccessGuard) -> None:
        self._guard = access_guard

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        principal = current_principal(req, resp)
        if principal is None:
            return

        body = await req.get_media()
        try:
            page_key = body["page"]
            action = Action(body["action"])
            min_role = Role(body["min_role"]) if body.get("min_role") else None
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except (TypeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        decision = await self._guard.allow(
            principal,
            page_key,
            action,
            target_station=body.get("station"),
            min_role=min_role,
            require_all_stations=bool(body.get("require_all_stations", False)),
        )
        resp.media = decision_media(decision)
        resp.status = falcon.HTTP_200
