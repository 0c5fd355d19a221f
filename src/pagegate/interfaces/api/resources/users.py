"""User picker API resource."""

import falcon.asgi

from pagegate.application.use_cases.permission.list_users import ListUsersUseCase
from pagegate.domain.exceptions import StoreUnavailable
from pagegate.interfaces.api.middleware.auth import require_administrator


class UsersResource:
    """GET /v1/users - profiles with permission summaries (Administrator only)."""

    def __init__(self, list_users: ListUsersUseCase) -> None:
        self._list_users = list_users

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        if require_administrator(req, resp) is None:
            return

        active_only = req.get_param_as_bool("active_only", default=False)
        try:
            entries = await self._list_users.execute(
                active_only=active_only,
                search=req.get_param("search"),
                role=req.get_param("role"),
            )
        except StoreUnavailable:
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Profile store unavailable"}
            return

        resp.media = {
            "items": [
                {
                    "id": e.user.id,
                    "role": e.user.role,
                    "station": e.user.station,
                    "employee_id": e.user.employee_id,
                    "active": e.user.active,
                    "permission_summary": e.summary,
                }
                for e in entries
            ]
        }
        resp.status = falcon.HTTP_200
