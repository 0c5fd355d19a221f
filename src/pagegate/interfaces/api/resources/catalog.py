"""Catalog API resource."""

import falcon.asgi

from pagegate.domain.catalog import PageCatalog
from pagegate.domain.value_objects import Action


class CatalogResource:
    """GET /v1/catalog - page groups and the action vocabulary."""

    def __init__(self, catalog: PageCatalog) -> None:
        self._catalog = catalog

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {
            "groups": [
                {
                    "name": group,
                    "pages": [
                        {"key": p.key, "label": p.label, "description": p.description}
                        for p in self._catalog.pages_in_group(group)
                    ],
                }
                for group in self._catalog.groups()
            ],
            "actions": [
                {"key": a.value, "label": a.label, "description": a.description}
                for a in Action
            ],
        }
        resp.status = falcon.HTTP_200
