"""Health check endpoints."""

import falcon
import falcon.asgi

from fauxledger.infrastructure.persistence.memory import InMemoryDatabase


class HealthResource:
    """Liveness and readiness endpoints."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._database = database

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - ready once the seeded store exists."""
        if self._database is None:
            resp.media = {"status": "unavailable"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready", "documents": self._database.documents.count()}
        resp.status = falcon.HTTP_200
