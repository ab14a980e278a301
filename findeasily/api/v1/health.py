# 📄 File: findeasily/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A checkup address that says whether the site and its database are working.
# 🧪 Purpose (Technical Summary):
# Liveness, database and event queue health endpoints for load balancers and monitoring.
# 🔗 Dependencies:
# FastAPI, DatabaseManager.health_check (app.state.database), AsyncioEventQueue (app.state.event_queue)
# 🔄 Connected Modules / Calls From:
# findeasily.api.v1.router

from datetime import datetime, timezone

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from findeasily.shared.config.settings import get_settings

health_router = APIRouter(tags=["Health Check"])


@health_router.get("/health", summary="Health check")
async def health_check(request: Request) -> JSONResponse:
    """
    Application and database status.

    Returns 503 when the database cannot be reached.
    """
    database = await request.app.state.database.health_check()
    healthy = database["status"] == "healthy"
    queue = request.app.state.event_queue
    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": get_settings().APP_VERSION,
            "components": {
                "database": database,
                "event_queue": {
                    "status": queue.status.value,
                    "pending": queue.pending,
                    "processed": queue.processed_count,
                    "failed": queue.failed_count,
                },
            },
        }
    )


@health_router.get("/health/live", summary="Liveness probe")
async def liveness_probe() -> Response:
    return Response(status_code=200, content="OK")
