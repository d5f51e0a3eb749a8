"""Health Checks: liveness and database readiness.

Invariants:
    - GET /health/ is 200 whenever the process serves requests
    - GET /health/ready is 503 until the database answers
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from customer_service.infrastructure import database

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": "customer-service"}


@router.get("/ready")
async def readiness():
    # read at call time: the manager is created by the lifespan
    manager = database.db_manager
    if manager is not None and await manager.health_check():
        return {"status": "ready", "checks": {"database": "healthy"}}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "checks": {"database": "unavailable"}},
    )
