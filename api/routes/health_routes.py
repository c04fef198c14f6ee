"""Liveness, readiness and component health endpoints."""

from fastapi import APIRouter, HTTPException, Request
from starlette import status

from core.database import (
    check_db_connection,
    comprehensive_health_check,
    find_missing_tables,
)
from schemas import DetailedHealthResponse, HealthResponse, PoolStatusResponse

SERVICE_NAME = "warehouse-api"

router = APIRouter(tags=["health"])


def _unavailable(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness endpoint. Does not touch the database."""
    return HealthResponse(status="healthy", service=SERVICE_NAME)


@router.get("/health/detailed", response_model=DetailedHealthResponse)
async def health_detailed(request: Request) -> DetailedHealthResponse:
    """Database reachability, schema presence and pool usage.

    Always returns 200; ``status`` is "unhealthy" when the database is down
    or any warehouse table is missing.
    """
    result = await comprehensive_health_check(request.app.state.engine)
    healthy = result["database"] and not result["missing_tables"]

    pool = result["pool"]
    return DetailedHealthResponse(
        status="healthy" if healthy else "unhealthy",
        service=SERVICE_NAME,
        database=result["database"],
        missing_tables=result["missing_tables"],
        pool=PoolStatusResponse(**pool._asdict()) if pool is not None else None,
    )


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={
        503: {
            "description": "Startup failed, database unreachable or schema missing",
            "content": {
                "application/json": {"example": {"detail": "Database unavailable"}}
            },
        }
    },
)
async def ready(request: Request) -> HealthResponse:
    """Readiness endpoint.

    Returns 200 only once startup has finished, the database answers, and
    every warehouse table exists.
    """
    init_error = getattr(request.app.state, "init_error", None)
    if init_error:
        raise _unavailable(f"Initialization failed: {init_error}")

    if not getattr(request.app.state, "init_done", False):
        raise _unavailable("Starting")

    engine = request.app.state.engine
    try:
        await check_db_connection(engine)
    except Exception as e:
        raise _unavailable("Database unavailable") from e

    missing = await find_missing_tables(engine)
    if missing:
        raise _unavailable(f"Schema not migrated: missing {', '.join(missing)}")

    return HealthResponse(status="ready", service=SERVICE_NAME)
