"""FastAPI application for the Warehouse API."""

import asyncio
import logging
import subprocess
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import fastapi
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import get_settings
from core.database import (
    create_engine,
    create_session_maker,
    dispose_engine,
    init_db,
)
from core.logger import configure_logging
from core.middleware import (
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
    request_headers,
)
from routes import (
    carries_router,
    employees_router,
    health_router,
    inbound_orders_router,
    localities_router,
    product_batches_router,
    product_records_router,
    products_router,
    sections_router,
    sellers_router,
    warehouses_router,
)

configure_logging()
logger = logging.getLogger(__name__)

# Validation failures at these locations mean a malformed identifier or an
# unparsable body, answered with 400 instead of 422. A bare ("body",)
# location means the body itself is not a JSON object.
_BAD_REQUEST_LOCATIONS = {"path", "query"}
_BAD_REQUEST_ERROR_TYPES = {"json_invalid"}
_WHOLE_BODY = ("body",)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for unhandled exceptions (including store failures)."""
    logger.exception(
        "unhandled.exception",
        extra={
            "exc_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected error occurred. Please try again."},
        headers=request_headers(request.scope),
    )


def _validation_status_code(errors: list[dict]) -> int:
    for error in errors:
        location = tuple(error.get("loc") or _WHOLE_BODY)
        if (
            location[0] in _BAD_REQUEST_LOCATIONS
            or location == _WHOLE_BODY
            or error.get("type") in _BAD_REQUEST_ERROR_TYPES
        ):
            return 400
    return 422


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handler for request validation errors.

    400 for malformed ids, unparsable JSON and bodies that are not objects;
    422 for missing, mistyped or zero-valued required fields.
    """
    if not isinstance(exc, RequestValidationError):
        return JSONResponse(status_code=500, content={"detail": "Unexpected error"})

    errors = list(exc.errors())
    status_code = _validation_status_code(errors)

    logger.warning(
        "request.validation_error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": status_code,
            "error_count": len(errors),
        },
    )
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": [
                {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
                for e in errors
            ]
        },
    )


async def _run_alembic_migrations() -> None:
    """Run Alembic migrations in a subprocess.

    psycopg2's connection pool cleanup deadlocks inside
    asyncio.to_thread when uvloop is the event loop.
    """
    cmd = [sys.executable, "-m", "cli", "migrate"]
    cwd = Path(__file__).parent

    result = await asyncio.to_thread(
        lambda: subprocess.run(
            cmd, cwd=cwd, capture_output=True, text=True, timeout=120
        )
    )

    if result.returncode != 0:
        stderr = result.stderr.strip()
        logger.error("migrations.failed", extra={"stderr": stderr})
        raise RuntimeError(f"Alembic migration failed:\n{stderr}")

    logger.info("migrations.complete")


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    """Create the single DB engine at startup, dispose on shutdown."""
    settings = get_settings()
    app.state.engine = create_engine()
    app.state.session_maker = create_session_maker(app.state.engine)

    app.state.init_done = False
    app.state.init_error = None

    try:
        async with asyncio.timeout(60):
            await init_db(app.state.engine)

        if settings.run_migrations_on_startup:
            async with asyncio.timeout(120):
                await _run_alembic_migrations()

        app.state.init_done = True
        logger.info("init.complete")
    except TimeoutError:
        logger.error("init.timeout", extra={"init_done": app.state.init_done})
        raise RuntimeError("Application startup timed out")
    except Exception as e:
        app.state.init_error = str(e)
        logger.error("init.failed", extra={"error": str(e)}, exc_info=True)
        raise

    try:
        yield
    finally:
        await dispose_engine(app.state.engine)


_settings = get_settings()

app = fastapi.FastAPI(
    title="Warehouse API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if _settings.docs_enabled else None,
    redoc_url="/redoc" if _settings.docs_enabled else None,
    openapi_url="/openapi.json" if _settings.docs_enabled else None,
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(SecurityHeadersMiddleware)

if _settings.allowed_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-Id"],
        expose_headers=["X-Request-Duration-Ms", "X-Request-Id"],
        max_age=600,
    )

# Outermost, so the request id and timing cover every other middleware.
app.add_middleware(RequestLoggingMiddleware)

app.include_router(health_router)
app.include_router(warehouses_router)
app.include_router(sections_router)
app.include_router(sellers_router)
app.include_router(products_router)
app.include_router(product_batches_router)
app.include_router(product_records_router)
app.include_router(employees_router)
app.include_router(inbound_orders_router)
app.include_router(localities_router)
app.include_router(carries_router)
