"""ASGI middleware: security headers and request logging."""

from __future__ import annotations

import time
import uuid

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from core.logger import bind_contextvars, clear_contextvars, get_logger
from core.wide_event import clear_wide_event, get_wide_event, init_wide_event

logger = get_logger(__name__)

REQUEST_ID_HEADER = "x-request-id"
DURATION_HEADER = "x-request-duration-ms"


class SecurityHeadersMiddleware:
    """Adds security headers for a JSON-only API."""

    SECURITY_HEADERS: list[tuple[bytes, bytes]] = [
        (b"x-content-type-options", b"nosniff"),
        (b"x-frame-options", b"DENY"),
        (b"referrer-policy", b"no-referrer"),
    ]

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_wrapper(message: Message) -> None:
            if message.get("type") == "http.response.start":
                headers: list[tuple[bytes, bytes]] = list(message.get("headers", []))
                headers.extend(self.SECURITY_HEADERS)
                message["headers"] = headers
            await send(message)

        await self.app(scope, receive, send_wrapper)


class RequestLoggingMiddleware:
    """Emits one ``request.completed`` log line per request.

    - Assigns a request id (reuses an incoming X-Request-Id header)
    - Binds it to structlog contextvars so every log line carries it
    - Adds X-Request-Id and X-Request-Duration-Ms response headers
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start_time = time.perf_counter()
        method = scope.get("method", "UNKNOWN")
        path = scope.get("path", "")
        request_id = _incoming_request_id(scope) or str(uuid.uuid4())

        clear_contextvars()
        bind_contextvars(request_id=request_id)
        state = scope.setdefault("state", {})
        state["request_id"] = request_id
        state["request_start"] = start_time
        wide_event = init_wide_event()
        wide_event["http_method"] = method
        wide_event["http_path"] = path

        response_status: int | None = None

        async def send_wrapper(message: Message) -> None:
            nonlocal response_status

            if message.get("type") == "http.response.start":
                response_status = int(message.get("status", 0))
                headers: list[tuple[bytes, bytes]] = list(message.get("headers", []))
                headers.extend(
                    (name.encode(), value.encode())
                    for name, value in request_headers(scope).items()
                )
                message["headers"] = headers

            elif message.get("type") == "http.response.body" and not message.get(
                "more_body", False
            ):
                _emit(scope, path, start_time, response_status)

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            event = get_wide_event()
            if event:
                # The 500 response may already have been sent and logged
                event["exception_type"] = type(exc).__name__
                _emit(
                    scope, path, start_time, response_status or 500, outcome="exception"
                )
            raise
        finally:
            clear_contextvars()


def request_headers(scope: Scope) -> dict[str, str]:
    """Request id and elapsed-time headers for the response to ``scope``.

    Also used by the 500 handler, whose response is sent outside this
    middleware.
    """
    state = scope.get("state") or {}
    if "request_id" not in state:
        return {}
    duration_ms = (time.perf_counter() - state["request_start"]) * 1000
    return {
        REQUEST_ID_HEADER: state["request_id"],
        DURATION_HEADER: f"{duration_ms:.2f}",
    }


def _incoming_request_id(scope: Scope) -> str | None:
    for name, value in scope.get("headers", []):
        if name == REQUEST_ID_HEADER.encode():
            return value.decode("latin-1")[:64] or None
    return None


def _emit(
    scope: Scope,
    path: str,
    start_time: float,
    status_code: int | None,
    *,
    outcome: str | None = None,
) -> None:
    event = get_wide_event()
    if not event:
        # Already emitted for this request
        return

    route = scope.get("route")
    duration_ms = (time.perf_counter() - start_time) * 1000
    event["http_route"] = getattr(route, "path", None) or path
    event["http_status_code"] = status_code
    event["duration_ms"] = round(duration_ms, 2)
    event["outcome"] = outcome or (
        "success" if status_code and status_code < 400 else "error"
    )

    if outcome == "exception" or (status_code is not None and status_code >= 500):
        logger.error("request.completed", **event)
    else:
        logger.info("request.completed", **event)

    clear_wide_event()
