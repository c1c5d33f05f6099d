from __future__ import annotations

import uuid
from collections.abc import Iterable
from time import perf_counter
from typing import Any, Callable

import structlog
from starlette.datastructures import MutableHeaders

from demo_admin.observability.metrics import InMemoryMetrics


class RequestContextMiddleware:
    """Per-request context for the CRUD API.

    Binds ``request_id``, ``path`` and ``method`` into structlog contextvars so
    the entity events logged while serving the request carry them, echoes the id
    in ``X-Request-ID``, and records ``http_requests_total`` / ``http_request_ms``
    on the app's own ``InMemoryMetrics``. Requests to ``excluded_metric_paths``
    (the metrics endpoint) are logged but not counted.
    """

    def __init__(
        self,
        app: Callable[..., Any],
        metrics: InMemoryMetrics,
        excluded_metric_paths: Iterable[str] = ("/api/metrics",),
    ) -> None:
        self.app = app
        self.metrics = metrics
        # Avoid self-observing the observability endpoints.
        self._excluded_metric_paths = set(excluded_metric_paths)

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid.uuid4())
        path = scope.get("path")
        method = scope.get("method")

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=path,
            method=method,
        )

        start = perf_counter()
        status_code: int = 500

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal status_code

            if message.get("type") == "http.response.start":
                status_code = int(message.get("status", 500))
                headers = MutableHeaders(scope=message)
                headers["X-Request-ID"] = request_id

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            elapsed_ms = (perf_counter() - start) * 1000.0

            # Update metrics first so they update even if logging misbehaves.
            if path not in self._excluded_metric_paths:
                self.metrics.observe_http_request(elapsed_ms=elapsed_ms)

            structlog.get_logger("access").info(
                "http_request",
                status_code=status_code,
                elapsed_ms=round(elapsed_ms, 2),
            )

            structlog.contextvars.clear_contextvars()
