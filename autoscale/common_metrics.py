"""
Prometheus request metrics for all microservices
"""
from fastapi import FastAPI, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, Counter, Histogram, generate_latest
from starlette.routing import Match
import logging
import time

logger = logging.getLogger(__name__)

HTTP_REQUESTS_TOTAL = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "route", "status"],
)

HTTP_REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "Duration of HTTP requests in seconds",
    ["method", "route", "status"],
    buckets=(0.1, 0.5, 1, 1.5, 2, 5),
)


def route_template(request: Request) -> str:
    """
    Matched route pattern (e.g. /products/{product_id}), or the raw path

    Must be called after the request went through the router, which leaves
    the matched route in the scope.
    """
    route = request.scope.get("route")
    if route is not None and getattr(route, "path", None):
        return route.path
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL and getattr(route, "path", None):
            return route.path
    return request.url.path


def setup_metrics(app: FastAPI):
    """Record every request and expose the registry on /metrics"""

    @app.middleware("http")
    async def record_request_metrics(request: Request, call_next):
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            labels = {
                "method": request.method,
                "route": route_template(request),
                "status": str(status),
            }
            HTTP_REQUESTS_TOTAL.labels(**labels).inc()
            HTTP_REQUEST_DURATION.labels(**labels).observe(time.perf_counter() - start)

    @app.get("/metrics", include_in_schema=False)
    def metrics():
        """Prometheus-compatible metrics"""
        return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)

    logger.info("Prometheus request metrics enabled")
