"""
Product Service - Main FastAPI Application
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
import logging

from autoscale.common_logging import setup_logging
from autoscale.common_instrumentation import setup_opentelemetry, instrument_fastapi
from autoscale.common_metrics import setup_metrics
from autoscale.product_service.api.routes import router
from autoscale.product_service.db.store import init_store
from autoscale.product_service.models.schemas import HealthResponse
from autoscale.product_service.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the product service with its own in-memory store"""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown events"""
        logger.info(f"Starting {settings.service_name}")
        logger.info(f"Environment: {settings.environment}")

        if settings.otel_enabled:
            setup_opentelemetry(
                service_name=settings.otel_service_name or settings.service_name,
                otlp_endpoint=settings.otel_endpoint,
                enabled=settings.otel_enabled
            )

        logger.info(f"{settings.service_name} started successfully")

        yield

        logger.info(f"Shutting down {settings.service_name}")

    app = FastAPI(
        title="Product Service",
        description="Microservice for managing the product catalog",
        version=settings.service_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.product_store = init_store(seed=settings.seed_sample_data)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_metrics(app)

    if settings.otel_enabled:
        instrument_fastapi(app)

    app.include_router(router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Root endpoint"""
        return "Hello World! Product Service is running."

    @app.get("/ping", response_class=PlainTextResponse)
    async def ping():
        return "Ping!"

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint (liveness probe)"""
        return HealthResponse(
            status="healthy",
            service=settings.service_name,
            version=settings.service_version,
            timestamp=datetime.now(timezone.utc),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    return app


app = create_app()


def run():
    """Console entry point"""
    import uvicorn

    setup_logging(
        service_name=default_settings.service_name,
        log_level=default_settings.log_level,
        log_format=default_settings.log_format
    )

    uvicorn.run(
        "autoscale.product_service.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
        log_level=default_settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
