"""Main FastAPI application for Day Tally."""

import logging
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .api.routes import router as api_router
from .charts.projection import LabelStyle
from .config import Settings, get_settings
from .database.connection import DatabaseManager
from .database.migrations import create_tables
from .dates import Clock, today_iso
from .observability.logging import configure_logging, get_request_id, set_request_id
from .repositories.day_counters import DataRepository
from .repositories.tasks import TaskFieldOptions, TaskRepository
from .services.statistics import StatisticsController
from .services.tally import DailyTally

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, clock: Clock = today_iso) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Settings to use instead of the cached environment settings.
        clock: Source of today's ``yyyy-MM-dd`` date.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        configure_logging(
            environment=settings.environment,
            log_level="DEBUG" if settings.debug else settings.log_level,
        )

        db = DatabaseManager(settings.database_url, echo=settings.database_echo)
        db.initialize()
        await create_tables(db)
        app.state.db = db

        repository = DataRepository(db, label_format=settings.date_label_format)
        app.state.tally = DailyTally(
            StatisticsController(repository),
            clock=clock,
            min_labels=settings.chart_min_labels,
            label_style=LabelStyle(
                angle=settings.chart_label_angle,
                height=settings.chart_label_height,
                text_size=settings.chart_label_text_size,
            ),
        )
        app.state.task_repository = TaskRepository(
            db, TaskFieldOptions.from_settings(settings)
        )

        await app.state.tally.start()

        logger.info("%s v%s started", settings.app_name, settings.app_version)
        logger.info("Environment: %s", settings.environment)

        yield

        # Shutdown
        logger.info("Shutting down %s...", settings.app_name)
        await db.close()
        logger.info("%s shutdown complete", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Task tracking with a daily statistics chart",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            set_request_id(None)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            "Storage failure on %s %s",
            request.method,
            request.url.path,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Storage failure", "request_id": get_request_id()},
        )

    # Include API routes
    app.include_router(api_router, prefix="/api/v1")

    # Root endpoint
    @app.get("/")
    async def root():
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment,
            "endpoints": {
                "health": "/health",
                "docs": "/docs" if settings.debug else "Disabled in production",
                "api": {
                    "statistics": "/api/v1/statistics",
                    "tasks": "/api/v1/tasks",
                },
            },
            "usage": {
                "increment_today": "POST /api/v1/statistics/increment",
                "chart": "GET /api/v1/statistics/chart",
                "list_tasks": "GET /api/v1/tasks",
                "create_task": "POST /api/v1/tasks",
                "delete_task": "DELETE /api/v1/tasks/{task_id}",
            },
        }

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    @app.get("/health/ready")
    async def health_ready(request: Request):
        """Readiness check: the database answers."""
        try:
            async with request.app.state.db.session() as session:
                await session.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            return JSONResponse(
                status_code=503,
                content={"status": "not_ready", "checks": {"database": f"error: {e}"}},
            )
        return {"status": "ready", "checks": {"database": "ok"}}

    if settings.enable_metrics:
        @app.get("/metrics")
        async def metrics_endpoint():
            """Prometheus metrics endpoint."""
            from .observability.metrics import generate_metrics_text
            return PlainTextResponse(
                generate_metrics_text(),
                media_type="text/plain; version=0.0.4; charset=utf-8",
            )

    return app


def run():
    """Serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "day_tally.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
