# app/main.py
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.shared.config import settings, AppEnv
from app.shared.container import container
from app.shared.logging_setup import init_logging
from app.shared.observability import setup_telemetry

from app.adapters.api.routers import health, provinces, provincial_connections

init_logging()
logger = structlog.get_logger()

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application Lifecycle Manager."""
    # 1. Initialize OpenTelemetry
    setup_telemetry(settings.OTEL_SERVICE_NAME, console_export=settings.OTEL_CONSOLE_EXPORT)

    logger.info("app_starting", name=settings.APP_NAME, env=settings.ENV)

    # 2. Warm the static tables so load-time validation is logged at boot
    table = container.route_table()
    logger.info(
        "route_data_ready",
        provinces=len(container.connectivity_graph().provinces()),
        routes=len(list(table.keys())),
        rejected=len(table.rejected()),
    )

    yield

    logger.info("app_stopping")

def create_app() -> FastAPI:
    """Factory function to create the FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Provincial road connectivity and route search (English / Dari / Pashto)",
        docs_url="/docs" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url="/redoc" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        lifespan=lifespan
    )

    # 1. Wire Dependency Injection
    container.wire(modules=["app.adapters.api.dependencies"])

    # 2. CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 3. Global Exception Handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail
        if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
            message = "Route not found"
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": message}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"success": False, "message": "Invalid request", "errors": jsonable_encoder(exc.errors())}
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        content = {"success": False, "message": "Internal server error"}
        if settings.EXPOSE_ERRORS:
            content["error"] = str(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=content
        )

    # 4. Service Banner
    @app.get("/", tags=["Health"])
    async def root():
        return {
            "message": f"{settings.APP_NAME} is running!",
            "version": settings.APP_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    # 5. Mount Routes
    app.include_router(health.router, prefix="/api")
    app.include_router(provinces.router, prefix="/api")
    app.include_router(provincial_connections.router, prefix="/api")

    return app

# Entry point for Uvicorn
app = create_app()
