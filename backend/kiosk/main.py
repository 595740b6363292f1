"""
Kiosk Management System - Backend API

Run with:
    uvicorn kiosk.main:app --reload
"""
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kiosk.api import customers, employees, products
from kiosk.bootstrap import ensure_schema_ready
from kiosk.container import ServiceContainer, build_services
from kiosk.core.config import settings
from kiosk.core.database import CONNECTION_TIMEOUT
from kiosk.core.exceptions import ConflictError, NotFoundError, StorageUnavailable, ValidationError

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the schema and build services once, unless a container was injected"""
    if getattr(app.state, "services", None) is None:
        if settings.INIT_SCHEMA_ON_STARTUP:
            ensure_schema_ready(settings)
        app.state.services = build_services(settings)
    yield
    app.state.services.close()


def _error(status_code: int, kind: str, exc: Exception, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "error": kind, "detail": str(exc), **extra},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map service errors to HTTP status codes"""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return _error(400, "validation_error", exc, field=exc.field)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error(404, "not_found", exc)

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        return _error(409, "conflict", exc, field=exc.field, value=exc.value)

    @app.exception_handler(StorageUnavailable)
    async def storage_unavailable_handler(request: Request, exc: StorageUnavailable):
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return _error(503, "storage_unavailable", exc)


def create_app(services: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Passing `services` skips schema preparation and backend wiring (tests).
    """
    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
        lifespan=lifespan,
    )
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(customers.router, prefix="/api/v1/customers", tags=["Customers"])
    app.include_router(products.router, prefix="/api/v1/products", tags=["Products"])
    app.include_router(employees.router, prefix="/api/v1/employees", tags=["Employees"])

    @app.get("/")
    def root():
        """Root endpoint - API status"""
        return {
            "message": "Kiosk Management API",
            "status": "online",
            "version": settings.API_VERSION,
        }

    @app.get("/health")
    def health(request: Request):
        """Health check endpoint - tests database connectivity"""
        container: ServiceContainer = request.app.state.services
        start_time = time.time()

        db_status = "connected"
        db_error = None
        try:
            container.ping()
        except StorageUnavailable as e:
            db_status = "disconnected"
            db_error = str(e)

        return {
            "status": "healthy" if db_status == "connected" else "degraded",
            "service": "kiosk-api",
            "version": settings.API_VERSION,
            "provider": container.provider.value,
            "database": {
                "status": db_status,
                "latency_ms": round((time.time() - start_time) * 1000, 2),
                "error": db_error,
                "connection_timeout_s": CONNECTION_TIMEOUT,
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("kiosk.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.API_DEBUG)
