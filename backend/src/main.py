"""LicenseFlow Backend - FastAPI application

Serves the advisory license pre-check used by the creator/brand licensing
marketplace before a license is created.

Wiring done here:
- structured logging from settings
- request ID correlation and CORS middleware
- error envelopes for malformed requests, unusable contexts and crashes
- licensing and observability routers
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import Settings, get_settings
from domain.licensing import LicenseValidationError
from observability.logging_config import configure_logging
from observability.middleware import RequestIDMiddleware
from observability.request_id import REQUEST_ID_HEADER
from observability.router import router as observability_router
from api.v1.licensing.router import router as licensing_router

settings = get_settings()
configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown; the engine itself needs no warm-up."""
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} starting ({settings.ENVIRONMENT})")
    if settings.DEBUG:
        logger.info("Debug mode enabled")

    yield

    logger.info(f"{settings.APP_NAME} shutting down")


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed candidate or context payload: 422 with field-level errors."""
    logger.warning(f"Rejected malformed payload on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "message": "Request payload is not a valid license validation request",
            "details": jsonable_encoder(exc.errors()),
        },
    )


async def license_validation_handler(request: Request, exc: LicenseValidationError) -> JSONResponse:
    """Engine faults that escaped a router (unusable context)."""
    logger.warning(f"License validation fault on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "invalid_context", "message": str(exc)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else is a 500; the traceback goes to the log only."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "message": "License validation failed unexpectedly. Please retry later.",
        },
    )


# =============================================================================
# APPLICATION FACTORY
# =============================================================================

def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the FastAPI application.

    Interactive docs are disabled in production.
    """
    docs_enabled = not app_settings.is_production

    application = FastAPI(
        title=app_settings.APP_NAME,
        description="License validation and conflict detection for creator/brand licensing",
        version=app_settings.APP_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )

    application.add_middleware(RequestIDMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    application.add_exception_handler(RequestValidationError, request_validation_handler)
    application.add_exception_handler(LicenseValidationError, license_validation_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    application.include_router(observability_router)
    application.include_router(licensing_router, prefix="/api/v1")

    @application.get("/", include_in_schema=False)
    async def root() -> dict[str, Any]:
        return {
            "name": app_settings.APP_NAME,
            "version": app_settings.APP_VERSION,
            "docs": "/docs" if docs_enabled else None,
        }

    @application.get("/api/v1", include_in_schema=False)
    async def api_root() -> dict[str, Any]:
        return {
            "version": "v1",
            "endpoints": {"license_validation": "/api/v1/licenses/validate"},
        }

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )
