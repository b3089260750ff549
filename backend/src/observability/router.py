"""Operational endpoints: Prometheus scrape target, health and readiness."""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from dependencies import get_validation_engine
from domain.licensing import LicenseValidationEngine
from .health import ComponentHealth, HealthStatus, check_validation_engine_health, get_overall_health
from .logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Observability"])


def _serialize(component: ComponentHealth) -> dict:
    return {
        "status": component.status.value,
        "message": component.message,
        "latency_ms": component.latency_ms,
    }


@router.get("/metrics", include_in_schema=False)
def metrics():
    """Prometheus text exposition of every registered collector."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@router.get(
    "/health",
    summary="Health check endpoint",
    description="Reports whether the license validation pipeline is fully wired",
)
def health_check(engine: LicenseValidationEngine = Depends(get_validation_engine)):
    """Component health with an overall status.

    Responds 503 when any component is unhealthy so load balancers stop
    routing to the instance.
    """
    components = {"validation_engine": check_validation_engine_health(engine)}
    overall = get_overall_health(components)

    if overall == HealthStatus.UNHEALTHY:
        logger.warning("Health check failed", extra={"outcome": overall.value})

    return JSONResponse(
        status_code=503 if overall == HealthStatus.UNHEALTHY else 200,
        content={
            "status": overall.value,
            "components": {name: _serialize(c) for name, c in components.items()},
        },
    )


@router.get(
    "/ready",
    summary="Readiness check endpoint",
    description="Readiness probe: the engine can accept validation requests",
)
def readiness_check(engine: LicenseValidationEngine = Depends(get_validation_engine)):
    engine_health = check_validation_engine_health(engine)

    if engine_health.status != HealthStatus.HEALTHY:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "message": engine_health.message},
        )

    return {
        "status": "ready",
        "message": engine_health.message,
    }
