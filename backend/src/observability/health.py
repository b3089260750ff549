"""Health check utilities for LicenseFlow.

The validation engine has no storage or network dependencies, so health is
determined by whether the check pipeline is wired up.
"""

import time
from enum import Enum
from typing import Dict, Optional
from dataclasses import dataclass

from .logging_config import get_logger

logger = get_logger(__name__)

EXPECTED_CHECKS = frozenset({
    "date_overlap",
    "exclusivity",
    "scope_conflict",
    "budget",
    "ownership",
    "approval_requirements",
})


class HealthStatus(str, Enum):
    """Health check status enum."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"


@dataclass
class ComponentHealth:
    """Health status for a single component."""
    status: HealthStatus
    message: Optional[str] = None
    latency_ms: Optional[float] = None


def check_validation_engine_health(engine) -> ComponentHealth:
    """Check that the license validation engine has its full pipeline.

    Args:
        engine: LicenseValidationEngine instance

    Returns:
        ComponentHealth: Engine health status
    """
    start = time.time()
    names = {check.name for check in engine.checks}
    latency_ms = round((time.time() - start) * 1000, 2)

    missing = EXPECTED_CHECKS - names
    if missing:
        logger.error(f"Validation engine is missing checks: {sorted(missing)}")
        return ComponentHealth(
            status=HealthStatus.UNHEALTHY,
            message=f"Missing checks: {', '.join(sorted(missing))}",
            latency_ms=latency_ms
        )

    return ComponentHealth(
        status=HealthStatus.HEALTHY,
        message=f"{len(names)} checks registered",
        latency_ms=latency_ms
    )


def get_overall_health(components: Dict[str, ComponentHealth]) -> HealthStatus:
    """Determine overall health from component statuses.

    Args:
        components: Component name to ComponentHealth

    Returns:
        HealthStatus: UNHEALTHY if any component is unhealthy, DEGRADED if any
        is degraded, otherwise HEALTHY
    """
    statuses = [component.status for component in components.values()]
    if HealthStatus.UNHEALTHY in statuses:
        return HealthStatus.UNHEALTHY
    if HealthStatus.DEGRADED in statuses:
        return HealthStatus.DEGRADED
    return HealthStatus.HEALTHY
