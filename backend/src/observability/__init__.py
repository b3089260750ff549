"""Observability module for LicenseFlow.

Provides structured logging, metrics and health checks.
"""

from .logging_config import configure_logging, get_logger
from .metrics import (
    license_validations_total,
    license_check_issues_total,
    license_conflicts_total,
    license_validation_duration_seconds,
    record_validation_report,
)
from .request_id import request_id_var, get_request_id, set_request_id, generate_request_id
from .health import HealthStatus, ComponentHealth
from .middleware import RequestIDMiddleware

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Metrics
    "license_validations_total",
    "license_check_issues_total",
    "license_conflicts_total",
    "license_validation_duration_seconds",
    "record_validation_report",
    # Request ID
    "request_id_var",
    "get_request_id",
    "set_request_id",
    "generate_request_id",
    # Health
    "HealthStatus",
    "ComponentHealth",
    # Middleware
    "RequestIDMiddleware",
]
