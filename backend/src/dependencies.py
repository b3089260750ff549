"""Global FastAPI dependencies.

This module provides:
- get_validation_engine: shared, stateless LicenseValidationEngine instance
"""

from functools import lru_cache

from domain.licensing import LicenseValidationEngine


@lru_cache()
def get_validation_engine() -> LicenseValidationEngine:
    """Get the process-wide validation engine.

    The engine holds no per-call state, so a single instance is safe to
    share across concurrent requests. Tests override this dependency via
    app.dependency_overrides.
    """
    return LicenseValidationEngine()
