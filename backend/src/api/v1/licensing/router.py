"""License validation API router.

Exposes the advisory pre-check surface: callers post a candidate license
together with the pre-fetched context and get the full validation report
back. Nothing is persisted; a failing report is a normal 200 response.
"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, status

from dependencies import get_validation_engine
from domain.licensing import LicenseValidationEngine, ValidationContextError
from observability.metrics import (
    license_validation_duration_seconds,
    license_validations_total,
    record_validation_report,
)
from schemas.licensing import LicenseValidationRequest, LicenseValidationResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/licenses", tags=["licenses"])


@router.post("/validate", response_model=LicenseValidationResponse)
def validate_license(
    request: LicenseValidationRequest,
    engine: LicenseValidationEngine = Depends(get_validation_engine)
):
    """Validate a proposed license against existing grants and ownership.

    Runs the date overlap, exclusivity, scope conflict, budget, ownership and
    approval requirement checks. The report is advisory: the license-creation
    flow must still serialize creation per asset.

    Args:
        request: Candidate license and validation context
        engine: License validation engine

    Returns:
        Validation report with per-check errors, warnings and details

    Raises:
        HTTPException 422: If the context is inconsistent with the candidate
    """
    candidate = request.candidate.to_domain()
    context = request.context.to_domain()

    start = time.perf_counter()
    try:
        report = engine.validate(candidate, context)
    except ValidationContextError as e:
        license_validations_total.labels(
            license_type=candidate.license_type.value, outcome="invalid_context"
        ).inc()
        logger.warning(
            f"Rejected license validation for asset {candidate.ip_asset_id}: {e}",
            extra={"asset_id": candidate.ip_asset_id, "brand_id": candidate.brand_id}
        )
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": "invalid_context", "message": str(e)}
        )
    license_validation_duration_seconds.observe(time.perf_counter() - start)

    record_validation_report(candidate.license_type.value, report)

    return LicenseValidationResponse.model_validate(report.to_dict())
