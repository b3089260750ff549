"""Pydantic Schemas for LicenseFlow API"""

from .licensing import (
    LicenseCandidateSchema,
    ValidationContextSchema,
    LicenseValidationRequest,
    LicenseValidationResponse,
    CheckResultResponse,
    ConflictResponse,
)

__all__ = [
    "LicenseCandidateSchema",
    "ValidationContextSchema",
    "LicenseValidationRequest",
    "LicenseValidationResponse",
    "CheckResultResponse",
    "ConflictResponse",
]
