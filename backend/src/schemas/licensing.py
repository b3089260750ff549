"""Pydantic schemas for the license validation API

Request models mirror the licensing domain types and convert into them via
to_domain(); response models are built from ValidationReport.to_dict().
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.licensing import (
    AssetStatus,
    AttributionTerms,
    Brand,
    CutdownTerms,
    ExclusivityTerms,
    ExistingLicense,
    IPAsset,
    LicenseCandidate,
    LicenseScope,
    LicenseStatus,
    LicenseType,
    MediaScope,
    OwnershipRecord,
    OwnershipType,
    PlacementScope,
    TerritoryScope,
    ValidationContext,
)
from domain.licensing.models import as_utc
from domain.licensing.policy import MAX_REV_SHARE_BPS


# ============================================================================
# Scope Schemas
# ============================================================================

class MediaSchema(BaseModel):
    digital: bool = False
    print: bool = False
    broadcast: bool = False
    ooh: bool = False

    model_config = ConfigDict(extra='forbid')


class PlacementSchema(BaseModel):
    social: bool = False
    website: bool = False
    email: bool = False
    paid_ads: bool = False
    packaging: bool = False

    model_config = ConfigDict(extra='forbid')


class GeographicSchema(BaseModel):
    territories: List[str] = Field(default_factory=list, description='ISO country codes or "GLOBAL"')


class ExclusivitySchema(BaseModel):
    category: Optional[str] = Field(None, description="Exclusivity category, e.g. Fashion")
    competitors: List[str] = Field(default_factory=list, description="Blocked competitor brand IDs")


class AttributionSchema(BaseModel):
    required: bool = False
    format: Optional[str] = None


class CutdownsSchema(BaseModel):
    allow_edits: bool = False
    max_duration: Optional[int] = Field(None, description="Maximum video duration in seconds")
    aspect_ratios: List[str] = Field(default_factory=list)


class LicenseScopeSchema(BaseModel):
    """Usage scope: media, placement, geography, exclusivity, attribution, cutdowns"""
    media: MediaSchema = Field(default_factory=MediaSchema)
    placement: PlacementSchema = Field(default_factory=PlacementSchema)
    geographic: Optional[GeographicSchema] = None
    exclusivity: Optional[ExclusivitySchema] = None
    attribution: Optional[AttributionSchema] = None
    cutdowns: Optional[CutdownsSchema] = None

    def to_domain(self) -> LicenseScope:
        exclusivity = self.exclusivity or ExclusivitySchema()
        attribution = self.attribution or AttributionSchema()
        cutdowns = self.cutdowns or CutdownsSchema()
        category = exclusivity.category.strip() if exclusivity.category else None

        return LicenseScope(
            media=MediaScope(**self.media.model_dump()),
            placement=PlacementScope(**self.placement.model_dump()),
            territory=TerritoryScope.from_codes(
                self.geographic.territories if self.geographic else []
            ),
            exclusivity=ExclusivityTerms(
                category=category or None,
                competitors=frozenset(exclusivity.competitors),
            ),
            attribution=AttributionTerms(
                required=attribution.required,
                format=attribution.format,
            ),
            cutdowns=CutdownTerms(
                allow_edits=cutdowns.allow_edits,
                max_duration_seconds=cutdowns.max_duration,
                aspect_ratios=tuple(cutdowns.aspect_ratios),
            ),
        )


# ============================================================================
# Candidate / Context Schemas
# ============================================================================

class LicenseCandidateSchema(BaseModel):
    """Proposed license to validate"""
    ip_asset_id: str = Field(..., min_length=1)
    brand_id: str = Field(..., min_length=1)
    license_type: LicenseType
    start_date: datetime
    end_date: datetime
    fee_cents: int = 0
    rev_share_bps: int = Field(0, ge=0, le=MAX_REV_SHARE_BPS, description="Revenue share in basis points")
    scope: LicenseScopeSchema = Field(default_factory=LicenseScopeSchema)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    replaces_license_id: Optional[str] = Field(
        None, description="License being amended or renewed; excluded from conflict checks"
    )

    @field_validator('start_date', 'end_date')
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        return as_utc(v)

    def to_domain(self) -> LicenseCandidate:
        return LicenseCandidate(
            ip_asset_id=self.ip_asset_id,
            brand_id=self.brand_id,
            license_type=self.license_type,
            start_date=self.start_date,
            end_date=self.end_date,
            fee_cents=self.fee_cents,
            rev_share_bps=self.rev_share_bps,
            scope=self.scope.to_domain(),
            metadata=dict(self.metadata),
            replaces_license_id=self.replaces_license_id,
        )


class ExistingLicenseSchema(BaseModel):
    """Previously granted license for the same asset"""
    id: str
    ip_asset_id: str
    brand_id: str
    brand_name: str
    license_type: LicenseType
    status: LicenseStatus
    start_date: datetime
    end_date: datetime
    fee_cents: int = 0
    rev_share_bps: int = Field(0, ge=0, le=MAX_REV_SHARE_BPS)
    scope: LicenseScopeSchema = Field(default_factory=LicenseScopeSchema)
    deleted_at: Optional[datetime] = None

    @field_validator('start_date', 'end_date', 'deleted_at')
    @classmethod
    def ensure_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)

    def to_domain(self) -> ExistingLicense:
        return ExistingLicense(
            id=self.id,
            ip_asset_id=self.ip_asset_id,
            brand_id=self.brand_id,
            brand_name=self.brand_name,
            license_type=self.license_type,
            status=self.status,
            start_date=self.start_date,
            end_date=self.end_date,
            fee_cents=self.fee_cents,
            rev_share_bps=self.rev_share_bps,
            scope=self.scope.to_domain(),
            deleted_at=self.deleted_at,
        )


class OwnershipSchema(BaseModel):
    """One creator's ownership share of the asset"""
    creator_id: str
    creator_name: str
    share_bps: int = Field(..., ge=0)
    ownership_type: OwnershipType = OwnershipType.PRIMARY
    disputed: bool = False
    contract_reference: Optional[str] = None
    legal_doc_url: Optional[str] = None
    creator_active: bool = True
    creator_deleted: bool = False
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @field_validator('start_date', 'end_date', 'deleted_at')
    @classmethod
    def ensure_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)

    def to_domain(self) -> OwnershipRecord:
        return OwnershipRecord(**self.model_dump())


class IPAssetSchema(BaseModel):
    id: str
    title: str
    status: AssetStatus
    ownerships: List[OwnershipSchema] = Field(default_factory=list)
    deleted_at: Optional[datetime] = None
    parent_asset_id: Optional[str] = None

    @field_validator('deleted_at')
    @classmethod
    def ensure_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)

    def to_domain(self) -> IPAsset:
        return IPAsset(
            id=self.id,
            title=self.title,
            status=self.status,
            ownerships=tuple(o.to_domain() for o in self.ownerships),
            deleted_at=self.deleted_at,
            parent_asset_id=self.parent_asset_id,
        )


class BrandSchema(BaseModel):
    id: str
    name: str
    is_verified: bool = False
    committed_budget_cents: int = Field(0, ge=0, description="Sum of fees across the brand's active/pending licenses")

    def to_domain(self) -> Brand:
        return Brand(**self.model_dump())


class ValidationContextSchema(BaseModel):
    """Pre-fetched state the checks evaluate against"""
    asset: IPAssetSchema
    brand: BrandSchema
    existing_licenses: List[ExistingLicenseSchema] = Field(default_factory=list)
    evaluated_at: Optional[datetime] = Field(
        None, description="Instant treated as now; defaults to the server's current time"
    )

    @field_validator('evaluated_at')
    @classmethod
    def ensure_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)

    def to_domain(self, now: Optional[datetime] = None) -> ValidationContext:
        return ValidationContext(
            asset=self.asset.to_domain(),
            brand=self.brand.to_domain(),
            evaluated_at=self.evaluated_at or now or datetime.now(timezone.utc),
            existing_licenses=tuple(lic.to_domain() for lic in self.existing_licenses),
        )


class LicenseValidationRequest(BaseModel):
    """Request body for POST /licenses/validate"""
    candidate: LicenseCandidateSchema
    context: ValidationContextSchema


# ============================================================================
# Response Schemas
# ============================================================================

class ConflictResponse(BaseModel):
    license_id: str
    brand_id: str
    brand_name: str
    reason: str
    details: str


class CheckResultResponse(BaseModel):
    """Result of a single check"""
    name: str
    passed: bool
    blocking: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    details: Dict[str, Any] = Field(default_factory=dict)
    conflicts: List[ConflictResponse] = Field(default_factory=list)


class LicenseValidationResponse(BaseModel):
    """Complete validation report"""
    overall_passed: bool
    approval_required: bool
    evaluated_at: datetime
    checks: Dict[str, CheckResultResponse]
    all_errors: List[str] = Field(default_factory=list)
    all_warnings: List[str] = Field(default_factory=list)
    conflicts: List[ConflictResponse] = Field(default_factory=list)
