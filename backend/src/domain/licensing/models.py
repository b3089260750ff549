"""Licensing domain models and enums.

These are the in-memory snapshot types the validation engine works on.
They are built fresh by the caller for every validation call and are never
persisted by the engine.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


class LicenseType(str, Enum):
    """License exclusivity kinds"""
    EXCLUSIVE = "EXCLUSIVE"
    EXCLUSIVE_TERRITORY = "EXCLUSIVE_TERRITORY"
    NON_EXCLUSIVE = "NON_EXCLUSIVE"


class LicenseStatus(str, Enum):
    """License lifecycle status"""
    DRAFT = "DRAFT"
    PENDING_APPROVAL = "PENDING_APPROVAL"
    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"
    TERMINATED = "TERMINATED"
    SUSPENDED = "SUSPENDED"


class AssetStatus(str, Enum):
    """IP asset lifecycle status"""
    DRAFT = "DRAFT"
    PROCESSING = "PROCESSING"
    REVIEW = "REVIEW"
    APPROVED = "APPROVED"
    PUBLISHED = "PUBLISHED"
    REJECTED = "REJECTED"
    ARCHIVED = "ARCHIVED"


class OwnershipType(str, Enum):
    """Kind of claim a creator holds on an asset"""
    PRIMARY = "PRIMARY"
    SECONDARY = "SECONDARY"
    DERIVATIVE = "DERIVATIVE"
    TRANSFERRED = "TRANSFERRED"


class ConflictReason(str, Enum):
    """Why an existing license conflicts with the candidate"""
    DATE_OVERLAP = "DATE_OVERLAP"
    EXCLUSIVE_OVERLAP = "EXCLUSIVE_OVERLAP"
    TERRITORY_OVERLAP = "TERRITORY_OVERLAP"
    CATEGORY_OVERLAP = "CATEGORY_OVERLAP"
    COMPETITOR_BLOCKED = "COMPETITOR_BLOCKED"
    SCOPE_DUPLICATE = "SCOPE_DUPLICATE"


class ApproverType(str, Enum):
    """Who has to sign off before a license can be activated"""
    CREATOR = "CREATOR"
    ADMIN = "ADMIN"


GLOBAL_TERRITORY = "GLOBAL"


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so all instants are comparable."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _normalize_instants(instance, *names: str) -> None:
    # frozen dataclasses need object.__setattr__
    for name in names:
        object.__setattr__(instance, name, as_utc(getattr(instance, name)))


@dataclass(frozen=True)
class TerritoryScope:
    """Geographic coverage of a license.

    GLOBAL is carried as an explicit flag rather than as one of the codes,
    so overlap logic can branch on it directly.
    """
    is_global: bool = False
    codes: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_codes(cls, territories: Optional[list[str]]) -> "TerritoryScope":
        """Parse raw territory codes (ISO country codes or "GLOBAL")"""
        normalized = {t.strip().upper() for t in territories or [] if t and t.strip()}
        is_global = GLOBAL_TERRITORY in normalized
        normalized.discard(GLOBAL_TERRITORY)
        return cls(is_global=is_global, codes=frozenset(normalized))

    @property
    def is_empty(self) -> bool:
        return not self.is_global and not self.codes

    def names(self) -> list[str]:
        """Sorted territory names, GLOBAL first when present"""
        names = sorted(self.codes)
        if self.is_global:
            names.insert(0, GLOBAL_TERRITORY)
        return names


@dataclass(frozen=True)
class MediaScope:
    """Media types a license covers"""
    digital: bool = False
    print: bool = False
    broadcast: bool = False
    ooh: bool = False  # out-of-home: billboards, transit

    def selected(self) -> list[str]:
        return [name for name in MEDIA_FLAGS if getattr(self, name)]


@dataclass(frozen=True)
class PlacementScope:
    """Placements a license covers"""
    social: bool = False
    website: bool = False
    email: bool = False
    paid_ads: bool = False
    packaging: bool = False

    def selected(self) -> list[str]:
        return [name for name in PLACEMENT_FLAGS if getattr(self, name)]


MEDIA_FLAGS = ("digital", "print", "broadcast", "ooh")
PLACEMENT_FLAGS = ("social", "website", "email", "paid_ads", "packaging")


@dataclass(frozen=True)
class ExclusivityTerms:
    category: Optional[str] = None
    competitors: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class AttributionTerms:
    required: bool = False
    format: Optional[str] = None


@dataclass(frozen=True)
class CutdownTerms:
    allow_edits: bool = False
    max_duration_seconds: Optional[int] = None
    aspect_ratios: tuple[str, ...] = ()


@dataclass(frozen=True)
class LicenseScope:
    """Declared usage scope of a license"""
    media: MediaScope = field(default_factory=MediaScope)
    placement: PlacementScope = field(default_factory=PlacementScope)
    territory: TerritoryScope = field(default_factory=TerritoryScope)
    exclusivity: ExclusivityTerms = field(default_factory=ExclusivityTerms)
    attribution: AttributionTerms = field(default_factory=AttributionTerms)
    cutdowns: CutdownTerms = field(default_factory=CutdownTerms)


@dataclass(frozen=True)
class LicenseCandidate:
    """The proposed license under evaluation.

    replaces_license_id is set when validating an amendment or renewal;
    the replaced license is then left out of all conflict analysis.
    """
    ip_asset_id: str
    brand_id: str
    license_type: LicenseType
    start_date: datetime
    end_date: datetime
    fee_cents: int = 0
    rev_share_bps: int = 0
    scope: LicenseScope = field(default_factory=LicenseScope)
    metadata: dict[str, Any] = field(default_factory=dict)
    replaces_license_id: Optional[str] = None

    def __post_init__(self):
        _normalize_instants(self, "start_date", "end_date")


@dataclass(frozen=True)
class ExistingLicense:
    """A license already granted (or pending) for the same asset"""
    id: str
    ip_asset_id: str
    brand_id: str
    brand_name: str
    license_type: LicenseType
    status: LicenseStatus
    start_date: datetime
    end_date: datetime
    fee_cents: int = 0
    rev_share_bps: int = 0
    scope: LicenseScope = field(default_factory=LicenseScope)
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        _normalize_instants(self, "start_date", "end_date", "deleted_at")


@dataclass(frozen=True)
class OwnershipRecord:
    """One creator's claim on an asset"""
    creator_id: str
    creator_name: str
    share_bps: int
    ownership_type: OwnershipType = OwnershipType.PRIMARY
    disputed: bool = False
    contract_reference: Optional[str] = None
    legal_doc_url: Optional[str] = None
    creator_active: bool = True
    creator_deleted: bool = False
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        _normalize_instants(self, "start_date", "end_date", "deleted_at")

    @property
    def has_documentation(self) -> bool:
        return bool(self.contract_reference or self.legal_doc_url)


@dataclass(frozen=True)
class IPAsset:
    id: str
    title: str
    status: AssetStatus
    ownerships: tuple[OwnershipRecord, ...] = ()
    deleted_at: Optional[datetime] = None
    parent_asset_id: Optional[str] = None

    def __post_init__(self):
        _normalize_instants(self, "deleted_at")


@dataclass(frozen=True)
class Brand:
    """Prospective licensee.

    committed_budget_cents is the sum of fees across the brand's own
    active/pending licenses, computed by the caller.
    """
    id: str
    name: str
    is_verified: bool = False
    committed_budget_cents: int = 0


@dataclass(frozen=True)
class ValidationContext:
    """Everything the checks need, pre-fetched by the caller.

    evaluated_at is the instant treated as "now"; injecting it keeps every
    check a pure function of its inputs.
    """
    asset: IPAsset
    brand: Brand
    evaluated_at: datetime
    existing_licenses: tuple[ExistingLicense, ...] = ()

    def __post_init__(self):
        _normalize_instants(self, "evaluated_at")


@dataclass
class Conflict:
    """A specific existing license the candidate collides with"""
    license_id: str
    brand_id: str
    brand_name: str
    reason: ConflictReason
    details: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "license_id": self.license_id,
            "brand_id": self.brand_id,
            "brand_name": self.brand_name,
            "reason": self.reason.value,
            "details": self.details,
        }


@dataclass(frozen=True)
class Approver:
    type: ApproverType
    identity: str
    name: Optional[str] = None
    reason: Optional[str] = None

    @property
    def key(self) -> tuple[str, str]:
        return (self.type.value, self.identity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "identity": self.identity,
            "name": self.name,
            "reason": self.reason,
        }


@dataclass
class CheckResult:
    """Outcome of a single check.

    Errors block license creation, warnings never do. Informational checks
    set blocking=False so the orchestrator leaves them out of the overall
    pass/fail decision.
    """
    name: str
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    details: dict[str, Any] = field(default_factory=dict)
    conflicts: list[Conflict] = field(default_factory=list)
    blocking: bool = True

    @property
    def passed(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "passed": self.passed,
            "blocking": self.blocking,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "details": self.details,
            "conflicts": [c.to_dict() for c in self.conflicts],
        }


@dataclass
class ValidationReport:
    """Aggregate of all check results for one candidate"""
    checks: dict[str, CheckResult]
    overall_passed: bool
    evaluated_at: datetime

    @property
    def all_errors(self) -> list[str]:
        return [e for check in self.checks.values() for e in check.errors]

    @property
    def all_warnings(self) -> list[str]:
        return [w for check in self.checks.values() for w in check.warnings]

    @property
    def conflicts(self) -> list[Conflict]:
        return [c for check in self.checks.values() for c in check.conflicts]

    @property
    def approval_required(self) -> bool:
        return any(
            check.details.get("approval_required", False)
            for check in self.checks.values()
            if not check.blocking
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary"""
        return {
            "overall_passed": self.overall_passed,
            "approval_required": self.approval_required,
            "evaluated_at": self.evaluated_at.isoformat(),
            "checks": {name: check.to_dict() for name, check in self.checks.items()},
            "all_errors": self.all_errors,
            "all_warnings": self.all_warnings,
            "conflicts": [c.to_dict() for c in self.conflicts],
        }
