"""Overlap primitives shared by the licensing checks.

Intervals are half-open: [start, end). An interval with end <= start is
empty and overlaps nothing, including itself.
"""

from datetime import datetime
from typing import Iterable

from .models import (
    ExistingLicense,
    LicenseCandidate,
    LicenseScope,
    LicenseStatus,
    TerritoryScope,
    ValidationContext,
)


CONFLICTING_STATUSES = frozenset({LicenseStatus.ACTIVE, LicenseStatus.PENDING_APPROVAL})


def intervals_overlap(
    a_start: datetime,
    a_end: datetime,
    b_start: datetime,
    b_end: datetime
) -> bool:
    """Return True if [a_start, a_end) and [b_start, b_end) intersect."""
    if a_end <= a_start or b_end <= b_start:
        return False
    return a_start < b_end and b_start < a_end


def territory_overlap(a: TerritoryScope, b: TerritoryScope) -> TerritoryScope:
    """Compute the territories two scopes have in common.

    A global scope covers everything, so the overlap with it is the other
    side in full.
    """
    if a.is_global:
        return b
    if b.is_global:
        return a
    return TerritoryScope(codes=a.codes & b.codes)


def media_overlap(a: LicenseScope, b: LicenseScope) -> list[str]:
    b_media = set(b.media.selected())
    return [name for name in a.media.selected() if name in b_media]


def placement_overlap(a: LicenseScope, b: LicenseScope) -> list[str]:
    b_placement = set(b.placement.selected())
    return [name for name in a.placement.selected() if name in b_placement]


def is_identical_scope(a: LicenseScope, b: LicenseScope) -> bool:
    """True when media, placement, territory and category all match exactly."""
    return (
        a.media == b.media
        and a.placement == b.placement
        and a.territory == b.territory
        and a.exclusivity.category == b.exclusivity.category
    )


def relevant_licenses(
    candidate: LicenseCandidate,
    context: ValidationContext
) -> list[ExistingLicense]:
    """Existing licenses that can conflict with the candidate at all.

    Only ACTIVE and PENDING_APPROVAL, non-deleted licenses for the same asset
    count. The license a candidate replaces is excluded.
    """
    return [
        existing for existing in context.existing_licenses
        if existing.status in CONFLICTING_STATUSES
        and existing.deleted_at is None
        and existing.ip_asset_id == candidate.ip_asset_id
        and existing.id != candidate.replaces_license_id
    ]


def overlapping_licenses(
    candidate: LicenseCandidate,
    licenses: Iterable[ExistingLicense]
) -> list[ExistingLicense]:
    """Filter licenses whose term intersects the candidate's term."""
    return [
        existing for existing in licenses
        if intervals_overlap(
            candidate.start_date, candidate.end_date,
            existing.start_date, existing.end_date
        )
    ]


def format_period(start: datetime, end: datetime) -> str:
    return f"{start.date().isoformat()} to {end.date().isoformat()}"
