"""Ownership check.

Structural problems (status, share sum, missing primary owner, disputes,
deleted creator accounts) are errors because royalties could not be split
soundly. Documentation gaps and inactive accounts are warnings.
"""

from typing import Optional

from domain.licensing.models import (
    AssetStatus,
    CheckResult,
    LicenseCandidate,
    OwnershipRecord,
    OwnershipType,
    ValidationContext,
)
from domain.licensing.policy import FULL_OWNERSHIP_BPS, OWNERSHIP_DOCUMENTATION_CENTS
from domain.licensing.port import LicenseCheck


LICENSABLE_STATUSES = frozenset({AssetStatus.PUBLISHED, AssetStatus.APPROVED})


def effective_ownerships(
    candidate: LicenseCandidate,
    ownerships: tuple[OwnershipRecord, ...]
) -> list[OwnershipRecord]:
    """Ownership records that apply during the candidate's license term.

    Deleted records are dropped. A missing start or end date leaves that
    side of the record's window open. If the candidate term is inverted the
    window filter is skipped.
    """
    records = [o for o in ownerships if o.deleted_at is None]
    if candidate.end_date <= candidate.start_date:
        return records

    effective = []
    for record in records:
        if record.start_date is not None and record.start_date >= candidate.end_date:
            continue
        if record.end_date is not None and record.end_date <= candidate.start_date:
            continue
        effective.append(record)
    return effective


def _share_percent(bps: int) -> str:
    return f"{bps / 100:g}%"


class OwnershipCheck(LicenseCheck):
    """Validates that the asset has a sound, fully allocated ownership structure."""

    name = "ownership"

    def evaluate(self, candidate: LicenseCandidate, context: ValidationContext) -> CheckResult:
        result = CheckResult(name=self.name)
        asset = context.asset

        # Rule 1: licensable lifecycle status, not soft-deleted
        if asset.status not in LICENSABLE_STATUSES:
            result.errors.append(
                f"IP asset must be in PUBLISHED or APPROVED status (current: {asset.status.value})"
            )
        if asset.deleted_at is not None:
            result.errors.append(f"Cannot license a deleted IP asset ({asset.id})")

        ownerships = effective_ownerships(candidate, asset.ownerships)

        # Rule 2: at least one record
        if not ownerships:
            result.errors.append(f"IP asset {asset.id} has no ownership records - cannot license")

        # Rule 3: shares sum to exactly 100%
        total_share_bps = sum(o.share_bps for o in ownerships)
        if total_share_bps != FULL_OWNERSHIP_BPS:
            result.errors.append(
                f"Invalid ownership structure: Total shares must equal 100% "
                f"(current: {_share_percent(total_share_bps)})"
            )

        # Rule 4: at least one primary owner
        primary_owners = [o for o in ownerships if o.ownership_type == OwnershipType.PRIMARY]
        if not primary_owners:
            result.errors.append("IP asset must have at least one primary owner")

        # Rule 5: creator accounts
        for ownership in ownerships:
            if ownership.creator_deleted:
                result.errors.append(
                    f"Creator {ownership.creator_name} has been deleted - cannot license"
                )
            elif not ownership.creator_active:
                result.warnings.append(f"Creator {ownership.creator_name} account is inactive")

        # Rule 6: disputes, reported once
        disputed = [o for o in ownerships if o.disputed]
        if disputed:
            result.errors.append(
                f"Ownership is disputed - cannot license until disputes are resolved "
                f"({len(disputed)} disputed ownership record(s))"
            )

        # Rule 7: documentation for high-value licenses
        if candidate.fee_cents >= OWNERSHIP_DOCUMENTATION_CENTS:
            missing_docs = [o for o in ownerships if not o.has_documentation]
            if missing_docs:
                result.warnings.append(
                    f"High-value license: {len(missing_docs)} ownership record(s) missing "
                    f"legal documentation"
                )

        if asset.parent_asset_id:
            result.warnings.append(
                f"This is a derivative work of {asset.parent_asset_id} - ensure parent asset "
                f"ownership is also valid"
            )

        result.details = {
            "asset_id": asset.id,
            "asset_title": asset.title,
            "asset_status": asset.status.value,
            "total_owners": len(ownerships),
            "primary_owners": len(primary_owners),
            "total_share_bps": total_share_bps,
            "has_disputes": bool(disputed),
            "owners": [_owner_summary(o) for o in ownerships],
        }
        return result


def _owner_summary(ownership: OwnershipRecord) -> dict[str, Optional[object]]:
    return {
        "creator_id": ownership.creator_id,
        "creator_name": ownership.creator_name,
        "share_bps": ownership.share_bps,
        "ownership_type": ownership.ownership_type.value,
        "is_active": ownership.creator_active and not ownership.creator_deleted,
        "has_documentation": ownership.has_documentation,
        "disputed": ownership.disputed,
    }
