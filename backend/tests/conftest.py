"""Pytest fixtures for license validation testing.

Provides reusable test fixtures for:
- The validation engine
- A FastAPI test client with the engine dependency wired in
- A JSON payload builder for the pre-check endpoint

Usage:
    def test_precheck(client, validation_payload):
        response = client.post("/api/v1/licenses/validate", json=validation_payload())
        assert response.status_code == 200
"""

import sys
import os
from pathlib import Path

# Set environment variables BEFORE any imports to ensure they take effect
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))
sys.path.insert(0, str(Path(__file__).parent))

from domain.licensing import LicenseValidationEngine
from dependencies import get_validation_engine


@pytest.fixture
def engine() -> LicenseValidationEngine:
    """Fresh validation engine with the default check pipeline."""
    return LicenseValidationEngine()


@pytest.fixture
def client(engine: LicenseValidationEngine):
    """Test client with the engine dependency overridden."""
    from main import app

    app.dependency_overrides[get_validation_engine] = lambda: engine
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def validation_payload():
    """Build a JSON request body for POST /api/v1/licenses/validate.

    Returns a callable; keyword arguments override candidate fields, and
    context-level keys (existing_licenses, asset, brand, evaluated_at) are
    accepted as well.
    """

    def _build(
        existing_licenses=None,
        asset=None,
        brand=None,
        evaluated_at="2024-12-01T00:00:00Z",
        **candidate_overrides
    ):
        candidate = {
            "ip_asset_id": "asset-1",
            "brand_id": "brand-1",
            "license_type": "NON_EXCLUSIVE",
            "start_date": "2025-01-01T00:00:00Z",
            "end_date": "2025-12-31T00:00:00Z",
            "fee_cents": 100000,
            "rev_share_bps": 0,
            "scope": {
                "media": {"digital": True},
                "placement": {"social": True},
                "geographic": {"territories": ["US"]},
            },
        }
        candidate.update(candidate_overrides)

        context = {
            "asset": asset or {
                "id": "asset-1",
                "title": "Sunset Over Lisbon",
                "status": "PUBLISHED",
                "ownerships": [
                    {
                        "creator_id": "creator-1",
                        "creator_name": "Maya Chen",
                        "share_bps": 10000,
                        "ownership_type": "PRIMARY",
                        "contract_reference": "CTR-001",
                    }
                ],
            },
            "brand": brand or {
                "id": "brand-1",
                "name": "Northwind Outdoors",
                "is_verified": True,
                "committed_budget_cents": 0,
            },
            "existing_licenses": existing_licenses or [],
        }
        if evaluated_at is not None:
            context["evaluated_at"] = evaluated_at

        return {"candidate": candidate, "context": context}

    return _build
