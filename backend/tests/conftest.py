"""
LandlordShield - Test Configuration

Shared fixtures: a fixed clock and sample portfolio records in the shapes
the data layer returns them (snake_case rows and camelCase API bodies).
"""

from collections.abc import AsyncGenerator
from datetime import datetime

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# Mid-morning, so day rounding is exercised
FIXED_NOW = datetime(2026, 6, 15, 9, 30)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def properties() -> list[dict]:
    return [
        {
            "id": "prop-1",
            "address_line1": "12 High Street",
            "city": "Leeds",
            "postcode": "LS1 1AA",
        },
        {
            "id": "prop-2",
            "addressLine1": "4 Mill Lane",
            "postcode": "M1 2BB",
        },
    ]


@pytest.fixture
def certificates() -> list[dict]:
    return [
        {
            "id": "c1",
            "property_id": "prop-1",
            "cert_type": "gas_safety",
            "status": "expired",
            "expiry_date": "2026-06-14",
        },
        {
            "id": "c2",
            "propertyId": "prop-2",
            "kind": "eicr",
            "status": "valid",
            "expiryDate": "2026-07-15",
        },
        {
            "id": "c3",
            "property_id": "prop-1",
            "cert_type": "epc",
            "status": "valid",
            "expiry_date": None,
        },
        {
            "id": "c4",
            "property_id": "prop-1",
            "cert_type": "legionella",
            "status": "expiring_soon",
            "expiry_date": "not-a-date",
        },
    ]


@pytest.fixture
def tasks() -> list[dict]:
    return [
        {
            "id": "t1",
            "user_id": "user-1",
            "property_id": None,
            "pillar": "mtd",
            "item_key": "mtd_signup",
            "title": "Signed up for MTD for Income Tax",
            "is_completed": False,
            "due_date": "2026-06-22",
            "priority": "critical",
        },
        {
            "id": "t2",
            "property_id": "prop-1",
            "pillar": "renters_rights",
            "item_key": "information_sheet",
            "title": "Information Sheet provided",
            "is_completed": True,
            "due_date": "2026-05-31",
            "priority": "critical",
        },
        {
            "id": "t3",
            "propertyId": "prop-2",
            "domain": "tenancy-rights",
            "key": "pet_policy",
            "title": "Pet policy updated",
            "isCompleted": False,
            "dueDate": "2026-05-01T00:00:00Z",
            "priority": "medium",
        },
        {
            "id": "t4",
            "domain": "energy",
            "key": "loft_insulation",
            "title": "Loft insulation booked",
            "is_completed": False,
            "due_date": None,
            "priority": "high",
        },
        {
            "id": "t5",
            "domain": "garden",
            "key": "hedges",
            "title": "Trim hedges",
            "is_completed": False,
            "due_date": "2026-09-01",
            "priority": "low",
        },
    ]


@pytest.fixture
def make_tasks():
    """Factory: ``total`` tasks in ``domain`` of which the first ``completed`` are done."""

    def _make(domain: str, completed: int, total: int, **extra) -> list[dict]:
        return [
            {
                "id": f"{domain}-{i}",
                "domain": domain,
                "title": f"{domain} item {i}",
                "is_completed": i < completed,
                **extra,
            }
            for i in range(total)
        ]

    return _make


@pytest_asyncio.fixture
async def client(monkeypatch) -> AsyncGenerator[AsyncClient, None]:
    """API client whose request clock is pinned to FIXED_NOW."""
    from landlordshield.main import app
    from landlordshield.routers import compliance

    monkeypatch.setattr(compliance, "_now", lambda: FIXED_NOW)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
