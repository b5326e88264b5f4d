"""Pytest configuration and shared fixtures."""

from datetime import UTC, datetime

import pytest
from rest_framework.test import APIClient

from eventreg.domain import EventDraft
from eventreg.stores import EventCatalog, RegistrationLedger

FIXED_NOW = datetime(2026, 1, 10, 9, 30, tzinfo=UTC)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def small_catalog() -> EventCatalog:
    """Catalog with a single two-seat event (id 1)."""
    return EventCatalog(
        seed=[
            EventDraft(
                name="Intimate Talk",
                location="Room 1",
                date=datetime(2026, 6, 1, tzinfo=UTC),
                total_seats=2,
            )
        ]
    )


@pytest.fixture
def ledger(small_catalog: EventCatalog) -> RegistrationLedger:
    return RegistrationLedger(small_catalog, clock=lambda: FIXED_NOW)
