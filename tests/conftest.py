"""
Pytest configuration for subgrid.

Provides fixtures for:
- The six bundled sample subscriptions
- A default ViewState with the tracker's defaults
- Settings isolated from the developer's environment
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Generator, Tuple

import pytest

from subgrid.config import Settings, get_settings
from subgrid.domain.models import Category, Frequency, Record, Status
from subgrid.domain.sample import generate_records, sample_records
from subgrid.table import SubscriptionTable
from subgrid.view_state import ViewState


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    """get_settings() is lru_cached; keep env overrides from leaking across tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific values, independent of any .env file.
    """
    return Settings(
        _env_file=None,
        log_level="DEBUG",
        default_rows_per_page=5,
        rows_per_page_options=[5, 10, 15],
    )


@pytest.fixture
def records() -> Tuple[Record, ...]:
    return sample_records()


@pytest.fixture
def state() -> ViewState:
    return ViewState()


@pytest.fixture
def table(records: Tuple[Record, ...], test_settings: Settings) -> SubscriptionTable:
    return SubscriptionTable(records, settings=test_settings)


@pytest.fixture
def many_records() -> Tuple[Record, ...]:
    """A larger deterministic record set (seeded)."""
    return generate_records(57, random.Random(7))


@pytest.fixture
def make_record() -> Callable[..., Record]:
    """Factory for one-off records; only override what the test cares about."""

    def _make(record_id: int, **overrides) -> Record:
        fields = {
            "id": record_id,
            "name": f"Sub {record_id}",
            "price": Decimal("10.00"),
            "currency": "USD",
            "frequency": Frequency.MONTHLY,
            "category": Category.OTHER,
            "start_date": datetime(2025, 1, 1, tzinfo=timezone.utc),
            "payment_method": "Credit Card",
            "status": Status.ACTIVE,
        }
        fields.update(overrides)
        return Record(**fields)

    return _make
