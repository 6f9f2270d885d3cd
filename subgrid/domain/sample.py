"""
Record source helpers: the bundled sample subscriptions and JSON loading.

The engine itself never performs I/O. These helpers sit at the boundary and
hand the engine a plain tuple of validated records.
"""
from __future__ import annotations

import json
import random
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Tuple

from pydantic import TypeAdapter

from subgrid.domain.models import Category, Currency, Frequency, Record, Status

SAMPLE_SUBSCRIPTIONS: List[Mapping[str, Any]] = [
    {
        "id": 1,
        "name": "Amazon Premium",
        "price": "15.59",
        "currency": "USD",
        "frequency": "monthly",
        "category": "entertainment",
        "startDate": "2025-02-11T00:00:00.000Z",
        "paymentMethod": "Credit Card",
        "status": "active",
    },
    {
        "id": 2,
        "name": "Netflix Standard",
        "price": "15.49",
        "currency": "USD",
        "frequency": "monthly",
        "category": "entertainment",
        "startDate": "2025-01-15T00:00:00.000Z",
        "paymentMethod": "PayPal",
        "status": "active",
    },
    {
        "id": 3,
        "name": "WSJ Digital",
        "price": "39.99",
        "currency": "USD",
        "frequency": "yearly",
        "category": "news",
        "startDate": "2025-03-01T00:00:00.000Z",
        "paymentMethod": "Credit Card",
        "status": "active",
    },
    {
        "id": 4,
        "name": "Spotify Premium",
        "price": "9.99",
        "currency": "USD",
        "frequency": "monthly",
        "category": "entertainment",
        "startDate": "2024-12-01T00:00:00.000Z",
        "paymentMethod": "Debit Card",
        "status": "active",
    },
    {
        "id": 5,
        "name": "Apple News+",
        "price": "9.99",
        "currency": "USD",
        "frequency": "monthly",
        "category": "news",
        "startDate": "2025-02-01T00:00:00.000Z",
        "paymentMethod": "Apple Pay",
        "status": "expired",
    },
    {
        "id": 6,
        "name": "LinkedIn Premium",
        "price": "29.99",
        "currency": "USD",
        "frequency": "monthly",
        "category": "professional",
        "startDate": "2025-01-20T00:00:00.000Z",
        "paymentMethod": "Credit Card",
        "status": "cancelled",
    },
]

_RECORDS_ADAPTER = TypeAdapter(List[Record])


def load_records(items: Iterable[Mapping[str, Any]]) -> Tuple[Record, ...]:
    """Validate raw mappings into records. Raises pydantic.ValidationError."""
    return tuple(_RECORDS_ADAPTER.validate_python(list(items)))


def load_records_json(path: Path | str) -> Tuple[Record, ...]:
    """Read a JSON array of subscription objects from disk."""
    with Path(path).open("r", encoding="utf-8") as f:
        payload = json.load(f)
    return load_records(payload)


def sample_records() -> Tuple[Record, ...]:
    """The six subscriptions the tracker ships with."""
    return load_records(SAMPLE_SUBSCRIPTIONS)


_PROVIDERS = [
    "Netflix", "Spotify", "Disney", "Hulu", "WSJ", "Apple", "Adobe", "Notion", "Peloton", "Zwift",
]
_TIERS = ["Basic", "Standard", "Premium", "Family", "Pro", "Digital"]
_PAYMENT_METHODS = ["Credit Card", "Debit Card", "PayPal", "Apple Pay", "Bank Transfer"]
_EPOCH = datetime(2020, 1, 1, tzinfo=timezone.utc)


def generate_records(rows: int, rng: random.Random) -> Tuple[Record, ...]:
    """
    Deterministic pseudo-random subscriptions with ids 1..rows.

    Used for benchmarking and for seeding demo data files.
    """
    records = []
    for record_id in range(1, rows + 1):
        records.append(
            Record(
                id=record_id,
                name=f"{rng.choice(_PROVIDERS)} {rng.choice(_TIERS)}",
                price=Decimal(rng.randint(99, 9_999)) / 100,
                currency=rng.choice(list(Currency)),
                frequency=rng.choice(list(Frequency)),
                category=rng.choice(list(Category)),
                start_date=_EPOCH + timedelta(days=rng.randint(0, 6 * 365)),
                payment_method=rng.choice(_PAYMENT_METHODS),
                status=rng.choice(list(Status)),
            )
        )
    return tuple(records)


__all__ = [
    "SAMPLE_SUBSCRIPTIONS",
    "generate_records",
    "load_records",
    "load_records_json",
    "sample_records",
]
