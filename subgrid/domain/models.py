"""
Domain models for subgrid.

Defines the subscription record tracked by the table, the closed enums its
fields draw from, and the column catalogue the table renders. Records are
frozen: the engine replaces the whole collection instead of editing rows.
"""
from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Dict, Tuple

from pydantic import BaseModel, Field, field_validator


class Status(str, Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class Category(str, Enum):
    ENTERTAINMENT = "entertainment"
    SPORTS = "sports"
    NEWS = "news"
    LIFESTYLE = "lifestyle"
    TECHNOLOGY = "technology"
    FINANCE = "finance"
    POLITICS = "politics"
    PROFESSIONAL = "professional"
    OTHER = "other"


class Frequency(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class Currency(str, Enum):
    USD = "USD"
    INR = "INR"
    EUR = "EUR"


CURRENCY_SYMBOLS: Dict[Currency, str] = {
    Currency.USD: "$",
    Currency.INR: "₹",
    Currency.EUR: "€",
}


class ColumnId(str, Enum):
    NAME = "name"
    PRICE = "price"
    CATEGORY = "category"
    FREQUENCY = "frequency"
    START_DATE = "startDate"
    STATUS = "status"
    ACTIONS = "actions"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class Column(BaseModel):
    """Static description of one table column."""

    uid: ColumnId
    label: str
    sortable: bool = True

    model_config = {"frozen": True}


# Canonical display order.
COLUMNS: Tuple[Column, ...] = (
    Column(uid=ColumnId.NAME, label="NAME"),
    Column(uid=ColumnId.PRICE, label="PRICE"),
    Column(uid=ColumnId.CATEGORY, label="CATEGORY"),
    Column(uid=ColumnId.FREQUENCY, label="FREQUENCY"),
    Column(uid=ColumnId.START_DATE, label="START DATE"),
    Column(uid=ColumnId.STATUS, label="STATUS"),
    Column(uid=ColumnId.ACTIONS, label="ACTIONS", sortable=False),
)

SORTABLE_COLUMNS: frozenset[ColumnId] = frozenset(c.uid for c in COLUMNS if c.sortable)
ALL_COLUMNS: frozenset[ColumnId] = frozenset(c.uid for c in COLUMNS)


class Record(BaseModel):
    """
    A single tracked subscription.

    Accepts both the camelCase keys used by the record source and the
    snake_case attribute names.
    """

    id: int = Field(..., description="Unique identifier within the record set.")
    name: str = Field(..., description="Display name of the subscription.")
    price: Decimal = Field(..., ge=0, description="Recurring charge.")
    currency: Currency = Field(Currency.USD, description="Billing currency code.")
    frequency: Frequency = Field(..., description="Billing interval.")
    category: Category = Field(..., description="Category from the closed category set.")
    start_date: datetime = Field(..., alias="startDate", description="Subscription start.")
    payment_method: str = Field("", alias="paymentMethod", description="How it is paid.")
    status: Status = Field(Status.ACTIVE, description="Lifecycle status.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @field_validator("start_date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # date-only and offset-less timestamps are read as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def currency_symbol(self) -> str:
        return CURRENCY_SYMBOLS[self.currency]


__all__ = [
    "ALL_COLUMNS",
    "COLUMNS",
    "CURRENCY_SYMBOLS",
    "Category",
    "Column",
    "ColumnId",
    "Currency",
    "Frequency",
    "Record",
    "SORTABLE_COLUMNS",
    "SortDirection",
    "Status",
]
