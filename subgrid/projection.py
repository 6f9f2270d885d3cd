"""
Column-visibility projection.

Turns a record into the display cells of the currently visible columns, in
canonical column order. Visibility never influences which rows pass the
pipeline, only which cells are produced for them.
"""

from __future__ import annotations

from datetime import datetime
from typing import AbstractSet, Dict, List

from subgrid.domain.models import COLUMNS, ColumnId, Record


def capitalize(text: str) -> str:
    return text[:1].upper() + text[1:].lower() if text else ""


def format_date(value: datetime) -> str:
    """`Feb 11, 2025` style, without zero-padding the day."""
    return f"{value:%b} {value.day}, {value.year}"


def format_price(record: Record) -> str:
    return f"{record.currency_symbol}{record.price}"


def ordered_columns(visible: AbstractSet[ColumnId]) -> List[ColumnId]:
    return [c.uid for c in COLUMNS if c.uid in visible]


def _cell(record: Record, column: ColumnId) -> str:
    if column is ColumnId.NAME:
        return record.name
    if column is ColumnId.PRICE:
        return format_price(record)
    if column is ColumnId.CATEGORY:
        return record.category.value
    if column is ColumnId.FREQUENCY:
        return record.frequency.value
    if column is ColumnId.START_DATE:
        return format_date(record.start_date)
    if column is ColumnId.STATUS:
        return capitalize(record.status.value)
    return ""


def project_row(record: Record, visible: AbstractSet[ColumnId]) -> Dict[str, str]:
    """Display cells keyed by column id, in canonical column order."""
    return {column.value: _cell(record, column) for column in ordered_columns(visible)}


__all__ = ["capitalize", "format_date", "format_price", "ordered_columns", "project_row"]
