"""
Domain package for subgrid.

Exports the subscription record, its enums, the column catalogue, and the
record source helpers. Keep this package focused on data definitions and
validation concerns.
"""

from subgrid.domain.models import (
    ALL_COLUMNS,
    COLUMNS,
    CURRENCY_SYMBOLS,
    SORTABLE_COLUMNS,
    Category,
    Column,
    ColumnId,
    Currency,
    Frequency,
    Record,
    SortDirection,
    Status,
)
from subgrid.domain.sample import (
    generate_records,
    load_records,
    load_records_json,
    sample_records,
)

__all__ = [
    "ALL_COLUMNS",
    "COLUMNS",
    "CURRENCY_SYMBOLS",
    "SORTABLE_COLUMNS",
    "Category",
    "Column",
    "ColumnId",
    "Currency",
    "Frequency",
    "Record",
    "SortDirection",
    "Status",
    "generate_records",
    "load_records",
    "load_records_json",
    "sample_records",
]
