"""
Sort stage: typed comparator dispatch with a deterministic tie-break.

Each sortable column maps to an explicit key function; there is no dynamic
field lookup. Ties on the primary key are broken by record id ascending, and
a descending sort is the exact reverse of the ascending one. Columns without
a comparator (``actions`` or an unrecognised id) leave the order unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from subgrid.domain.models import ColumnId, Record, SortDirection
from subgrid.stages.abstract import AbstractPipelineStage
from subgrid.utils.logging import get_logger
from subgrid.view_state import SortColumn, ViewState

log = get_logger(__name__)

SortKey = Callable[[Record], Any]


def _text_key(text: str) -> Tuple[str, str]:
    # Case-insensitive first, raw value second so the order stays total.
    return (text.casefold(), text)


SORT_KEYS: Dict[ColumnId, SortKey] = {
    ColumnId.NAME: lambda r: _text_key(r.name),
    ColumnId.PRICE: lambda r: r.price,
    ColumnId.CATEGORY: lambda r: _text_key(r.category.value),
    ColumnId.FREQUENCY: lambda r: _text_key(r.frequency.value),
    ColumnId.START_DATE: lambda r: r.start_date,
    ColumnId.STATUS: lambda r: _text_key(r.status.value),
}


def sort_key_for(column: SortColumn) -> Optional[SortKey]:
    """Return the key function for `column`, or None when it is not sortable."""
    try:
        return SORT_KEYS.get(ColumnId(column))
    except ValueError:
        return None


def sort_records(
    records: Sequence[Record],
    column: SortColumn,
    direction: SortDirection | str = SortDirection.ASC,
) -> Tuple[Record, ...]:
    key = sort_key_for(column)
    if key is None:
        log.debug("Sort column has no comparator; keeping order", extra={"column": str(column)})
        return tuple(records)
    return tuple(
        sorted(
            records,
            key=lambda r: (key(r), r.id),
            reverse=SortDirection(direction) is SortDirection.DESC,
        )
    )


class SortStage(AbstractPipelineStage):
    name: str = "sort"
    description: str = "Order by the active column and direction, ties by id."

    def apply(self, records: Sequence[Record], state: ViewState) -> Tuple[Record, ...]:
        return sort_records(records, state.sort_column, state.sort_direction)


__all__ = ["SORT_KEYS", "SortStage", "sort_key_for", "sort_records"]
