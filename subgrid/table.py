"""
SubscriptionTable: the host-side binding of one record set to one ViewState.

This is the only mutable object in the engine. Each mutator swaps in a new
ViewState (or record tuple) and the host calls `render()` to pull a fresh
RenderFrame. The table keeps the page in `[1, total_pages]` whenever it
changes something that could move the page out of range.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional, Sequence, Tuple

from subgrid.config import Settings, get_settings
from subgrid.domain.models import Category, ColumnId, Record, SortDirection, Status
from subgrid.errors import InvalidConfiguration
from subgrid.pipeline import RenderFrame, derive_rows, recompute
from subgrid.stages import pagination
from subgrid.utils.logging import get_logger
from subgrid.view_state import SortColumn, ViewState

log = get_logger(__name__)


def _unique_records(records: Iterable[Record]) -> Tuple[Record, ...]:
    rows = tuple(records)
    counts = Counter(r.id for r in rows)
    dupes = sorted(record_id for record_id, n in counts.items() if n > 1)
    if dupes:
        raise InvalidConfiguration(f"record ids must be unique, duplicated: {dupes}")
    return rows


class SubscriptionTable:
    """
    Binds a record collection to a ViewState for a single render surface.

    Not thread-safe; one table instance serves one view.
    """

    def __init__(
        self,
        records: Iterable[Record] = (),
        state: Optional[ViewState] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._records = _unique_records(records)
        self._state = state or ViewState.from_settings(self.settings)

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def total_pages(self) -> int:
        return pagination.total_pages(
            len(derive_rows(self._records, self._state)), self._state.rows_per_page
        )

    def render(self) -> RenderFrame:
        return recompute(self._records, self._state)

    # Record source

    def replace_records(self, records: Iterable[Record]) -> None:
        """
        Swap in a new ground-truth record set.

        View parameters and the selection are kept; selected ids that no
        longer exist stay selected but inert.
        """
        self._records = _unique_records(records)
        self._clamp_page()
        log.info("Record set replaced", extra={"records": len(self._records)})

    # Filters

    def set_query(self, query: str) -> None:
        self._state = self._state.set_query(query)

    def toggle_status_facet(self, status: Status | str) -> None:
        self._state = self._state.toggle_status_facet(status)

    def toggle_category_facet(self, category: Category | str) -> None:
        self._state = self._state.toggle_category_facet(category)

    def clear_facets(self) -> None:
        self._state = self._state.clear_facets()

    # Sorting and columns

    def set_sort_column(self, column: SortColumn) -> None:
        self._state = self._state.set_sort_column(column)

    def set_sort(self, column: SortColumn, direction: SortDirection | str) -> None:
        self._state = self._state.set_sort(column, direction)

    def toggle_column_visible(self, column: ColumnId | str) -> None:
        self._state = self._state.toggle_column_visible(column)

    # Paging

    def set_rows_per_page(self, rows_per_page: int) -> None:
        options = self.settings.rows_per_page_options
        if rows_per_page not in options:
            raise InvalidConfiguration(
                f"rows_per_page {rows_per_page} is not one of {options}"
            )
        self._state = self._state.set_rows_per_page(rows_per_page)

    def set_current_page(self, page: int) -> None:
        self._state = self._state.set_current_page(pagination.clamp_page(page, self.total_pages))

    def next_page(self) -> None:
        self.set_current_page(pagination.next_page(self._state.current_page, self.total_pages))

    def previous_page(self) -> None:
        self.set_current_page(
            pagination.previous_page(self._state.current_page, self.total_pages)
        )

    def page_links(self) -> pagination.PageLinks:
        return pagination.page_links(self.total_pages, self.settings.page_link_count)

    # Selection

    def toggle_selection(self, record_id: int) -> None:
        self._state = self._state.toggle_selection(record_id)

    def toggle_all_visible(self) -> None:
        self._state = self._state.toggle_all_visible(self._page_ids())

    def is_all_visible_selected(self) -> bool:
        return self._state.is_all_visible_selected(self._page_ids())

    def _page_ids(self) -> Sequence[int]:
        return self.render().page_ids

    def _clamp_page(self) -> None:
        clamped = pagination.clamp_page(self._state.current_page, self.total_pages)
        if clamped != self._state.current_page:
            log.debug(
                "Current page clamped",
                extra={"page": self._state.current_page, "clamped": clamped},
            )
            self._state = self._state.set_current_page(clamped)


__all__ = ["SubscriptionTable"]
