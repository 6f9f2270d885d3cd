"""
ViewState: every user-adjustable parameter of one table view.

The state is an immutable value object. Each mutator returns a new ViewState
and leaves the receiver untouched, which keeps every pipeline stage a pure
function of (records, state).

Page-reset rules:
- changing the query, either facet set, or rows-per-page resets the page to 1;
- changing the sort or the visible columns keeps the page;
- the selection is never pruned implicitly.
"""

from __future__ import annotations

from typing import Iterable, Union

from pydantic import BaseModel, Field

from subgrid import selection
from subgrid.config import Settings
from subgrid.domain.models import (
    ALL_COLUMNS,
    Category,
    ColumnId,
    SortDirection,
    Status,
)
from subgrid.errors import InvalidConfiguration

# Unrecognised column ids are tolerated and sort as identity.
SortColumn = Union[ColumnId, str]


class ViewState(BaseModel):
    query: str = ""
    status_facets: frozenset[Status] = Field(default_factory=frozenset)
    category_facets: frozenset[Category] = Field(default_factory=frozenset)
    visible_columns: frozenset[ColumnId] = Field(default_factory=lambda: ALL_COLUMNS)
    sort_column: SortColumn = ColumnId.START_DATE
    sort_direction: SortDirection = SortDirection.DESC
    rows_per_page: int = Field(5, gt=0)
    current_page: int = Field(1, ge=1)
    selected_ids: frozenset[int] = Field(default_factory=frozenset)

    model_config = {"frozen": True}

    @classmethod
    def from_settings(cls, settings: Settings) -> "ViewState":
        """Defaults for a fresh table view, taken from configuration."""
        if settings.default_rows_per_page not in settings.rows_per_page_options:
            raise InvalidConfiguration(
                f"default rows per page {settings.default_rows_per_page} is not one of "
                f"{settings.rows_per_page_options}"
            )
        return cls(
            sort_column=_coerce_column(settings.default_sort_column),
            sort_direction=SortDirection(settings.default_sort_direction),
            rows_per_page=settings.default_rows_per_page,
        )

    def _replace(self, **changes) -> "ViewState":
        return self.model_copy(update=changes)

    # Filters

    def set_query(self, query: str) -> "ViewState":
        return self._replace(query=query, current_page=1)

    def toggle_status_facet(self, status: Status | str) -> "ViewState":
        return self._replace(
            status_facets=_toggle_member(self.status_facets, Status(status)),
            current_page=1,
        )

    def toggle_category_facet(self, category: Category | str) -> "ViewState":
        return self._replace(
            category_facets=_toggle_member(self.category_facets, Category(category)),
            current_page=1,
        )

    def clear_facets(self) -> "ViewState":
        return self._replace(
            status_facets=frozenset(), category_facets=frozenset(), current_page=1
        )

    # Sorting

    def set_sort_column(self, column: SortColumn) -> "ViewState":
        """
        Header click: the active column flips direction, any other column
        becomes active in ascending order.
        """
        column = _coerce_column(column)
        if column == self.sort_column:
            return self._replace(sort_direction=self.sort_direction.flipped())
        return self._replace(sort_column=column, sort_direction=SortDirection.ASC)

    def set_sort(self, column: SortColumn, direction: SortDirection | str) -> "ViewState":
        return self._replace(
            sort_column=_coerce_column(column), sort_direction=SortDirection(direction)
        )

    # Columns

    def toggle_column_visible(self, column: ColumnId | str) -> "ViewState":
        return self._replace(
            visible_columns=_toggle_member(self.visible_columns, ColumnId(column))
        )

    # Paging

    def set_rows_per_page(self, rows_per_page: int) -> "ViewState":
        if rows_per_page <= 0:
            raise InvalidConfiguration(f"rows_per_page must be positive, got {rows_per_page}")
        return self._replace(rows_per_page=rows_per_page, current_page=1)

    def set_current_page(self, page: int) -> "ViewState":
        if page < 1:
            raise InvalidConfiguration(f"current_page is 1-based, got {page}")
        return self._replace(current_page=page)

    # Selection

    def toggle_selection(self, record_id: int) -> "ViewState":
        return self._replace(selected_ids=selection.toggle(self.selected_ids, record_id))

    def toggle_all_visible(self, page_ids: Iterable[int]) -> "ViewState":
        return self._replace(
            selected_ids=selection.toggle_all_visible(self.selected_ids, page_ids)
        )

    def is_all_visible_selected(self, page_ids: Iterable[int]) -> bool:
        return selection.is_all_visible_selected(self.selected_ids, page_ids)

    def clear_selection(self) -> "ViewState":
        return self._replace(selected_ids=frozenset())


def _toggle_member(members: frozenset, value) -> frozenset:
    if value in members:
        return members - {value}
    return members | {value}


def _coerce_column(column: SortColumn) -> SortColumn:
    try:
        return ColumnId(column)
    except ValueError:
        return column


__all__ = ["SortColumn", "ViewState"]
