"""
Pipeline: recompute the render frame for one table view.

Usage (example from a host):
    from subgrid.pipeline import recompute

    frame = recompute(records, state)
    for row in frame.projected_rows:
        print(row)

The pipeline is pull-based: the host calls `recompute` after every ViewState
change. Nothing is cached or mutated, so repeated calls with the same inputs
return equal frames.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from subgrid import selection
from subgrid.domain.models import ColumnId, Record, SortDirection
from subgrid.projection import ordered_columns, project_row
from subgrid.stages.abstract import PipelineStage
from subgrid.stages.filtering import FilterStage
from subgrid.stages.pagination import PaginateStage, total_pages
from subgrid.stages.sorting import SortStage
from subgrid.utils.logging import get_logger
from subgrid.view_state import SortColumn, ViewState

log = get_logger(__name__)


@dataclass(frozen=True)
class RenderFrame:
    """
    Everything the render surface needs for one render cycle.
    """

    rows: Tuple[Record, ...]
    visible_columns: Tuple[ColumnId, ...]
    sort_column: SortColumn
    sort_direction: SortDirection
    current_page: int
    rows_per_page: int
    total_pages: int
    filtered_count: int
    total_count: int
    selected_ids: frozenset[int] = field(default_factory=frozenset)

    @property
    def page_ids(self) -> Tuple[int, ...]:
        return tuple(r.id for r in self.rows)

    @property
    def projected_rows(self) -> List[Dict[str, str]]:
        return [project_row(r, frozenset(self.visible_columns)) for r in self.rows]

    @property
    def all_visible_selected(self) -> bool:
        return selection.is_all_visible_selected(self.selected_ids, self.page_ids)

    @property
    def selection_summary(self) -> str:
        return selection.selection_summary(self.selected_ids, self.filtered_count)

    def is_selected(self, record_id: int) -> bool:
        return record_id in self.selected_ids

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly snapshot of the frame."""
        return {
            "rows": [
                {"id": r.id, "selected": self.is_selected(r.id), "cells": cells}
                for r, cells in zip(self.rows, self.projected_rows)
            ],
            "visible_columns": [c.value for c in self.visible_columns],
            "sort_column": str(getattr(self.sort_column, "value", self.sort_column)),
            "sort_direction": self.sort_direction.value,
            "current_page": self.current_page,
            "rows_per_page": self.rows_per_page,
            "total_pages": self.total_pages,
            "filtered_count": self.filtered_count,
            "total_count": self.total_count,
            "selected_ids": sorted(self.selected_ids),
            "all_visible_selected": self.all_visible_selected,
            "selection_summary": self.selection_summary,
        }


def default_stages() -> Tuple[PipelineStage, PipelineStage]:
    """Filter then sort. Pagination runs last and separately, it needs the filtered count."""
    return (FilterStage(), SortStage())


def derive_rows(
    records: Sequence[Record],
    state: ViewState,
    stages: Sequence[PipelineStage] | None = None,
) -> Tuple[Record, ...]:
    """Filtered and sorted rows, before pagination."""
    rows: Tuple[Record, ...] = tuple(records)
    for stage in stages if stages is not None else default_stages():
        rows = stage.apply(rows, state)
    return rows


def recompute(
    records: Sequence[Record],
    state: ViewState,
    stages: Sequence[PipelineStage] | None = None,
) -> RenderFrame:
    """
    Run filter → sort → paginate and assemble the render frame.

    Parameters
    ----------
    records : Sequence[Record]
        The full record set; never mutated.
    state : ViewState
        Current view parameters. The current page is used as given; a page
        past the end yields an empty slice.
    stages : Sequence[PipelineStage] | None
        Override the pre-pagination stages (defaults to filter, sort).
    """
    derived = derive_rows(records, state, stages)
    page = PaginateStage().apply(derived, state)
    frame = RenderFrame(
        rows=page,
        visible_columns=tuple(ordered_columns(state.visible_columns)),
        sort_column=state.sort_column,
        sort_direction=state.sort_direction,
        current_page=state.current_page,
        rows_per_page=state.rows_per_page,
        total_pages=total_pages(len(derived), state.rows_per_page),
        filtered_count=len(derived),
        total_count=len(records),
        selected_ids=state.selected_ids,
    )
    log.debug(
        "Pipeline recomputed",
        extra={
            "total": frame.total_count,
            "filtered": frame.filtered_count,
            "page": frame.current_page,
            "total_pages": frame.total_pages,
            "page_rows": len(page),
        },
    )
    return frame


__all__ = ["RenderFrame", "default_stages", "derive_rows", "recompute"]
