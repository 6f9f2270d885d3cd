"""
Paginate stage and the page arithmetic behind the pagination controls.

Pages are 1-based. A page past the end yields an empty slice rather than an
error; clamping the current page is the host's job (see `clamp_page`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from subgrid.domain.models import Record
from subgrid.errors import InvalidConfiguration
from subgrid.stages.abstract import AbstractPipelineStage
from subgrid.view_state import ViewState


def _require_positive(rows_per_page: int) -> None:
    if rows_per_page <= 0:
        raise InvalidConfiguration(f"rows_per_page must be positive, got {rows_per_page}")


def total_pages(row_count: int, rows_per_page: int) -> int:
    """ceil(row_count / rows_per_page), reported as 1 for an empty set."""
    _require_positive(rows_per_page)
    return max(1, -(-row_count // rows_per_page))


def clamp_page(page: int, pages: int) -> int:
    return min(max(1, page), max(1, pages))


def next_page(page: int, pages: int) -> int:
    return clamp_page(page + 1, pages)


def previous_page(page: int, pages: int) -> int:
    return clamp_page(page - 1, pages)


@dataclass(frozen=True)
class PageLinks:
    """Numbered links shown between the previous/next controls."""

    leading: Tuple[int, ...]
    last: int | None = None

    @property
    def has_gap(self) -> bool:
        return self.last is not None


def page_links(pages: int, max_links: int = 5) -> PageLinks:
    """
    The first `max_links` page numbers, plus a jump to the last page when
    there are more pages than links.
    """
    leading = tuple(range(1, min(max_links, pages) + 1))
    return PageLinks(leading=leading, last=pages if pages > max_links else None)


def paginate(
    records: Sequence[Record], rows_per_page: int, current_page: int
) -> Tuple[Record, ...]:
    """Slice `[(page - 1) * rows_per_page, page * rows_per_page)`, clipped to bounds."""
    _require_positive(rows_per_page)
    start = max(current_page - 1, 0) * rows_per_page
    return tuple(records[start : start + rows_per_page])


def iter_pages(records: Sequence[Record], rows_per_page: int) -> List[Tuple[Record, ...]]:
    """Every page in order, 1..total_pages."""
    return [
        paginate(records, rows_per_page, page)
        for page in range(1, total_pages(len(records), rows_per_page) + 1)
    ]


class PaginateStage(AbstractPipelineStage):
    name: str = "paginate"
    description: str = "Slice the visible page out of the sorted rows."

    def apply(self, records: Sequence[Record], state: ViewState) -> Tuple[Record, ...]:
        return paginate(records, state.rows_per_page, state.current_page)


__all__ = [
    "PageLinks",
    "PaginateStage",
    "clamp_page",
    "iter_pages",
    "next_page",
    "page_links",
    "paginate",
    "previous_page",
    "total_pages",
]
