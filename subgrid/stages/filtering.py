"""
Filter stage: free-text query AND status facet AND category facet.

Within a facet set the allowed values are OR-ed; an empty facet set places no
restriction on its dimension. The text query matches the record name or
category as a case-insensitive substring.
"""

from __future__ import annotations

from typing import AbstractSet, Sequence, Tuple

from subgrid.domain.models import Category, Record, Status
from subgrid.stages.abstract import AbstractPipelineStage
from subgrid.view_state import ViewState


def matches_query(record: Record, query: str) -> bool:
    if not query:
        return True
    needle = query.casefold()
    return needle in record.name.casefold() or needle in record.category.value.casefold()


def passes_facet(value, facets: AbstractSet) -> bool:
    return not facets or value in facets


def filter_records(
    records: Sequence[Record],
    query: str = "",
    status_facets: AbstractSet[Status] = frozenset(),
    category_facets: AbstractSet[Category] = frozenset(),
) -> Tuple[Record, ...]:
    """
    Reduce `records` to the ones passing every active predicate.

    Input order is preserved.
    """
    return tuple(
        r
        for r in records
        if matches_query(r, query)
        and passes_facet(r.status, status_facets)
        and passes_facet(r.category, category_facets)
    )


class FilterStage(AbstractPipelineStage):
    name: str = "filter"
    description: str = "Free-text query on name/category plus status and category facets."

    def apply(self, records: Sequence[Record], state: ViewState) -> Tuple[Record, ...]:
        return filter_records(
            records,
            query=state.query,
            status_facets=state.status_facets,
            category_facets=state.category_facets,
        )


__all__ = ["FilterStage", "filter_records", "matches_query", "passes_facet"]
