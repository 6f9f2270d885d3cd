"""
Selection manager: pure operations over a set of selected record ids.

Selection is keyed by record id, never by row position, so it survives
re-filtering, re-sorting, paging, and record-set replacement. Ids that are
not (or no longer) in the record set are allowed and simply inert.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable


def toggle(selected: AbstractSet[int], record_id: int) -> frozenset[int]:
    """Remove `record_id` if selected, otherwise add it."""
    if record_id in selected:
        return frozenset(selected - {record_id})
    return frozenset(selected | {record_id})


def is_all_visible_selected(selected: AbstractSet[int], page_ids: Iterable[int]) -> bool:
    """
    True when the visible page is non-empty and every row on it is selected.

    Drives the checked state of the header checkbox. Ids selected on other
    pages do not uncheck it; only the visible ids are compared.
    """
    ids = frozenset(page_ids)
    return bool(ids) and ids <= selected


def toggle_all_visible(selected: AbstractSet[int], page_ids: Iterable[int]) -> frozenset[int]:
    """
    Header checkbox gesture.

    If every row on the visible page is already selected, the ENTIRE selection
    is cleared, including ids on other pages. Otherwise every visible id is
    added and nothing else is removed.
    """
    ids = frozenset(page_ids)
    if is_all_visible_selected(selected, ids):
        return frozenset()
    return frozenset(selected | ids)


def selection_summary(selected: AbstractSet[int], filtered_count: int) -> str:
    return f"{len(selected)} of {filtered_count} selected"


__all__ = [
    "is_all_visible_selected",
    "selection_summary",
    "toggle",
    "toggle_all_visible",
]
