from __future__ import annotations

import pytest

from subgrid.domain.models import ColumnId, SortDirection, Status
from subgrid.errors import InvalidConfiguration
from subgrid.table import SubscriptionTable


def _ids(records):
    return [r.id for r in records]


def test_new_table_uses_settings_defaults(table):
    frame = table.render()
    assert frame.rows_per_page == 5
    assert frame.sort_column == ColumnId.START_DATE
    assert frame.sort_direction is SortDirection.DESC
    assert _ids(frame.rows) == [3, 1, 5, 6, 2]


def test_duplicate_ids_are_rejected(records):
    with pytest.raises(InvalidConfiguration, match="duplicated: \\[1\\]"):
        SubscriptionTable(records + (records[0],))


def test_set_current_page_is_clamped(table):
    table.set_current_page(99)
    assert table.state.current_page == 2
    table.set_current_page(-3)
    assert table.state.current_page == 1


def test_next_and_previous_page(table):
    table.next_page()
    assert table.state.current_page == 2
    table.next_page()
    assert table.state.current_page == 2
    table.previous_page()
    table.previous_page()
    assert table.state.current_page == 1


def test_rows_per_page_must_come_from_menu(table):
    with pytest.raises(InvalidConfiguration):
        table.set_rows_per_page(7)
    with pytest.raises(InvalidConfiguration):
        table.set_rows_per_page(0)


def test_rows_per_page_change_resets_page(table):
    table.set_current_page(2)
    table.set_rows_per_page(10)
    assert table.state.current_page == 1
    assert table.total_pages == 1


def test_query_change_resets_page(table):
    table.set_current_page(2)
    table.set_query("premium")
    assert table.state.current_page == 1
    assert _ids(table.render().rows) == [1, 6, 4]


def test_sort_change_keeps_page(table):
    table.set_current_page(2)
    table.set_sort_column(ColumnId.PRICE)
    assert table.state.current_page == 2
    assert table.state.sort_direction is SortDirection.ASC
    assert _ids(table.render().rows) == [3]


def test_toggle_all_visible_targets_current_page(table):
    table.toggle_selection(4)  # lives on page 2
    table.toggle_all_visible()
    assert table.state.selected_ids == {3, 1, 5, 6, 2, 4}
    assert table.is_all_visible_selected()

    table.toggle_all_visible()
    assert table.state.selected_ids == frozenset()


def test_header_checkbox_reflects_only_the_visible_page(table):
    for record_id in (3, 1, 5, 6, 2):
        table.toggle_selection(record_id)
    assert table.is_all_visible_selected()
    table.next_page()
    assert not table.is_all_visible_selected()


def test_selection_persists_across_query_sort_and_page(table):
    table.toggle_selection(2)
    table.toggle_selection(5)
    table.set_query("netflix")
    table.set_sort_column(ColumnId.NAME)
    table.set_current_page(3)
    assert table.state.selected_ids == {2, 5}


def test_replace_records_keeps_selection_and_clamps_page(table, records):
    table.toggle_selection(6)
    table.set_current_page(2)

    table.replace_records(records[:3])

    assert table.state.current_page == 1
    assert table.state.selected_ids == {6}
    frame = table.render()
    assert frame.total_count == 3
    assert 6 not in frame.page_ids


def test_replace_records_with_empty_set(table):
    table.replace_records(())
    frame = table.render()
    assert frame.rows == ()
    assert frame.total_pages == 1
    assert not table.is_all_visible_selected()


def test_facets_and_clear(table):
    table.toggle_status_facet(Status.CANCELLED)
    table.toggle_category_facet("professional")
    assert _ids(table.render().rows) == [6]
    table.clear_facets()
    assert table.render().filtered_count == 6


def test_column_visibility_does_not_change_rows(table):
    before = table.render().rows
    table.toggle_column_visible(ColumnId.STATUS)
    frame = table.render()
    assert frame.rows == before
    assert ColumnId.STATUS not in frame.visible_columns


def test_page_links(table, many_records, test_settings):
    assert table.page_links().leading == (1, 2)
    big = SubscriptionTable(many_records, settings=test_settings)
    links = big.page_links()
    assert links.leading == (1, 2, 3, 4, 5)
    assert links.last == 12
