from __future__ import annotations

from subgrid import selection


def test_toggle_adds_then_removes():
    once = selection.toggle(frozenset(), 3)
    assert once == {3}
    assert selection.toggle(once, 3) == frozenset()


def test_toggle_unknown_id_is_allowed():
    assert selection.toggle(frozenset({1}), 999) == {1, 999}


def test_toggle_returns_new_set():
    original = frozenset({1, 2})
    selection.toggle(original, 2)
    assert original == {1, 2}


def test_toggle_all_visible_adds_page_and_keeps_other_pages():
    selected = frozenset({42})
    result = selection.toggle_all_visible(selected, [1, 2, 3])
    assert result == {1, 2, 3, 42}


def test_toggle_all_visible_fills_a_partially_selected_page():
    result = selection.toggle_all_visible(frozenset({2}), [1, 2, 3])
    assert result == {1, 2, 3}


def test_toggle_all_visible_on_full_page_clears_entire_selection():
    # ids 42 and 43 sit on another page; they are cleared too
    selected = frozenset({1, 2, 3, 42, 43})
    assert selection.toggle_all_visible(selected, [1, 2, 3]) == frozenset()


def test_is_all_visible_selected():
    assert selection.is_all_visible_selected({1, 2, 3}, [1, 2, 3])
    assert selection.is_all_visible_selected({1, 2, 3, 9}, [1, 2, 3])
    assert not selection.is_all_visible_selected({1, 2}, [1, 2, 3])


def test_empty_page_is_never_all_selected():
    assert not selection.is_all_visible_selected({1, 2}, [])
    assert not selection.is_all_visible_selected(frozenset(), [])


def test_toggle_all_visible_on_empty_page_keeps_selection():
    assert selection.toggle_all_visible(frozenset({5}), []) == {5}


def test_select_all_then_check_is_true_when_page_was_not_full():
    page = [4, 5, 6]
    for before in (frozenset(), frozenset({4}), frozenset({99})):
        after = selection.toggle_all_visible(before, page)
        assert selection.is_all_visible_selected(after, page)


def test_select_all_on_full_page_empties_selection():
    page = [4, 5, 6]
    for before in (frozenset(page), frozenset({4, 5, 6, 99})):
        assert selection.toggle_all_visible(before, page) == frozenset()


def test_selection_summary():
    assert selection.selection_summary({1, 2}, 6) == "2 of 6 selected"
