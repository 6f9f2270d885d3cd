from __future__ import annotations

import pytest

from subgrid.domain.models import Category, Status
from subgrid.stages.filtering import FilterStage, filter_records, matches_query
from subgrid.view_state import ViewState

ACTIVE_SAMPLE_COUNT = 4


def _ids(records):
    return [r.id for r in records]


def test_empty_query_and_facets_pass_everything(records):
    assert filter_records(records) == records


def test_query_matches_name_or_category_case_insensitively(records):
    # "WSJ Digital" is in the news category, "Apple News+" has it in the name
    assert _ids(filter_records(records, query="news")) == [3, 5]
    assert _ids(filter_records(records, query="NEWS")) == [3, 5]


def test_query_matches_substring_of_name(records):
    assert _ids(filter_records(records, query="premium")) == [1, 4, 6]


def test_query_without_matches_is_empty(records):
    assert filter_records(records, query="zzz") == ()


def test_status_facet_keeps_only_members(records):
    filtered = filter_records(records, status_facets={Status.ACTIVE})
    assert len(filtered) == ACTIVE_SAMPLE_COUNT
    assert all(r.status is Status.ACTIVE for r in filtered)


def test_facet_values_are_or_within_a_dimension(records):
    filtered = filter_records(records, status_facets={Status.EXPIRED, Status.CANCELLED})
    assert _ids(filtered) == [5, 6]


def test_dimensions_are_and_combined(records):
    filtered = filter_records(
        records,
        query="premium",
        status_facets={Status.ACTIVE},
        category_facets={Category.ENTERTAINMENT},
    )
    assert _ids(filtered) == [1, 4]


def test_plain_string_facets_match_enum_fields(records):
    assert _ids(filter_records(records, category_facets={"news"})) == [3, 5]


def test_filter_preserves_input_order(records):
    reversed_input = tuple(reversed(records))
    assert _ids(filter_records(reversed_input, query="e")) == [
        r.id for r in reversed_input if matches_query(r, "e")
    ]


def test_filter_on_empty_collection():
    assert filter_records((), query="x", status_facets={Status.ACTIVE}) == ()


@pytest.mark.parametrize("query", ["", "a", "premium", "news", "ENT", "digital", "+"])
@pytest.mark.parametrize(
    "statuses",
    [frozenset(), frozenset({Status.ACTIVE}), frozenset({Status.EXPIRED, Status.CANCELLED})],
)
@pytest.mark.parametrize(
    "categories",
    [
        frozenset(),
        frozenset({Category.NEWS}),
        frozenset({Category.ENTERTAINMENT, Category.PROFESSIONAL}),
    ],
)
def test_record_is_kept_iff_every_predicate_passes(many_records, query, statuses, categories):
    filtered = set(_ids(filter_records(many_records, query, statuses, categories)))
    for r in many_records:
        text_ok = query.casefold() in r.name.casefold() or query.casefold() in r.category.value
        status_ok = not statuses or r.status in statuses
        category_ok = not categories or r.category in categories
        assert (r.id in filtered) == (text_ok and status_ok and category_ok)


def test_empty_facet_never_excludes(many_records):
    only_status = filter_records(many_records, status_facets=frozenset())
    only_category = filter_records(many_records, category_facets=frozenset())
    assert only_status == many_records
    assert only_category == many_records


def test_stage_reads_its_inputs_from_view_state(records):
    state = ViewState().set_query("premium").toggle_status_facet("active")
    stage = FilterStage()
    assert stage.name == "filter"
    assert _ids(stage.apply(records, state)) == [1, 4]


def test_filter_is_deterministic(records):
    first = filter_records(records, query="e", status_facets={Status.ACTIVE})
    second = filter_records(records, query="e", status_facets={Status.ACTIVE})
    assert first == second
