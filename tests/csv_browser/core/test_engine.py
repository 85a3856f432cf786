from __future__ import annotations

import pytest

from csv_browser.core import engine
from csv_browser.core.dataset import Dataset
from csv_browser.core.filter_state import FilterState


def _fruit_dataset() -> Dataset:
    return Dataset.from_records(
        [
            {"name": "Apple", "price": "1"},
            {"name": "Banana", "price": "2"},
            {"name": "Cherry", "price": "1"},
        ],
        columns=["name", "price"],
    )


def test_price_filter_keeps_matching_rows_in_order():
    ds = _fruit_dataset()

    filtered = engine.apply_filters(ds, FilterState({"name": "", "price": "1"}))

    assert [r["name"] for r in filtered] == ["Apple", "Cherry"]


def test_paging_over_filtered_rows():
    ds = _fruit_dataset()
    filtered = engine.apply_filters(ds, {"price": "1"})

    assert engine.paginate(filtered, page=1, page_size=1) == [{"name": "Cherry", "price": "1"}]
    assert engine.paginate(filtered, page=5, page_size=1) == []


def test_empty_filter_state_is_identity():
    ds = _fruit_dataset()

    assert engine.apply_filters(ds, FilterState()) == list(ds.records)
    assert engine.apply_filters(ds, FilterState.for_columns(ds.columns)) == list(ds.records)


def test_filter_is_case_insensitive_substring():
    ds = _fruit_dataset()

    filtered = engine.apply_filters(ds, {"name": "AN"})

    assert [r["name"] for r in filtered] == ["Banana"]


def test_all_patterns_must_match():
    ds = _fruit_dataset()

    filtered = engine.apply_filters(ds, {"name": "e", "price": "1"})

    assert [r["name"] for r in filtered] == ["Apple", "Cherry"]
    assert engine.apply_filters(ds, {"name": "e", "price": "2"}) == []


def test_filtered_rows_are_an_ordered_subsequence():
    ds = Dataset.from_records(
        [{"k": v} for v in ["ab", "b", "AB", "c", "xab", "ba"]],
        columns=["k"],
    )

    filtered = engine.apply_filters(ds, {"k": "ab"})

    assert [r["k"] for r in filtered] == ["ab", "AB", "xab"]
    positions = [list(ds.records).index(r) for r in filtered]
    assert positions == sorted(positions)


def test_missing_value_never_matches_non_empty_pattern():
    ds = Dataset.from_records(
        [{"name": "Apple", "colour": "red"}, {"name": "Kiwi"}],
        columns=["name", "colour"],
    )

    filtered = engine.apply_filters(ds, {"colour": "r"})

    assert [r["name"] for r in filtered] == ["Apple"]


def test_patterns_for_unknown_columns_are_ignored():
    ds = _fruit_dataset()

    assert engine.apply_filters(ds, {"weight": "heavy"}) == list(ds.records)


def test_no_match_gives_empty_result_and_empty_page():
    ds = _fruit_dataset()

    filtered = engine.apply_filters(ds, {"name": "durian"})

    assert filtered == []
    assert engine.paginate(filtered, 0, 10) == []
    assert engine.page_count(len(filtered), 10) == 1


@pytest.mark.parametrize("page", [0, 1, 2, 3, 7])
def test_paginate_size_bounds(page):
    rows = [{"i": str(i)} for i in range(23)]

    visible = engine.paginate(rows, page, 10)

    assert len(visible) <= 10
    assert len(visible) >= max(0, min(10, len(rows) - page * 10))
    assert visible == engine.paginate(rows, page, 10)


def test_paginate_rejects_bad_window():
    with pytest.raises(ValueError):
        engine.paginate([], 0, 0)
    with pytest.raises(ValueError):
        engine.paginate([], -1, 10)


def test_page_count():
    assert engine.page_count(0, 10) == 1
    assert engine.page_count(10, 10) == 1
    assert engine.page_count(11, 10) == 2
    assert engine.page_count(100, 50) == 2


def test_discover_columns_uses_header_order():
    ds = Dataset.from_records([{"b": "1", "a": "2"}], columns=["b", "a"])

    assert engine.discover_columns(ds) == ["b", "a"]
    assert engine.discover_columns(Dataset.empty()) == []


def test_unique_values_first_occurrence_order():
    ds = Dataset.from_records(
        [{"c": "2"}, {"c": "1"}, {"c": "2"}, {"c": None}, {"c": "3"}],
        columns=["c"],
    )

    assert engine.unique_values(ds, "c") == ["2", "1", "", "3"]


def test_control_switches_to_text_above_ten_distinct_values():
    values = ["1", "2", "1", "3", "4", "5", "6", "7", "8", "9", "10"]
    ds = Dataset.from_records([{"n": v} for v in values], columns=["n"])

    assert len(engine.unique_values(ds, "n")) == 10
    assert engine.filter_control_kind(ds, "n") == "select"

    ds = Dataset.from_records([{"n": v} for v in values + ["11"]], columns=["n"])

    assert len(engine.unique_values(ds, "n")) == 11
    assert engine.filter_control_kind(ds, "n") == "text"
