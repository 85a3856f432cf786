from __future__ import annotations

from csv_browser.core.filter_state import FilterState


def test_for_columns_is_all_empty():
    st = FilterState.for_columns(["a", "b"])

    assert st.to_dict() == {"a": "", "b": ""}
    assert st.active() == {}


def test_with_value_returns_new_state():
    st = FilterState.for_columns(["a", "b"])

    updated = st.with_value("a", "x")

    assert st.get("a") == ""
    assert updated.get("a") == "x"
    assert updated.active() == {"a": "x"}
    assert updated.with_value("a", None).get("a") == ""


def test_get_missing_column_is_empty():
    assert FilterState().get("anything") == ""


def test_filter_state_to_from_dict_roundtrip():
    st = FilterState({"name": "app", "price": ""})

    rebuilt = FilterState.from_dict(st.to_dict())

    assert rebuilt == st


def test_from_dict_coerces_values():
    st = FilterState.from_dict({"price": 1, "name": None})

    assert st.to_dict() == {"price": "1", "name": ""}
    assert FilterState.from_dict(None) == FilterState()
