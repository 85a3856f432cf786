from __future__ import annotations

import pytest

from csv_browser.core.dataset import Dataset
from csv_browser.core.exceptions import DatasetSchemaError


def test_from_records_normalises_rows_against_columns():
    ds = Dataset.from_records(
        [
            {"a": "1", "b": "x"},
            {"a": 2},
            {"a": None, "b": "y", "extra": "dropped"},
        ],
        columns=["a", "b"],
    )

    assert ds.columns == ("a", "b")
    assert list(ds.records) == [
        {"a": "1", "b": "x"},
        {"a": "2", "b": ""},
        {"a": "", "b": "y"},
    ]


def test_columns_default_to_first_record_key_order():
    ds = Dataset.from_records([{"z": "1", "y": "2"}, {"y": "3", "z": "4"}])

    assert ds.columns == ("z", "y")
    assert ds.records[1] == {"z": "4", "y": "3"}


def test_empty_input_gives_empty_dataset():
    assert Dataset.from_records([]).is_empty
    assert Dataset.from_records(None).columns == ()
    assert Dataset.from_dict(None) == Dataset.empty()


def test_header_only_dataset_is_empty_but_keeps_columns():
    ds = Dataset.from_records([], columns=["a", "b"])

    assert ds.is_empty
    assert ds.columns == ("a", "b")


@pytest.mark.parametrize("columns", [["a", "a"], ["a", ""], ["a", "  "]])
def test_bad_columns_are_rejected(columns):
    with pytest.raises(DatasetSchemaError):
        Dataset.from_records([], columns=columns)


def test_non_mapping_record_is_rejected():
    with pytest.raises(DatasetSchemaError):
        Dataset.from_records([{"a": "1"}, ["not", "a", "dict"]])


def test_store_shape_roundtrip():
    ds = Dataset.from_records([{"a": "1", "b": "2"}], columns=["a", "b"])

    assert Dataset.from_dict(ds.to_dict()) == ds
    assert ds.to_dict() == {"columns": ["a", "b"], "records": [{"a": "1", "b": "2"}]}
