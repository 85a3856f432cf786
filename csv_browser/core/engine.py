"""
Filtering and paging over an in-memory Dataset.

All functions are pure: they never mutate the Dataset or FilterState they
are given, and filtering keeps the source relative order of records.
"""

from __future__ import annotations

import math
from typing import List, Literal, Mapping, Sequence, Union

from csv_browser.core.dataset import Dataset, Record
from csv_browser.core.filter_state import FilterState

DISCRETE_FILTER_LIMIT = 10

ControlKind = Literal["select", "text"]


def discover_columns(dataset: Dataset) -> List[str]:
    if dataset.is_empty:
        return []
    return list(dataset.columns)


def unique_values(dataset: Dataset, column: str) -> List[str]:
    """Distinct values of one column, in first-occurrence order."""
    return list(dict.fromkeys(r.get(column, "") for r in dataset.records))


def filter_control_kind(
    dataset: Dataset,
    column: str,
    limit: int = DISCRETE_FILTER_LIMIT,
) -> ControlKind:
    return "select" if len(unique_values(dataset, column)) <= limit else "text"


def _matches(record: Record, needles: Mapping[str, str]) -> bool:
    for column, needle in needles.items():
        if needle not in record.get(column, "").casefold():
            return False
    return True


def apply_filters(
    dataset: Dataset,
    filter_state: Union[FilterState, Mapping[str, str]],
) -> List[Record]:
    patterns = filter_state.patterns if isinstance(filter_state, FilterState) else filter_state

    # Only dataset columns take part; stray patterns are ignored
    needles = {
        col: patterns[col].casefold()
        for col in dataset.columns
        if patterns.get(col)
    }
    if not needles:
        return list(dataset.records)

    return [r for r in dataset.records if _matches(r, needles)]


def paginate(filtered: Sequence[Record], page: int, page_size: int) -> List[Record]:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if page < 0:
        raise ValueError(f"page must be non-negative, got {page}")

    start = page * page_size
    return list(filtered[start:start + page_size])


def page_count(total: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return max(1, math.ceil(total / page_size))
