from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from csv_browser.core.exceptions import DatasetSchemaError

Record = Dict[str, str]


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def validate_columns(columns: Sequence[Any]) -> Tuple[str, ...]:
    out: List[str] = []
    seen: set[str] = set()
    for col in columns:
        if not isinstance(col, str) or not col.strip():
            raise DatasetSchemaError(f"Invalid column name: {col!r}")
        if col in seen:
            raise DatasetSchemaError(f"Duplicate column name: {col!r}")
        seen.add(col)
        out.append(col)
    return tuple(out)


@dataclass(frozen=True)
class Dataset:
    """
    Ordered table of string records sharing one column schema.

    - columns: column names in header order (upload) or first-record key order (load)
    - records: one dict per row, keyed by exactly `columns`

    Build instances through `from_records` so every row is normalised against
    the schema once, at ingestion time. Downstream code (filtering, paging,
    rendering) can then index `record[column]` without key checks.
    """

    columns: Tuple[str, ...] = ()
    records: Tuple[Record, ...] = ()

    @classmethod
    def empty(cls) -> Dataset:
        return cls()

    @classmethod
    def from_records(
        cls,
        records: Optional[Iterable[Any]],
        columns: Optional[Sequence[str]] = None,
    ) -> Dataset:
        rows = list(records or [])
        if columns is None:
            if not rows:
                return cls.empty()
            first = rows[0]
            if not isinstance(first, Mapping):
                raise DatasetSchemaError("records[0] must be an object.")
            columns = list(first.keys())

        schema = validate_columns(columns)

        normalised: List[Record] = []
        for i, row in enumerate(rows):
            if not isinstance(row, Mapping):
                raise DatasetSchemaError(f"records[{i}] must be an object.")
            # Missing keys become "", keys outside the schema are dropped
            normalised.append({col: _cell(row.get(col)) for col in schema})

        return cls(columns=schema, records=tuple(normalised))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Dataset:
        """Rebuild from the {"columns", "records"} shape kept in the browser store."""
        if not data:
            return cls.empty()
        return cls.from_records(data.get("records"), columns=data.get("columns"))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "columns": list(self.columns),
            "records": [dict(r) for r in self.records],
        }

    def to_records(self) -> List[Record]:
        return [dict(r) for r in self.records]

    @property
    def is_empty(self) -> bool:
        return not self.records

    def __len__(self) -> int:
        return len(self.records)
