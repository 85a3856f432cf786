from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current per-column filters.

    Fields:

    - patterns: column name -> substring pattern. Matching is a case-insensitive
      containment test. An empty or missing pattern means the column is not
      constrained.
    """

    patterns: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def for_columns(cls, columns: Iterable[str]) -> FilterState:
        """All-empty filters for a freshly uploaded dataset."""
        return cls(patterns={col: "" for col in columns})

    def get(self, column: str) -> str:
        return self.patterns.get(column, "")

    def with_value(self, column: str, value: Optional[str]) -> FilterState:
        patterns = dict(self.patterns)
        patterns[column] = "" if value is None else str(value)
        return FilterState(patterns=patterns)

    def active(self) -> Dict[str, str]:
        """Only the columns that actually constrain the result."""
        return {col: pat for col, pat in self.patterns.items() if pat}

    def to_dict(self) -> Dict[str, str]:
        return dict(self.patterns)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> FilterState:
        if not data:
            return cls()
        return cls(
            patterns={
                str(col): "" if val is None else str(val)
                for col, val in data.items()
            }
        )
