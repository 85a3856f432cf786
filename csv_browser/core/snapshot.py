from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from csv_browser.core.dataset import Dataset
from csv_browser.core.exceptions import DatasetSchemaError
from csv_browser.core.filter_state import FilterState

logger = logging.getLogger(__name__)

DATASET_KEY = "dataset"
FILTER_STATE_KEY = "filterState"

# Payloads written by the first JavaScript front end
LEGACY_DATASET_KEY = "csvData"
LEGACY_FILTER_STATE_KEY = "filterValues"


@dataclass(frozen=True)
class Snapshot:
    """The (Dataset, FilterState) pair persisted as one overwritable unit."""

    dataset: Dataset = field(default_factory=Dataset.empty)
    filters: FilterState = field(default_factory=FilterState)

    def to_payload(self) -> Dict[str, Any]:
        return {
            DATASET_KEY: self.dataset.to_records(),
            FILTER_STATE_KEY: self.filters.to_dict(),
        }

    @classmethod
    def from_payload(cls, payload: Any) -> Snapshot:
        """
        Read a stored payload back into typed objects.

        Anything that cannot be read as a list of records gives an empty
        Snapshot; the caller treats that the same as "nothing saved".
        """
        if not isinstance(payload, Mapping):
            logger.warning("Snapshot payload is not an object: %r", type(payload).__name__)
            return cls()

        rows = payload.get(DATASET_KEY, payload.get(LEGACY_DATASET_KEY))
        raw_filters = payload.get(FILTER_STATE_KEY, payload.get(LEGACY_FILTER_STATE_KEY))

        if not isinstance(rows, list) or not rows:
            return cls()

        first = rows[0]
        if not isinstance(first, Mapping):
            logger.warning("Snapshot dataset does not start with a record")
            return cls()

        # Blank keys are dropped, the remaining columns still load
        columns = [k for k in first if isinstance(k, str) and k.strip()]
        if len(columns) != len(first):
            logger.warning(
                "Dropping blank column names from snapshot",
                extra={"dropped": len(first) - len(columns)},
            )
        if not columns:
            return cls()

        try:
            dataset = Dataset.from_records(rows, columns=columns)
        except DatasetSchemaError:
            logger.warning("Snapshot dataset does not match its first record", exc_info=True)
            return cls()

        if raw_filters is not None and not isinstance(raw_filters, Mapping):
            logger.warning("Ignoring non-object filter state in snapshot")
            raw_filters = None

        return cls(dataset=dataset, filters=FilterState.from_dict(raw_filters))
