from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List

from csv_browser.core import engine
from csv_browser.core.dataset import Dataset, Record
from csv_browser.core.filter_state import FilterState

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class PageWindow:
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class TableState:
    """
    Everything needed to render one table view.

    Any filter change or page-size change sends the view back to the first
    page; only `with_page` moves the window without touching the filters.
    """

    dataset: Dataset = field(default_factory=Dataset.empty)
    filters: FilterState = field(default_factory=FilterState)
    window: PageWindow = field(default_factory=PageWindow)

    @classmethod
    def from_upload(cls, dataset: Dataset, page_size: int = DEFAULT_PAGE_SIZE) -> TableState:
        return cls(
            dataset=dataset,
            filters=FilterState.for_columns(dataset.columns),
            window=PageWindow(0, page_size),
        )

    def with_filters(self, filters: FilterState) -> TableState:
        return replace(self, filters=filters, window=PageWindow(0, self.window.size))

    def with_page_size(self, size: int) -> TableState:
        return replace(self, window=PageWindow(0, size))

    def with_page(self, page: int) -> TableState:
        return replace(self, window=PageWindow(page, self.window.size))

    @property
    def columns(self) -> List[str]:
        return engine.discover_columns(self.dataset)

    def filtered(self) -> List[Record]:
        return engine.apply_filters(self.dataset, self.filters)

    def visible_rows(self) -> List[Record]:
        return engine.paginate(self.filtered(), self.window.page, self.window.size)

    def page_count(self) -> int:
        return engine.page_count(len(self.filtered()), self.window.size)
