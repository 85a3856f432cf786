from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import Input, Output, State

from csv_browser.core.dataset import Dataset
from csv_browser.core.filter_state import FilterState
from csv_browser.core.table_state import PageWindow, TableState
from csv_browser.ui.helpers import records_table, row_summary
from csv_browser.ui.ids import IDs

if TYPE_CHECKING:
    from csv_browser.ui.config import AppConfig


def _table_state(
    dataset_data: Any,
    filter_data: Any,
    active_page: Optional[int],
    page_size: Optional[int],
    default_size: int,
) -> TableState:
    """Rebuild the TableState from the client stores and pager widgets."""
    size = int(page_size or default_size)
    # dbc.Pagination is 1-based
    page = max(int(active_page or 1) - 1, 0)
    return TableState(
        dataset=Dataset.from_dict(dataset_data),
        filters=FilterState.from_dict(filter_data),
        window=PageWindow(page, size),
    )


def _window_after_change(
    current: TableState,
    triggered_id: Any,
    filters: FilterState,
    page_size: int,
) -> PageWindow:
    """
    Where the pager lands after one of its inputs changed.

    A page-size change goes through `with_page_size`; a new dataset always
    arrives together with its filter state, so both go through `with_filters`.
    """
    if triggered_id == IDs.Control.PAGE_SIZE_SELECT:
        return current.with_page_size(page_size).window
    return current.with_filters(filters).window


def register_table_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    default_size = ctx.global_config.default_page_size

    # ---------------------------------------------------------
    # New data, new filters or a new page size -> first page
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.PAGINATION, "active_page"),
        Input(IDs.Store.DATASET, "data"),
        Input(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.PAGE_SIZE_SELECT, "value"),
        State(IDs.Control.PAGINATION, "active_page"),
        prevent_initial_call=True,
    )
    def reset_page(dataset_data, filter_data, page_size, active_page):
        current = _table_state(dataset_data, None, active_page, page_size, default_size)
        window = _window_after_change(
            current,
            dash.ctx.triggered_id,
            FilterState.from_dict(filter_data),
            current.window.size,
        )
        return window.page + 1

    # ---------------------------------------------------------
    # Render the visible page
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_CONTAINER, "children"),
        Output(IDs.Control.PAGINATION, "max_value"),
        Output(IDs.Control.ROW_SUMMARY, "children"),
        Input(IDs.Store.DATASET, "data"),
        Input(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.PAGINATION, "active_page"),
        Input(IDs.Control.PAGE_SIZE_SELECT, "value"),
    )
    def render_table(dataset_data, filter_data, active_page, page_size):
        state = _table_state(dataset_data, filter_data, active_page, page_size, default_size)
        if state.dataset.is_empty:
            return [], 1, ""

        rows = state.visible_rows()
        n_filtered = len(state.filtered())

        return (
            records_table(state.columns, rows),
            state.page_count(),
            row_summary(len(rows), state.window.offset, n_filtered, len(state.dataset)),
        )
