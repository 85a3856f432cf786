from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, exceptions

from csv_browser.core.dataset import Dataset
from csv_browser.core.exceptions import DatasetSchemaError, SnapshotError
from csv_browser.core.filter_state import FilterState
from csv_browser.core.snapshot import Snapshot
from csv_browser.services.snapshot_service import LoadOutcome
from csv_browser.ui.helpers import status_message
from csv_browser.ui.ids import IDs

if TYPE_CHECKING:
    from csv_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

EMPTY_MESSAGES = {
    LoadOutcome.NOT_FOUND: "Nothing has been saved yet.",
    LoadOutcome.EMPTY: "Saved dataset is empty.",
}


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # 1. Save current dataset + filters
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.STATUS_BAR, "children", allow_duplicate=True),
        Input(IDs.Control.SAVE_BTN, "n_clicks"),
        State(IDs.Store.DATASET, "data"),
        State(IDs.Store.FILTER_STATE, "data"),
        prevent_initial_call=True,
    )
    def save_snapshot(n_clicks, dataset_data, filter_data):
        if not n_clicks:
            raise exceptions.PreventUpdate

        try:
            snapshot = Snapshot(
                dataset=Dataset.from_dict(dataset_data),
                filters=FilterState.from_dict(filter_data),
            )
            ctx.snapshot_service.save_snapshot(snapshot)
        except (SnapshotError, DatasetSchemaError) as e:
            logger.error("Save failed: %s", str(e))
            return status_message("Failed to save data.", "error")

        return status_message("Data saved successfully!")

    # ---------------------------------------------------------
    # 2. Load the saved snapshot, replacing dataset + filters
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.DATASET, "data", allow_duplicate=True),
        Output(IDs.Store.FILTER_STATE, "data", allow_duplicate=True),
        Output(IDs.Control.STATUS_BAR, "children", allow_duplicate=True),
        Input(IDs.Control.LOAD_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def load_snapshot(n_clicks):
        if not n_clicks:
            raise exceptions.PreventUpdate

        try:
            result = ctx.snapshot_service.load_snapshot()
        except SnapshotError as e:
            # Keep whatever is on screen
            logger.error("Load failed: %s", str(e))
            return dash.no_update, dash.no_update, status_message("Failed to load data.", "error")

        if not result.found:
            logger.warning("No data found on load", extra={"outcome": result.outcome.value})
            return (
                Dataset.empty().to_dict(),
                {},
                status_message(EMPTY_MESSAGES[result.outcome], "warn"),
            )

        snapshot = result.snapshot
        return (
            snapshot.dataset.to_dict(),
            snapshot.filters.to_dict(),
            status_message(f"Loaded {len(snapshot.dataset)} saved rows."),
        )
