from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import ALL, Input, Output, State, exceptions

from csv_browser.core.dataset import Dataset
from csv_browser.core.filter_state import FilterState
from csv_browser.ui.helpers import build_filter_controls
from csv_browser.ui.ids import IDs

if TYPE_CHECKING:
    from csv_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

HIDDEN = {"display": "none"}


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Rebuild the filter controls whenever the dataset is replaced
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.FILTER_CONTAINER, "children"),
        Output(IDs.Control.TABLE_SECTION, "style"),
        Input(IDs.Store.DATASET, "data"),
        State(IDs.Store.FILTER_STATE, "data"),
    )
    def render_filter_controls(dataset_data, filter_data):
        dataset = Dataset.from_dict(dataset_data)
        if dataset.is_empty:
            return [], HIDDEN

        filters = FilterState.from_dict(filter_data)
        controls = build_filter_controls(
            dataset,
            filters,
            limit=ctx.global_config.discrete_filter_limit,
        )
        return controls, {}

    # ---------------------------------------------------------
    # Any control edit -> new filter state
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data", allow_duplicate=True),
        Input({"type": IDs.Pattern.COLUMN_FILTER, "index": ALL}, "value"),
        State({"type": IDs.Pattern.COLUMN_FILTER, "index": ALL}, "id"),
        State(IDs.Store.FILTER_STATE, "data"),
        prevent_initial_call=True,
    )
    def update_filter_state(values, ids, filter_data):
        current = FilterState.from_dict(filter_data)

        updated = current
        for control_id, value in zip(ids, values):
            updated = updated.with_value(control_id["index"], value)

        # Freshly rendered controls echo the stored values back; that is not an edit
        if updated == current:
            raise exceptions.PreventUpdate

        logger.debug("Filters changed", extra={"filters": updated.active()})
        return updated.to_dict()
