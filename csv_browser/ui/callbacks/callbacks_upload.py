from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from csv_browser.core.csv_parser import parse_upload
from csv_browser.core.exceptions import CsvParseError
from csv_browser.core.roles import Role
from csv_browser.core.table_state import TableState
from csv_browser.ui.helpers import status_message
from csv_browser.ui.ids import IDs

if TYPE_CHECKING:
    from csv_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_upload_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Show the upload control only for roles that may upload
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.UPLOAD_CONTAINER, "style"),
        Input(IDs.Control.ROLE_SELECT, "value"),
    )
    def toggle_upload_visibility(role_value: str | None):
        role = Role.parse(role_value, default=ctx.global_config.default_role)
        return {} if role.can_upload else {"display": "none"}

    # ---------------------------------------------------------
    # Parse an uploaded CSV into the dataset store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.DATASET, "data", allow_duplicate=True),
        Output(IDs.Store.FILTER_STATE, "data", allow_duplicate=True),
        Output(IDs.Control.STATUS_BAR, "children", allow_duplicate=True),
        Input(IDs.Control.UPLOAD, "contents"),
        State(IDs.Control.UPLOAD, "filename"),
        prevent_initial_call=True,
    )
    def upload_csv(contents, filename):
        if not contents:
            raise dash.exceptions.PreventUpdate

        filename = filename or "upload.csv"
        try:
            dataset = parse_upload(
                contents,
                filename,
                max_bytes=ctx.global_config.max_upload_bytes,
            )
        except CsvParseError as e:
            # Prior dataset and filters stay as they were
            logger.warning("Upload rejected", extra={"csv_filename": filename, "error": str(e)})
            return (
                dash.no_update,
                dash.no_update,
                status_message(f"Could not read '{filename}'.", "error"),
            )

        state = TableState.from_upload(dataset, ctx.global_config.default_page_size)
        return (
            state.dataset.to_dict(),
            state.filters.to_dict(),
            status_message(f"Loaded {len(dataset)} rows from '{filename}'."),
        )
