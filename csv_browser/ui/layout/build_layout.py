from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from csv_browser.ui.ids import IDs
from csv_browser.ui.layout.build_filter_panel import build_filter_panel
from csv_browser.ui.layout.build_navbar import build_navbar
from csv_browser.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from csv_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    return dbc.Container(
        fluid=True,
        className="csvb-root",
        children=[
            build_navbar(ctx.global_config),

            # App-level stores
            dcc.Store(id=IDs.Store.DATASET, data={"columns": [], "records": []}),
            dcc.Store(id=IDs.Store.FILTER_STATE, data={}),

            html.Div(id=IDs.Control.STATUS_BAR, className="csvb-status-bar small mt-2"),

            # Hidden until a non-empty dataset is uploaded or loaded
            html.Div(
                id=IDs.Control.TABLE_SECTION,
                style={"display": "none"},
                children=dbc.Row(
                    [
                        dbc.Col(build_filter_panel(), md=3, className="mt-3"),
                        dbc.Col(build_table_panel(ctx.global_config), md=9, className="mt-3"),
                    ],
                    className="gx-3",
                ),
            ),
        ],
    )
