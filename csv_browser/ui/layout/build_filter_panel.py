from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from csv_browser.ui.ids import IDs


def build_filter_panel() -> dbc.Card:
    # Controls are generated per column once a dataset is present
    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                html.Div(id=IDs.Control.FILTER_CONTAINER, className="csvb-filter-grid"),
            ),
        ],
        className="csvb-sidebar",
    )
