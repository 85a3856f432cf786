from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from csv_browser.config import GlobalConfig
from csv_browser.ui.ids import IDs


def build_table_panel(global_config: GlobalConfig) -> dbc.Card:
    page_size_options = [
        {"label": f"{size} rows", "value": size}
        for size in global_config.page_size_options
    ]

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Rows"),
                        html.Small(id=IDs.Control.ROW_SUMMARY, className="text-muted ms-auto"),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    dcc.Loading(
                        id="table-loading",
                        type="default",
                        children=html.Div(id=IDs.Control.TABLE_CONTAINER),
                    ),
                    html.Div(
                        [
                            dcc.Dropdown(
                                id=IDs.Control.PAGE_SIZE_SELECT,
                                options=page_size_options,
                                value=global_config.default_page_size,
                                clearable=False,
                                searchable=False,
                                style={"width": "130px"},
                                className="me-3",
                            ),
                            dbc.Pagination(
                                id=IDs.Control.PAGINATION,
                                max_value=1,
                                active_page=1,
                                first_last=True,
                                previous_next=True,
                                fully_expanded=False,
                                className="mb-0",
                            ),
                        ],
                        className="d-flex justify-content-end align-items-center mt-2",
                    ),
                ],
                className="csvb-main-body",
            ),
        ],
        className="csvb-maincard",
    )
