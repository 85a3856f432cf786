from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from csv_browser.config import GlobalConfig
from csv_browser.core.roles import Role
from csv_browser.ui.ids import IDs


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    role_options = [{"label": r.label, "value": r.value} for r in Role]
    default_role = global_config.default_role

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                # Left: title
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(global_config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),

                # Right: role, save/load, upload
                html.Div(
                    [
                        dcc.Dropdown(
                            id=IDs.Control.ROLE_SELECT,
                            options=role_options,
                            value=default_role.value,
                            clearable=False,
                            searchable=False,
                            className="csvb-role-dropdown me-2",
                            style={"minWidth": "160px"},
                        ),
                        dbc.Button(
                            "Save",
                            id=IDs.Control.SAVE_BTN,
                            color="primary",
                            className="me-2",
                        ),
                        dbc.Button(
                            "Load",
                            id=IDs.Control.LOAD_BTN,
                            color="secondary",
                            className="me-2",
                        ),
                        html.Div(
                            id=IDs.Control.UPLOAD_CONTAINER,
                            style={} if default_role.can_upload else {"display": "none"},
                            children=dcc.Upload(
                                id=IDs.Control.UPLOAD,
                                children=dbc.Button("Upload CSV File", color="info"),
                                accept=".csv",
                                multiple=False,
                            ),
                        ),
                    ],
                    className="ms-auto d-flex align-items-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm csvb-navbar",
    )
