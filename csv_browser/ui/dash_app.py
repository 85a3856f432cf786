from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from csv_browser.api.gateway import register_snapshot_routes
from csv_browser.config import load_global_config
from csv_browser.services.snapshot_service import SnapshotService
from csv_browser.services.snapshot_store import InMemorySnapshotStore, SnapshotStore
from csv_browser.ui.layout.build_layout import build_layout
from csv_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from csv_browser.ui.callbacks.callbacks_io import register_io_callbacks
from csv_browser.ui.callbacks.callbacks_table import register_table_callbacks
from csv_browser.ui.callbacks.callbacks_upload import register_upload_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
    config_root: Path | str = Path("config"),
    store: Optional[SnapshotStore] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Snapshot store + gateway service (swap the store for a database later)
    snapshot_service = SnapshotService(store if store is not None else InMemorySnapshotStore())

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        snapshot_service=snapshot_service,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title

    # Bounds both the snapshot endpoint and the upload callback request
    app.server.config["MAX_CONTENT_LENGTH"] = global_config.max_request_bytes
    register_snapshot_routes(app.server, snapshot_service, global_config.api_route)

    app.layout = build_layout(ctx)

    # Register callbacks
    register_upload_callbacks(app, ctx)
    register_filter_callbacks(app, ctx)
    register_table_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "api_route": global_config.api_route},
    )
    return app
