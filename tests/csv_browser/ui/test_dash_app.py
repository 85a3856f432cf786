from __future__ import annotations

import json

from csv_browser.services.snapshot_store import InMemorySnapshotStore
from csv_browser.ui.dash_app import create_dash_app
from csv_browser.ui.ids import IDs


def _walk_ids(component):
    found = []
    stack = [component]
    while stack:
        node = stack.pop()
        if isinstance(node, (list, tuple)):
            stack.extend(node)
            continue
        node_id = getattr(node, "id", None)
        if node_id is not None:
            found.append(node_id)
        children = getattr(node, "children", None)
        if children is not None and not isinstance(children, str):
            stack.append(children)
    return found


def test_layout_contains_controls_and_hidden_table(tmp_path):
    app = create_dash_app(tmp_path)

    ids = _walk_ids(app.layout)

    for expected in (
        IDs.Store.DATASET,
        IDs.Store.FILTER_STATE,
        IDs.Control.ROLE_SELECT,
        IDs.Control.SAVE_BTN,
        IDs.Control.LOAD_BTN,
        IDs.Control.UPLOAD,
        IDs.Control.PAGINATION,
        IDs.Control.PAGE_SIZE_SELECT,
        IDs.Control.FILTER_CONTAINER,
    ):
        assert expected in ids

    section = next(
        c for c in [app.layout] + list(app.layout.children)
        if getattr(c, "id", None) == IDs.Control.TABLE_SECTION
    )
    assert section.style == {"display": "none"}


def test_title_and_page_sizes_come_from_config(tmp_path):
    (tmp_path / "global.json").write_text(
        json.dumps({"ui_title": "Top deals", "page_size_options": [10, 50, 100]})
    )

    app = create_dash_app(tmp_path)

    assert app.title == "Top deals"


def test_snapshot_endpoint_is_mounted_on_server(tmp_path):
    store = InMemorySnapshotStore()
    app = create_dash_app(tmp_path, store=store)
    client = app.server.test_client()

    assert client.get("/api/snapshot").status_code == 404

    client.put("/api/snapshot", json={"dataset": [{"a": "1"}], "filterState": {}})

    assert store.read() == {"dataset": [{"a": "1"}], "filterState": {}}
    assert client.get("/api/snapshot").get_json() == {"dataset": [{"a": "1"}], "filterState": {}}
