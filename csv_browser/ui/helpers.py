from __future__ import annotations

from typing import List, Sequence

from dash import dash_table, dcc, html

from csv_browser.core import engine
from csv_browser.core.dataset import Dataset, Record
from csv_browser.core.filter_state import FilterState
from csv_browser.ui.ids import column_filter_id

NONE_OPTION = {"label": "None", "value": ""}


def build_filter_control(
    dataset: Dataset,
    column: str,
    value: str = "",
    limit: int = engine.DISCRETE_FILTER_LIMIT,
) -> html.Div:
    """
    One filter control per column: a dropdown of the column's values while the
    column has at most `limit` distinct values, a free-text box otherwise.
    """
    label = f"Filter by {column}"

    if engine.filter_control_kind(dataset, column, limit) == "select":
        values = [v for v in engine.unique_values(dataset, column) if v != ""]
        control = dcc.Dropdown(
            id=column_filter_id(column),
            options=[NONE_OPTION] + [{"label": v, "value": v} for v in values],
            value=value or "",
            clearable=False,
            placeholder="None",
            className="mb-2",
        )
    else:
        control = dcc.Input(
            id=column_filter_id(column),
            type="text",
            value=value or "",
            placeholder="Contains…",
            className="form-control mb-2",
        )

    return html.Div(
        [html.Label(label, className="form-label"), control],
        className="csvb-filter",
    )


def build_filter_controls(
    dataset: Dataset,
    filters: FilterState,
    limit: int = engine.DISCRETE_FILTER_LIMIT,
) -> List[html.Div]:
    return [
        build_filter_control(dataset, col, filters.get(col), limit)
        for col in engine.discover_columns(dataset)
    ]


def records_table(columns: Sequence[str], rows: Sequence[Record]) -> dash_table.DataTable:
    """
    Styled DataTable for one page of rows. Paging and filtering happen in
    Python, so the table itself only renders what it is given.
    """
    return dash_table.DataTable(
        data=[dict(r) for r in rows],
        columns=[{"name": c, "id": c} for c in columns],

        # ---- FONT + LOOK & FEEL ----
        style_table={
            "overflowX": "auto",
        },
        style_as_list_view=True,
        style_cell={
            "fontFamily": 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif',
            "fontSize": "13px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "320px",
            "whiteSpace": "nowrap",
            "textOverflow": "ellipsis",
        },
        style_header={
            "fontFamily": 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif',
            "fontSize": "13px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={
            "borderBottom": "1px solid #e5e7eb",
        },
        page_action="none",
        sort_action="none",
        filter_action="none",
    )


def row_summary(n_visible: int, offset: int, n_filtered: int, n_total: int) -> str:
    if n_filtered == 0:
        return f"No matching rows ({n_total} total)"
    first = offset + 1
    last = offset + n_visible
    if n_visible == 0:
        return f"Page is past the last of {n_filtered} matching rows ({n_total} total)"
    return f"Showing {first}-{last} of {n_filtered} matching rows ({n_total} total)"


def status_message(text: str, kind: str = "ok") -> html.Span:
    return html.Span(text, className=f"csvb-status csvb-status-{kind}")
