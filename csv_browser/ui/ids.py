from __future__ import annotations

__all__ = ["IDs", "column_filter_id"]


class IDs:
    class Store:
        DATASET = "dataset-store"
        FILTER_STATE = "filter-state"

    class Control:
        # Navbar
        ROLE_SELECT = "role-select"
        SAVE_BTN = "save-btn"
        LOAD_BTN = "load-btn"
        UPLOAD = "csv-upload"
        UPLOAD_CONTAINER = "csv-upload-container"

        # Status bar
        STATUS_BAR = "status-bar"

        # Filters + table (hidden while no dataset is loaded)
        TABLE_SECTION = "table-section"
        FILTER_CONTAINER = "filter-container"
        TABLE_CONTAINER = "table-container"
        PAGINATION = "table-pagination"
        PAGE_SIZE_SELECT = "page-size-select"
        ROW_SUMMARY = "row-summary"

    class Pattern:
        # pattern-matching "type" strings
        COLUMN_FILTER = "column-filter"


def column_filter_id(column: str) -> dict:
    return {"type": IDs.Pattern.COLUMN_FILTER, "index": column}
