from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from csv_browser.core.engine import DISCRETE_FILTER_LIMIT
from csv_browser.core.exceptions import ConfigError
from csv_browser.core.roles import Role

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE_OPTIONS: Tuple[int, ...] = (10, 50, 100)
DEFAULT_ROUTE = "/api/snapshot"


@dataclass
class GlobalConfig:
    ui_title: str = "CSV Browser"
    subtitle: str = "Upload, filter and share a spreadsheet"
    page_size_options: Tuple[int, ...] = DEFAULT_PAGE_SIZE_OPTIONS
    default_page_size: int = DEFAULT_PAGE_SIZE_OPTIONS[0]
    discrete_filter_limit: int = DISCRETE_FILTER_LIMIT
    max_upload_bytes: int = 25 * 1024 * 1024
    max_request_bytes: int = 50 * 1024 * 1024
    api_route: str = DEFAULT_ROUTE
    default_role: Role = Role.RETAILERS

    def validate(self) -> None:
        """Reject values that would break paging or the upload guard."""
        if not self.page_size_options or any(int(s) <= 0 for s in self.page_size_options):
            raise ConfigError(f"page_size_options must be positive: {self.page_size_options!r}")
        if self.default_page_size not in self.page_size_options:
            raise ConfigError(
                f"default_page_size {self.default_page_size} is not one of {self.page_size_options}"
            )
        if self.discrete_filter_limit < 0:
            raise ConfigError("discrete_filter_limit must be >= 0")
        if self.max_upload_bytes <= 0 or self.max_request_bytes <= 0:
            raise ConfigError("Byte limits must be positive")
        # Uploads travel base64-encoded inside a Dash callback request
        if self.max_request_bytes < self.max_upload_bytes * 4 // 3:
            raise ConfigError("max_request_bytes is too small to carry a max_upload_bytes upload")
        if not self.api_route.startswith("/"):
            raise ConfigError(f"api_route must start with '/': {self.api_route!r}")


_KNOWN_KEYS = {
    "ui_title",
    "subtitle",
    "page_size_options",
    "default_page_size",
    "discrete_filter_limit",
    "max_upload_bytes",
    "max_request_bytes",
    "api_route",
    "default_role",
}


def _from_raw(raw: Dict[str, Any]) -> GlobalConfig:
    unknown = sorted(set(raw) - _KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown global config keys: %s", ", ".join(unknown))

    defaults = GlobalConfig()
    try:
        options = tuple(int(s) for s in raw.get("page_size_options", defaults.page_size_options))
        return GlobalConfig(
            ui_title=str(raw.get("ui_title", defaults.ui_title)),
            subtitle=str(raw.get("subtitle", defaults.subtitle)),
            page_size_options=options,
            default_page_size=int(raw.get("default_page_size", options[0] if options else 0)),
            discrete_filter_limit=int(raw.get("discrete_filter_limit", defaults.discrete_filter_limit)),
            max_upload_bytes=int(raw.get("max_upload_bytes", defaults.max_upload_bytes)),
            max_request_bytes=int(raw.get("max_request_bytes", defaults.max_request_bytes)),
            api_route=str(raw.get("api_route", defaults.api_route)),
            default_role=Role(raw.get("default_role", defaults.default_role.value)),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid global config: {e}") from e


def load_global_config(root: Optional[Path | str] = None) -> GlobalConfig:
    """
    Load <root>/global.json (defaults if missing), then apply env overrides:

    - CSV_BROWSER_TITLE: ui_title
    - CSV_BROWSER_PAGE_SIZE: default_page_size
    """
    raw: Dict[str, Any] = {}
    if root is not None:
        global_path = Path(root) / "global.json"
        if global_path.is_file():
            logger.info("Loading global config", extra={"config_path": str(global_path)})
            try:
                with global_path.open() as f:
                    raw = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"{global_path} is not valid JSON: {e}") from e
            if not isinstance(raw, dict):
                raise ConfigError(f"{global_path} must contain a JSON object")
        else:
            logger.info("No global.json found, using defaults", extra={"config_root": str(root)})

    title = os.getenv("CSV_BROWSER_TITLE")
    if title:
        raw["ui_title"] = title

    page_size = os.getenv("CSV_BROWSER_PAGE_SIZE")
    if page_size:
        raw["default_page_size"] = page_size

    config = _from_raw(raw)
    config.validate()
    return config
