from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure root logger for the app

    Modes:
    - JSON (default) for deployed servers
    - plain text (local runs)

    Selection Order:
        1) force_format argument ("json" or "plain") if provided
        2) env var CSV_BROWSER_LOG_FORMAT
        3) default = "json"
    """

    if force_format is not None:
        format_mode = force_format
    else:
        format_mode = os.getenv("CSV_BROWSER_LOG_FORMAT", "json").lower()

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = logging.StreamHandler()

    if format_mode == "plain":
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    else:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )

    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)

    # Werkzeug logs every Dash callback POST at INFO
    logging.getLogger("werkzeug").setLevel(max(level, logging.WARNING))
