from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from csv_browser.config import GlobalConfig
from csv_browser.services.snapshot_service import SnapshotService


@dataclass
class AppConfig:
    """
    Shared state for the Dash app, passed into layout + callback registration
    functions instead of module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    snapshot_service: Optional[SnapshotService] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.snapshot_service is None:
            raise RuntimeError("AppConfig.snapshot_service must be initialized.")
