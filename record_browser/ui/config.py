from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from record_browser.config.model import GlobalConfig
from record_browser.core.table_state import TableState
from record_browser.services.export_service import ExportService
from record_browser.services.record_service import RecordService


@dataclass
class AppConfig:
    """
    Shared state for the Dash app: loaded config plus the services the
    callbacks need. Passed into layout + callback registration instead of
    module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    record_service: Optional[RecordService] = None
    export_service: Optional[ExportService] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.record_service is None:
            raise RuntimeError("AppConfig.record_service must be initialized.")
        if self.export_service is None:
            raise RuntimeError("AppConfig.export_service must be initialized.")

    def new_table_state(self) -> TableState:
        cfg = self.global_config
        return TableState(
            columns=cfg.columns,
            page_size=cfg.page_size,
            window_width=cfg.page_window,
        )
