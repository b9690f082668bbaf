from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from record_browser.config.model import DEFAULT_EXPORT_PREFIX
from record_browser.services.storage import StorageBackend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: bytes
    media_type: str = "application/json"


class ExportService:
    """
    Serialises the whole filtered set (not just the visible page) to an
    indented JSON document named <prefix>_<ISO date>.json.
    """

    def __init__(self, prefix: str = DEFAULT_EXPORT_PREFIX, indent: int = 2) -> None:
        self.prefix = prefix
        self.indent = indent

    def filename_for(self, day: Optional[date] = None) -> str:
        day = day or date.today()
        return f"{self.prefix}_{day.isoformat()}.json"

    def build_export(self, records: Sequence[Mapping[str, Any]], day: Optional[date] = None) -> ExportFile:
        payload = [dict(r) for r in records]
        content = json.dumps(payload, indent=self.indent, ensure_ascii=False, default=str).encode("utf-8")
        export = ExportFile(filename=self.filename_for(day), content=content)
        logger.info(
            "Export built",
            extra={"export_file": export.filename, "n_records": len(payload), "n_bytes": len(content)},
        )
        return export

    def export_to(
        self,
        storage: StorageBackend,
        records: Sequence[Mapping[str, Any]],
        day: Optional[date] = None,
    ) -> str:
        export = self.build_export(records, day)
        return storage.write_bytes(export.filename, export.content)
