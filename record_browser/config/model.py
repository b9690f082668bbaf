from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

DEFAULT_PAGE_SIZE = 10
DEFAULT_PAGE_WINDOW = 5
DEFAULT_DEBOUNCE_MS = 300
DEFAULT_EXPORT_PREFIX = "filtered_data"
DEFAULT_FETCH_TIMEOUT = 10.0


@dataclass(frozen=True)
class RecordColumns:
    """
    Semantic names for the record keys used internally by the app.

    The defaults are the keys of the shipped dataset; override them in
    global.json under "columns" for a dataset with different headers.
    """
    group_name: str = "Tên nhóm"
    code: str = "Mã"
    name: str = "Tên"
    customer_code: str = "Mã KH"
    customer_name: str = "Tên KH"
    address: str = "Địa chỉ"
    revenue: str = "Doanh số"
    upload_date: str = "Ngày Upload"

    def display_order(self) -> List[str]:
        """Record keys in the order the table shows them."""
        return [
            self.group_name,
            self.code,
            self.name,
            self.customer_code,
            self.customer_name,
            self.address,
            self.revenue,
            self.upload_date,
        ]

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> RecordColumns:
        known = {f.name for f in fields(cls)}
        return cls(**{k: str(v) for k, v in (data or {}).items() if k in known})


@dataclass(frozen=True)
class LocaleFormat:
    """Number/date conventions for rendered cells (defaults: vi-VN)."""
    group_separator: str = "."
    decimal_separator: str = ","
    currency_suffix: str = " đ"
    date_format: str = "%d/%m/%Y"
    max_fraction_digits: int = 3

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> LocaleFormat:
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})


@dataclass
class GlobalConfig:
    config_root: Path
    data_source: str
    ui_title: str = "Record Browser"
    subtitle: str = "Filter, page and export records"
    page_size: int = DEFAULT_PAGE_SIZE
    page_window: int = DEFAULT_PAGE_WINDOW
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    export_prefix: str = DEFAULT_EXPORT_PREFIX
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    columns: RecordColumns = field(default_factory=RecordColumns)
    locale: LocaleFormat = field(default_factory=LocaleFormat)

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0

    @property
    def is_remote_source(self) -> bool:
        return self.data_source.lower().startswith(("http://", "https://"))

    def resolve_data_path(self) -> Path:
        """Local data file, relative paths resolved against the config root."""
        path = Path(self.data_source)
        if path.is_absolute():
            return path
        return (self.config_root / path).resolve()
