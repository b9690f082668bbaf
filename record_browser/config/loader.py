from __future__ import annotations

import json
import logging
import math
import os
from pathlib import Path

from record_browser.config.model import (
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_EXPORT_PREFIX,
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PAGE_WINDOW,
    GlobalConfig,
    LocaleFormat,
    RecordColumns,
)
from record_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_DATA_SOURCE = "RECORD_BROWSER_DATA_SOURCE"
DEFAULT_DATA_SOURCE = "data/data.json"


def _positive_int(raw: dict, key: str, default: int) -> int:
    value = raw.get(key, default)
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"'{key}' must be an integer, got {value!r}")
    if number < 1:
        raise ConfigError(f"'{key}' must be >= 1, got {number}")
    return number


def _positive_number(raw: dict, key: str, default: float) -> float:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"'{key}' must be a number, got {value!r}")
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not 0 < number < math.inf:
        raise ConfigError(f"'{key}' must be a positive finite number, got {value!r}")
    return number


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load configuration from a directory holding global.json.

    The data source can be overridden with RECORD_BROWSER_DATA_SOURCE.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise ConfigError(f"File not found at {global_path}")

    try:
        with global_path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    data_source = os.getenv(ENV_DATA_SOURCE, "").strip() or raw.get("data_source", DEFAULT_DATA_SOURCE)
    debounce_ms = raw.get("debounce_ms", DEFAULT_DEBOUNCE_MS)
    if not isinstance(debounce_ms, (int, float)) or debounce_ms < 0:
        raise ConfigError(f"'debounce_ms' must be a non-negative number, got {debounce_ms!r}")

    config = GlobalConfig(
        config_root=root,
        data_source=str(data_source),
        ui_title=raw.get("ui_title", "Record Browser"),
        subtitle=raw.get("subtitle", "Filter, page and export records"),
        page_size=_positive_int(raw, "page_size", DEFAULT_PAGE_SIZE),
        page_window=_positive_int(raw, "page_window", DEFAULT_PAGE_WINDOW),
        debounce_ms=int(debounce_ms),
        export_prefix=raw.get("export_prefix", DEFAULT_EXPORT_PREFIX),
        fetch_timeout=_positive_number(raw, "fetch_timeout", DEFAULT_FETCH_TIMEOUT),
        columns=RecordColumns.from_dict(raw.get("columns")),
        locale=LocaleFormat.from_dict(raw.get("locale")),
    )

    logger.info(
        "Global config loaded",
        extra={
            "data_source": config.data_source,
            "page_size": config.page_size,
            "debounce_ms": config.debounce_ms,
        },
    )
    return config
