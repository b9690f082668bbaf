from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any, Dict, List

from record_browser.config.model import GlobalConfig
from record_browser.core.data_source import DataSource
from record_browser.core.exceptions import DataSourceError

logger = logging.getLogger(__name__)


def _ensure_record_list(payload: Any, origin: str) -> List[Dict[str, Any]]:
    """Shape check only: a JSON array of objects. Field contents are not validated."""
    if not isinstance(payload, list):
        raise DataSourceError(f"{origin}: expected a JSON array, got {type(payload).__name__}")
    for idx, item in enumerate(payload):
        if not isinstance(item, dict):
            raise DataSourceError(f"{origin}: item {idx} is not an object")
    return payload


class JsonFileDataSource(DataSource):
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    def fetch_records(self) -> List[Dict[str, Any]]:
        try:
            with self.path.open(encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError as e:
            raise DataSourceError(f"Data file not found: {self.path}") from e
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DataSourceError(f"Could not read {self.path}: {e}") from e
        return _ensure_record_list(payload, str(self.path))


class UrlDataSource(DataSource):
    def __init__(self, url: str, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout

    def describe(self) -> str:
        return self.url

    def fetch_records(self) -> List[Dict[str, Any]]:
        req = urllib.request.Request(self.url, headers={"Accept": "application/json"})
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                status = getattr(resp, "status", 200)
                if status != 200:
                    raise DataSourceError(f"{self.url} responded with HTTP {status}")
                payload = json.loads(resp.read().decode("utf-8"))
        except urllib.error.HTTPError as e:
            raise DataSourceError(f"{self.url} responded with HTTP {e.code}") from e
        except (urllib.error.URLError, OSError) as e:
            raise DataSourceError(f"Could not reach {self.url}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DataSourceError(f"{self.url} did not return valid JSON: {e}") from e
        return _ensure_record_list(payload, self.url)


def data_source_from_config(config: GlobalConfig) -> DataSource:
    if config.is_remote_source:
        return UrlDataSource(config.data_source, timeout=config.fetch_timeout)
    return JsonFileDataSource(config.resolve_data_path())
