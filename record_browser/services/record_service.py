from __future__ import annotations

import logging
from typing import Optional

from record_browser.core.data_source import DataSource, LoadResult, fetch_dataset

logger = logging.getLogger(__name__)


class RecordService:
    """
    Lazy, cached access to the dataset for the web surface.

    The first request pays for the fetch; later callbacks reuse the result
    until reload() is called. A failed load is cached too, so the UI keeps
    showing the error instead of retrying on every callback.
    """

    def __init__(self, source: DataSource):
        self._source = source
        self._result: Optional[LoadResult] = None

    @property
    def source(self) -> DataSource:
        return self._source

    @property
    def result(self) -> LoadResult:
        if self._result is None:
            self._result = fetch_dataset(self._source)
        return self._result

    def is_loaded(self) -> bool:
        return self._result is not None

    def reload(self) -> LoadResult:
        logger.info("Reloading dataset", extra={"source": self._source.describe()})
        self._result = None
        return self.result
