from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from record_browser.core.exceptions import DataSourceError

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Unable to load data. Please try again."


class DataSource(ABC):
    """
    Provider of the full dataset. Implementations raise DataSourceError on
    any failure; fetch_dataset() turns that into a LoadResult.
    """

    @abstractmethod
    def fetch_records(self) -> List[Dict[str, Any]]:
        pass

    def describe(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class LoadResult:
    records: Tuple[Dict[str, Any], ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def fetch_dataset(source: DataSource) -> LoadResult:
    """Fetch boundary: never raises, failures become a user-facing message."""
    logger.info("Fetching dataset", extra={"source": source.describe()})
    try:
        records = source.fetch_records()
    except DataSourceError as e:
        logger.error(
            "Dataset fetch failed",
            extra={"source": source.describe(), "error": str(e)},
        )
        return LoadResult(error=LOAD_ERROR_MESSAGE)
    except Exception:
        logger.exception(
            "Unexpected error while fetching dataset",
            extra={"source": source.describe()},
        )
        return LoadResult(error=LOAD_ERROR_MESSAGE)

    logger.info(
        "Dataset fetched",
        extra={"source": source.describe(), "n_records": len(records)},
    )
    return LoadResult(records=tuple(records))
