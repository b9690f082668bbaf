from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Tuple

Record = Mapping[str, Any]


def freeze_record(raw: Mapping[str, Any]) -> Record:
    """Read-only copy of a raw record; the store never hands out mutable rows."""
    return MappingProxyType(dict(raw))


class RecordStore:
    """
    Holds the loaded dataset and the current filtered subset.

    The dataset is replaced wholesale on (re)load and never patched.
    The filtered subset is written only by the filter step and is
    always an order-preserving subsequence of the dataset.
    """

    def __init__(self, records: Iterable[Mapping[str, Any]] = ()) -> None:
        self._dataset: Tuple[Record, ...] = ()
        self._filtered: Tuple[Record, ...] = ()
        self.replace(records)

    @property
    def dataset(self) -> Tuple[Record, ...]:
        return self._dataset

    @property
    def filtered(self) -> Tuple[Record, ...]:
        return self._filtered

    @property
    def total_count(self) -> int:
        return len(self._dataset)

    @property
    def filtered_count(self) -> int:
        return len(self._filtered)

    def replace(self, records: Iterable[Mapping[str, Any]]) -> None:
        self._dataset = tuple(freeze_record(r) for r in records)
        self._filtered = self._dataset

    def set_filtered(self, records: Iterable[Record]) -> None:
        self._filtered = tuple(records)

    def clear(self) -> None:
        self._dataset = ()
        self._filtered = ()

    def __len__(self) -> int:
        return len(self._dataset)
