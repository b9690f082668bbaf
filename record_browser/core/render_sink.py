from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from record_browser.core.table_view import TableView


class RenderSink(ABC):
    """
    Display surface for the table pipeline (Dash, a terminal, a test recorder).

    The pipeline pushes a complete TableView after every recompute and never
    reads anything back.
    """

    @abstractmethod
    def render(self, view: TableView) -> None:
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        pass

    def show_loading(self, loading: bool) -> None:
        """Toggle the loading indicator; sinks without one can ignore it."""
        pass
