"""
Port (interface) for searching an explicit sequence of stocks.
Application adapters (e.g. LinearStockSearch) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from stockfolio.domain.entities.stock import Stock


class IStockSearch(ABC):
    @abstractmethod
    def search_by_name(self, stocks: Iterable[Stock], target_name: str) -> Optional[Stock]:
        """Return the first stock whose name matches, or None."""
        ...

    @abstractmethod
    def search_by_ticker(self, stocks: Iterable[Stock], target_ticker: str) -> Optional[Stock]:
        """Return the first stock whose ticker matches, or None."""
        ...

    @abstractmethod
    def search_by_sector(self, stocks: Iterable[Stock], sector: str) -> list[Stock]:
        """Return every stock in *sector*, preserving input order."""
        ...
