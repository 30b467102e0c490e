"""
Port (interface) for the stock store.
Infrastructure adapters (InMemoryStockRepository, JsonFileStockRepository)
must implement this interface.

save() is an upsert; insert-only semantics live in StockService.create_stock().
"""

from abc import ABC, abstractmethod
from typing import Optional

from stockfolio.domain.entities.stock import Stock


class IStockRepository(ABC):
    @abstractmethod
    def retrieve_all(self) -> list[Stock]:
        """Return copies of every stored stock.

        Raises:
            PersistenceError: if the backing storage cannot be read.
        """
        ...

    @abstractmethod
    def find_by_id(self, ticker: str) -> Optional[Stock]:
        """Return a copy of the stock stored under *ticker*, or None."""
        ...

    @abstractmethod
    def save(self, stock: Stock) -> Stock:
        """Validate, then insert or overwrite the entry at ``stock.ticker``.

        Raises:
            ValidationError: listing every violated constraint.
            PersistenceError: if the snapshot could not be written. The
                in-memory write is kept.
        """
        ...

    @abstractmethod
    def update(self, stock: Stock) -> Stock:
        """Overwrite an existing entry.

        Raises:
            NotFoundError: if ``stock.ticker`` is unknown.
            ValidationError, PersistenceError: as for save().
        """
        ...

    @abstractmethod
    def delete(self, ticker: str) -> None:
        """Remove an existing entry.

        Raises:
            NotFoundError: if *ticker* is unknown.
            PersistenceError: if the snapshot could not be written.
        """
        ...

    @abstractmethod
    def search_by_ticker(self, ticker: str) -> list[Stock]: ...

    @abstractmethod
    def search_by_sector(self, sector: str) -> list[Stock]: ...

    @abstractmethod
    def sort_by_attribute(self, attribute: str) -> list[Stock]:
        """Return every stock ordered ascending by *attribute* (stable).

        Raises:
            ValidationError: "Unknown attribute for sorting" for unrecognised names.
        """
        ...
