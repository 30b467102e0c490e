"""
Application service: business invariants on top of the stock store.

Business decisions owned here:
  - create_stock() is insert-only (the store's save() is an upsert).
  - update_stock() / delete_stock() check existence explicitly so the error
    carries a clear message.
  - Domain errors are re-raised unchanged; anything else is wrapped as
    PersistenceError naming the failed operation.

The store (IStockRepository) and search helper (IStockSearch) are injected;
no infrastructure imports appear here.
"""

import logging
from typing import Iterable, Optional

from stockfolio.domain.entities.stock import Stock
from stockfolio.domain.errors import (
    DuplicateError,
    NotFoundError,
    PersistenceError,
    StockfolioError,
    ValidationError,
)
from stockfolio.domain.ports.stock_repository_port import IStockRepository
from stockfolio.domain.ports.stock_search_port import IStockSearch

LOGGER = logging.getLogger(__name__)


class StockService:
    def __init__(self, repository: IStockRepository, search: IStockSearch) -> None:
        self._repository = repository
        self._search = search

    def get_all_stocks(self) -> list[Stock]:
        """Return every stock.

        Raises:
            PersistenceError: propagated from the store.
        """
        try:
            return self._repository.retrieve_all()
        except StockfolioError:
            LOGGER.exception("Failed to retrieve all stocks")
            raise
        except Exception as exc:
            LOGGER.exception("Failed to retrieve all stocks")
            raise PersistenceError("Failed to retrieve all stocks") from exc

    def get_by_ticker(self, ticker: str) -> Optional[Stock]:
        """Return the stock for *ticker*, or None when it is not held."""
        return self._repository.find_by_id(ticker)

    def create_stock(self, stock: Stock) -> Stock:
        """Insert a new stock.

        Raises:
            ValidationError: if *stock* is None or violates an invariant.
            DuplicateError: if the ticker is already held. Nothing is written.
            PersistenceError: if the store could not be written.
        """
        if stock is None:
            raise ValidationError("Stock must not be null")
        if self._repository.find_by_id(stock.ticker) is not None:
            LOGGER.error("Stock with ticker %s already exists", stock.ticker)
            raise DuplicateError(stock.ticker)
        return self._call("save stock", stock.ticker, self._repository.save, stock)

    def update_stock(self, stock: Stock) -> Stock:
        """Replace an existing stock.

        Raises:
            ValidationError: if *stock* or its ticker is missing, or the new
                values violate an invariant.
            NotFoundError: if the ticker is not held. Nothing is written.
            PersistenceError: if the store could not be written.
        """
        if stock is None or not stock.ticker or not str(stock.ticker).strip():
            LOGGER.error("Stock object or ticker is missing")
            raise ValidationError("Stock and its ticker must not be empty")
        if self._repository.find_by_id(stock.ticker) is None:
            LOGGER.error("Cannot update %s: stock not found", stock.ticker)
            raise NotFoundError(stock.ticker, f"Stock with ticker {stock.ticker} not found")
        return self._call("update stock", stock.ticker, self._repository.update, stock)

    def delete_stock(self, ticker: str) -> None:
        """Remove a stock.

        Raises:
            NotFoundError: if the ticker is not held.
            PersistenceError: if the store could not be written.
        """
        if not self._repository.search_by_ticker(ticker):
            LOGGER.error("Cannot delete %s: stock not found", ticker)
            raise NotFoundError(ticker)
        self._call("delete stock", ticker, self._repository.delete, ticker)

    def sort_by_attribute(self, attribute: str) -> list[Stock]:
        """Return every stock ordered by *attribute*.

        Raises:
            ValidationError: for an unknown attribute (propagated unchanged).
            PersistenceError: for any other failure.
        """
        return self._call("sort stocks", attribute, self._repository.sort_by_attribute, attribute)

    def search_by_name(self, stocks: Optional[Iterable[Stock]], name: str) -> Optional[Stock]:
        """Case-insensitive exact name match; first match wins.

        When *stocks* is None the whole store is searched.
        """
        if stocks is None:
            stocks = self.get_all_stocks()
        return self._search.search_by_name(stocks, name)

    def search_by_sector(self, sector: str) -> list[Stock]:
        """Every stock whose sector matches case-insensitively; empty when none do."""
        return self._search.search_by_sector(self.get_all_stocks(), sector)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _call(operation: str, subject: Optional[str], func, *args):
        try:
            return func(*args)
        except StockfolioError as exc:
            LOGGER.error("Failed to %s %s: %s", operation, subject, exc)
            raise
        except Exception as exc:
            LOGGER.exception("Unexpected error while trying to %s %s", operation, subject)
            raise PersistenceError(f"Failed to {operation}: {subject}") from exc
