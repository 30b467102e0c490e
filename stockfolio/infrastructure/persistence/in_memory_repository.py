"""
Infrastructure adapter: process-local dict -> IStockRepository.

Owns the canonical ticker -> Stock map. Stocks are copied on the way in and on
the way out so callers can never alias internal state. Each operation runs
under one re-entrant lock per instance; there are no transactions.
"""

import logging
import threading
from typing import Iterable, Optional

from stockfolio.domain.entities.stock import Stock
from stockfolio.domain.errors import NotFoundError, ValidationError
from stockfolio.domain.ports.stock_repository_port import IStockRepository

LOGGER = logging.getLogger(__name__)

# Normalised attribute token -> Stock attribute.
SORTABLE_ATTRIBUTES: dict[str, str] = {
    "name": "name",
    "currentprice": "current_price",
    "sector": "sector",
    "quantity": "quantity",
    "purchaseprice": "purchase_price",
}


def resolve_sort_attribute(attribute: Optional[str]) -> str:
    """Map ``currentPrice`` / ``current_price`` / ``CURRENTPRICE`` to ``current_price``."""
    token = (attribute or "").replace("_", "").strip().lower()
    try:
        return SORTABLE_ATTRIBUTES[token]
    except KeyError:
        raise ValidationError(f"Unknown attribute for sorting: {attribute}") from None


class InMemoryStockRepository(IStockRepository):
    """Dict-backed stock store."""

    def __init__(self, stocks: Iterable[Stock] = ()) -> None:
        self._lock = threading.RLock()
        self._stocks: dict[str, Stock] = {}
        for stock in stocks:
            self._stocks[stock.ticker] = stock.copy()

    # ------------------------------------------------------------------
    # IStockRepository interface
    # ------------------------------------------------------------------

    def retrieve_all(self) -> list[Stock]:
        with self._lock:
            return [stock.copy() for stock in self._stocks.values()]

    def find_by_id(self, ticker: str) -> Optional[Stock]:
        with self._lock:
            stock = self._stocks.get(ticker)
            return stock.copy() if stock is not None else None

    def save(self, stock: Stock) -> Stock:
        self._validate(stock)
        with self._lock:
            self._stocks[stock.ticker] = stock.copy()
            LOGGER.debug("Stored stock %s", stock.ticker)
            self._persist()
        return stock

    def update(self, stock: Stock) -> Stock:
        self._validate(stock)
        with self._lock:
            if stock.ticker not in self._stocks:
                raise NotFoundError(stock.ticker)
            self._stocks[stock.ticker] = stock.copy()
            LOGGER.debug("Updated stock %s", stock.ticker)
            self._persist()
        return stock

    def delete(self, ticker: str) -> None:
        with self._lock:
            if ticker not in self._stocks:
                raise NotFoundError(ticker)
            del self._stocks[ticker]
            LOGGER.debug("Deleted stock %s", ticker)
            self._persist()

    def search_by_ticker(self, ticker: str) -> list[Stock]:
        if ticker is None:
            return []
        with self._lock:
            return [s.copy() for s in self._stocks.values() if s.ticker == ticker]

    def search_by_sector(self, sector: str) -> list[Stock]:
        if sector is None:
            return []
        wanted = sector.casefold()
        with self._lock:
            return [
                s.copy()
                for s in self._stocks.values()
                if s.sector is not None and s.sector.casefold() == wanted
            ]

    def sort_by_attribute(self, attribute: str) -> list[Stock]:
        key = resolve_sort_attribute(attribute)
        with self._lock:
            snapshot = [stock.copy() for stock in self._stocks.values()]
        return sorted(snapshot, key=lambda stock: getattr(stock, key))

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _persist(self) -> None:
        """Mirror the map to durable storage. Called with the lock held."""

    @staticmethod
    def _validate(stock: Optional[Stock]) -> None:
        if stock is None:
            raise ValidationError("Stock must not be null")
        stock.ensure_valid()
