"""
Linear-scan implementation of IStockSearch.
Pure functions over the sequence handed in; no index is kept, a personal
portfolio never grows large enough to need one.
"""

from typing import Iterable, Optional

from stockfolio.domain.entities.stock import Stock
from stockfolio.domain.ports.stock_search_port import IStockSearch


def _same(left: Optional[str], right: Optional[str]) -> bool:
    if left is None or right is None:
        return False
    return left.casefold() == right.casefold()


class LinearStockSearch(IStockSearch):
    """Case-insensitive matching on name, ticker and sector."""

    def search_by_name(self, stocks: Iterable[Stock], target_name: str) -> Optional[Stock]:
        for stock in stocks:
            if _same(stock.name, target_name):
                return stock
        return None

    def search_by_ticker(self, stocks: Iterable[Stock], target_ticker: str) -> Optional[Stock]:
        for stock in stocks:
            if _same(stock.ticker, target_ticker):
                return stock
        return None

    def search_by_sector(self, stocks: Iterable[Stock], sector: str) -> list[Stock]:
        return [stock for stock in stocks if _same(stock.sector, sector)]
