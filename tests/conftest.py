"""Shared pytest fixtures for the stockfolio test-suite."""

import json

import pytest

from stockfolio.application.search.linear_search import LinearStockSearch
from stockfolio.application.services.stock_service import StockService
from stockfolio.domain.entities.stock import Stock
from stockfolio.infrastructure.persistence.in_memory_repository import (
    InMemoryStockRepository,
)


def _make_stock(ticker: str = "AAPL", **overrides) -> Stock:
    values = {
        "ticker": ticker,
        "name": f"{ticker} Corp",
        "currency_symbol": "$",
        "sector": "Technology",
        "current_price": 100.0,
        "quantity": 1,
        "purchase_price": 90.0,
    }
    values.update(overrides)
    return Stock(**values)


@pytest.fixture
def make_stock():
    """Factory for unvalidated stocks with sensible defaults."""
    return _make_stock


@pytest.fixture
def aapl() -> Stock:
    return Stock.create("AAPL", "Apple Inc.", "$", "Technology", 150.50, 10, 145.00)


@pytest.fixture
def msft() -> Stock:
    return Stock.create("MSFT", "Microsoft Corp.", "$", "Technology", 210.40, 5, 200.00)


@pytest.fixture
def repository() -> InMemoryStockRepository:
    return InMemoryStockRepository()


@pytest.fixture
def service(repository) -> StockService:
    return StockService(repository, LinearStockSearch())


@pytest.fixture
def json_path(tmp_path):
    """A JSON store on disk pre-seeded with one holding."""
    path = tmp_path / "stocks.json"
    path.write_text(
        json.dumps(
            {
                "GOOGL": {
                    "ticker": "GOOGL",
                    "name": "Alphabet Inc.",
                    "currencySymbol": "$",
                    "sector": "Communication Services",
                    "currentPrice": 2800.0,
                    "quantity": 2,
                    "purchasePrice": 2500.0,
                }
            }
        )
    )
    return path
