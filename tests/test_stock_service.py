"""Unit tests for StockService business rules."""

from unittest.mock import MagicMock

import pytest

from stockfolio.application.search.linear_search import LinearStockSearch
from stockfolio.application.services.stock_service import StockService
from stockfolio.domain.entities.stock import Stock
from stockfolio.domain.errors import (
    DuplicateError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from stockfolio.domain.ports.stock_repository_port import IStockRepository


def test_create_then_get_returns_equal_stock(service, aapl):
    service.create_stock(aapl)
    assert service.get_by_ticker("AAPL") == aapl


def test_get_unknown_ticker_is_none(service):
    assert service.get_by_ticker("NOPE") is None


def test_duplicate_create_is_rejected_and_store_unchanged(service, aapl):
    service.create_stock(aapl)
    duplicate = Stock.create("AAPL", "Other Name", "$", "Other", 1.0, 1, 1.0)
    with pytest.raises(DuplicateError, match="AAPL already exists"):
        service.create_stock(duplicate)
    assert service.get_all_stocks() == [aapl]


def test_create_none_is_rejected(service):
    with pytest.raises(ValidationError):
        service.create_stock(None)


def test_create_invalid_stock_propagates_validation_error(service, make_stock):
    with pytest.raises(ValidationError) as excinfo:
        service.create_stock(make_stock("BAD", name="", quantity=-1))
    assert len(excinfo.value.errors) == 2
    assert service.get_all_stocks() == []


def test_update_unknown_ticker(service, aapl):
    with pytest.raises(NotFoundError, match="AAPL not found"):
        service.update_stock(aapl)
    assert service.get_all_stocks() == []


@pytest.mark.parametrize("ticker", ["", "   "])
def test_update_requires_ticker(service, make_stock, ticker):
    with pytest.raises(ValidationError):
        service.update_stock(make_stock(ticker))


def test_update_none_is_rejected(service):
    with pytest.raises(ValidationError):
        service.update_stock(None)


def test_update_existing(service, aapl):
    service.create_stock(aapl)
    changed = aapl.copy()
    changed.current_price = 175.25
    service.update_stock(changed)
    assert service.get_by_ticker("AAPL").current_price == 175.25


def test_delete_then_get_is_none(service, aapl):
    service.create_stock(aapl)
    service.delete_stock("AAPL")
    assert service.get_by_ticker("AAPL") is None


def test_delete_unknown(service):
    with pytest.raises(NotFoundError, match="Stock not found: NOPE"):
        service.delete_stock("NOPE")


def test_sort_by_name(service, make_stock):
    service.create_stock(make_stock("GOOGL", name="G Corp"))
    service.create_stock(make_stock("AAPL", name="A Corp"))
    assert [s.ticker for s in service.sort_by_attribute("name")] == ["AAPL", "GOOGL"]


def test_sort_unknown_attribute_keeps_validation_error(service):
    with pytest.raises(ValidationError):
        service.sort_by_attribute("bogus")


def test_sector_search_is_case_insensitive(service, make_stock):
    service.create_stock(make_stock("AAPL", sector="technology"))
    service.create_stock(make_stock("XOM", sector="Energy"))
    assert [s.ticker for s in service.search_by_sector("Technology")] == ["AAPL"]
    assert service.search_by_sector("Utilities") == []


def test_search_by_name(service, aapl, msft):
    service.create_stock(aapl)
    service.create_stock(msft)
    assert service.search_by_name(service.get_all_stocks(), "microsoft corp.").ticker == "MSFT"
    assert service.search_by_name(None, "APPLE INC.").ticker == "AAPL"
    assert service.search_by_name(None, "Tesla") is None


def test_portfolio_scenario(service, aapl, msft):
    service.create_stock(aapl)
    service.create_stock(msft)
    assert sorted(s.ticker for s in service.get_all_stocks()) == ["AAPL", "MSFT"]
    by_quantity = service.sort_by_attribute("quantity")
    assert [(s.ticker, s.quantity) for s in by_quantity] == [("MSFT", 5), ("AAPL", 10)]


def test_unexpected_failures_are_wrapped(aapl):
    repository = MagicMock(spec=IStockRepository)
    repository.find_by_id.return_value = None
    repository.save.side_effect = RuntimeError("disk on fire")
    repository.retrieve_all.side_effect = OSError("gone")
    service = StockService(repository, LinearStockSearch())

    with pytest.raises(PersistenceError) as excinfo:
        service.create_stock(aapl)
    assert isinstance(excinfo.value.__cause__, RuntimeError)

    with pytest.raises(PersistenceError):
        service.get_all_stocks()


def test_persistence_errors_propagate_unchanged(aapl):
    repository = MagicMock(spec=IStockRepository)
    repository.search_by_ticker.return_value = [aapl]
    original = PersistenceError("Failed to save data to JSON")
    repository.delete.side_effect = original
    service = StockService(repository, LinearStockSearch())

    with pytest.raises(PersistenceError) as excinfo:
        service.delete_stock("AAPL")
    assert excinfo.value is original


@pytest.mark.parametrize("price", ["abc", float("nan")])
def test_bad_price_is_a_validation_error_not_a_storage_failure(service, make_stock, price):
    with pytest.raises(ValidationError, match="current price"):
        service.create_stock(make_stock("S", current_price=price))
    assert service.get_all_stocks() == []
