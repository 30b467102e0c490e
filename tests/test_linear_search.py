"""Unit tests for LinearStockSearch."""

import pytest

from stockfolio.application.search.linear_search import LinearStockSearch


@pytest.fixture
def search():
    return LinearStockSearch()


@pytest.fixture
def stocks(make_stock):
    return [
        make_stock("AAPL", name="Apple Inc.", sector="technology"),
        make_stock("XOM", name="Exxon Mobil", sector="Energy"),
        make_stock("MSFT", name="Microsoft", sector="Technology"),
        make_stock("APPL2", name="apple inc.", sector="Other"),
    ]


def test_search_by_name_is_case_insensitive_and_first_wins(search, stocks):
    found = search.search_by_name(stocks, "APPLE INC.")
    assert found is stocks[0]


def test_search_by_name_absent(search, stocks):
    assert search.search_by_name(stocks, "Tesla") is None
    assert search.search_by_name(stocks, None) is None
    assert search.search_by_name([], "Apple Inc.") is None


def test_search_by_ticker(search, stocks):
    assert search.search_by_ticker(stocks, "xom") is stocks[1]
    assert search.search_by_ticker(stocks, "TSLA") is None


def test_search_by_sector_preserves_order(search, stocks):
    found = search.search_by_sector(stocks, "Technology")
    assert [s.ticker for s in found] == ["AAPL", "MSFT"]


def test_search_by_sector_empty_when_nothing_matches(search, stocks):
    assert search.search_by_sector(stocks, "Utilities") == []
