"""
Infrastructure adapter: flat JSON document -> IStockRepository.

The whole document is loaded once at construction and rewritten wholesale
after every mutation. The document is a single object keyed by ticker:

    {"AAPL": {"ticker": "AAPL", "name": "Apple Inc.", "currencySymbol": "$",
              "sector": "Technology", "currentPrice": 150.5, "quantity": 10,
              "purchasePrice": 145.0}}

There is no append log, no file lock between load and save, and no detection
of external edits. A failed write leaves the in-memory change in place.
"""

import json
import logging
import os
from pathlib import Path
from typing import Union

from stockfolio.domain.entities.stock import Stock
from stockfolio.domain.errors import PersistenceError
from stockfolio.infrastructure.persistence.in_memory_repository import InMemoryStockRepository

LOGGER = logging.getLogger(__name__)


class JsonFileStockRepository(InMemoryStockRepository):
    """Stock store mirrored to a JSON snapshot on disk."""

    def __init__(self, path: Union[str, Path], create_if_missing: bool = False) -> None:
        super().__init__()
        self._path = Path(path)
        if create_if_missing and not self._path.exists():
            LOGGER.info("JSON store %s not found, creating an empty document", self._path)
            self._write({})
        self._stocks = self._load()
        LOGGER.info("Loaded %d stocks from %s", len(self._stocks), self._path)

    @property
    def path(self) -> Path:
        return self._path

    def _persist(self) -> None:
        self._write(self._stocks)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _load(self) -> dict[str, Stock]:
        if not self._path.is_file():
            raise PersistenceError(f"JSON file not found: {self._path}")
        try:
            with open(self._path, encoding="utf-8") as fh:
                document = json.load(fh)
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Failed to load data from JSON: {self._path}") from exc

        if not isinstance(document, dict):
            raise PersistenceError(
                f"Expected a JSON object keyed by ticker in {self._path}, "
                f"got {type(document).__name__}"
            )
        stocks: dict[str, Stock] = {}
        for ticker, record in document.items():
            if not isinstance(record, dict):
                raise PersistenceError(f"Malformed record for {ticker!r} in {self._path}")
            try:
                stock = Stock.from_dict({"ticker": ticker, **record})
            except (KeyError, TypeError, ValueError) as exc:
                raise PersistenceError(f"Malformed record for {ticker!r} in {self._path}") from exc
            problems = stock.validate()
            if stock.ticker != ticker:
                problems.append(f"ticker {stock.ticker!r} does not match its key")
            if problems:
                raise PersistenceError(
                    f"Malformed record for {ticker!r} in {self._path}: " + "; ".join(problems)
                )
            stocks[ticker] = stock
        return stocks

    def _write(self, stocks: dict[str, Stock]) -> None:
        document = {ticker: stock.to_dict() for ticker, stock in stocks.items()}
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as fh:
                json.dump(document, fh, indent=2, allow_nan=False)
                fh.write("\n")
                fh.flush()
                os.fsync(fh.fileno())
        except (OSError, ValueError) as exc:
            LOGGER.error("Failed to save data to JSON file %s: %s", self._path, exc)
            raise PersistenceError(f"Failed to save data to JSON: {self._path}") from exc
        LOGGER.debug("Saved %d stocks to %s", len(document), self._path)
