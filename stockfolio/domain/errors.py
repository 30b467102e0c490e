"""
Domain error taxonomy for the stock ledger.
Zero external dependencies. Entrypoints translate these into transport-level
responses (see infrastructure/entrypoints/fastapi_app.py).
"""

from typing import Optional


class StockfolioError(Exception):
    """Base class for every error raised by the domain and application layers."""


class ValidationError(StockfolioError):
    """Malformed input: empty required field, negative number, unknown sort attribute.

    ``errors`` lists every violated constraint, not just the first one.
    """

    def __init__(self, message: str, errors: Optional[list[str]] = None) -> None:
        super().__init__(message)
        self.errors: list[str] = list(errors) if errors else [message]


class NotFoundError(StockfolioError):
    """The referenced ticker does not exist. No state change occurred."""

    def __init__(self, ticker: Optional[str], message: Optional[str] = None) -> None:
        super().__init__(message or f"Stock not found: {ticker}")
        self.ticker = ticker


class DuplicateError(StockfolioError):
    """Attempted to create a ticker that already exists. No state change occurred."""

    def __init__(self, ticker: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Stock with ticker {ticker} already exists.")
        self.ticker = ticker


class PersistenceError(StockfolioError):
    """The backing storage could not be read or written.

    When raised from a mutating call the in-memory write has already happened;
    it is not rolled back.
    """
