"""
Domain entity for a single stock holding.
Zero external dependencies. Pure Python dataclass only.

The plain constructor does not validate so that adapters can rebuild records
from storage and let the repository act as the gatekeeper; use Stock.create()
for a validated instance.
"""

import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Optional

from stockfolio.domain.errors import ValidationError

# Attribute name -> camelCase key used in the JSON document and over HTTP.
WIRE_NAMES: dict[str, str] = {
    "ticker": "ticker",
    "name": "name",
    "currency_symbol": "currencySymbol",
    "sector": "sector",
    "current_price": "currentPrice",
    "quantity": "quantity",
    "purchase_price": "purchasePrice",
}

_REQUIRED_TEXT = (
    ("ticker", "Stock ticker must not be empty"),
    ("name", "Stock name must not be empty"),
    ("currency_symbol", "Stock currency symbol must not be empty"),
    ("sector", "Stock sector must not be empty"),
)

_NON_NEGATIVE = (
    ("current_price", "Stock current price must not be negative"),
    ("quantity", "Stock quantity must not be negative"),
    ("purchase_price", "Stock purchase price must not be negative"),
)


def _is_non_negative_number(value: Any) -> bool:
    # None, bools, strings, NaN and infinities all fail.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


@dataclass
class Stock:
    ticker: str
    name: str
    currency_symbol: str
    sector: str
    current_price: float = 0.0
    quantity: int = 0
    purchase_price: float = 0.0

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "ticker" and "ticker" in self.__dict__:
            raise AttributeError("Stock ticker is fixed at creation")
        super().__setattr__(key, value)

    @classmethod
    def create(
        cls,
        ticker: str,
        name: str,
        currency_symbol: str,
        sector: str,
        current_price: float,
        quantity: int,
        purchase_price: float,
    ) -> "Stock":
        """Build a stock and raise ValidationError listing every violated constraint."""
        stock = cls(
            ticker=ticker,
            name=name,
            currency_symbol=currency_symbol,
            sector=sector,
            current_price=current_price,
            quantity=quantity,
            purchase_price=purchase_price,
        )
        stock.ensure_valid()
        return stock

    def validate(self) -> list[str]:
        """Return one message per violated invariant; empty when the stock is valid."""
        problems: list[str] = []
        for attr, message in _REQUIRED_TEXT:
            value = getattr(self, attr)
            if not isinstance(value, str) or not value.strip():
                problems.append(message)
        for attr, message in _NON_NEGATIVE:
            if not _is_non_negative_number(getattr(self, attr)):
                problems.append(message)
        return problems

    def ensure_valid(self) -> None:
        problems = self.validate()
        if problems:
            raise ValidationError("; ".join(problems), errors=problems)

    def copy(self) -> "Stock":
        return Stock(**{f.name: getattr(self, f.name) for f in fields(self)})

    # ------------------------------------------------------------------
    # Derived arithmetic
    # ------------------------------------------------------------------

    @property
    def market_value(self) -> float:
        return self.current_price * self.quantity

    @property
    def cost_basis(self) -> float:
        return self.purchase_price * self.quantity

    @property
    def roi(self) -> Optional[float]:
        """Return on investment as a fraction, or None when nothing was paid."""
        if not self.cost_basis:
            return None
        return (self.market_value - self.cost_basis) / self.cost_basis

    # ------------------------------------------------------------------
    # Wire mapping
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {WIRE_NAMES[key]: value for key, value in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Stock":
        """Rebuild a stock from a camelCase (or snake_case) record.

        Raises:
            KeyError: if ``ticker`` is missing.
            ValueError / TypeError: if a numeric field cannot be coerced.
        """
        values: dict[str, Any] = {}
        for attr, wire in WIRE_NAMES.items():
            if wire in data:
                values[attr] = data[wire]
            elif attr in data:
                values[attr] = data[attr]
        if "ticker" not in values:
            raise KeyError("ticker")
        for attr in ("current_price", "purchase_price"):
            if values.get(attr) is not None:
                values[attr] = float(values[attr])
        if values.get("quantity") is not None:
            values["quantity"] = int(values["quantity"])
        values.setdefault("name", "")
        values.setdefault("currency_symbol", "")
        values.setdefault("sector", "")
        return cls(**values)
