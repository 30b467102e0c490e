"""
Pydantic request/response models for the HTTP layer.

Field names on the wire are camelCase (matching the JSON store); snake_case
is accepted on input too. Range checks are left to the domain so that a bad
payload reports every violated constraint at once.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from stockfolio.application.use_cases.get_portfolio_summary import PortfolioSummary
from stockfolio.domain.entities.stock import Stock


class StockPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ticker: Optional[str] = None
    name: Optional[str] = None
    currency_symbol: Optional[str] = Field(default=None, alias="currencySymbol")
    sector: Optional[str] = None
    current_price: Optional[float] = Field(default=None, alias="currentPrice")
    quantity: Optional[int] = None
    purchase_price: Optional[float] = Field(default=None, alias="purchasePrice")

    def to_entity(self, ticker: Optional[str] = None) -> Stock:
        return Stock(
            ticker=ticker if ticker is not None else self.ticker,
            name=self.name,
            currency_symbol=self.currency_symbol,
            sector=self.sector,
            current_price=self.current_price,
            quantity=self.quantity,
            purchase_price=self.purchase_price,
        )


class StockResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ticker: str
    name: str
    currency_symbol: str = Field(alias="currencySymbol")
    sector: str
    current_price: float = Field(alias="currentPrice")
    quantity: int
    purchase_price: float = Field(alias="purchasePrice")

    @classmethod
    def from_entity(cls, stock: Stock) -> "StockResponse":
        return cls.model_validate(stock.to_dict())


class PortfolioSummaryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    holdings: int
    total_market_value: float = Field(alias="totalMarketValue")
    total_cost_basis: float = Field(alias="totalCostBasis")
    roi: Optional[float] = None
    market_value_by_sector: dict[str, float] = Field(alias="marketValueBySector")

    @classmethod
    def from_summary(cls, summary: PortfolioSummary) -> "PortfolioSummaryResponse":
        return cls(
            holdings=summary.holdings,
            total_market_value=summary.total_market_value,
            total_cost_basis=summary.total_cost_basis,
            roi=summary.roi,
            market_value_by_sector=summary.market_value_by_sector,
        )
