"""
Use-case: value the whole portfolio (market value, cost basis, ROI).
Depends only on Domain ports and entities. No infrastructure imports.
"""

from dataclasses import dataclass, field
from typing import Optional

from stockfolio.domain.ports.stock_repository_port import IStockRepository


@dataclass(frozen=True)
class PortfolioSummary:
    holdings: int
    total_market_value: float
    total_cost_basis: float
    roi: Optional[float]
    market_value_by_sector: dict[str, float] = field(default_factory=dict)


class GetPortfolioSummaryUseCase:
    def __init__(self, repository: IStockRepository) -> None:
        self._repository = repository

    def execute(self) -> PortfolioSummary:
        """Aggregate every holding in the store.

        ROI is ``(market value - cost basis) / cost basis`` and is None when
        the total cost basis is zero. Sector totals are keyed by the sector
        as stored.
        """
        stocks = self._repository.retrieve_all()
        market_value = 0.0
        cost_basis = 0.0
        by_sector: dict[str, float] = {}
        for stock in stocks:
            market_value += stock.market_value
            cost_basis += stock.cost_basis
            by_sector[stock.sector] = by_sector.get(stock.sector, 0.0) + stock.market_value

        roi = (market_value - cost_basis) / cost_basis if cost_basis else None
        return PortfolioSummary(
            holdings=len(stocks),
            total_market_value=round(market_value, 4),
            total_cost_basis=round(cost_basis, 4),
            roi=round(roi, 6) if roi is not None else None,
            market_value_by_sector={k: round(v, 4) for k, v in by_sector.items()},
        )
