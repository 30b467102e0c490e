"""
FastAPI entry point.

build_app() is the Composition Root: it reads Settings, builds the store
adapter and wires it into StockService. Nothing is built at import time.
Route functions only translate between HTTP and service calls; domain errors are mapped to status codes by
the exception handlers registered in create_app().

Run locally:
    uvicorn stockfolio.infrastructure.entrypoints.fastapi_app:build_app --factory --reload --port 8000
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from stockfolio.application.search.linear_search import LinearStockSearch
from stockfolio.application.services.stock_service import StockService
from stockfolio.application.use_cases.get_portfolio_summary import GetPortfolioSummaryUseCase
from stockfolio.domain.errors import (
    DuplicateError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from stockfolio.domain.ports.stock_repository_port import IStockRepository
from stockfolio.infrastructure.config.logging_setup import configure_logging
from stockfolio.infrastructure.config.settings import Settings, build_repository
from stockfolio.infrastructure.entrypoints.schemas import (
    PortfolioSummaryResponse,
    StockPayload,
    StockResponse,
)

LOGGER = logging.getLogger(__name__)


def get_service(request: Request) -> StockService:
    return request.app.state.stock_service


def get_summary_use_case(request: Request) -> GetPortfolioSummaryUseCase:
    return request.app.state.summary_use_case


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[IStockRepository] = None,
) -> FastAPI:
    """Build the API with its dependencies wired.

    Args:
        settings:   Runtime settings; loaded from the environment when omitted.
        repository: Pre-built store (tests inject an isolated one). Built from
                    *settings* when omitted.
    """
    if repository is None:
        settings = settings or Settings.load()
        repository = build_repository(settings)

    app = FastAPI(title="Stockfolio API", version="1.0")
    app.state.stock_service = StockService(repository, LinearStockSearch())
    app.state.summary_use_case = GetPortfolioSummaryUseCase(repository)

    _register_error_handlers(app)
    _register_routes(app)
    return app


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation(_: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc), "errors": exc.errors},
        )

    @app.exception_handler(RequestValidationError)
    async def _malformed(_: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Malformed request", "errors": errors},
        )

    @app.exception_handler(DuplicateError)
    async def _duplicate(_: Request, exc: DuplicateError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

    @app.exception_handler(NotFoundError)
    async def _not_found(_: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(PersistenceError)
    async def _persistence(_: Request, exc: PersistenceError) -> JSONResponse:
        LOGGER.error("Storage failure: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


def _register_routes(app: FastAPI) -> None:
    # Fixed paths are declared before /{ticker} so they are not captured by it.

    @app.get("/api/stocks", response_model=list[StockResponse])
    def list_stocks(service: StockService = Depends(get_service)):
        return [StockResponse.from_entity(s) for s in service.get_all_stocks()]

    @app.get("/api/stocks/sort", response_model=list[StockResponse])
    def sort_stocks(attribute: str, service: StockService = Depends(get_service)):
        """Sort by name, currentPrice, sector, quantity or purchasePrice."""
        return [StockResponse.from_entity(s) for s in service.sort_by_attribute(attribute)]

    @app.get("/api/stocks/summary", response_model=PortfolioSummaryResponse)
    def portfolio_summary(use_case: GetPortfolioSummaryUseCase = Depends(get_summary_use_case)):
        return PortfolioSummaryResponse.from_summary(use_case.execute())

    @app.get("/api/stocks/search/name/{name}", response_model=StockResponse)
    def search_by_name(name: str, service: StockService = Depends(get_service)):
        stock = service.search_by_name(None, name)
        if stock is None:
            raise HTTPException(status_code=404, detail=f"No stock named {name!r}")
        return StockResponse.from_entity(stock)

    @app.get("/api/stocks/search/sector/{sector}", response_model=list[StockResponse])
    def search_by_sector(sector: str, service: StockService = Depends(get_service)):
        return [StockResponse.from_entity(s) for s in service.search_by_sector(sector)]

    @app.get("/api/stocks/{ticker}", response_model=StockResponse)
    def get_stock(ticker: str, service: StockService = Depends(get_service)):
        stock = service.get_by_ticker(ticker)
        if stock is None:
            raise HTTPException(status_code=404, detail=f"Stock not found: {ticker}")
        return StockResponse.from_entity(stock)

    @app.post("/api/stocks", response_model=StockResponse, status_code=status.HTTP_201_CREATED)
    def create_stock(body: StockPayload, service: StockService = Depends(get_service)):
        return StockResponse.from_entity(service.create_stock(body.to_entity()))

    @app.put("/api/stocks/{ticker}", response_model=StockResponse)
    def update_stock(ticker: str, body: StockPayload, service: StockService = Depends(get_service)):
        if body.ticker is not None and body.ticker != ticker:
            raise ValidationError(
                f"Ticker in body ({body.ticker}) does not match ticker in path ({ticker})"
            )
        return StockResponse.from_entity(service.update_stock(body.to_entity(ticker)))

    @app.delete("/api/stocks/{ticker}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_stock(ticker: str, service: StockService = Depends(get_service)):
        service.delete_stock(ticker)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.get("/health")
    async def health():
        return {"status": "ok"}


# ---------------------------------------------------------------------------
# Composition Root: wire all dependencies once at process startup
# ---------------------------------------------------------------------------


def build_app() -> FastAPI:
    settings = Settings.load()
    configure_logging(settings.log_level)
    LOGGER.info("Starting Stockfolio API with %s storage", settings.storage)
    return create_app(settings)


def main() -> None:
    import uvicorn

    uvicorn.run(build_app(), host="127.0.0.1", port=8000)


if __name__ == "__main__":
    main()
