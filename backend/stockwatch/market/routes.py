"""REST endpoints for inspecting and updating the market."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel, Field

from .models import Stock
from .registry import StockMarket

logger = logging.getLogger(__name__)


class PriceRequest(BaseModel):
    price: float = Field(..., gt=0, allow_inf_nan=False, description="New price in dollars")


class PriceUpdateResponse(BaseModel):
    symbol: str
    updated: bool
    stock: dict | None = None


def _normalize(symbol: str) -> str:
    symbol = symbol.upper().strip()
    if not symbol:
        raise HTTPException(status_code=422, detail="Symbol must not be blank")
    return symbol


def create_stocks_router(market: StockMarket) -> APIRouter:
    """Create the /api/stocks router bound to a market."""
    router = APIRouter(prefix="/api/stocks", tags=["stocks"])

    @router.get("")
    def list_stocks() -> list[dict]:
        return list(market.snapshot().values())

    @router.get("/{symbol}")
    def get_stock(symbol: str) -> dict:
        stock = market.get(_normalize(symbol))
        if stock is None:
            raise HTTPException(status_code=404, detail=f"Unknown symbol: {_normalize(symbol)}")
        return stock.to_dict()

    @router.put("/{symbol}")
    def put_stock(symbol: str, body: PriceRequest) -> dict:
        """Start tracking a symbol, or reset an existing one to a new price."""
        stock = Stock(symbol=_normalize(symbol), price=body.price)
        market.add_stock(stock)
        logger.info("Tracking %s at $%.2f", stock.symbol, stock.price)
        return stock.to_dict()

    @router.post("/{symbol}/price", response_model=PriceUpdateResponse)
    def update_price(symbol: str, body: PriceRequest) -> PriceUpdateResponse:
        """Push a new price and notify observers.

        Unknown symbols are not an error: the response has ``updated: false``
        and nothing is created.
        """
        symbol = _normalize(symbol)
        stock = market.update_price(symbol, body.price)
        return PriceUpdateResponse(
            symbol=symbol,
            updated=stock is not None,
            stock=stock.to_dict() if stock is not None else None,
        )

    @router.delete("/{symbol}", status_code=204)
    def delete_stock(symbol: str) -> Response:
        market.remove_stock(_normalize(symbol))
        return Response(status_code=204)

    return router
