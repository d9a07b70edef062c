"""SSE streaming endpoint for live prices."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Request
from fastapi.responses import StreamingResponse

from .registry import StockMarket

logger = logging.getLogger(__name__)


def create_stream_router(market: StockMarket, interval: float = 0.5) -> APIRouter:
    """Create the SSE streaming router bound to a market."""
    router = APIRouter(prefix="/api/stream", tags=["streaming"])

    @router.get("/prices")
    async def stream_prices(request: Request) -> StreamingResponse:
        """SSE endpoint for live prices.

        Emits the full market whenever it changes, checked every ``interval``
        seconds:

            data: {"AAPL": {"symbol": "AAPL", "price": 155.20, ...}, ...}
        """
        return StreamingResponse(
            _generate_events(market, request, interval),
            media_type="text/event-stream",
            headers={
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
                "X-Accel-Buffering": "no",  # Disable nginx buffering if proxied
            },
        )

    return router


async def _generate_events(
    market: StockMarket,
    request: Request,
    interval: float = 0.5,
) -> AsyncGenerator[str, None]:
    """Yield SSE-formatted price events until the client disconnects."""
    # Browser EventSource reconnects after 1s if the connection drops
    yield "retry: 1000\n\n"

    last_version = -1
    sent_any = False
    client_ip = request.client.host if request.client else "unknown"
    logger.info("SSE client connected: %s", client_ip)

    try:
        while True:
            if await request.is_disconnected():
                logger.info("SSE client disconnected: %s", client_ip)
                break

            current_version = market.version
            if current_version != last_version:
                last_version = current_version
                data = market.snapshot()
                # An empty market still gets an event once clients have seen stocks
                if data or sent_any:
                    sent_any = True
                    yield f"data: {json.dumps(data)}\n\n"

            await asyncio.sleep(interval)
    except asyncio.CancelledError:
        logger.info("SSE stream cancelled for: %s", client_ip)
