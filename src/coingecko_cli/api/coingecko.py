"""CoinGecko API client — public read-only market snapshot."""

import logging
from typing import Any

import httpx

from coingecko_cli.models import MarketEntry

log = logging.getLogger(__name__)

COINGECKO_BASE = "https://api.coingecko.com/api/v3"

# Top 10 by market cap, quoted in USD, no sparkline payload.
MARKET_PARAMS = {
    "vs_currency": "usd",
    "order": "market_cap_desc",
    "per_page": "10",
    "page": "1",
    "sparkline": "false",
}


class FetchError(Exception):
    """The market snapshot could not be retrieved.

    Covers connection failures, non-2xx responses and malformed bodies alike.
    """


def _parse_entry(raw: dict[str, Any]) -> MarketEntry:
    return MarketEntry(
        name=raw.get("name", "") or "",
        symbol=raw.get("symbol", "") or "",
        image=raw.get("image", "") or "",
        current_price=float(raw.get("current_price", 0) or 0),
        total_volume=float(raw.get("total_volume", 0) or 0),
        market_cap=float(raw.get("market_cap", 0) or 0),
        # null when CoinGecko has no 24h history for the coin
        price_change_percentage_24h=float(raw.get("price_change_percentage_24h", 0) or 0),
    )


async def _get_markets(client: httpx.AsyncClient) -> Any:
    resp = await client.get(f"{COINGECKO_BASE}/coins/markets", params=MARKET_PARAMS)
    resp.raise_for_status()
    return resp.json()


async def fetch_market_data(client: httpx.AsyncClient | None = None) -> list[MarketEntry]:
    """Fetch the top coins by market cap, in the order the API returns them.

    Issues exactly one request and never retries. Pass ``client`` to reuse an
    existing ``httpx.AsyncClient``; otherwise one is opened for this call.
    """
    log.debug("GET %s/coins/markets %s", COINGECKO_BASE, MARKET_PARAMS)
    try:
        if client is None:
            async with httpx.AsyncClient() as own_client:
                data = await _get_markets(own_client)
        else:
            data = await _get_markets(client)
    except (httpx.HTTPError, ValueError) as exc:
        raise FetchError(f"market data request failed: {exc}") from exc

    if not isinstance(data, list):
        raise FetchError(f"expected a JSON array, got {type(data).__name__}")

    try:
        entries = [_parse_entry(e) for e in data]
    except (AttributeError, TypeError, ValueError) as exc:
        raise FetchError(f"malformed market entry: {exc}") from exc

    log.debug("fetched %d market entries", len(entries))
    return entries
