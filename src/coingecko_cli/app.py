"""The market board: owns the session store and redraws on every action."""

import logging
from typing import Awaitable, Callable

from rich.console import Console

from coingecko_cli.api.coingecko import FetchError, fetch_market_data
from coingecko_cli.display.tables import console, render_table, show_error
from coingecko_cli.models import MarketEntry
from coingecko_cli.pipeline import (
    apply_filter,
    sort_by_market_cap,
    sort_by_percentage_change,
)
from coingecko_cli.state import Store

log = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch data. Please try again later."

Fetcher = Callable[[], Awaitable[list[MarketEntry]]]


class Board:
    """Wires fetch, search, sort and rendering around one Store.

    With ``auto_render`` off, actions only update the store and the caller
    decides when to draw; the fetch error is always shown.
    """

    def __init__(
        self,
        fetch: Fetcher | None = None,
        out: Console | None = None,
        auto_render: bool = True,
    ) -> None:
        self.store = Store()
        self.out = out or console
        self.auto_render = auto_render
        self._fetch = fetch or fetch_market_data

    async def load(self) -> bool:
        """Fetch the snapshot once. Returns False after showing the error row."""
        try:
            entries = await self._fetch()
        except FetchError:
            log.debug("initial load failed", exc_info=True)
            self.store.clear()
            show_error(FETCH_ERROR_MESSAGE, self.out)
            return False

        self.store.replace(entries)
        self._refresh()
        return True

    def search(self, query: str) -> list[MarketEntry]:
        view = apply_filter(self.store, query)
        self._refresh()
        return view

    def sort_by_market_cap(self) -> list[MarketEntry]:
        view = sort_by_market_cap(self.store)
        self._refresh()
        return view

    def sort_by_percentage_change(self) -> list[MarketEntry]:
        view = sort_by_percentage_change(self.store)
        self._refresh()
        return view

    def render(self) -> None:
        render_table(self.store.view, self.out)

    def _refresh(self) -> None:
        if self.auto_render:
            self.render()
