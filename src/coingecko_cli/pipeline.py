"""Search and sort over the store's view list."""

from coingecko_cli.models import MarketEntry
from coingecko_cli.state import Store


def matches(entry: MarketEntry, needle: str) -> bool:
    """Substring match on name or symbol. ``needle`` must already be casefolded."""
    return needle in entry.name.casefold() or needle in entry.symbol.casefold()


def apply_filter(store: Store, query: str) -> list[MarketEntry]:
    """Rebuild the view from the canonical list, dropping any previous sort."""
    needle = query.strip().casefold()
    if not needle:
        store.view = list(store.canonical)
    else:
        store.view = [e for e in store.canonical if matches(e, needle)]
    return store.view


def sort_by_market_cap(store: Store) -> list[MarketEntry]:
    store.view.sort(key=lambda e: e.market_cap, reverse=True)
    return store.view


def sort_by_percentage_change(store: Store) -> list[MarketEntry]:
    store.view.sort(key=lambda e: e.price_change_percentage_24h, reverse=True)
    return store.view


SORT_KEYS = {
    "market_cap": sort_by_market_cap,
    "change": sort_by_percentage_change,
}
