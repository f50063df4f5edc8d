"""Session state: the fetched snapshot and the list currently on screen."""

from dataclasses import dataclass, field

from coingecko_cli.models import MarketEntry


@dataclass
class Store:
    """Holds the canonical snapshot and the derived view.

    ``canonical`` is exactly what the API returned and is only ever replaced
    wholesale. ``view`` is the filtered and/or sorted list that gets rendered;
    it always holds a subset of ``canonical``.
    """

    canonical: list[MarketEntry] = field(default_factory=list)
    view: list[MarketEntry] = field(default_factory=list)

    def replace(self, entries: list[MarketEntry]) -> None:
        """Install a fresh snapshot and reset the view to an unsorted copy."""
        self.canonical = list(entries)
        self.view = list(entries)

    def clear(self) -> None:
        self.canonical = []
        self.view = []
