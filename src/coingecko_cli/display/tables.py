"""Rich table builders for the market board."""

from dataclasses import dataclass

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich import box
from rich.text import Text

from coingecko_cli.models import MarketEntry
from coingecko_cli.display.format import fmt_change, fmt_usd

console = Console()

NO_RESULTS_MESSAGE = "No cryptocurrencies found matching your search."

# style class -> rich style
CHANGE_STYLES = {
    "positive": "green",
    "negative": "red",
}


@dataclass(frozen=True)
class Row:
    image: str
    name: str
    symbol: str
    price: str
    volume: str
    change: str
    change_style: str     # "positive" | "negative"
    market_cap: str


@dataclass(frozen=True)
class Placeholder:
    message: str
    warning: bool = False


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------

def to_row(entry: MarketEntry) -> Row:
    change_text, change_style = fmt_change(entry.price_change_percentage_24h)
    return Row(
        image=entry.image,
        name=entry.name,
        symbol=entry.symbol.upper(),
        price=fmt_usd(entry.current_price),
        volume=fmt_usd(entry.total_volume),
        change=change_text,
        change_style=change_style,
        market_cap=f"Mkt Cap : {fmt_usd(entry.market_cap)}",
    )


def project(entries: list[MarketEntry]) -> list[Row] | list[Placeholder]:
    """Map entries to display rows, or a single "no results" placeholder."""
    if not entries:
        return [Placeholder(NO_RESULTS_MESSAGE)]
    return [to_row(e) for e in entries]


def project_error(message: str) -> list[Placeholder]:
    return [Placeholder(f"⚠️ {message}", warning=True)]


# ---------------------------------------------------------------------------
# Drawing
# ---------------------------------------------------------------------------

def _market_table() -> Table:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold dim",
        pad_edge=True,
        expand=False,
        show_edge=False,
    )
    table.add_column("Coin",                                     no_wrap=True)
    table.add_column("Symbol",     style="bold",                 no_wrap=True)
    table.add_column("Price",      justify="right",              no_wrap=True)
    table.add_column("Volume",     justify="right",              no_wrap=True)
    table.add_column("24h",        justify="right",              no_wrap=True)
    table.add_column("Market Cap", justify="right", style="cyan", no_wrap=True)
    return table


def _coin_cell(row: Row) -> Text:
    # terminals can't draw the logo; link the name to it instead
    if row.image:
        return Text(row.name, style=Style(link=row.image))
    return Text(row.name)


def _placeholder_table(placeholder: Placeholder) -> Table:
    table = Table(box=box.SIMPLE, show_header=False, show_edge=False, expand=False)
    table.add_column(justify="center", min_width=60)
    style = "bold yellow" if placeholder.warning else "dim"
    table.add_row(Text(placeholder.message, style=style))
    return table


def draw(rows: list[Row] | list[Placeholder], out: Console | None = None) -> None:
    out = out or console
    if rows and isinstance(rows[0], Placeholder):
        out.print(_placeholder_table(rows[0]))
        return

    table = _market_table()
    for row in rows:
        table.add_row(
            _coin_cell(row),
            row.symbol,
            row.price,
            row.volume,
            Text(row.change, style=CHANGE_STYLES[row.change_style]),
            row.market_cap,
        )
    out.print(table)


def render_table(entries: list[MarketEntry], out: Console | None = None) -> None:
    """Draw the market table for ``entries`` (or the no-results row)."""
    draw(project(entries), out)


def show_error(message: str, out: Console | None = None) -> None:
    """Replace the table with a single warning row carrying ``message``."""
    draw(project_error(message), out)
