import asyncio
import json
import sys
from dataclasses import asdict
from typing import Annotated, Optional

import typer

from coingecko_cli.app import Board
from coingecko_cli.display.tables import console
from coingecko_cli.pipeline import SORT_KEYS

app = typer.Typer()


@app.callback(invoke_without_command=True)
def markets(
    search: Annotated[Optional[str], typer.Option("--search", "-s", help="Filter by name or symbol")] = None,
    sort: Annotated[Optional[str], typer.Option("--sort", help="Sort by: market_cap, change")] = None,
    fmt: Annotated[str, typer.Option("--format", help="Output format: table or json")] = "table",
) -> None:
    """Show the top 10 coins by market cap."""
    if sort is not None and sort not in SORT_KEYS:
        raise typer.BadParameter(
            f"expected one of: {', '.join(SORT_KEYS)}", param_hint="--sort"
        )

    async def run() -> None:
        board = Board(out=console, auto_render=False)
        with console.status("[dim]Fetching markets…[/dim]", spinner="dots"):
            ok = await board.load()
        if not ok:
            raise typer.Exit(1)

        if search is not None:
            board.search(search)
        if sort == "market_cap":
            board.sort_by_market_cap()
        elif sort == "change":
            board.sort_by_percentage_change()

        if fmt == "json" or not sys.stdout.isatty():
            print(json.dumps([asdict(e) for e in board.store.view], indent=2))
        else:
            console.print()
            board.render()

    asyncio.run(run())
