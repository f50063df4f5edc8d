from typing import Annotated

import typer

from coingecko_cli.commands.browse import browse
from coingecko_cli.commands.markets import markets
from coingecko_cli.log import setup_logging

app = typer.Typer(
    name="coingecko",
    help="Terminal board for the top CoinGecko markets.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug diagnostics on stderr")] = False,
) -> None:
    setup_logging(verbose)


app.command("markets", help="Top 10 coins by market cap, with search and sort")(markets)
app.command("browse", help="Interactive search and sort")(browse)


if __name__ == "__main__":
    app()
