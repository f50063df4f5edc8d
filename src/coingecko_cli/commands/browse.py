import asyncio

import typer
from rich.prompt import Prompt

from coingecko_cli.app import Board
from coingecko_cli.display.tables import console

app = typer.Typer()

HELP_LINE = (
    "[dim]Type to search (empty clears) · [bold]:cap[/bold] sort by market cap · "
    "[bold]:change[/bold] sort by 24h change · [bold]:q[/bold] quit[/dim]"
)


def handle(board: Board, line: str) -> bool:
    """Apply one input event to the board. Returns False when the user quits."""
    command = line.strip()
    if command == ":q":
        return False
    if command == ":cap":
        board.sort_by_market_cap()
    elif command == ":change":
        board.sort_by_percentage_change()
    else:
        board.search(line)
    return True


@app.callback(invoke_without_command=True)
def browse() -> None:
    """Interactive board: search and sort the top 10 coins."""
    board = Board(out=console)
    with console.status("[dim]Fetching markets…[/dim]", spinner="dots"):
        ok = asyncio.run(board.load())
    if not ok:
        raise typer.Exit(1)

    console.print(HELP_LINE)
    while True:
        try:
            line = Prompt.ask("[cyan]search[/cyan]", default="", show_default=False, console=console)
        except EOFError:
            break
        if not handle(board, line):
            break
