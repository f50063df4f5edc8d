from coingecko_cli.commands.browse import handle


class RecordingBoard:
    def __init__(self):
        self.calls = []

    def search(self, query):
        self.calls.append(("search", query))

    def sort_by_market_cap(self):
        self.calls.append(("cap",))

    def sort_by_percentage_change(self):
        self.calls.append(("change",))


def test_handle_routes_commands():
    board = RecordingBoard()
    assert handle(board, ":cap")
    assert handle(board, " :change ")
    assert handle(board, "Eth")
    assert handle(board, "")
    assert board.calls == [("cap",), ("change",), ("search", "Eth"), ("search", "")]


def test_handle_quit():
    board = RecordingBoard()
    assert handle(board, ":q") is False
    assert board.calls == []
