import pytest

from coingecko_cli.models import MarketEntry


def make_entry(name, symbol, market_cap=0.0, change=0.0, price=1.0, volume=0.0):
    return MarketEntry(
        name=name,
        symbol=symbol,
        image=f"https://assets.example/{symbol}.png",
        current_price=price,
        total_volume=volume,
        market_cap=market_cap,
        price_change_percentage_24h=change,
    )


@pytest.fixture(name="make_entry")
def make_entry_fixture():
    return make_entry


@pytest.fixture
def entries():
    # API order: market cap descending
    return [
        make_entry("Bitcoin", "btc", market_cap=1_300_000_000_000, change=1.25, price=67_000, volume=25_000_000_000),
        make_entry("Ethereum", "eth", market_cap=400_000_000_000, change=-3.5, price=3_300, volume=12_000_000_000),
        make_entry("Tether", "usdt", market_cap=110_000_000_000, change=0.0, price=1.0, volume=40_000_000_000),
        make_entry("BNB", "bnb", market_cap=85_000_000_000, change=5.0, price=580, volume=900_000_000),
        make_entry("Wrapped Bitcoin", "wbtc", market_cap=9_000_000_000, change=-90.0, price=66_900, volume=200_000_000),
    ]


@pytest.fixture
def raw_markets():
    return [
        {
            "id": "bitcoin",
            "symbol": "btc",
            "name": "Bitcoin",
            "image": "https://coin-images.coingecko.com/coins/images/1/large/bitcoin.png?1696501400",
            "current_price": 67012,
            "market_cap": 1321000000000,
            "market_cap_rank": 1,
            "total_volume": 25400000000,
            "price_change_percentage_24h": 1.2345,
        },
        {
            "id": "ethereum",
            "symbol": "eth",
            "name": "Ethereum",
            "image": "https://coin-images.coingecko.com/coins/images/279/large/ethereum.png?1696501628",
            "current_price": 3301.5,
            "market_cap": 396000000000,
            "market_cap_rank": 2,
            "total_volume": 12100000000,
            "price_change_percentage_24h": None,
        },
    ]
