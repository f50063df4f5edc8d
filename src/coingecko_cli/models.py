from dataclasses import dataclass


@dataclass(frozen=True)
class MarketEntry:
    name: str
    symbol: str
    image: str                          # logo URL
    current_price: float
    total_volume: float                 # 24h trading volume, USD
    market_cap: float
    price_change_percentage_24h: float  # signed, e.g. -2.5 = -2.5%
