"""Number formatting helpers."""


def format_number(n: float) -> str:
    """Abbreviate a number: 2.50B, 1.50M, 1.00K, 999.00.

    Thresholds compare the signed value, so negatives never take a suffix.
    """
    if n >= 1_000_000_000:
        return f"{n / 1_000_000_000:.2f}B"
    if n >= 1_000_000:
        return f"{n / 1_000_000:.2f}M"
    if n >= 1_000:
        return f"{n / 1_000:.2f}K"
    return f"{n:.2f}"


def fmt_usd(n: float) -> str:
    return f"${format_number(n)}"


def fmt_change(pct: float) -> tuple[str, str]:
    """Return (text, style class) for a 24h percentage change.

    Returns e.g. ("▲ 2.35%", "positive") or ("▼ 0.10%", "negative").
    Zero counts as positive.
    """
    if pct >= 0:
        return f"▲ {abs(pct):.2f}%", "positive"
    return f"▼ {abs(pct):.2f}%", "negative"
