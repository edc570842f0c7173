"""
Market Scanner - rank many instruments by price change.

Builds per-symbol snapshots from candle series (and optionally their
analysis), then filters and sorts them for a scanner table.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Literal

from candlescope.core.models import AnalysisResult, Candle, SignalDirection

FilterMode = Literal["all", "gainers", "losers"]
FILTER_MODES: tuple[str, ...] = ("all", "gainers", "losers")


@dataclass(frozen=True)
class TickerSnapshot:
    """One row of the scanner table."""

    symbol: str
    price: float
    change_pct: float
    volume: float
    signal: SignalDirection | None = None

    @property
    def pair(self) -> str:
        return format_pair(self.symbol)

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "price": self.price,
            "changePct": self.change_pct,
            "volume": self.volume,
            "signal": self.signal.value if self.signal else None,
        }


def percent_change(old_price: float, current_price: float) -> float:
    """Percent change from old_price to current_price; 0.0 when old_price is 0."""
    if old_price == 0:
        return 0.0
    return (current_price - old_price) / old_price * 100


def snapshot_from_candles(
    symbol: str,
    candles: Sequence[Candle],
    result: AnalysisResult | None = None,
) -> TickerSnapshot:
    """
    Summarize a candle series for the scanner.

    Price is the last close, change is measured from the first open and
    volume is the total over the series.

    Raises:
        ValueError: If candles is empty
    """
    if not candles:
        raise ValueError(f"No candles for {symbol}")

    return TickerSnapshot(
        symbol=symbol,
        price=candles[-1].close,
        change_pct=percent_change(candles[0].open, candles[-1].close),
        volume=sum(c.volume for c in candles),
        signal=result.signal.signal if result else None,
    )


def filter_snapshots(
    snapshots: Iterable[TickerSnapshot],
    mode: FilterMode = "all",
) -> list[TickerSnapshot]:
    """Keep all rows, only gainers (change > 0) or only losers (change < 0)."""
    if mode not in FILTER_MODES:
        raise ValueError(f"Unknown filter mode: '{mode}'. Expected one of {', '.join(FILTER_MODES)}")

    if mode == "gainers":
        return [s for s in snapshots if s.change_pct > 0]
    if mode == "losers":
        return [s for s in snapshots if s.change_pct < 0]
    return list(snapshots)


def rank_snapshots(snapshots: Iterable[TickerSnapshot]) -> list[TickerSnapshot]:
    """Sort by change, biggest gainer first."""
    return sorted(snapshots, key=lambda s: s.change_pct, reverse=True)


def format_pair(symbol: str) -> str:
    """BTCUSDT -> BTC/USDT."""
    if symbol.endswith("USDT") and len(symbol) > 4:
        return f"{symbol[:-4]}/USDT"
    return symbol


def format_change(change: float) -> str:
    """Signed percentage with two decimals, e.g. +1.23%."""
    sign = "+" if change >= 0 else ""
    return f"{sign}{change:.2f}%"


def format_volume(volume: float) -> str:
    """Compact volume: 1.2M, 3.4K or a plain integer."""
    if volume >= 1_000_000:
        return f"{volume / 1_000_000:.1f}M"
    if volume >= 1_000:
        return f"{volume / 1_000:.1f}K"
    return f"{volume:.0f}"
