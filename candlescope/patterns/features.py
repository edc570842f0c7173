"""
Candle Features - per-candle shape metrics used by pattern rules.

Pure functions of a single candle. No OHLC consistency checks are made;
malformed input (NaN, negative range) passes through unchanged.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from candlescope.core.models import Candle


@dataclass(frozen=True)
class DerivedCandle:
    """A candle plus its body/wick/tail measurements."""

    time: int
    open: float
    high: float
    low: float
    close: float
    volume: float
    body_len: float  # |close - open|
    wick_len: float  # Upper shadow above the body
    tail_len: float  # Lower shadow below the body
    is_bullish: bool
    is_bearish: bool
    is_doji: bool

    @property
    def range(self) -> float:
        """Full high-low range."""
        return self.high - self.low

    @property
    def body_top(self) -> float:
        return max(self.open, self.close)

    @property
    def body_bottom(self) -> float:
        return min(self.open, self.close)

    @property
    def body_midpoint(self) -> float:
        return (self.open + self.close) / 2


def derive_candle(candle: Candle, doji_body_ratio: float = 0.1) -> DerivedCandle:
    """
    Compute shape metrics for one candle.

    Args:
        candle: Raw OHLCV candle
        doji_body_ratio: Body at most this fraction of the range is a doji

    Returns:
        DerivedCandle with the original fields plus shape metrics
    """
    body_top = max(candle.open, candle.close)
    body_bottom = min(candle.open, candle.close)
    body_len = abs(candle.close - candle.open)

    return DerivedCandle(
        time=candle.time,
        open=candle.open,
        high=candle.high,
        low=candle.low,
        close=candle.close,
        volume=candle.volume,
        body_len=body_len,
        wick_len=candle.high - body_top,
        tail_len=body_bottom - candle.low,
        is_bullish=candle.close > candle.open,
        is_bearish=candle.close < candle.open,
        is_doji=body_len <= (candle.high - candle.low) * doji_body_ratio,
    )


def derive_candles(
    candles: Sequence[Candle],
    doji_body_ratio: float = 0.1,
) -> list[DerivedCandle]:
    """Derive every candle, preserving length and order."""
    return [derive_candle(c, doji_body_ratio) for c in candles]
