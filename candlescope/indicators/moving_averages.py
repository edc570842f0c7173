"""
Moving Average Indicators - SMA and EMA calculations.

Pure math functions for calculating simple and exponential moving averages.
A window containing NaN or infinity yields None rather than a poisoned value.
"""

import math
from collections.abc import Iterable, Sequence

from candlescope.core.models import Candle


def all_finite(values: Iterable[float]) -> bool:
    """True if no value is NaN or infinite."""
    return all(math.isfinite(v) for v in values)


def sma(prices: Sequence[float], period: int) -> float | None:
    """
    Calculate Simple Moving Average.

    Args:
        prices: List of prices (most recent last)
        period: Number of periods to average

    Returns:
        SMA value or None if insufficient data
    """
    if len(prices) < period or period <= 0:
        return None

    window = prices[-period:]
    if not all_finite(window):
        return None

    return sum(window) / period


def ema(prices: Sequence[float], period: int) -> float | None:
    """
    Calculate Exponential Moving Average.

    Uses the standard EMA formula with multiplier = 2 / (period + 1).
    The first EMA value is seeded with the SMA of the first `period` prices.

    Args:
        prices: List of prices (most recent last)
        period: Number of periods for EMA calculation

    Returns:
        Current EMA value or None if insufficient data
    """
    series = ema_series(prices, period)
    return series[-1] if series else None


def ema_series(prices: Sequence[float], period: int) -> list[float]:
    """
    Calculate EMA series for all available data points.

    Args:
        prices: List of prices (most recent last)
        period: Number of periods for EMA calculation

    Returns:
        List of EMA values (length is len(prices) - period + 1), empty if
        there is not enough data or any price is not finite
    """
    if len(prices) < period or period <= 0:
        return []
    if not all_finite(prices):
        return []

    multiplier = 2 / (period + 1)
    result: list[float] = []

    # Seed with SMA for the first value
    result.append(sum(prices[:period]) / period)

    for price in prices[period:]:
        result.append(price * multiplier + result[-1] * (1 - multiplier))

    return result


def ema_points(candles: Sequence[Candle], period: int) -> list[tuple[int, float]]:
    """
    EMA series aligned to candle times, for drawing an overlay line.

    The first point sits on the candle at index period - 1, the last
    candle that went into the SMA seed.

    Args:
        candles: Candles (most recent last)
        period: EMA period

    Returns:
        List of (time, ema) tuples, empty if there is not enough data
    """
    values = ema_series([c.close for c in candles], period)
    times = [c.time for c in candles[period - 1 :]] if values else []
    return list(zip(times, values, strict=True))
