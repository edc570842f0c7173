"""
MACD Indicator - Moving Average Convergence Divergence.

Trend-following momentum indicator showing the relationship
between two exponential moving averages of price. Only the MACD line is
produced; there is no signal line or histogram.
"""

from collections.abc import Sequence

from .moving_averages import ema


def macd_line(
    prices: Sequence[float],
    fast: int = 12,
    slow: int = 26,
) -> float | None:
    """
    Calculate the MACD line.

    MACD Line = Fast EMA - Slow EMA

    Args:
        prices: List of prices (most recent last)
        fast: Fast EMA period (default 12)
        slow: Slow EMA period (default 26)

    Returns:
        MACD line value, or None if insufficient data
    """
    if fast <= 0 or slow <= 0 or fast >= slow:
        return None
    if len(prices) < slow:
        return None

    fast_ema = ema(prices, fast)
    slow_ema = ema(prices, slow)

    if fast_ema is None or slow_ema is None:
        return None

    return fast_ema - slow_ema
