"""
RSI Indicator - Relative Strength Index calculation.

Measures the speed and magnitude of recent price changes
to evaluate overbought or oversold conditions.
"""

from collections.abc import Sequence

from .moving_averages import all_finite


def rsi(prices: Sequence[float], period: int = 14) -> float | None:
    """
    Calculate RSI using Wilder's smoothing method.

    RSI = 100 - (100 / (1 + RS))
    RS = Average Gain / Average Loss

    The averages start as plain means of the first `period` changes and are
    then smoothed over every later change.

    A window with no losses has no defined RS. That case returns 100.0 when
    there were gains and 50.0 when prices never moved, so the result always
    stays inside [0, 100].

    Args:
        prices: List of prices (most recent last), needs period + 1 prices minimum
        period: Lookback period (default 14)

    Returns:
        RSI value (0-100) or None if insufficient data
    """
    if len(prices) < period + 1 or period <= 0:
        return None
    if not all_finite(prices):
        return None

    changes = [prices[i] - prices[i - 1] for i in range(1, len(prices))]

    # Initial SMA for first 'period' changes
    avg_gain = sum(c for c in changes[:period] if c > 0) / period
    avg_loss = sum(-c for c in changes[:period] if c < 0) / period

    # Wilder's smoothing: (prev_avg * (period-1) + current) / period
    for change in changes[period:]:
        gain = change if change > 0 else 0.0
        loss = -change if change < 0 else 0.0
        avg_gain = (avg_gain * (period - 1) + gain) / period
        avg_loss = (avg_loss * (period - 1) + loss) / period

    if avg_loss == 0:
        return 100.0 if avg_gain > 0 else 50.0

    rs = avg_gain / avg_loss
    return 100 - (100 / (1 + rs))
