"""
Bollinger Bands - SMA with a volatility envelope.

The bands sit k population standard deviations above and below the
simple moving average of the last `period` closes.
"""

import math
from collections.abc import Sequence

from candlescope.core.models import BollingerBands

from .moving_averages import sma


def bollinger_bands(
    prices: Sequence[float],
    period: int = 20,
    std_dev: float = 2.0,
) -> BollingerBands | None:
    """
    Calculate Bollinger Bands.

    Args:
        prices: List of prices (most recent last)
        period: SMA and deviation window (default 20)
        std_dev: Band width in standard deviations (default 2)

    Returns:
        BollingerBands or None if insufficient data
    """
    middle = sma(prices, period)
    if middle is None:
        return None

    window = prices[-period:]
    variance = sum((price - middle) ** 2 for price in window) / period
    sigma = math.sqrt(variance)

    return BollingerBands(
        upper=middle + sigma * std_dev,
        middle=middle,
        lower=middle - sigma * std_dev,
    )
