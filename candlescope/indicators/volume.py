"""
Volume Analysis - current volume against its recent average.

Classifies the volume trend and checks whether volume confirms the
latest price move.
"""

import math
from collections.abc import Sequence

from candlescope.core.models import PatternSignal, VolumeStats, VolumeTrend

from .moving_averages import sma


def classify_volume_trend(
    ratio: float,
    high_ratio: float = 1.5,
    low_ratio: float = 0.5,
) -> VolumeTrend:
    """Map a current/average volume ratio to a trend band."""
    if ratio > high_ratio:
        return VolumeTrend.HIGH
    if ratio < low_ratio:
        return VolumeTrend.LOW
    return VolumeTrend.NORMAL


def price_volume_alignment(price_delta: float, ratio: float) -> PatternSignal:
    """
    Does above-average volume confirm the price move?

    Only volume above its average (ratio > 1) counts as confirmation.
    """
    if ratio > 1 and price_delta > 0:
        return PatternSignal.BULLISH
    if ratio > 1 and price_delta < 0:
        return PatternSignal.BEARISH
    return PatternSignal.NEUTRAL


def analyze_volume(
    volumes: Sequence[float],
    prices: Sequence[float],
    lookback: int = 20,
    high_ratio: float = 1.5,
    low_ratio: float = 0.5,
) -> VolumeStats | None:
    """
    Analyze the most recent volume.

    The average covers the last min(lookback, len(volumes)) volumes,
    including the current one.

    Args:
        volumes: Volume per candle (most recent last)
        prices: Close per candle (most recent last)
        lookback: Averaging window (default 20)
        high_ratio: Ratio above which volume is High
        low_ratio: Ratio below which volume is Low

    Returns:
        VolumeStats, or None with fewer than two candles, zero average
        volume, or non-finite input
    """
    if len(volumes) < 2 or len(prices) < 2 or lookback <= 0:
        return None

    current = volumes[-1]
    average = sma(volumes, min(lookback, len(volumes)))
    if average is None or average == 0:
        return None

    price_delta = prices[-1] - prices[-2]
    if not math.isfinite(price_delta):
        return None

    ratio = current / average

    return VolumeStats(
        current=current,
        average=average,
        ratio=ratio,
        trend=classify_volume_trend(ratio, high_ratio, low_ratio),
        price_volume_alignment=price_volume_alignment(price_delta, ratio),
    )
