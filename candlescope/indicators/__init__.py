"""
Technical Indicators Module - Pure math functions for market analysis.

All functions are stateless and operate on price/candle data.
Insufficient history is reported as None, never as zero.
"""

from .analysis import analyze_indicators
from .bollinger import bollinger_bands
from .macd import macd_line
from .moving_averages import all_finite, ema, ema_points, ema_series, sma
from .rsi import rsi
from .volume import analyze_volume, classify_volume_trend, price_volume_alignment

__all__ = [
    # Moving Averages
    "sma",
    "ema",
    "ema_series",
    "ema_points",
    "all_finite",
    # RSI
    "rsi",
    # MACD
    "macd_line",
    # Bollinger Bands
    "bollinger_bands",
    # Volume
    "analyze_volume",
    "classify_volume_trend",
    "price_volume_alignment",
    # Full set
    "analyze_indicators",
]
