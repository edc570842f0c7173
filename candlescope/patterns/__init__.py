"""
Patterns Module - Candlestick shape recognition on the latest candles.
"""

from .detector import detect_patterns
from .features import DerivedCandle, derive_candle, derive_candles
from .rules import (
    is_bearish_engulfing,
    is_bullish_engulfing,
    is_doji,
    is_evening_star,
    is_hammer,
    is_morning_star,
    is_shooting_star,
)

__all__ = [
    "DerivedCandle",
    "derive_candle",
    "derive_candles",
    "detect_patterns",
    "is_hammer",
    "is_doji",
    "is_shooting_star",
    "is_bullish_engulfing",
    "is_bearish_engulfing",
    "is_morning_star",
    "is_evening_star",
]
