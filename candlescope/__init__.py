"""
candlescope - candlestick pattern and indicator analysis.

Usage:
    from candlescope import analyze
    result = analyze(candles)
    print(result.signal.recommendation)
"""

from .core import (
    DEFAULT_CONFIG,
    AnalysisConfig,
    AnalysisResult,
    Candle,
    CompositeSignal,
    IndicatorSet,
    Pattern,
)
from .engine import analyze

__version__ = "0.1.0"

__all__ = [
    "analyze",
    "AnalysisConfig",
    "DEFAULT_CONFIG",
    "AnalysisResult",
    "Candle",
    "CompositeSignal",
    "IndicatorSet",
    "Pattern",
]
