"""
Core Module - Data models and configuration shared by every layer.
"""

from .config import DEFAULT_CONFIG, AnalysisConfig
from .models import (
    AnalysisResult,
    BollingerBands,
    Candle,
    CompositeSignal,
    Confidence,
    IndicatorSet,
    Pattern,
    PatternSignal,
    PatternStrength,
    SignalDirection,
    VolumeStats,
    VolumeTrend,
)

__all__ = [
    "AnalysisConfig",
    "DEFAULT_CONFIG",
    "AnalysisResult",
    "BollingerBands",
    "Candle",
    "CompositeSignal",
    "Confidence",
    "IndicatorSet",
    "Pattern",
    "PatternSignal",
    "PatternStrength",
    "SignalDirection",
    "VolumeStats",
    "VolumeTrend",
]
