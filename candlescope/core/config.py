"""
Analysis configuration and thresholds.

Centralizes all magic numbers used by pattern detection, indicators and
signal composition so they can be tuned in one place.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for candle analysis.

    Ratios are expressed as decimals (e.g., 0.7 = 70% of votes).
    The defaults reproduce the classic settings: RSI(14), MACD(12, 26),
    EMA(20), Bollinger(20, 2).
    """

    # =========================================================
    # Indicator Periods
    # =========================================================

    rsi_period: int = 14
    macd_fast: int = 12
    macd_slow: int = 26
    ema_period: int = 20
    bollinger_period: int = 20
    bollinger_std_dev: float = 2.0

    # Candles required before any indicator is reported
    min_candles_for_indicators: int = 20

    # =========================================================
    # Indicator Thresholds
    # =========================================================

    # RSI below oversold votes bullish, above overbought votes bearish
    rsi_oversold: float = 30.0
    rsi_overbought: float = 70.0

    # Volume average window and trend classification
    volume_lookback: int = 20
    volume_high_ratio: float = 1.5
    volume_low_ratio: float = 0.5

    # =========================================================
    # Pattern Shape Thresholds
    # =========================================================

    # Body at most this fraction of the range is a doji
    doji_body_ratio: float = 0.1

    # Middle candle body of a star, relative to the first candle body
    star_body_ratio: float = 0.3

    # =========================================================
    # Vote Classification
    # =========================================================

    bullish_ratio: float = 0.7
    bearish_ratio: float = 0.3
    high_confidence_bullish_ratio: float = 0.8
    high_confidence_bearish_ratio: float = 0.2

    def __post_init__(self) -> None:
        """Validate configuration."""
        for name in (
            "rsi_period",
            "macd_fast",
            "macd_slow",
            "ema_period",
            "bollinger_period",
            "volume_lookback",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.macd_fast >= self.macd_slow:
            raise ValueError("macd_fast must be less than macd_slow")
        if self.min_candles_for_indicators < 1:
            raise ValueError("min_candles_for_indicators must be at least 1")
        if self.bollinger_std_dev <= 0:
            raise ValueError("bollinger_std_dev must be positive")
        if not 0 <= self.rsi_oversold < self.rsi_overbought <= 100:
            raise ValueError("RSI thresholds must satisfy 0 <= oversold < overbought <= 100")
        if not 0 < self.volume_low_ratio < self.volume_high_ratio:
            raise ValueError("volume_low_ratio must be positive and below volume_high_ratio")
        if not 0 <= self.doji_body_ratio <= 1:
            raise ValueError("doji_body_ratio must be between 0 and 1")
        if self.star_body_ratio <= 0:
            raise ValueError("star_body_ratio must be positive")
        if not (
            0
            <= self.high_confidence_bearish_ratio
            <= self.bearish_ratio
            < self.bullish_ratio
            <= self.high_confidence_bullish_ratio
            <= 1
        ):
            raise ValueError("Vote ratios must be ordered within [0, 1]")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnalysisConfig":
        """Create config from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


# Default configuration instance
DEFAULT_CONFIG = AnalysisConfig()
