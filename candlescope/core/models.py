"""
Core data models for candle analysis.

Contains immutable dataclasses for:
- Raw OHLCV candles
- Detected candlestick patterns
- Indicator snapshots (RSI, MACD, EMA, Bollinger, volume)
- The composite signal and the full analysis result

All values are recomputed on every analysis call and carry no identity.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any


class PatternSignal(Enum):
    """Directional bias of a pattern or of volume confirmation."""
    BULLISH = "Bullish"
    BEARISH = "Bearish"
    NEUTRAL = "Neutral"


class PatternStrength(Enum):
    """How much weight a pattern carries in the vote."""
    MEDIUM = "Medium"
    STRONG = "Strong"


class VolumeTrend(Enum):
    """Current volume relative to its recent average."""
    LOW = "Low"  # ratio < 0.5
    NORMAL = "Normal"
    HIGH = "High"  # ratio > 1.5


class SignalDirection(Enum):
    """Overall direction of the composite signal."""
    BULLISH = "BULLISH"
    BEARISH = "BEARISH"
    NEUTRAL = "NEUTRAL"


class Confidence(Enum):
    """Confidence band of the composite signal."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class Candle:
    """
    A single OHLCV candlestick.

    The producer guarantees high >= max(open, close) and low <= min(open, close);
    nothing here checks it.
    """

    time: int  # Candle open time, epoch seconds
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "time": self.time,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Candle":
        """Create from a mapping with time/open/high/low/close[/volume] keys."""
        return cls(
            time=int(data["time"]),
            open=float(data["open"]),
            high=float(data["high"]),
            low=float(data["low"]),
            close=float(data["close"]),
            volume=float(data.get("volume") or 0.0),
        )

    @classmethod
    def from_bybit_row(cls, row: Sequence[Any]) -> "Candle":
        """
        Create from a Bybit v5 kline row.

        Bybit returns: [startTime, open, high, low, close, volume, turnover]
        All as strings, startTime in milliseconds.
        """
        if len(row) < 6:
            raise ValueError(f"Kline row needs at least 6 fields, got {len(row)}: {row!r}")
        return cls(
            time=int(row[0]) // 1000,
            open=float(row[1]),
            high=float(row[2]),
            low=float(row[3]),
            close=float(row[4]),
            volume=float(row[5]),
        )


@dataclass(frozen=True)
class Pattern:
    """A candlestick pattern detected on the most recent candles."""

    name: str
    signal: PatternSignal
    strength: PatternStrength
    description: str

    @property
    def is_strong(self) -> bool:
        return self.strength is PatternStrength.STRONG

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "signal": self.signal.value,
            "strength": self.strength.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class BollingerBands:
    """Bollinger Bands around an SMA."""

    upper: float
    middle: float
    lower: float

    @property
    def width(self) -> float:
        """Distance between the outer bands."""
        return self.upper - self.lower

    def to_dict(self) -> dict:
        return {"upper": self.upper, "middle": self.middle, "lower": self.lower}


@dataclass(frozen=True)
class VolumeStats:
    """Current volume compared with its recent average."""

    current: float
    average: float
    ratio: float  # current / average
    trend: VolumeTrend
    price_volume_alignment: PatternSignal

    def to_dict(self) -> dict:
        return {
            "current": self.current,
            "average": self.average,
            "ratio": self.ratio,
            "trend": self.trend.value,
            "priceVolumeAlignment": self.price_volume_alignment.value,
        }


@dataclass(frozen=True)
class IndicatorSet:
    """
    Snapshot of every indicator as of the last candle.

    A None field means "not yet computable" (insufficient or degenerate
    history). It is never a stand-in for zero.
    """

    rsi: float | None = None
    macd: float | None = None
    ema20: float | None = None
    volume: VolumeStats | None = None
    bollinger: BollingerBands | None = None

    @property
    def is_empty(self) -> bool:
        """True when nothing could be computed."""
        return all(
            value is None
            for value in (self.rsi, self.macd, self.ema20, self.volume, self.bollinger)
        )

    def to_dict(self) -> dict:
        return {
            "rsi": self.rsi,
            "macd": self.macd,
            "ema20": self.ema20,
            "volume": self.volume.to_dict() if self.volume else None,
            "bollinger": self.bollinger.to_dict() if self.bollinger else None,
        }


@dataclass(frozen=True)
class CompositeSignal:
    """Aggregate vote over indicators and patterns."""

    signal: SignalDirection
    confidence: Confidence
    bullish_signals: int
    bearish_signals: int
    reasons: tuple[str, ...]
    recommendation: str

    @property
    def total_signals(self) -> int:
        return self.bullish_signals + self.bearish_signals

    @property
    def bullish_ratio(self) -> float | None:
        """Share of bullish votes, or None when nobody voted."""
        if self.total_signals == 0:
            return None
        return self.bullish_signals / self.total_signals

    def to_dict(self) -> dict:
        return {
            "signal": self.signal.value,
            "confidence": self.confidence.value,
            "bullishSignals": self.bullish_signals,
            "bearishSignals": self.bearish_signals,
            "reasons": list(self.reasons),
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Everything one analysis call produces."""

    patterns: tuple[Pattern, ...]
    indicators: IndicatorSet
    signal: CompositeSignal

    def to_dict(self) -> dict:
        """JSON-ready representation of the whole result."""
        return {
            "patterns": [p.to_dict() for p in self.patterns],
            "indicators": self.indicators.to_dict(),
            "signal": self.signal.to_dict(),
        }
