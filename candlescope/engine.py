"""
Analysis Engine - one call from candles to patterns, indicators and signal.

Stateless: every call recomputes everything from the series it is given,
so repeated calls with the same candles return equal results.
"""

import logging
from collections.abc import Sequence

from candlescope.core.config import DEFAULT_CONFIG, AnalysisConfig
from candlescope.core.models import AnalysisResult, Candle
from candlescope.indicators import analyze_indicators
from candlescope.patterns import detect_patterns
from candlescope.signals import compose_signal

logger = logging.getLogger(__name__)


def analyze(
    candles: Sequence[Candle],
    config: AnalysisConfig | None = None,
) -> AnalysisResult:
    """
    Analyze a time-ordered candle series.

    Args:
        candles: Candles ascending by time (most recent last)
        config: Analysis configuration (uses defaults if None)

    Returns:
        AnalysisResult with patterns, indicators and the composite signal
    """
    config = config or DEFAULT_CONFIG

    patterns = detect_patterns(candles, config)
    indicators = analyze_indicators(candles, config)
    current_price = candles[-1].close if candles else None
    signal = compose_signal(indicators, patterns, current_price, config)

    logger.debug(
        f"Analyzed {len(candles)} candles: {signal.signal.value} ({signal.confidence.value}), "
        f"bull={signal.bullish_signals} bear={signal.bearish_signals}"
    )

    return AnalysisResult(
        patterns=tuple(patterns),
        indicators=indicators,
        signal=signal,
    )
