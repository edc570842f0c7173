"""
Pattern Detector - classify what the most recent candles are doing.

Only the tail of the series is examined: the last candle for single-candle
rules, the last two for engulfing, the last three for stars. Every matching
rule is reported; results are ordered single, two-candle, three-candle.
"""

import logging
from collections.abc import Sequence

from candlescope.core.config import DEFAULT_CONFIG, AnalysisConfig
from candlescope.core.models import Candle, Pattern, PatternSignal, PatternStrength

from .features import derive_candles
from .rules import (
    is_bearish_engulfing,
    is_bullish_engulfing,
    is_doji,
    is_evening_star,
    is_hammer,
    is_morning_star,
    is_shooting_star,
)

logger = logging.getLogger(__name__)

DOJI = Pattern(
    name="Doji",
    signal=PatternSignal.NEUTRAL,
    strength=PatternStrength.MEDIUM,
    description="Indecision in market",
)
SHOOTING_STAR = Pattern(
    name="Shooting Star",
    signal=PatternSignal.BEARISH,
    strength=PatternStrength.MEDIUM,
    description="Potential bearish reversal",
)
BULLISH_ENGULFING = Pattern(
    name="Bullish Engulfing",
    signal=PatternSignal.BULLISH,
    strength=PatternStrength.STRONG,
    description="Strong bullish reversal signal",
)
BEARISH_ENGULFING = Pattern(
    name="Bearish Engulfing",
    signal=PatternSignal.BEARISH,
    strength=PatternStrength.STRONG,
    description="Strong bearish reversal signal",
)
MORNING_STAR = Pattern(
    name="Morning Star",
    signal=PatternSignal.BULLISH,
    strength=PatternStrength.STRONG,
    description="Strong bullish reversal pattern",
)
EVENING_STAR = Pattern(
    name="Evening Star",
    signal=PatternSignal.BEARISH,
    strength=PatternStrength.STRONG,
    description="Strong bearish reversal pattern",
)


def hammer(is_bullish: bool) -> Pattern:
    """A hammer takes its direction from the candle's own color."""
    return Pattern(
        name="Hammer",
        signal=PatternSignal.BULLISH if is_bullish else PatternSignal.BEARISH,
        strength=PatternStrength.MEDIUM,
        description="Potential reversal pattern",
    )


def detect_patterns(
    candles: Sequence[Candle],
    config: AnalysisConfig | None = None,
) -> list[Pattern]:
    """
    Detect candlestick patterns on the most recent candles.

    Rules needing more candles than the series holds are skipped.

    Args:
        candles: Candles (most recent last)
        config: Analysis configuration (uses defaults if None)

    Returns:
        List of matched patterns, possibly empty
    """
    if not candles:
        return []

    config = config or DEFAULT_CONFIG

    # Only the last three candles can take part in any rule
    tail = derive_candles(candles[-3:], config.doji_body_ratio)
    last = tail[-1]
    patterns: list[Pattern] = []

    # Single candle patterns
    if is_hammer(last):
        patterns.append(hammer(last.is_bullish))
    if is_doji(last):
        patterns.append(DOJI)
    if is_shooting_star(last):
        patterns.append(SHOOTING_STAR)

    # Two candle patterns
    if len(tail) >= 2:
        prev = tail[-2]
        if is_bullish_engulfing(prev, last):
            patterns.append(BULLISH_ENGULFING)
        if is_bearish_engulfing(prev, last):
            patterns.append(BEARISH_ENGULFING)

    # Three candle patterns
    if len(tail) >= 3:
        first, middle = tail[-3], tail[-2]
        if is_morning_star(first, middle, last, config.star_body_ratio):
            patterns.append(MORNING_STAR)
        if is_evening_star(first, middle, last, config.star_body_ratio):
            patterns.append(EVENING_STAR)

    if patterns:
        logger.debug(f"Detected patterns: {', '.join(p.name for p in patterns)}")

    return patterns
