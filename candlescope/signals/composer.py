"""
Signal Composer - fuse indicators and patterns into one trading signal.

Each input casts bullish or bearish votes:
- RSI oversold / overbought: 1 vote
- MACD line sign: 1 vote (exactly zero counts as bearish)
- Price vs EMA20: 1 vote
- Each directional pattern: 2 votes if Strong, else 1
- Volume confirming the price move: 1 vote

The bullish share of all votes decides direction and confidence.
"""

from collections.abc import Iterable

from candlescope.core.config import DEFAULT_CONFIG, AnalysisConfig
from candlescope.core.models import (
    CompositeSignal,
    Confidence,
    IndicatorSet,
    Pattern,
    PatternSignal,
    SignalDirection,
)

RECOMMENDATIONS = {
    (SignalDirection.BULLISH, Confidence.HIGH): "Strong Buy - Multiple bullish indicators align",
    (SignalDirection.BULLISH, Confidence.MEDIUM): "Buy - Bullish bias with moderate confidence",
    (SignalDirection.BEARISH, Confidence.HIGH): "Strong Sell - Multiple bearish indicators align",
    (SignalDirection.BEARISH, Confidence.MEDIUM): "Sell - Bearish bias with moderate confidence",
}
HOLD_RECOMMENDATION = "Hold - Mixed signals, wait for clearer direction"


def get_recommendation(signal: SignalDirection, confidence: Confidence) -> str:
    """Fixed recommendation text for a (signal, confidence) pair."""
    return RECOMMENDATIONS.get((signal, confidence), HOLD_RECOMMENDATION)


def classify_votes(
    bullish: int,
    bearish: int,
    config: AnalysisConfig | None = None,
) -> tuple[SignalDirection, Confidence]:
    """
    Turn vote counts into a direction and confidence.

    Args:
        bullish: Bullish vote count
        bearish: Bearish vote count
        config: Analysis configuration (uses defaults if None)

    Returns:
        (direction, confidence); (NEUTRAL, Low) when nobody voted
    """
    config = config or DEFAULT_CONFIG
    total = bullish + bearish
    if total == 0:
        return SignalDirection.NEUTRAL, Confidence.LOW

    ratio = bullish / total
    if ratio >= config.bullish_ratio:
        high = ratio >= config.high_confidence_bullish_ratio
        return SignalDirection.BULLISH, Confidence.HIGH if high else Confidence.MEDIUM
    if ratio <= config.bearish_ratio:
        high = ratio <= config.high_confidence_bearish_ratio
        return SignalDirection.BEARISH, Confidence.HIGH if high else Confidence.MEDIUM
    return SignalDirection.NEUTRAL, Confidence.MEDIUM


def compose_signal(
    indicators: IndicatorSet,
    patterns: Iterable[Pattern],
    current_price: float | None,
    config: AnalysisConfig | None = None,
) -> CompositeSignal:
    """
    Run the weighted vote.

    Absent indicators (None) cast no vote at all.

    Args:
        indicators: Indicator snapshot for the series
        patterns: Patterns detected on the latest candles
        current_price: Latest price, compared against EMA20
        config: Analysis configuration (uses defaults if None)

    Returns:
        CompositeSignal with vote counts, reasons and recommendation
    """
    config = config or DEFAULT_CONFIG
    bullish = 0
    bearish = 0
    reasons: list[str] = []

    # RSI extremes
    if indicators.rsi is not None:
        if indicators.rsi < config.rsi_oversold:
            bullish += 1
            reasons.append("RSI oversold (bullish)")
        elif indicators.rsi > config.rsi_overbought:
            bearish += 1
            reasons.append("RSI overbought (bearish)")

    # MACD line sign
    if indicators.macd is not None:
        if indicators.macd > 0:
            bullish += 1
            reasons.append("MACD positive (bullish)")
        else:
            bearish += 1
            reasons.append("MACD negative (bearish)")

    # Price vs EMA20
    if indicators.ema20 is not None and current_price is not None:
        if current_price > indicators.ema20:
            bullish += 1
            reasons.append("Price above EMA20 (bullish)")
        else:
            bearish += 1
            reasons.append("Price below EMA20 (bearish)")

    # Patterns
    for pattern in patterns:
        weight = 2 if pattern.is_strong else 1
        if pattern.signal is PatternSignal.BULLISH:
            bullish += weight
            reasons.append(f"{pattern.name} pattern (bullish)")
        elif pattern.signal is PatternSignal.BEARISH:
            bearish += weight
            reasons.append(f"{pattern.name} pattern (bearish)")

    # Volume confirmation
    if indicators.volume is not None:
        alignment = indicators.volume.price_volume_alignment
        if alignment is PatternSignal.BULLISH:
            bullish += 1
            reasons.append("Volume confirms bullish move")
        elif alignment is PatternSignal.BEARISH:
            bearish += 1
            reasons.append("Volume confirms bearish move")

    direction, confidence = classify_votes(bullish, bearish, config)

    return CompositeSignal(
        signal=direction,
        confidence=confidence,
        bullish_signals=bullish,
        bearish_signals=bearish,
        reasons=tuple(reasons),
        recommendation=get_recommendation(direction, confidence),
    )
